from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import InternalError

PATH_SEPARATOR = "/"

# Node references are indexes into Graph.nodes; these two never are.
FAIL = -1
SUCCESS = -2

# Stands for the position one past the last path character.
END_OF_PATH = None


class SymbolKind(IntEnum):
    """Edge symbol classes. The value is the priority rank (lowest tried first)."""

    EXACT = 0
    END = 1
    SEGMENT_CHAR = 2
    ANY = 3


@dataclass(frozen=True)
class Symbol:
    kind: SymbolKind
    char: str | None = None

    def accepts(self, c: str | None) -> bool:
        """Test one path character (or END_OF_PATH) against this symbol."""
        kind = self.kind
        if kind == SymbolKind.EXACT:
            return c is not END_OF_PATH and c == self.char
        if kind == SymbolKind.END:
            return c is END_OF_PATH
        if kind == SymbolKind.SEGMENT_CHAR:
            return c is not END_OF_PATH and c != PATH_SEPARATOR
        if kind == SymbolKind.ANY:
            return c is not END_OF_PATH
        raise InternalError(f"unexpected symbol kind on edge: {kind!r}")

    @property
    def priority(self) -> int:
        return int(self.kind)

    def __str__(self) -> str:
        if self.kind == SymbolKind.EXACT:
            return repr(self.char)
        return self.kind.name


def exact(c: str) -> Symbol:
    return Symbol(SymbolKind.EXACT, c)


END = Symbol(SymbolKind.END)
SEGMENT_CHAR = Symbol(SymbolKind.SEGMENT_CHAR)
ANY = Symbol(SymbolKind.ANY)


@dataclass(frozen=True)
class Edge:
    symbol: Symbol
    target: int


@dataclass(frozen=True)
class Node:
    index: int
    edges: tuple[Edge, ...]


@dataclass(frozen=True)
class Graph:
    """Compiled pattern automaton. Read-only; safe to share between matches."""

    nodes: tuple[Node, ...]

    START = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, ref: int) -> Node:
        if ref < 0 or ref >= len(self.nodes):
            raise InternalError(f"node reference {ref} is outside the graph")
        return self.nodes[ref]

    def describe(self) -> str:
        lines: list[str] = []
        for n in self.nodes:
            targets = ", ".join(f"{e.symbol} -> {_ref_name(e.target)}" for e in n.edges)
            lines.append(f"{n.index}: {targets}")
        return "\n".join(lines)


def _ref_name(ref: int) -> str:
    if ref == SUCCESS:
        return "SUCCESS"
    if ref == FAIL:
        return "FAIL"
    return str(ref)


class GraphBuilder:
    """Mutable arena used while compiling; `freeze()` yields the Graph."""

    def __init__(self) -> None:
        self._edges: list[list[Edge]] = []

    @property
    def last(self) -> int:
        return len(self._edges) - 1

    def new_node(self) -> int:
        self._edges.append([])
        return self.last

    def add_edge(self, source: int, symbol: Symbol, target: int) -> None:
        edges = self._edges[source]
        edges.append(Edge(symbol=symbol, target=target))
        # list.sort is stable: equal priorities keep insertion order.
        edges.sort(key=lambda e: e.symbol.priority)

    def freeze(self) -> Graph:
        nodes = tuple(Node(index=i, edges=tuple(edges)) for i, edges in enumerate(self._edges))
        for n in nodes:
            if not n.edges:
                raise InternalError(f"node {n.index} has no outgoing edges")
        return Graph(nodes=nodes)
