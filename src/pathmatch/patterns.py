from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from .errors import PatternError
from .graph import ANY, END, PATH_SEPARATOR, SEGMENT_CHAR, SUCCESS, Graph, GraphBuilder, exact
from .matcher import is_match
from .paths import GLOBSTAR, normalize_path, normalize_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledPattern:
    raw: str
    normalized: str
    graph: Graph

    def matches(self, path: str) -> bool:
        return is_match(self.graph, normalize_path(path))


def compile_graph(pattern: str) -> Graph:
    """Compile a normalized pattern into a backtracking automaton.

    Supported:
      - *  (within a segment): self-loop on the current node
      - ** (directly after '/'): self-loop accepting any character, '/' included
      - ?  (single char within a segment)
      - anything else is a literal

    A literal that follows a '*' in the same segment gets an extra edge back
    to the '*' node, so the wildcard can resume consuming if the rest of the
    pattern fails further on.
    """
    if not pattern:
        raise PatternError("empty pattern")

    b = GraphBuilder()
    current = b.new_node()
    segment_wildcard: int | None = None

    i = 0
    L = len(pattern)

    while i < L:
        c = pattern[i]

        if c == PATH_SEPARATOR:
            nxt = b.new_node()
            b.add_edge(current, exact(PATH_SEPARATOR), nxt)
            current = nxt
            segment_wildcard = None

            if pattern.startswith(GLOBSTAR, i + 1):
                b.add_edge(current, ANY, current)
                segment_wildcard = current
                i += len(GLOBSTAR)
                # '/**/' : the separator after the globstar is already implied
                if pattern.startswith(PATH_SEPARATOR, i + 1):
                    i += 1
        elif c == "?":
            nxt = b.new_node()
            b.add_edge(current, SEGMENT_CHAR, nxt)
            current = nxt
            segment_wildcard = None
        elif c == "*":
            b.add_edge(current, SEGMENT_CHAR, current)
            segment_wildcard = current
        else:
            nxt = b.new_node()
            b.add_edge(current, exact(c), nxt)
            if segment_wildcard is not None:
                b.add_edge(nxt, SEGMENT_CHAR, segment_wildcard)
            current = nxt

        i += 1

    b.add_edge(current, END, SUCCESS)

    graph = b.freeze()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("compiled pattern %r into %d nodes:\n%s", pattern, len(graph), graph.describe())
    return graph


@lru_cache(maxsize=4096)
def compile_pattern(pattern: str) -> CompiledPattern:
    raw = pattern
    norm = normalize_pattern(pattern)
    return CompiledPattern(raw=raw, normalized=norm, graph=compile_graph(norm))


def match_path(path: str, pattern: str) -> bool:
    """Normalize both inputs and report whether `path` matches `pattern`."""
    return compile_pattern(pattern).matches(path)
