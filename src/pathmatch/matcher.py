from __future__ import annotations

import logging

from .errors import MatchError
from .graph import END_OF_PATH, FAIL, SUCCESS, Edge, Graph

logger = logging.getLogger(__name__)


def is_match(graph: Graph, path: str) -> bool:
    """Walk `path` through `graph`, one character per edge, backtracking on failure.

    Edges are tried in priority order (exact, end, segment char, any) and the
    first branch that reaches SUCCESS wins. The walk uses an explicit stack
    of pending (edge, position) attempts instead of recursion; attempts are
    made in the same depth-first order, and (node, position) states are
    visited at most once so wildcard-heavy patterns stay polynomial.
    """
    if not path:
        raise MatchError("empty path")
    if not graph.nodes:
        raise MatchError("no pattern was compiled into the graph")

    end = len(path)
    pending: list[tuple[Edge, int]] = []
    # Every edge consumes a character, so a state seen twice already failed
    # or is still queued; either way entering it again adds nothing.
    seen: set[tuple[int, int]] = set()

    def enter(ref: int, pos: int) -> bool:
        if ref == SUCCESS:
            return True
        if ref == FAIL or pos > end or (ref, pos) in seen:
            return False
        seen.add((ref, pos))
        # Reversed so the highest-priority edge is popped first.
        for edge in reversed(graph.node(ref).edges):
            pending.append((edge, pos))
        return False

    matched = enter(Graph.START, 0)
    while not matched and pending:
        edge, pos = pending.pop()
        c = path[pos] if pos < end else END_OF_PATH
        if edge.symbol.accepts(c):
            matched = enter(edge.target, pos + 1)

    logger.debug("path %r %s", path, "matched" if matched else "did not match")
    return matched
