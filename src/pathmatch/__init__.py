from __future__ import annotations

from .errors import InternalError, MatchError, PathMatchError, PatternError
from .graph import FAIL, SUCCESS, Edge, Graph, Node, Symbol, SymbolKind
from .matcher import is_match
from .patterns import CompiledPattern, compile_graph, compile_pattern, match_path
from .version import __version__

__all__ = [
    "CompiledPattern",
    "Edge",
    "FAIL",
    "Graph",
    "InternalError",
    "MatchError",
    "Node",
    "PathMatchError",
    "PatternError",
    "SUCCESS",
    "Symbol",
    "SymbolKind",
    "__version__",
    "compile_graph",
    "compile_pattern",
    "is_match",
    "match_path",
]
