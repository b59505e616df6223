from __future__ import annotations


class PathMatchError(Exception):
    """Base exception for pathmatch."""


class PatternError(PathMatchError, ValueError):
    """A pattern cannot be compiled (empty)."""


class MatchError(PathMatchError, ValueError):
    """Matching was requested with an empty path or an empty graph."""


class InternalError(PathMatchError, RuntimeError):
    """A compiled graph violates its own invariants."""
