from __future__ import annotations

from .errors import MatchError, PatternError
from .graph import PATH_SEPARATOR

ALT_SEPARATOR = "\\"
GLOBSTAR = "**"

# Prepended to patterns that are neither rooted nor start with a globstar.
ANYWHERE_PREFIX = PATH_SEPARATOR + GLOBSTAR + PATH_SEPARATOR


def to_posix(path: str) -> str:
    return path.replace(ALT_SEPARATOR, PATH_SEPARATOR)


def normalize_pattern(pattern: str) -> str:
    """Normalize a user pattern into the form the compiler expects.

    - Converts backslashes to slashes
    - A pattern that is not rooted matches at any depth: '/**/' is prepended,
      or just '/' when it already starts with '**'
    - A trailing '/' means "everything under this directory": '**' is appended
    """
    if not pattern:
        raise PatternError("empty pattern")
    pat = to_posix(pattern)

    if not pat.startswith(PATH_SEPARATOR):
        if pat.startswith(GLOBSTAR):
            pat = PATH_SEPARATOR + pat
        else:
            pat = ANYWHERE_PREFIX + pat

    if pat.endswith(PATH_SEPARATOR):
        pat += GLOBSTAR

    return pat


def normalize_path(path: str) -> str:
    if not path:
        raise MatchError("empty path")
    return to_posix(path)
