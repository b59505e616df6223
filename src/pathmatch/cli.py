from __future__ import annotations

import argparse
import sys

from .errors import InternalError, PathMatchError
from .patterns import match_path
from .version import __version__

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def cmd_match(args: argparse.Namespace) -> int:
    return EXIT_MATCH if match_path(args.path, args.pattern) else EXIT_NO_MATCH


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathmatch",
        add_help=False,
        description=f"pathmatch {__version__} - test a path against a glob pattern (exit 0 = match, 1 = no match)",
    )
    p.add_argument("path", help="Path to test; '\\' is treated as '/'")
    p.add_argument(
        "pattern",
        help="Glob with *, ?, **; unrooted patterns match at any depth, a trailing '/' matches everything below",
    )
    p.set_defaults(func=cmd_match)
    return p


def main(argv: list[str] | None = None) -> None:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()

    # Both values are positional even when they start with "-".
    # argparse exits with 2 on a wrong argument count.
    args = parser.parse_args(["--", *argv])
    try:
        rc = args.func(args)
    except InternalError as e:
        print(f"internal error: {e}", file=sys.stderr)
        rc = EXIT_ERROR
    except PathMatchError as e:
        print(f"error: {e}", file=sys.stderr)
        rc = EXIT_ERROR
    except KeyboardInterrupt:
        rc = 130

    raise SystemExit(rc)
