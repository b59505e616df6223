import pytest

from pathmatch import cli
from pathmatch.errors import InternalError


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


def test_match_exits_zero():
    assert _run(["/any/dir/file.txt", "file.txt"]) == 0


def test_no_match_exits_one():
    assert _run(["/any/dir/file.txt", "*.md"]) == 1


def test_backslash_arguments():
    assert _run(["\\src\\a.py", "src\\"]) == 0


@pytest.mark.parametrize("argv", [[], ["/a"], ["/a", "/a", "/a"]])
def test_wrong_argument_count_exits_two(argv):
    assert _run(argv) == 2


def test_empty_path_exits_two(capsys):
    assert _run(["", "*.txt"]) == 2
    assert "error: empty path" in capsys.readouterr().err


def test_empty_pattern_exits_two(capsys):
    assert _run(["/a.txt", ""]) == 2
    assert "error: empty pattern" in capsys.readouterr().err


def test_internal_error_exits_two(monkeypatch, capsys):
    def broken(path, pattern):
        raise InternalError("unexpected symbol kind on edge: 99")

    monkeypatch.setattr(cli, "match_path", broken)
    assert _run(["/a", "/a"]) == 2
    assert "internal error" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [["-h"], ["--help"], ["-h", "/a", "/a"]])
def test_help_flags_are_not_options(argv):
    assert _run(argv) == 2


def test_dash_arguments_are_positional():
    assert _run(["/a/-b", "-b"]) == 0
    assert _run(["-x", "-x"]) == 1
