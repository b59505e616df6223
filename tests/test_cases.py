from pathlib import Path

import pytest
import yaml

from pathmatch.patterns import match_path

CASES_FILE = Path(__file__).parent / "data" / "cases.yaml"


def _load_cases():
    data = yaml.safe_load(CASES_FILE.read_text(encoding="utf-8"))
    return [pytest.param(c["path"], c["pattern"], c["match"], id=f"{c['pattern']}|{c['path']}") for c in data["cases"]]


@pytest.mark.parametrize("path, pattern, expected", _load_cases())
def test_case_table(path, pattern, expected):
    assert match_path(path, pattern) is expected
