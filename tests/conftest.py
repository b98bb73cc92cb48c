from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def run_from_repo_root(monkeypatch):
    # program tests open examples/program_N.lox relative to the repo root
    monkeypatch.chdir(ROOT)
