import pytest


@pytest.fixture
def helper_tmp(tmp_path, monkeypatch):
    """Create a temp directory and chdir into it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
