import os
import stat

import pytest

from wish.search_path import SearchPath


def make_script(directory, name, body):
    """Write an executable /bin/sh script and return its path."""
    path = directory / name
    path.write_text("#!/bin/sh\n" + body + "\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def search_path():
    return SearchPath()


@pytest.fixture
def bindir(tmp_path):
    d = tmp_path / "bin"
    d.mkdir()
    return d


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside tmp_path; the old cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _no_log_env(monkeypatch):
    monkeypatch.delenv("WISH_LOG_FILE", raising=False)
    monkeypatch.delenv("WISH_LOG_LEVEL", raising=False)
