"""Shared test fixtures for Resource Ranker tests."""

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep user/project config files and RANKER_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    workdir = tmp_path_factory.mktemp("cwd")
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(workdir)
    for key in [k for k in os.environ if k.startswith("RANKER_")]:
        monkeypatch.delenv(key)
    return workdir


@pytest.fixture
def write_sources(tmp_path):
    """Create files under tmp_path from a {relative path: content} mapping."""

    def _write(files):
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def color_project(write_sources):
    """Two files: 0xffabcdef used three times, 0xff123456 once."""
    return write_sources(
        {
            "lib/one.dart": (
                "final a = Color(0xffabcdef);\n"
                "final b = Color(0xffabcdef);\n"
                "final c = Color(0xffabcdef);\n"
            ),
            "lib/two.dart": "final d = Color(0xff123456);\n",
        }
    )
