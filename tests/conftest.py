import json
import os

import pytest


@pytest.fixture
def write_manifest():
    """Write a manifest into a directory, creating it as needed."""

    def _write(directory, data, filename="package.json"):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_listdir(monkeypatch, tmp_path):
    """Hide every directory outside ``tmp_path`` from the upward search."""
    real_listdir = os.listdir
    root = str(tmp_path)

    def _listdir(path):
        if str(path).startswith(root):
            return real_listdir(path)
        return []

    monkeypatch.setattr(os, "listdir", _listdir)
    return _listdir
