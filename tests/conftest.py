"""Shared fixtures: fake npm projects on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path: Path):
    """Return a builder ``(manifest, packages) -> root``.

    *packages* maps a package name to ``{filename: content}``; ``None`` as
    the file map creates an empty package directory.
    """

    def _make(manifest, packages=None) -> Path:
        root = tmp_path / "project"
        root.mkdir()
        if manifest is not None:
            text = manifest if isinstance(manifest, str) else json.dumps(manifest)
            (root / "package.json").write_text(text, encoding="utf-8")
        for name, files in (packages or {}).items():
            pkg = root / "node_modules" / name
            pkg.mkdir(parents=True)
            for fname, content in (files or {}).items():
                data = content if isinstance(content, bytes) else content.encode("utf-8")
                (pkg / fname).write_bytes(data)
        return root

    return _make
