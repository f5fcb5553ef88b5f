"""Shared test fixtures for fs-root-mcp."""

from __future__ import annotations

import pytest

from fs_root_mcp.config import ServerConfig


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep the caller's MCP_FS_* environment out of every test."""
    for name in ("MCP_FS_ROOT", "MCP_FS_STRICT_SYMLINKS", "MCP_FS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def fs_root(tmp_path):
    """Create a root directory with a small tree.

    Layout::

        root/
            a.txt
            b/
                c.txt
            reports/
                q1.csv
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b").mkdir()
    (root / "b" / "c.txt").write_text("charlie")
    (root / "reports").mkdir()
    (root / "reports" / "q1.csv").write_text("1,2,3")
    return root


@pytest.fixture()
def config(fs_root):
    """ServerConfig pointing at the fs_root tree."""
    return ServerConfig(root_dir=str(fs_root))
