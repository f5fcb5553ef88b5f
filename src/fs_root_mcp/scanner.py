"""Root scanner — reports the root and reads directories under it."""

from __future__ import annotations

import asyncio
import logging
import os

from .config import ServerConfig
from .models.listing import DirectoryListing, RootInfo
from .root_policy import relative_or_same, resolve_within_root

logger = logging.getLogger(__name__)


def describe_root(config: ServerConfig) -> RootInfo:
    """Return the configured root."""
    return RootInfo(root=config.root_dir)


def _read_entries(target: str) -> list[str]:
    """Read one directory level, sorted by name, directories suffixed with os.sep."""
    names = []
    with os.scandir(target) as it:
        for entry in sorted(it, key=lambda e: e.name):
            name = entry.name
            if entry.is_dir(follow_symlinks=False):
                name += os.sep
            names.append(name)
    return names


def list_directory_sync(config: ServerConfig, requested: str | None) -> DirectoryListing:
    """List entries at *requested* under the configured root (sync).

    Raises:
        PathEscapeError: If *requested* resolves outside the root. Nothing
            is read from disk in that case.
        FileNotFoundError: If the resolved path does not exist.
        NotADirectoryError: If the resolved path is not a directory.
        PermissionError: If the directory cannot be read.
    """
    target = resolve_within_root(
        config.root_dir,
        requested,
        strict_symlinks=config.strict_symlinks,
    )
    entries = _read_entries(target)
    logger.debug("Listed %d entries in %s", len(entries), target)
    return DirectoryListing(
        root=config.root_dir,
        path=target,
        display_path=relative_or_same(config.root_dir, target),
        entries=entries,
    )


async def list_directory(config: ServerConfig, requested: str | None) -> DirectoryListing:
    """List entries at *requested* under the configured root.

    Args:
        config: Server configuration carrying the root.
        requested: Path relative to the root; empty or ``"."`` for the root.

    Returns:
        DirectoryListing with entries and the relative display path.
    """
    return await asyncio.to_thread(list_directory_sync, config, requested)
