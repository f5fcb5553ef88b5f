"""Policy helpers confining caller-supplied paths to the configured root."""

from __future__ import annotations

import os

from .errors import PathEscapeError


def _strip_anchor(requested: str) -> str:
    """Drop any drive and leading separators so *requested* joins below the root."""
    _, tail = os.path.splitdrive(requested)
    return tail.lstrip(os.sep + (os.altsep or ""))


def _escapes(root: str, path: str) -> bool:
    rel = os.path.relpath(path, root)
    return rel == os.pardir or rel.startswith(os.pardir + os.sep)


def resolve_within_root(
    root: str,
    requested: str | None,
    *,
    strict_symlinks: bool = False,
) -> str:
    """Resolve *requested* relative to *root*, blocking traversal outside it.

    Normalization is lexical: ``.`` and ``..`` segments are collapsed
    without touching the filesystem. A symlink inside the root that points
    elsewhere is only caught when *strict_symlinks* is set, which re-checks
    containment on the ``realpath`` of both sides.

    Args:
        root: Absolute, normalized root directory.
        requested: Caller-supplied path. Empty, ``None`` or ``"."`` mean the
            root itself. A leading separator or drive is ignored, so
            ``"/etc"`` resolves to ``<root>/etc``.
        strict_symlinks: Also reject paths whose real location is outside
            the real root.

    Returns:
        Absolute path equal to *root* or nested under it.

    Raises:
        PathEscapeError: If the normalized path lies outside *root*.
    """
    sub_path = "" if requested in (None, "", ".") else _strip_anchor(requested)
    candidate = os.path.abspath(os.path.join(root, sub_path))

    if _escapes(root, candidate):
        raise PathEscapeError(requested or "")
    if strict_symlinks and _escapes(os.path.realpath(root), os.path.realpath(candidate)):
        raise PathEscapeError(requested or "")
    return candidate


def relative_or_same(root: str, path: str) -> str:
    """Return *path* relative to *root*, or *path* itself when that says nothing."""
    try:
        rel = os.path.relpath(path, root)
    except ValueError:
        return path
    return path if rel == os.curdir else rel
