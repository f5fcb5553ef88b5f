"""Result models for root reporting and directory listing."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RootInfo(BaseModel):
    """The single configured root."""

    root: str

    @property
    def text(self) -> str:
        return f"Root: {self.root}"

    @property
    def roots(self) -> list[str]:
        return [self.root]


class DirectoryListing(BaseModel):
    """Single-level listing of a directory under the root.

    ``entries`` holds bare names; directories carry a trailing ``os.sep``.
    ``display_path`` is the listed path relative to the root, or the
    absolute path when the root itself was listed.
    """

    root: str
    path: str
    display_path: str
    entries: list[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        """Human-readable rendering: header line, then one entry per line."""
        return f"Listing for {self.display_path}:\n" + "\n".join(self.entries)
