"""Shared type aliases for tool parameters."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

RelativePath = Annotated[str, Field(
    max_length=4096,
    description="Path relative to the configured root (empty or '.' for the root itself)",
)]
