"""Structured error handling — root confinement failures, I/O categories, tool error model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCategory(str, Enum):
    """Categories of errors for diagnostics."""

    PATH_ESCAPE = "PATH_ESCAPE"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    NOT_A_DIRECTORY = "NOT_A_DIRECTORY"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    CONFIGURATION_INVALID = "CONFIGURATION_INVALID"
    UNKNOWN = "UNKNOWN"


class PathEscapeError(ValueError):
    """Raised when a requested path normalizes to a location outside the root."""

    def __init__(self, requested: str) -> None:
        self.requested = requested
        super().__init__(f"path outside root: {requested!r}")


class ConfigurationError(RuntimeError):
    """Raised when the root directory cannot be determined at startup."""


class ToolError(BaseModel):
    """Structured error returned from any tool."""

    error: str
    category: str
    hint: str


def categorize_error(error: Exception) -> tuple[ErrorCategory, str]:
    """Map an exception to an ErrorCategory + human-readable hint."""
    if isinstance(error, PathEscapeError):
        return (
            ErrorCategory.PATH_ESCAPE,
            "Path resolves outside the configured root; use a path relative to the root",
        )
    if isinstance(error, FileNotFoundError):
        return (
            ErrorCategory.PATH_NOT_FOUND,
            "Path not found; check it with list_resources on the parent directory",
        )
    if isinstance(error, NotADirectoryError):
        return (
            ErrorCategory.NOT_A_DIRECTORY,
            "Path is a file; only directories can be listed",
        )
    if isinstance(error, PermissionError):
        return (
            ErrorCategory.PERMISSION_DENIED,
            "Directory is not readable by the server process",
        )
    if isinstance(error, ConfigurationError):
        return (
            ErrorCategory.CONFIGURATION_INVALID,
            "Set MCP_FS_ROOT to an existing directory or start the server from one",
        )

    return (ErrorCategory.UNKNOWN, str(error))


def make_tool_error(error: Exception) -> dict:
    """Create a serialisable ToolError dict from an exception."""
    cat, hint = categorize_error(error)
    return ToolError(
        error=str(error),
        category=cat.value,
        hint=hint,
    ).model_dump(mode="json")


def format_tool_error(error: Exception) -> str:
    """Render an exception as a single caller-facing line."""
    payload = make_tool_error(error)
    if payload["hint"] == payload["error"]:
        return f"{payload['category']}: {payload['error']}"
    return f"{payload['category']}: {payload['error']} ({payload['hint']})"
