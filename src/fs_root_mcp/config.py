"""Server configuration via environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ConfigurationError

ROOT_ENV_VAR = "MCP_FS_ROOT"
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _is_env_placeholder(value: str) -> bool:
    """Return True when *value* looks like an unresolved shell placeholder."""
    if value.startswith("${") and value.endswith("}"):
        inner = value[2:-1].strip()
        if ":-" in inner:
            inner = inner.split(":-", 1)[0].strip()
        return bool(inner) and all(ch.isalnum() or ch == "_" for ch in inner)
    if value.startswith("$"):
        inner = value[1:].strip()
        return bool(inner) and all(ch.isalnum() or ch == "_" for ch in inner)
    return False


def resolve_root_dir(raw: str) -> str:
    """Turn the MCP_FS_ROOT value into an absolute root directory.

    Blank values and placeholders some MCP hosts pass through unchanged
    (``${MCP_FS_ROOT}``) fall back to the current working directory.

    Raises:
        ConfigurationError: If the working directory is gone or the path
            cannot be made absolute.
    """
    value = raw.strip()
    if not value or _is_env_placeholder(value):
        try:
            value = os.getcwd()
        except OSError as exc:
            raise ConfigurationError(f"cannot determine working directory: {exc}") from exc

    try:
        return os.path.abspath(os.path.expanduser(value))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"cannot resolve path {value!r}: {exc}") from exc


class ServerConfig(BaseModel):
    """Runtime configuration resolved from environment.

    Frozen: the root is fixed for the lifetime of the process and handed
    to the tools explicitly by :func:`fs_root_mcp.server.create_app`.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: str
    strict_symlinks: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @field_validator("root_dir")
    @classmethod
    def validate_root_dir(cls, value: str) -> str:
        if not os.path.isabs(value):
            raise ValueError(f"Root directory must be absolute, got '{value}'")
        return os.path.normpath(value)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            allowed = ", ".join(sorted(VALID_LOG_LEVELS))
            raise ValueError(f"Invalid log level '{value}'. Allowed: {allowed}")
        return level

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build config from environment variables."""
        return cls(
            root_dir=resolve_root_dir(os.getenv(ROOT_ENV_VAR, "")),
            strict_symlinks=os.getenv("MCP_FS_STRICT_SYMLINKS", "").lower() in ("1", "true", "yes"),
            log_level=os.getenv("MCP_FS_LOG_LEVEL", "INFO"),
        )
