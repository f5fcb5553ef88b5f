"""Root browsing tools — 2 tools on a FastMCP sub-server."""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import ToolAnnotations

from ..config import ServerConfig
from ..errors import format_tool_error
from ..scanner import describe_root, list_directory
from ..types import RelativePath

logger = logging.getLogger(__name__)


def build_roots_server(config: ServerConfig) -> FastMCP:
    """Create the sub-server exposing *config*'s root.

    The tools close over *config*; nothing else is shared between calls.
    """
    roots_server = FastMCP("roots")

    @roots_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
    async def list_roots() -> ToolResult:
        """Show the configured root directory for file browsing."""
        info = describe_root(config)
        return ToolResult(content=info.text, structured_content={"result": info.roots})

    @roots_server.tool(annotations=ToolAnnotations(readOnlyHint=True, openWorldHint=False))
    async def list_resources(path: RelativePath = "") -> ToolResult:
        """List files/directories under the configured root.

        Directories are suffixed with the path separator.

        Args:
            path: Directory relative to the root; empty lists the root itself.

        Returns:
            Text listing plus the entry names as structured ``result``.
        """
        try:
            listing = await list_directory(config, path)
        except Exception as exc:
            logger.warning("list_resources rejected %r: %s", path, exc)
            raise ToolError(format_tool_error(exc)) from exc
        return ToolResult(content=listing.text, structured_content={"result": listing.entries})

    return roots_server
