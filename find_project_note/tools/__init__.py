"""MCP tool definitions for the Find Project Note server.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from find_project_note.tools import navigation_tools
from find_project_note.tools import settings_tools

__all__ = [
    "navigation_tools",
    "settings_tools",
]
