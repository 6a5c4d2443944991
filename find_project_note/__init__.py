"""Find Project Note MCP Server

Opens the nearest tagged ancestor folder note of an Obsidian note and picks
preview or source mode from a note's front-matter tags.
"""

from find_project_note.data_models import (
    NotePath,
    ResolutionResult,
    ResolutionStatus,
    Settings,
    TagType,
    VaultMetadata,
    ViewMode,
)
from find_project_note.session import configure_state, get_state
from find_project_note.server import mcp, run_server

# Import tools to register them with the MCP server
from find_project_note import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "NotePath",
    "ResolutionResult",
    "ResolutionStatus",
    "Settings",
    "TagType",
    "VaultMetadata",
    "ViewMode",
    "configure_state",
    "get_state",
    "mcp",
    "run_server",
]
