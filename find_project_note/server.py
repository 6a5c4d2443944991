"""FastMCP server initialization and tool registration."""

import logging
from mcp.server.fastmcp import FastMCP

from find_project_note.constants import LOG_LEVEL

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("find_project_note")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Start the MCP server with stdio transport."""
    logger.info("Starting Find Project Note server")
    mcp.run(transport="stdio")
