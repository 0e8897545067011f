"""
MCP Server module for form-codegen.

Provides Model Context Protocol server implementation
with stdio and SSE transport support.
"""

from form_codegen.mcp_server.server import create_mcp_server, create_sse_app, run_mcp_server
from form_codegen.mcp_server.tools import call_mcp_tool, get_mcp_tools

__all__ = [
    "create_mcp_server",
    "create_sse_app",
    "run_mcp_server",
    "call_mcp_tool",
    "get_mcp_tools",
]
