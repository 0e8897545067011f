"""
Start the form-codegen MCP server.

    python run_mcp_server.py                      # stdio
    python run_mcp_server.py --transport sse      # SSE on MCP_HOST:MCP_PORT
"""

import argparse
import asyncio
import logging

from form_codegen.config import get_config
from form_codegen.mcp_server import run_mcp_server

logger = logging.getLogger("form-codegen-mcp")


def main():
    config = get_config()

    parser = argparse.ArgumentParser(description="form-codegen MCP server")
    parser.add_argument("--transport", choices=["stdio", "sse"], default=config.mcp_transport)
    parser.add_argument("--host", default=config.mcp_host)
    parser.add_argument("--port", type=int, default=config.mcp_port)
    args = parser.parse_args()

    try:
        asyncio.run(run_mcp_server(transport=args.transport, host=args.host, port=args.port))
    except KeyboardInterrupt:
        logger.info("Server stopped")


if __name__ == "__main__":
    main()
