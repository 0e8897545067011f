#!/usr/bin/env python3
"""
MCP Server SSE Example

Connects an agent to the form-codegen MCP server over SSE and asks it to
generate a registration form component.

Prerequisites:
    1. Start the server:
       python run_mcp_server.py --transport sse --port 8080

    2. Health check:
       curl http://localhost:8080/health

    3. OPENAI_API_KEY set in the environment (used by the agent).

Usage:
    python examples/mcp_sse_example.py
"""

import asyncio
import sys

from agents import Agent, Runner
from agents.mcp import MCPServerSse


async def main():
    """MCP Server SSE example with the generate_vue_form tool."""

    mcp_url = "http://localhost:8080/sse"

    print("=" * 60)
    print("🚀 form-codegen MCP SSE Example")
    print("=" * 60)
    print(f"MCP Server URL: {mcp_url}")
    print()

    try:
        async with MCPServerSse(
            params={"url": mcp_url},
            client_session_timeout_seconds=60,
        ) as mcp_server:
            print("✅ Connected to MCP server")

            tools = await mcp_server.list_tools()
            print(f"\nAvailable tools ({len(tools)}):")
            for tool in tools:
                print(f"   - {tool.name}")
            print()

            agent = Agent(
                name="Form Builder Agent",
                instructions="""
                You are a form builder assistant.

                Turn the user's description of a form into field descriptors
                and call generate_vue_form. Reply with the "sfc" value only.
                """,
                mcp_servers=[mcp_server],
            )

            result = await Runner.run(
                agent,
                "Build a registration form with a required username, a required email, "
                "an age between 18 and 99, a gender radio (male/female) and a newsletter switch.",
            )

            print("\n" + "=" * 60)
            print("Result:")
            print("=" * 60)
            print(result.final_output)

    except Exception as e:
        print(f"❌ Error: {type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
