"""
Configuration module for form-codegen.

Handles environment variables and default settings for the outer
surfaces (MCP server, demo). Generated code never depends on these values.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class CodegenConfig:
    """Configuration settings for form-codegen."""

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8080

    # Logging
    log_level: str = "INFO"

    # Output settings
    indent_json_output: int = 2

    # Gradio playground
    demo_port: int = 7860

    @classmethod
    def from_env(cls) -> "CodegenConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_host=os.getenv("MCP_HOST", _defaults.mcp_host),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
            log_level=os.getenv("FORM_CODEGEN_LOG_LEVEL", _defaults.log_level).upper(),
            indent_json_output=int(os.getenv("FORM_CODEGEN_JSON_INDENT", str(_defaults.indent_json_output))),
            demo_port=int(os.getenv("FORM_CODEGEN_DEMO_PORT", str(_defaults.demo_port))),
        )


config = CodegenConfig.from_env()


def get_config() -> CodegenConfig:
    """Get the current configuration."""
    return config
