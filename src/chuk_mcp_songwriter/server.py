#!/usr/bin/env python3
"""
Entry point for the CHUK Songwriter MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

from chuk_mcp_songwriter.settings import SETTINGS_ENV_VAR

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Songwriter MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Generation settings YAML file (default: ./songwriter.yaml if present)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.settings:
        os.environ[SETTINGS_ENV_VAR] = args.settings

    # Import after argument parsing so settings are resolved from the flags
    from chuk_mcp_songwriter.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Songwriter MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Songwriter MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
