# The module provides the command line entry point of the CNPJ MCP server.
# Author: Shibo Li
# Date: 2025-06-13
# Version: 1.0.2

import argparse
import asyncio
from typing import List, Optional

from cnpj_mcp.core.config import get_settings

USAGE = """\
MCP CNPJ Intelligence v{version}

NOTE: this is an MCP server. It speaks the Model Context Protocol on
stdin/stdout and is meant to be launched by an MCP client, not run by hand
in a terminal.

INSTALLATION:
  pip install cnpj-mcp

CONFIGURATION (Claude Desktop, Gemini CLI or any MCP client):
  Add to claude_desktop_config.json or ~/.gemini/settings.json:
  {{
    "mcpServers": {{
      "cnpj-intelligence": {{
        "command": "cnpj-mcp"
      }}
    }}
  }}

USAGE:
  gemini "look up CNPJ 00.000.000/0001-91"

API: {api_url}
"""


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="cnpj-mcp",
        description=USAGE.format(version=settings.VERSION, api_url=settings.API_BASE_URL),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="help", help="show this message and exit")
    parser.add_argument("-v", "--version", action="version", version=settings.VERSION)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    build_parser().parse_args(argv)

    from cnpj_mcp.server import serve
    asyncio.run(serve())


if __name__ == "__main__":
    main()
