"""
ngnMCP – MCP server for Nigerian banking utils.

Starts a FastMCP server (stdio) and registers all skills.

Skills:
  nuban  – NUBAN generation, check digit calculation & validation, bank list

Usage:
  python server.py                        # starts the MCP server
  claude mcp add ngnMCP -- python /path/to/server.py

Configuration:
  Copy .env.example to .env and adjust as needed (all values optional).
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# load .env from the project directory (before any skill imports)
load_dotenv(Path(__file__).parent / ".env", override=False)

mcp = FastMCP(
    "ngnMCP",
    instructions=(
        "MCP server for Nigerian banking utils. "
        "Available skills: nuban (generate, calculate and validate NUBANs, list bank codes). "
        "A NUBAN is only valid relative to a 3-digit bank code."
    ),
)

# ── Register skills ────────────────────────────────────────────────────
from skills.nuban import register_tools as _nuban  # noqa: E402

_nuban(mcp)

# ── Entry point ────────────────────────────────────────────────────────
if __name__ == "__main__":
    mcp.run()
