# Client generator base utilities
import json
from typing import Any

from mcpcfg.models import ConfigGenerator, ServerAddress

# ABOUTME: Name the MCP server is registered under in every client
SERVER_NAME = "archon"


def to_pretty_json(data: dict[str, Any]) -> str:
    """Serialize a config document for display.

    ABOUTME: Uses 2-space indentation for readability
    ABOUTME: Keeps insertion order so documents read as written
    """
    return json.dumps(data, indent=2, ensure_ascii=False)


def to_compact_json(data: dict[str, Any]) -> str:
    """Serialize a payload with no whitespace.

    ABOUTME: Used for embedded payloads where byte layout matters
    """
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def mcp_servers(entry: dict[str, Any]) -> dict[str, Any]:
    """Wrap a single server entry in the common mcpServers envelope."""
    return {"mcpServers": {SERVER_NAME: entry}}


def url_entry(key: str) -> ConfigGenerator:
    """Build a generator for clients that only need the URL under *key*.

    ABOUTME: Cursor, Augment, Gemini and Windsurf differ only in the key name

    Args:
        key: JSON key holding the MCP URL (url, httpUrl, serverUrl)

    Returns:
        Generator producing {"mcpServers": {"archon": {key: url}}}

    Examples:
        >>> generate = url_entry("serverUrl")
        >>> print(generate(ServerAddress("localhost", 8051)))
        {
          "mcpServers": {
            "archon": {
              "serverUrl": "http://localhost:8051/mcp"
            }
          }
        }
    """
    def generate(address: ServerAddress) -> str:
        return to_pretty_json(mcp_servers({key: address.mcp_url}))

    return generate
