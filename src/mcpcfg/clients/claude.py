# Claude Code client profile
from mcpcfg.clients.base import SERVER_NAME, to_pretty_json
from mcpcfg.models import ClientId, ClientProfile, ServerAddress


def generate_config(address: ServerAddress) -> str:
    """Render the Claude Code server entry.

    ABOUTME: Claude Code takes a flat entry, not an mcpServers envelope
    """
    return to_pretty_json(
        {
            "name": SERVER_NAME,
            "transport": "http",
            "url": address.mcp_url,
        }
    )


def generate_command(address: ServerAddress) -> str:
    """Render the `claude mcp add` shell command.

    ABOUTME: Alternative artifact to the JSON entry, meant to be pasted in a terminal

    Examples:
        >>> generate_command(ServerAddress("localhost", 8051))
        'claude mcp add --transport http archon http://localhost:8051/mcp'
    """
    return f"claude mcp add --transport http {SERVER_NAME} {address.mcp_url}"


PROFILE = ClientProfile(
    id=ClientId.CLAUDE_CODE,
    label="Claude Code",
    title="Claude Code Configuration",
    steps=(
        "Open a terminal and run the following command:",
        "The connection will be established automatically",
    ),
    generate=generate_config,
    command=generate_command,
)
