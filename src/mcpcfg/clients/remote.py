# Profiles for stdio-only clients bridged through mcp-remote
from mcpcfg.clients.base import mcp_servers, to_pretty_json
from mcpcfg.models import ClientId, ClientProfile, ServerAddress

# ABOUTME: mcp-remote refuses plain http:// URLs without this flag
REMOTE_COMMAND = "npx"
REMOTE_PACKAGE = "mcp-remote"
ALLOW_HTTP_FLAG = "--allow-http"


def generate_config(address: ServerAddress) -> str:
    """Render a stdio entry that proxies the HTTP server via mcp-remote.

    ABOUTME: Shared by Cline and Kiro, which only launch stdio servers
    """
    return to_pretty_json(
        mcp_servers(
            {
                "command": REMOTE_COMMAND,
                "args": [REMOTE_PACKAGE, address.mcp_url, ALLOW_HTTP_FLAG],
            }
        )
    )


CLINE_PROFILE = ClientProfile(
    id=ClientId.CLINE,
    label="Cline",
    title="Cline Configuration",
    steps=(
        "Open VS Code settings (Cmd/Ctrl + ,)",
        'Search for "cline.mcpServers"',
        'Click "Edit in settings.json"',
        "Add the configuration shown below",
        "Restart VS Code for changes to take effect",
    ),
    generate=generate_config,
)

KIRO_PROFILE = ClientProfile(
    id=ClientId.KIRO,
    label="Kiro",
    title="Kiro Configuration",
    steps=(
        "Open Kiro settings",
        "Navigate to MCP Servers section",
        "Add the configuration shown below",
        "Save and restart Kiro",
    ),
    generate=generate_config,
)
