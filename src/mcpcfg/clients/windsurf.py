# Windsurf client profile
from mcpcfg.clients.base import url_entry
from mcpcfg.models import ClientId, ClientProfile

generate_config = url_entry("serverUrl")

PROFILE = ClientProfile(
    id=ClientId.WINDSURF,
    label="Windsurf",
    title="Windsurf Configuration",
    steps=(
        'Open Windsurf and click the "MCP servers" button (hammer icon)',
        'Click "Configure" and then "View raw config"',
        "Add the configuration shown below to the mcpServers object",
        'Click "Refresh" to connect to the server',
    ),
    generate=generate_config,
)
