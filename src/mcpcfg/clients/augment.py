# Augment client profile
from mcpcfg.clients.base import url_entry
from mcpcfg.models import ClientId, ClientProfile

generate_config = url_entry("url")

PROFILE = ClientProfile(
    id=ClientId.AUGMENT,
    label="Augment",
    title="Augment Configuration",
    steps=(
        "Open Augment settings",
        "Navigate to Extensions > MCP",
        "Add the configuration shown below",
        "Reload configuration",
    ),
    generate=generate_config,
)
