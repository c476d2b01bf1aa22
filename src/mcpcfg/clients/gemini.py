# Gemini CLI client profile
from mcpcfg.clients.base import url_entry
from mcpcfg.models import ClientId, ClientProfile

# ABOUTME: Gemini CLI reads streamable HTTP servers from httpUrl (url means SSE there)
generate_config = url_entry("httpUrl")

PROFILE = ClientProfile(
    id=ClientId.GEMINI,
    label="Gemini",
    title="Gemini CLI Configuration",
    steps=(
        "Locate or create the settings file at ~/.gemini/settings.json",
        "Add the configuration shown below to the file",
        "Launch Gemini CLI in your terminal",
        "Test the connection by typing /mcp to list available tools",
    ),
    generate=generate_config,
)
