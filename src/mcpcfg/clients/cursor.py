# Cursor client profile and one-click deep-link encoder
import base64
import logging

from mcpcfg.clients.base import SERVER_NAME, to_compact_json, url_entry
from mcpcfg.models import ClientId, ClientProfile, OneClickCapability, ServerAddress

logger = logging.getLogger(__name__)

# ABOUTME: Cursor registers this scheme with the OS to receive install requests
DEEPLINK_TEMPLATE = (
    "cursor://anysphere.cursor-deeplink/mcp/install?name={name}&config={config}"
)

generate_config = url_entry("url")


def encode_install_link(address: ServerAddress) -> str:
    """Build the Cursor one-click install URI.

    ABOUTME: Payload is compact JSON {"url": ...}, base64 of its UTF-8 bytes
    ABOUTME: Payload stays compact even though displayed configs are pretty-printed
    ABOUTME: Decoding is left to Cursor; this side never reads it back

    Args:
        address: Address of the running MCP server

    Returns:
        cursor:// URI carrying the encoded payload

    Examples:
        >>> encode_install_link(ServerAddress("localhost", 8051))
        'cursor://anysphere.cursor-deeplink/mcp/install?name=archon&config=eyJ1cmwiOiJodHRwOi8vbG9jYWxob3N0OjgwNTEvbWNwIn0='
    """
    payload = to_compact_json({"url": address.mcp_url})
    encoded = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    logger.debug("Encoded Cursor install payload %s (%d bytes)", payload, len(payload))
    return DEEPLINK_TEMPLATE.format(name=SERVER_NAME, config=encoded)


PROFILE = ClientProfile(
    id=ClientId.CURSOR,
    label="Cursor",
    title="Cursor Configuration",
    steps=(
        "Option A: Use the one-click install button below (recommended)",
        "Option B: Manually edit ~/.cursor/mcp.json",
        "Add the configuration shown below",
        "Restart Cursor for changes to take effect",
    ),
    generate=generate_config,
    one_click=OneClickCapability(
        label="One-Click Install for Cursor",
        hint="Opens Cursor with configuration",
        encode=encode_install_link,
    ),
)
