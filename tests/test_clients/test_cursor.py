# Tests for the Cursor client profile and deep-link encoder
import base64
import json

from mcpcfg.clients.cursor import DEEPLINK_TEMPLATE, PROFILE, encode_install_link, generate_config
from mcpcfg.models import ClientId, ServerAddress

LINK_PREFIX = "cursor://anysphere.cursor-deeplink/mcp/install?name=archon&config="


def test_cursor_profile_properties() -> None:
    """Test profile id and one-click capability."""
    assert PROFILE.id == ClientId.CURSOR
    assert PROFILE.supports_one_click
    assert PROFILE.one_click is not None
    assert PROFILE.one_click.encode is encode_install_link
    assert PROFILE.one_click.label == "One-Click Install for Cursor"
    assert PROFILE.command is None


def test_cursor_config_shape() -> None:
    """Test mcpServers entry keyed by url."""
    output = generate_config(ServerAddress("localhost", 8051))
    assert json.loads(output) == {
        "mcpServers": {"archon": {"url": "http://localhost:8051/mcp"}}
    }


def test_install_link_localhost() -> None:
    """Test the deep link for the default address."""
    expected_payload = base64.b64encode(b'{"url":"http://localhost:8051/mcp"}').decode()

    link = encode_install_link(ServerAddress("localhost", 8051))

    assert link == LINK_PREFIX + expected_payload
    assert link == LINK_PREFIX + "eyJ1cmwiOiJodHRwOi8vbG9jYWxob3N0OjgwNTEvbWNwIn0="


def test_install_link_payload_is_compact() -> None:
    """Test the embedded JSON has no whitespace."""
    link = encode_install_link(ServerAddress("example.com", 443))
    payload = base64.b64decode(link[len(LINK_PREFIX):]).decode("utf-8")

    assert payload == '{"url":"http://example.com:443/mcp"}'
    assert json.loads(payload) == {"url": "http://example.com:443/mcp"}


def test_install_link_ipv6_max_port() -> None:
    """Test boundary inputs survive encoding intact."""
    link = encode_install_link(ServerAddress("[::1]", 65535))
    payload = json.loads(base64.b64decode(link[len(LINK_PREFIX):]))
    assert payload == {"url": "http://[::1]:65535/mcp"}


def test_install_link_deterministic() -> None:
    """Test the same address always gives the same link."""
    address = ServerAddress("localhost", 8051)
    assert encode_install_link(address) == encode_install_link(address)


def test_template_scheme() -> None:
    """Test the fixed URI template."""
    assert DEEPLINK_TEMPLATE.startswith("cursor://anysphere.cursor-deeplink/mcp/install?")
