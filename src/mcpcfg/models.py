# Core data models for mcpcfg
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from mcpcfg.utils.validation import validate_host, validate_port

# ABOUTME: Lifecycle states reported by the MCP server's status provider
ServerState = Literal["running", "starting", "stopped"]


@dataclass(frozen=True)
class ServerAddress:
    """Immutable host/port of a running MCP server.

    ABOUTME: Validates on construction so generators never see bad input
    ABOUTME: Host is interpolated verbatim (no URL-encoding)
    """
    host: str
    port: int

    def __post_init__(self) -> None:
        validate_host(self.host)
        validate_port(self.port)

    @property
    def mcp_url(self) -> str:
        """Streamable HTTP endpoint of the server."""
        return f"http://{self.host}:{self.port}/mcp"


@dataclass(frozen=True)
class ServerStatus:
    """Snapshot of the MCP server as reported by the settings provider.

    ABOUTME: Address may be absent while the server is not running
    """
    state: ServerState
    address: ServerAddress | None = None

    @property
    def is_running(self) -> bool:
        """True only when the server runs and its address is known."""
        return self.state == "running" and self.address is not None


class ClientId(str, Enum):
    """Closed set of supported MCP clients, in display order.

    ABOUTME: Adding a client requires a new member and a registry entry
    """
    CLAUDE_CODE = "claude-code"
    GEMINI = "gemini"
    CURSOR = "cursor"
    WINDSURF = "windsurf"
    CLINE = "cline"
    KIRO = "kiro"
    AUGMENT = "augment"

    def __str__(self) -> str:
        return self.value


# ABOUTME: Generators turn an address into displayable text
ConfigGenerator = Callable[[ServerAddress], str]


@dataclass(frozen=True)
class OneClickCapability:
    """Deep-link install attached to a client that supports it.

    ABOUTME: encode builds the URI; opening it is the caller's job
    """
    label: str
    hint: str
    encode: ConfigGenerator


@dataclass(frozen=True)
class ClientProfile:
    """How a single client type is configured.

    ABOUTME: Steps are shown in order; each one stands alone
    ABOUTME: one_click and command are optional per-client capabilities
    """
    id: ClientId
    label: str
    title: str
    steps: tuple[str, ...]
    generate: ConfigGenerator
    one_click: OneClickCapability | None = None
    command: ConfigGenerator | None = None

    @property
    def supports_one_click(self) -> bool:
        """Whether a deep-link install is available."""
        return self.one_click is not None
