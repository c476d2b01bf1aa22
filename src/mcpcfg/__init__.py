# mcpcfg - MCP client configuration generator
# ABOUTME: Version information
__version__ = "0.1.0"

# ABOUTME: Export core data models
from mcpcfg.models import (
    ClientId,
    ClientProfile,
    OneClickCapability,
    ServerAddress,
    ServerStatus,
)

# ABOUTME: Export registry, rendering and settings functions
from mcpcfg.clients import get_all_clients, lookup, parse_client_id
from mcpcfg.clients.cursor import encode_install_link
from mcpcfg.config import get_config_path, load_status, resolve_status
from mcpcfg.render import install_link, render, render_all, render_command
from mcpcfg.utils import NotSupportedError, ValidationError

__all__ = [
    "__version__",
    "ClientId",
    "ClientProfile",
    "OneClickCapability",
    "ServerAddress",
    "ServerStatus",
    "get_all_clients",
    "lookup",
    "parse_client_id",
    "encode_install_link",
    "get_config_path",
    "load_status",
    "resolve_status",
    "install_link",
    "render",
    "render_all",
    "render_command",
    "NotSupportedError",
    "ValidationError",
]
