# Settings loading for mcpcfg
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import tomli

from mcpcfg.models import ServerAddress, ServerState, ServerStatus
from mcpcfg.utils import (
    ValidationError,
    coerce_port,
    expand_env_vars,
    substitute_env_vars,
    validate_host,
)

logger = logging.getLogger(__name__)

# ABOUTME: Default settings directory in user's home
CONFIG_DIR = Path.home() / ".mcpcfg"

# ABOUTME: Main settings file location (JSON format, .toml also accepted)
CONFIG_FILE = CONFIG_DIR / "config.json"

# ABOUTME: Address used when neither flags nor a settings file provide one
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8051

VALID_STATES = ("running", "starting", "stopped")


def get_config_path() -> Path:
    """Return the path to the mcpcfg settings file.

    ABOUTME: Returns ~/.mcpcfg/config.json
    ABOUTME: File is optional; defaults apply when it is missing

    Returns:
        Path to settings file
    """
    return CONFIG_FILE


def read_settings_file(path: Path) -> dict[str, Any]:
    """Read a JSON or TOML settings file.

    ABOUTME: Chooses the parser from the file suffix
    ABOUTME: Raises ValueError for syntax errors, naming the file

    Raises:
        FileNotFoundError: If path doesn't exist
        ValueError: If the file can't be parsed or isn't a table/object
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    if path.suffix == ".toml":
        try:
            with open(path, "rb") as f:
                data = tomli.load(f)
        except tomli.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e
    else:
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings in {path} must be an object at the top level")

    return cast(dict[str, Any], data)


def _expand(value: Any) -> Any:
    """Expand ${VAR} references in string values only."""
    if isinstance(value, str):
        return expand_env_vars(value)
    return value


@dataclass(frozen=True)
class ServerSettings:
    """Server section of a settings file, before defaults are applied.

    ABOUTME: Host and port are kept independently so a partial address survives
    ABOUTME: Both are already validated when present
    """
    state: ServerState = "running"
    host: str | None = None
    port: int | None = None

    def to_status(self) -> ServerStatus:
        """Build a ServerStatus; the address is set only when both parts are known."""
        if self.host is None or self.port is None:
            return ServerStatus(state=self.state)
        return ServerStatus(state=self.state, address=ServerAddress(self.host, self.port))


def _parse_host(value: Any) -> str:
    """Expand and validate a settings host.

    ABOUTME: An unset ${VAR} in the host is an error, not a warning
    """
    if isinstance(value, str):
        value, unresolved = substitute_env_vars(value)
        if unresolved:
            raise ValidationError(
                "host", f"unresolved environment variable(s): {', '.join(sorted(unresolved))}"
            )
    return validate_host(value)


def parse_settings(data: dict[str, Any]) -> ServerSettings:
    """Read the "server" section of a parsed settings document.

    ABOUTME: Missing status means "running"
    ABOUTME: Host and port are each optional and validated on their own

    Args:
        data: Parsed settings document

    Returns:
        ServerSettings with whatever the file provides

    Raises:
        ValueError: If the server section or status value is malformed
        ValidationError: If host or port is invalid
    """
    server = data.get("server", {})
    if not isinstance(server, dict):
        raise ValueError("'server' section must be an object")

    state = _expand(server.get("status", "running"))
    if state not in VALID_STATES:
        raise ValueError(
            f"Invalid server status '{state}'. Must be one of: {', '.join(VALID_STATES)}"
        )

    unknown = set(server) - {"host", "port", "status"}
    for key in sorted(unknown):
        logger.warning("Ignoring unknown settings key 'server.%s'", key)

    host = server.get("host")
    port = _expand(server.get("port"))
    return ServerSettings(
        state=state,
        host=_parse_host(host) if host is not None else None,
        port=coerce_port(port) if port is not None else None,
    )


def parse_status(data: dict[str, Any]) -> ServerStatus:
    """Build a ServerStatus from a parsed settings document.

    ABOUTME: Without both host and port the status carries no address

    Raises:
        ValueError: If the server section or status value is malformed
        ValidationError: If host or port is invalid
    """
    return parse_settings(data).to_status()


def load_settings(path: Path) -> ServerSettings:
    """Load the server section from a settings file.

    ABOUTME: Fail-fast on parse errors with clear error messages
    ABOUTME: Expands environment variables in string values

    Args:
        path: Path to config.json or config.toml

    Returns:
        Parsed ServerSettings

    Raises:
        FileNotFoundError: If settings file doesn't exist
        ValueError: If the file or its values are invalid
    """
    logger.debug("Loading settings from %s", path)
    return parse_settings(read_settings_file(path))


def load_status(path: Path) -> ServerStatus:
    """Load the MCP server status from a settings file."""
    return load_settings(path).to_status()


def resolve_status(
    host: str | None = None,
    port: int | str | None = None,
    path: Path | None = None,
) -> ServerStatus:
    """Work out which server to generate configuration for.

    ABOUTME: Host and port are merged one field at a time: flag, then settings, then default
    ABOUTME: An explicit path must exist; the default path is optional

    Args:
        host: Host given on the command line, if any
        port: Port given on the command line, if any
        path: Settings file given on the command line, if any

    Returns:
        ServerStatus to render against

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ValueError: If settings or overrides are invalid
    """
    if path is not None:
        settings = load_settings(path)
    elif get_config_path().exists():
        settings = load_settings(get_config_path())
    else:
        settings = ServerSettings()

    if host is not None:
        resolved_host = host
    elif settings.host is not None:
        resolved_host = settings.host
    else:
        resolved_host = DEFAULT_HOST

    if port is not None:
        resolved_port = coerce_port(port)
    elif settings.port is not None:
        resolved_port = settings.port
    else:
        resolved_port = DEFAULT_PORT

    logger.debug("Resolved server address %s:%s", resolved_host, resolved_port)
    return ServerStatus(
        state=settings.state,
        address=ServerAddress(host=resolved_host, port=resolved_port),
    )
