# Client profile registry
import logging
from collections.abc import Mapping
from types import MappingProxyType

from mcpcfg.clients import augment, claude, cursor, gemini, remote, windsurf
from mcpcfg.models import ClientId, ClientProfile
from mcpcfg.utils.validation import NotSupportedError

logger = logging.getLogger(__name__)

# All client profiles, in display order
ALL_CLIENTS: list[ClientProfile] = [
    claude.PROFILE,
    gemini.PROFILE,
    cursor.PROFILE,
    windsurf.PROFILE,
    remote.CLINE_PROFILE,
    remote.KIRO_PROFILE,
    augment.PROFILE,
]

# ABOUTME: Older spellings still accepted at the string boundary
CLIENT_ALIASES: dict[str, ClientId] = {
    "claudecode": ClientId.CLAUDE_CODE,
}


def _build_registry(profiles: list[ClientProfile]) -> Mapping[ClientId, ClientProfile]:
    """Index profiles by id and check the set is exactly ClientId.

    ABOUTME: Fails at import time if a client is missing or registered twice
    """
    registry: dict[ClientId, ClientProfile] = {}
    for profile in profiles:
        if profile.id in registry:
            raise RuntimeError(f"Client '{profile.id}' registered twice")
        registry[profile.id] = profile

    missing = set(ClientId) - set(registry)
    if missing:
        names = ", ".join(sorted(client_id.value for client_id in missing))
        raise RuntimeError(f"No profile registered for: {names}")

    logger.debug("Registered %d client profiles", len(registry))
    return MappingProxyType(registry)


REGISTRY: Mapping[ClientId, ClientProfile] = _build_registry(ALL_CLIENTS)

__all__ = [
    "ALL_CLIENTS",
    "CLIENT_ALIASES",
    "REGISTRY",
    "get_all_clients",
    "lookup",
    "parse_client_id",
]


def lookup(client_id: ClientId) -> ClientProfile:
    """Return the profile for a client id.

    ABOUTME: Total over ClientId, so there is no error path here
    """
    return REGISTRY[client_id]


def parse_client_id(raw: str) -> ClientId:
    """Convert user input to a ClientId.

    ABOUTME: Case-insensitive and tolerant of surrounding whitespace
    ABOUTME: The only place NotSupportedError is raised

    Args:
        raw: Client name as typed by the user

    Returns:
        Matching ClientId

    Raises:
        NotSupportedError: If raw names no supported client

    Examples:
        >>> parse_client_id(" Cursor ")
        <ClientId.CURSOR: 'cursor'>
        >>> parse_client_id("claudecode")
        <ClientId.CLAUDE_CODE: 'claude-code'>
    """
    normalized = raw.strip().lower()
    if normalized in CLIENT_ALIASES:
        return CLIENT_ALIASES[normalized]

    try:
        return ClientId(normalized)
    except ValueError:
        raise NotSupportedError(raw, [client_id.value for client_id in ClientId]) from None


def get_all_clients() -> list[ClientProfile]:
    """Return all client profiles in display order."""
    return list(ALL_CLIENTS)
