# Rendering of client artifacts from a server address
from mcpcfg.clients import get_all_clients
from mcpcfg.models import ClientId, ClientProfile, ServerAddress


def render(profile: ClientProfile, address: ServerAddress) -> str:
    """Render the configuration document for a client.

    ABOUTME: Pure passthrough to the profile's generator
    ABOUTME: Same inputs always give byte-identical output
    """
    return profile.generate(address)


def render_command(profile: ClientProfile, address: ServerAddress) -> str | None:
    """Render the client's shell command, or None if it has none."""
    if profile.command is None:
        return None
    return profile.command(address)


def install_link(profile: ClientProfile, address: ServerAddress) -> str | None:
    """Render the one-click install URI.

    ABOUTME: Returns None for clients without the one-click capability
    """
    if profile.one_click is None:
        return None
    return profile.one_click.encode(address)


def render_all(address: ServerAddress) -> dict[ClientId, str]:
    """Render every client's configuration, in display order."""
    return {profile.id: render(profile, address) for profile in get_all_clients()}
