# CLI interface for mcpcfg
import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from mcpcfg import __version__
from mcpcfg.clients import get_all_clients, lookup, parse_client_id
from mcpcfg.config import resolve_status
from mcpcfg.models import ClientProfile, ServerAddress
from mcpcfg.render import install_link, render, render_command

# ABOUTME: Exit codes
# 0 = success, 2 = config or usage error, 3 = fatal
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2
EXIT_FATAL = 3

NOT_RUNNING_MESSAGE = "Start the MCP server to see configuration options"

UNIVERSAL_NOTE = (
    "Note: Archon works with any application that supports MCP. Below are "
    "instructions for common tools, but these steps can be adapted for any "
    "MCP-compatible client."
)


def _resolve(args: argparse.Namespace) -> tuple[ClientProfile, ServerAddress | None]:
    """Parse the client argument and work out the server address.

    ABOUTME: Returns a None address when the server is not running
    """
    profile = lookup(parse_client_id(args.client))
    config_path = Path(args.config) if args.config else None
    status = resolve_status(host=args.host, port=args.port, path=config_path)
    return profile, status.address if status.is_running else None


def _run(
    args: argparse.Namespace,
    handler: Callable[[ClientProfile, ServerAddress], int],
) -> int:
    """Run a client command, mapping errors to exit codes.

    ABOUTME: Prints the placeholder message when the server is not running
    """
    try:
        profile, address = _resolve(args)
        if address is None:
            print(NOT_RUNNING_MESSAGE)
            return EXIT_SUCCESS
        return handler(profile, address)

    except (FileNotFoundError, ValueError) as e:
        # ValueError covers NotSupportedError and ValidationError
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return EXIT_FATAL


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list command.

    ABOUTME: Shows supported clients in display order
    """
    print(f"mcpcfg list v{__version__}")
    print()
    print("Supported clients:")
    print()

    clients = get_all_clients()
    for profile in clients:
        marker = " (one-click install)" if profile.supports_one_click else ""
        print(f"  {profile.id.value:<12} {profile.label}{marker}")

    print()
    print(f"Total: {len(clients)} client(s)")
    return EXIT_SUCCESS


def _show(profile: ClientProfile, address: ServerAddress) -> int:
    print(UNIVERSAL_NOTE)
    print()
    print(profile.title)
    print()
    for index, step in enumerate(profile.steps, start=1):
        print(f"  {index}. {step}")

    command = render_command(profile, address)
    if command is not None:
        print()
        print("Command:")
        print(f"  {command}")

    print()
    print("Configuration:")
    print(render(profile, address))

    if profile.one_click is not None:
        print()
        print(f"{profile.one_click.label} ({profile.one_click.hint}):")
        print(f"  {install_link(profile, address)}")

    return EXIT_SUCCESS


def cmd_show(args: argparse.Namespace) -> int:
    """Execute show command.

    ABOUTME: Prints title, steps, command, configuration and deep link
    """
    return _run(args, _show)


def _print_config(profile: ClientProfile, address: ServerAddress) -> int:
    print(render(profile, address))
    return EXIT_SUCCESS


def cmd_config(args: argparse.Namespace) -> int:
    """Execute config command.

    ABOUTME: Prints only the configuration document so it can be piped
    """
    return _run(args, _print_config)


def _print_command(profile: ClientProfile, address: ServerAddress) -> int:
    command = render_command(profile, address)
    if command is None:
        print(f"Error: {profile.label} has no setup command", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    print(command)
    return EXIT_SUCCESS


def cmd_command(args: argparse.Namespace) -> int:
    """Execute command command (prints the client's shell command)."""
    return _run(args, _print_command)


def _print_link(profile: ClientProfile, address: ServerAddress) -> int:
    link = install_link(profile, address)
    if link is None:
        print(f"Error: {profile.label} does not support one-click install", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    print(link)
    return EXIT_SUCCESS


def cmd_link(args: argparse.Namespace) -> int:
    """Execute link command (prints the one-click install URI)."""
    return _run(args, _print_link)


def _add_client_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "client",
        help="Client to configure (e.g. claude-code, cursor)"
    )
    parser.add_argument(
        "--host",
        help="MCP server host (overrides settings file)"
    )
    parser.add_argument(
        "--port",
        help="MCP server port (overrides settings file)"
    )
    parser.add_argument(
        "--config",
        help="Path to settings file (default: ~/.mcpcfg/config.json)"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mcpcfg",
        description="Generate MCP client configuration for a running MCP server"
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"mcpcfg v{__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    subparsers.add_parser(
        "list",
        help="List supported clients"
    )

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Show setup steps and configuration for a client"
    )
    _add_client_arguments(show_parser)

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Print only the configuration document"
    )
    _add_client_arguments(config_parser)

    # command command
    command_parser = subparsers.add_parser(
        "command",
        help="Print the client's setup command (claude-code)"
    )
    _add_client_arguments(command_parser)

    # link command
    link_parser = subparsers.add_parser(
        "link",
        help="Print the one-click install link (cursor)"
    )
    _add_client_arguments(link_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    ABOUTME: Parses args and dispatches to appropriate command
    ABOUTME: Returns exit code for sys.exit()
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    # Dispatch to command
    if args.command == "list":
        return cmd_list(args)
    elif args.command == "show":
        return cmd_show(args)
    elif args.command == "config":
        return cmd_config(args)
    elif args.command == "command":
        return cmd_command(args)
    elif args.command == "link":
        return cmd_link(args)
    else:
        # No command specified, show help
        parser.print_help()
        return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
