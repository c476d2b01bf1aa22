# ABOUTME: Validation utilities for server addresses and client identifiers
# ABOUTME: Defines the two error types raised at the package's input boundaries
import re

# Valid TCP port range for the MCP server
MIN_PORT = 1
MAX_PORT = 65535

# ABOUTME: Hosts are passed through verbatim, so only whitespace and path separators are rejected
_INVALID_HOST_PATTERN = re.compile(r"[\s/]")


class ValidationError(ValueError):
    """Raised when a host or port cannot form a usable MCP URL.

    ABOUTME: Subclasses ValueError so callers can catch either
    ABOUTME: Carries the offending field name for error reporting
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid {field}: {message}")
        self.field = field


class NotSupportedError(ValueError):
    """Raised when a raw string does not name a supported client.

    ABOUTME: Only raised while converting untyped input to a ClientId
    """

    def __init__(self, raw: str, supported: list[str]) -> None:
        super().__init__(
            f"Client '{raw}' is not supported. Choose one of: {', '.join(supported)}"
        )
        self.raw = raw
        self.supported = supported


def validate_host(host: object) -> str:
    """Validate a hostname or IP literal.

    ABOUTME: Accepts bracketed IPv6 literals such as [::1] unchanged
    ABOUTME: Returns the host so it can be used inline

    Args:
        host: Host value to check

    Returns:
        The host string, unchanged

    Raises:
        ValidationError: If host is not a non-empty string or contains whitespace

    Examples:
        >>> validate_host("localhost")
        'localhost'
        >>> validate_host("[::1]")
        '[::1]'
    """
    if not isinstance(host, str) or not host:
        raise ValidationError("host", "must be a non-empty string")
    if _INVALID_HOST_PATTERN.search(host):
        raise ValidationError("host", f"'{host}' contains whitespace or '/'")
    return host


def validate_port(port: object) -> int:
    """Validate a TCP port number.

    ABOUTME: Rejects bools even though bool is an int subclass
    ABOUTME: Rejects floats, negatives, zero and anything above 65535

    Args:
        port: Port value to check

    Returns:
        The port as an int

    Raises:
        ValidationError: If port is not an integer in [1, 65535]
    """
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValidationError("port", f"{port!r} is not an integer")
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValidationError("port", f"{port} is outside {MIN_PORT}-{MAX_PORT}")
    return port


def coerce_port(value: object) -> int:
    """Convert a settings or command-line value to a validated port.

    ABOUTME: Accepts ints and ASCII digit-only strings (after env expansion)
    ABOUTME: Unicode digits such as "²" or "٣" are rejected like any other text
    """
    if isinstance(value, str):
        stripped = value.strip()
        if not (stripped.isascii() and stripped.isdigit()):
            raise ValidationError("port", f"'{value}' is not an integer")
        value = int(stripped)
    return validate_port(value)
