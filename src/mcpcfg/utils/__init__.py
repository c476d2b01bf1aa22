# ABOUTME: Utility modules for mcpcfg
# ABOUTME: Exports env expansion and validation helpers

from mcpcfg.utils.env import expand_env_vars, substitute_env_vars
from mcpcfg.utils.validation import (
    NotSupportedError,
    ValidationError,
    coerce_port,
    validate_host,
    validate_port,
)

__all__ = [
    "expand_env_vars",
    "substitute_env_vars",
    "NotSupportedError",
    "ValidationError",
    "coerce_port",
    "validate_host",
    "validate_port",
]
