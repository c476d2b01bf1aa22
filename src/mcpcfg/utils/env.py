# Environment variable expansion for settings values
import os
import re
import warnings

# ABOUTME: Pattern matches ${VAR_NAME} where VAR_NAME is uppercase with underscores
ENV_VAR_PATTERN = re.compile(r'\$\{([A-Z_][A-Z0-9_]*)\}')


def substitute_env_vars(value: str) -> tuple[str, set[str]]:
    """Expand ${VAR} references and report the ones left unresolved.

    ABOUTME: Single pass; unset references are kept verbatim in the result
    ABOUTME: Callers decide whether unresolved names are an error or a warning

    Args:
        value: String potentially containing ${VAR} references

    Returns:
        Tuple of (expanded string, names of unset variables)

    Examples:
        >>> substitute_env_vars("${MCP_HOST}:${UNSET_VAR}")
        ('localhost:${UNSET_VAR}', {'UNSET_VAR'})
    """
    unresolved: set[str] = set()

    def replace_var(match: re.Match[str]) -> str:
        var_name = match.group(1)
        if var_name in os.environ:
            return os.environ[var_name]
        unresolved.add(var_name)
        return match.group(0)

    return ENV_VAR_PATTERN.sub(replace_var, value), unresolved


def expand_env_vars(value: str) -> str:
    """Expand environment variables in ${VAR} format.

    ABOUTME: Lets settings files say "port": "${MCP_PORT}"
    ABOUTME: Unset variables are kept verbatim with a UserWarning each

    Args:
        value: String potentially containing ${VAR} references

    Returns:
        String with environment variables expanded
    """
    expanded, unresolved = substitute_env_vars(value)
    for var_name in sorted(unresolved):
        warnings.warn(
            f"Environment variable '{var_name}' not found, keeping original",
            UserWarning,
            stacklevel=2
        )
    return expanded
