"""Mapping table and environment configuration."""

import os
from collections.abc import Mapping

from .models import MappingEntry


class ConfigurationError(Exception):
    """Raised when the operation cannot be configured (e.g. no home directory)."""
    pass


# Environment variables checked for the home directory, first match wins.
HOME_ENV_VARS = ("HOME", "USERPROFILE")

# Destinations are sandboxed names so the default table never replaces real
# dotfiles. Point them at ".bashrc" etc. once the sources are ready.
DEFAULT_MAPPINGS: tuple[MappingEntry, ...] = (
    MappingEntry("bashrc.example", ".bashrc_from_dotmanager"),
    MappingEntry("vimrc.example", ".vimrc_from_dotmanager"),
    MappingEntry("gitconfig.example", ".gitconfig_from_dotmanager"),
)


def get_home_dir(environ: Mapping[str, str] | None = None) -> str:
    """Look up the user's home directory from the environment.

    Args:
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        The first non-empty value of HOME or USERPROFILE.

    Raises:
        ConfigurationError: If neither variable holds a value.
    """
    if environ is None:
        environ = os.environ

    for name in HOME_ENV_VARS:
        value = environ.get(name)
        if value:
            return value

    raise ConfigurationError(
        f"Cannot determine home directory: none of {', '.join(HOME_ENV_VARS)} is set"
    )
