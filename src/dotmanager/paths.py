"""Source and destination path resolution."""

import os
from collections.abc import Mapping

from .config import ConfigurationError, get_home_dir
from .models import MappingEntry, ResolvedPaths


def resolve_roots(environ: Mapping[str, str] | None = None) -> tuple[str, str]:
    """Resolve the source directory and home directory for one operation.

    The current working directory is the source directory.

    Args:
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Tuple of (source_dir, home_dir)

    Raises:
        ConfigurationError: If the working directory or the home directory
            cannot be determined.
    """
    home_dir = get_home_dir(environ)
    try:
        source_dir = os.getcwd()
    except OSError as e:
        raise ConfigurationError(f"Cannot determine source directory: {e.strerror or e}")
    return source_dir, home_dir


def resolve_paths(entry: MappingEntry, source_dir: str, home_dir: str) -> ResolvedPaths:
    """Concatenate an entry's names onto the source and home directories.

    Plain concatenation with the path separator: no normalization, symlink
    resolution or existence check. A root of "/" gives "//name". The source
    path is the exact string a created link points at.
    """
    return ResolvedPaths(
        source_path=f"{source_dir}{os.sep}{entry.source_name}",
        dest_path=f"{home_dir}{os.sep}{entry.dest_name}",
    )
