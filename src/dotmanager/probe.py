"""Filesystem queries for link classification."""

import os
import stat

from .models import LinkState, Outcome


class ProbeError(Exception):
    """Raised when a path cannot be queried for reasons other than absence."""

    outcome = Outcome.PROBE_FAILED

    def __init__(self, path: str, error: OSError):
        super().__init__(f"Cannot inspect {path}: {error.strerror or error}")
        self.path = path
        self.error = error


def _lstat(path: str) -> os.stat_result | None:
    """Stat a path without following a final symlink; None if nothing is there."""
    try:
        return os.lstat(path)
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ProbeError(path, e)


def link_target(path: str) -> str:
    """Return the target string stored in a symlink.

    Raises:
        ProbeError: If the link cannot be read.
    """
    try:
        return os.readlink(path)
    except OSError as e:
        raise ProbeError(path, e)


def classify(path: str, expected_target: str) -> LinkState:
    """Classify what currently sits at a destination path.

    Args:
        path: Destination path to inspect
        expected_target: Link target that counts as correct

    Returns:
        LinkState for the path. The target comparison is exact string
        equality.

    Raises:
        ProbeError: On any OS error other than the path not existing.
    """
    st = _lstat(path)
    if st is None:
        return LinkState.ABSENT

    if stat.S_ISLNK(st.st_mode):
        if link_target(path) == expected_target:
            return LinkState.LINKED_CORRECTLY
        return LinkState.LINKED_ELSEWHERE

    return LinkState.REGULAR_FILE_EXISTS


def lexists(path: str) -> bool:
    """Check whether any entry exists at path, including a dangling symlink.

    Raises:
        ProbeError: On any OS error other than the path not existing.
    """
    return _lstat(path) is not None


def exists(path: str) -> bool:
    """Check whether path exists, following symlinks.

    Raises:
        ProbeError: On any OS error other than the path not existing.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise ProbeError(path, e)
    return True
