"""Mapping table validation for dotmanager."""

from collections.abc import Sequence

from .config import ConfigurationError
from .models import MappingEntry


class ValidationError(ConfigurationError):
    """Raised when a mapping table fails validation."""
    pass


def validate_name(name: str, *, is_dst: bool = False) -> None:
    """Validate a source or destination name.

    Args:
        name: Name relative to the source or home directory
        is_dst: True if this is a destination name

    Raises:
        ValidationError: If the name is invalid
    """
    kind = "Destination" if is_dst else "Source"

    if not isinstance(name, str) or not name:
        raise ValidationError(f"{kind} name must be a non-empty string: {name!r}")

    if name.startswith("/") or name.startswith("\\"):
        raise ValidationError(f"{kind} must be relative: {name}")

    parts = name.replace("\\", "/").split("/")
    if ".." in parts:
        raise ValidationError(f"Path cannot contain '..': {name}")

    if all(part in ("", ".") for part in parts):
        raise ValidationError(f"{kind} name must name a file: {name}")


def validate_mappings(mappings: Sequence[MappingEntry]) -> None:
    """Validate all mapping entries.

    Args:
        mappings: Ordered mapping table

    Raises:
        ValidationError: If any entry is invalid or a destination repeats
    """
    destinations = set()

    for i, entry in enumerate(mappings):
        if not isinstance(entry, MappingEntry):
            raise ValidationError(f"Invalid mapping at index {i}: expected MappingEntry")

        validate_name(entry.source_name)
        validate_name(entry.dest_name, is_dst=True)

        if entry.dest_name in destinations:
            raise ValidationError(f"Duplicate destination: {entry.dest_name}")
        destinations.add(entry.dest_name)
