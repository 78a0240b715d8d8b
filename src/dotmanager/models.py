"""Domain models for dotfile link management."""

from dataclasses import dataclass
from enum import Enum


class LinkState(Enum):
    """State of a destination path relative to its expected source."""

    ABSENT = "absent"
    LINKED_CORRECTLY = "linked_correctly"
    LINKED_ELSEWHERE = "linked_elsewhere"
    REGULAR_FILE_EXISTS = "regular_file_exists"


class Outcome(Enum):
    """Per-entry result label reported by an operation."""

    # status
    NOT_FOUND = "NOT_FOUND"
    LINKED_CORRECTLY = "LINKED_CORRECTLY"
    LINKED_ELSEWHERE = "LINKED_ELSEWHERE"
    REGULAR_FILE_EXISTS = "REGULAR_FILE_EXISTS"

    # link
    SOURCE_MISSING = "SOURCE_MISSING"
    DEST_EXISTS_SKIPPED = "DEST_EXISTS_SKIPPED"
    CREATED = "CREATED"
    FAILED = "FAILED"

    # unlink
    ALREADY_ABSENT = "ALREADY_ABSENT"
    REMOVED = "REMOVED"
    REMOVE_FAILED = "REMOVE_FAILED"
    NOT_MANAGED_SKIPPED = "NOT_MANAGED_SKIPPED"

    PROBE_FAILED = "PROBE_FAILED"


STATUS_OUTCOMES = {
    LinkState.ABSENT: Outcome.NOT_FOUND,
    LinkState.LINKED_CORRECTLY: Outcome.LINKED_CORRECTLY,
    LinkState.LINKED_ELSEWHERE: Outcome.LINKED_ELSEWHERE,
    LinkState.REGULAR_FILE_EXISTS: Outcome.REGULAR_FILE_EXISTS,
}


@dataclass(frozen=True)
class MappingEntry:
    """A source file name paired with its destination name in the home directory."""

    source_name: str
    dest_name: str


@dataclass(frozen=True)
class ResolvedPaths:
    """Absolute source and destination paths for one mapping entry."""

    source_path: str
    dest_path: str


@dataclass(frozen=True)
class EntryResult:
    """Outcome of applying an operation to one mapping entry.

    Attributes:
        entry: The mapping entry that was processed
        paths: Resolved source and destination paths
        outcome: Result label
        detail: Raw underlying error message for failures, else None
    """

    entry: MappingEntry
    paths: ResolvedPaths
    outcome: Outcome
    detail: str | None = None

    @property
    def failed(self) -> bool:
        """True if the entry hit an error rather than a planned skip."""
        return self.outcome in (Outcome.FAILED, Outcome.REMOVE_FAILED, Outcome.PROBE_FAILED)
