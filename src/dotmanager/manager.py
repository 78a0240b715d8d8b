"""Status, link and unlink operations over a mapping table."""

import os
from collections.abc import Callable, Mapping, Sequence

from . import probe
from .models import STATUS_OUTCOMES, EntryResult, LinkState, MappingEntry, Outcome, ResolvedPaths
from .output import Reporter
from .paths import resolve_paths, resolve_roots
from .probe import ProbeError
from .validation import validate_mappings


class LinkManagerError(Exception):
    """Base class for per-entry failures that are reported, not raised.

    Subclasses name the outcome they are reported as.
    """

    outcome = Outcome.FAILED


class SourceMissingError(LinkManagerError):
    """Raised when an entry's source file does not exist."""

    outcome = Outcome.SOURCE_MISSING


class LinkCreationError(LinkManagerError):
    """Raised when creating a symlink fails."""

    outcome = Outcome.FAILED


class RemovalError(LinkManagerError):
    """Raised when removing a managed symlink fails."""

    outcome = Outcome.REMOVE_FAILED


def _os_message(error: OSError) -> str:
    return error.strerror or str(error)


class LinkManager:
    """Applies status, link and unlink to every entry of a mapping table.

    The manager holds no state of its own; everything is read from and
    written to the filesystem. The source and home directories are resolved
    at the start of each operation unless given explicitly.
    """

    def __init__(
        self,
        mappings: Sequence[MappingEntry],
        *,
        source_dir: str | None = None,
        home_dir: str | None = None,
        environ: Mapping[str, str] | None = None,
        reporter: Reporter | None = None,
    ):
        """Initialize the manager.

        Args:
            mappings: Ordered mapping table
            source_dir: Source directory (default: cwd at operation time)
            home_dir: Home directory (default: looked up in the environment)
            environ: Environment used for the home directory lookup
            reporter: Receives each entry result as it is produced

        Raises:
            ValidationError: If the mapping table is invalid.
        """
        validate_mappings(mappings)
        self.mappings = tuple(mappings)
        self.source_dir = source_dir
        self.home_dir = home_dir
        self.environ = environ
        self.reporter = reporter or Reporter()

    def status(self) -> list[EntryResult]:
        """Report the link state of every entry. Never touches the filesystem."""
        return self._run("status", self._status_entry)

    def link(self) -> list[EntryResult]:
        """Create missing links, skipping missing sources and existing destinations."""
        return self._run("link", self._link_entry)

    def unlink(self) -> list[EntryResult]:
        """Remove links that point exactly at their expected source."""
        return self._run("unlink", self._unlink_entry)

    def _roots(self) -> tuple[str, str]:
        if self.source_dir is not None and self.home_dir is not None:
            return self.source_dir, self.home_dir

        source_dir, home_dir = resolve_roots(self.environ)
        if self.source_dir is not None:
            source_dir = self.source_dir
        if self.home_dir is not None:
            home_dir = self.home_dir
        return source_dir, home_dir

    def _run(
        self,
        operation: str,
        handler: Callable[[ResolvedPaths], tuple[Outcome, str | None]],
    ) -> list[EntryResult]:
        # ConfigurationError propagates: no entry can be resolved without roots
        source_dir, home_dir = self._roots()

        self.reporter.begin(operation)
        results = []
        for entry in self.mappings:
            paths = resolve_paths(entry, source_dir, home_dir)
            try:
                outcome, detail = handler(paths)
            except (LinkManagerError, ProbeError) as e:
                outcome, detail = e.outcome, str(e)

            result = EntryResult(entry=entry, paths=paths, outcome=outcome, detail=detail)
            self.reporter.report(result)
            results.append(result)
        self.reporter.finish()

        return results

    def _status_entry(self, paths: ResolvedPaths) -> tuple[Outcome, str | None]:
        state = probe.classify(paths.dest_path, paths.source_path)
        return STATUS_OUTCOMES[state], None

    def _link_entry(self, paths: ResolvedPaths) -> tuple[Outcome, str | None]:
        if not probe.exists(paths.source_path):
            raise SourceMissingError(f"Source not found: {paths.source_path}")

        if probe.lexists(paths.dest_path):
            return Outcome.DEST_EXISTS_SKIPPED, None

        try:
            os.symlink(paths.source_path, paths.dest_path)
        except OSError as e:
            raise LinkCreationError(_os_message(e))

        return Outcome.CREATED, None

    def _unlink_entry(self, paths: ResolvedPaths) -> tuple[Outcome, str | None]:
        state = probe.classify(paths.dest_path, paths.source_path)

        if state is LinkState.ABSENT:
            return Outcome.ALREADY_ABSENT, None

        if state is not LinkState.LINKED_CORRECTLY:
            return Outcome.NOT_MANAGED_SKIPPED, None

        try:
            os.unlink(paths.dest_path)
        except OSError as e:
            raise RemovalError(_os_message(e))

        return Outcome.REMOVED, None
