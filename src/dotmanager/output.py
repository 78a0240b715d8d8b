"""Colored output and result reporting for dotmanager."""

import os
import sys
from typing import TextIO

import yaml

from .models import EntryResult, Outcome


class Output:
    """Handles colored and formatted output."""

    # ANSI color codes
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    def __init__(
        self,
        *,
        no_color: bool = False,
        quiet: bool = False,
        stream: TextIO | None = None,
        err_stream: TextIO | None = None,
    ):
        """Initialize output handler.

        Args:
            no_color: Disable colored output
            quiet: Suppress headers
            stream: Output stream (default stdout)
            err_stream: Error stream (default stderr)
        """
        self.stream = stream or sys.stdout
        self.err_stream = err_stream or sys.stderr
        self.quiet = quiet

        self._use_color = self._should_use_color(no_color)

    def _should_use_color(self, no_color: bool) -> bool:
        """Determine if colored output should be used.

        Args:
            no_color: Explicit flag to disable color

        Returns:
            True if color should be used
        """
        if no_color:
            return False

        if os.environ.get("NO_COLOR"):
            return False

        if not hasattr(self.stream, "isatty") or not self.stream.isatty():
            return False

        return True

    def colorize(self, text: str, *codes: str) -> str:
        """Apply color codes to text.

        Args:
            text: Text to colorize
            codes: ANSI codes to apply

        Returns:
            Colorized text (or plain text if color disabled)
        """
        if not self._use_color:
            return text
        return f"{''.join(codes)}{text}{self.RESET}"

    def error(self, message: str) -> None:
        """Print an error message (red) to the error stream."""
        print(self.colorize(f"Error: {message}", self.RED), file=self.err_stream)

    def header(self, text: str) -> None:
        """Print a header (bold cyan)."""
        if self.quiet:
            return
        print(self.colorize(text, self.BOLD, self.CYAN), file=self.stream)

    def line(self, text: str) -> None:
        """Print a line regardless of quiet mode."""
        print(text, file=self.stream)


class Reporter:
    """Receives entry results as an operation produces them.

    The base class discards everything; subclasses decide presentation.
    """

    def begin(self, operation: str) -> None:
        """Called once before the first entry of an operation."""

    def report(self, result: EntryResult) -> None:
        """Called once per mapping entry, in table order."""

    def finish(self) -> None:
        """Called once after the last entry."""


# (label, color) per outcome
_LABELS = {
    Outcome.NOT_FOUND: ("NOT FOUND", Output.YELLOW),
    Outcome.LINKED_CORRECTLY: ("LINKED CORRECTLY", Output.GREEN),
    Outcome.LINKED_ELSEWHERE: ("LINKED ELSEWHERE", Output.RED),
    Outcome.REGULAR_FILE_EXISTS: ("REGULAR FILE EXISTS (NOT A LINK)", Output.RED),
    Outcome.SOURCE_MISSING: ("SOURCE MISSING", Output.RED),
    Outcome.DEST_EXISTS_SKIPPED: ("DESTINATION EXISTS, SKIPPED", Output.YELLOW),
    Outcome.CREATED: ("CREATED", Output.GREEN),
    Outcome.FAILED: ("FAILED", Output.RED),
    Outcome.ALREADY_ABSENT: ("ALREADY ABSENT, SKIPPED", Output.YELLOW),
    Outcome.REMOVED: ("REMOVED", Output.GREEN),
    Outcome.REMOVE_FAILED: ("REMOVE FAILED", Output.RED),
    Outcome.NOT_MANAGED_SKIPPED: ("NOT A MANAGED LINK, SKIPPED", Output.RED),
    Outcome.PROBE_FAILED: ("ERROR", Output.RED),
}

_HEADERS = {
    "status": "--- Checking dotfile status ---",
    "link": "--- Creating symbolic links ---",
    "unlink": "--- Removing symbolic links ---",
}

_VERBS = {
    "link": "Linking",
    "unlink": "Unlinking",
}


class TextReporter(Reporter):
    """Prints one colored line per entry through an Output handler."""

    def __init__(self, output: Output):
        self.output = output
        self.operation: str | None = None

    def begin(self, operation: str) -> None:
        self.operation = operation
        self.output.header(_HEADERS.get(operation, f"--- {operation} ---"))

    def report(self, result: EntryResult) -> None:
        self.output.line(self.format(result))

    def format(self, result: EntryResult) -> str:
        """Format a single result line.

        Args:
            result: Entry result

        Returns:
            Line such as "bashrc.example -> .bashrc: LINKED CORRECTLY" for
            status, or "Linking .bashrc... CREATED" for link and unlink.
        """
        label, color = _LABELS[result.outcome]
        if result.failed and result.detail:
            label = f"{label}: {result.detail}"
        label = self.output.colorize(label, color)

        entry = result.entry
        verb = _VERBS.get(self.operation or "")
        if verb is None:
            return f"{entry.source_name:<25} -> {entry.dest_name}: {label}"
        return f"{verb} {entry.dest_name}... {label}"


class YamlReporter(Reporter):
    """Collects results and writes them as a single YAML document."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout
        self.operation: str | None = None
        self.results: list[EntryResult] = []

    def begin(self, operation: str) -> None:
        self.operation = operation
        self.results = []

    def report(self, result: EntryResult) -> None:
        self.results.append(result)

    def finish(self) -> None:
        document = {
            "operation": self.operation,
            "results": [
                {
                    "source": r.entry.source_name,
                    "dest": r.entry.dest_name,
                    "source_path": r.paths.source_path,
                    "dest_path": r.paths.dest_path,
                    "outcome": r.outcome.value,
                    "detail": r.detail,
                }
                for r in self.results
            ],
        }
        yaml.safe_dump(document, self.stream, default_flow_style=False, sort_keys=False)
