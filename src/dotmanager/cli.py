"""Command-line interface."""

import argparse

from . import __version__
from .config import DEFAULT_MAPPINGS, ConfigurationError
from .manager import LinkManager
from .output import Output, Reporter, TextReporter, YamlReporter

COMMANDS = """\
commands:
  status    Check the current state of the symbolic links
  link      Create symbolic links for the configured files
  unlink    Remove the symbolic links managed by dotmanager
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dotmanager",
        usage="%(prog)s [options] <command>",
        description="Manage dotfiles by linking them from this directory into your home directory",
        epilog=COMMANDS,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress headers",
    )
    parser.add_argument(
        "--format",
        choices=["text", "yaml"],
        default="text",
        help="Report format (default: text)",
    )
    parser.add_argument("command", nargs="?", help=argparse.SUPPRESS)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 whatever the per-entry outcomes, 1 if the home
        directory cannot be determined).
    """
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    output = Output(no_color=args.no_color, quiet=args.quiet)

    handlers = {
        "status": LinkManager.status,
        "link": LinkManager.link,
        "unlink": LinkManager.unlink,
    }

    handler = handlers.get(args.command)
    if handler is None or extra:
        parser.print_help(output.stream)
        return 0

    reporter: Reporter
    if args.format == "yaml":
        reporter = YamlReporter(output.stream)
    else:
        reporter = TextReporter(output)

    try:
        manager = LinkManager(DEFAULT_MAPPINGS, reporter=reporter)
        handler(manager)
    except ConfigurationError as e:
        output.error(str(e))
        return 1

    return 0
