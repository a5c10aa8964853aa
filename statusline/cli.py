"""Command-line interface for statusline."""

import argparse
import logging
import os
import sys
from typing import Optional

from . import __version__
from .differ import DIFFERS, calculate_net_diff, get_differ
from .git import get_git_branch
from .models import InputError, SessionInput
from .parser import parse_input, read_file_originals
from .renderer import Palette, render_status_line, render_token_gauge

logger = logging.getLogger(__name__)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="statusline",
        description="Print a one-line status summary for a Claude Code session",
        epilog="""
Reads the session JSON from stdin and prints:
  <branch> | +<added> -<removed> | <model> | <token gauge>

Setup in ~/.claude/settings.json:
  "statusLine": {"type": "command", "command": "statusline"}

Environment:
  NO_COLOR                 Same as --no-color
  STATUSLINE_DIFF          Default for --diff
  STATUSLINE_SCRATCH_DIR   Default for --scratch-dir
  STATUSLINE_DEBUG         Same as --debug
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=bool(os.environ.get("NO_COLOR")),
        help="Disable ANSI colors"
    )
    parser.add_argument(
        "--diff",
        choices=sorted(DIFFERS),
        default=os.environ.get("STATUSLINE_DIFF") or "external",
        help="Diff backend: system 'diff' or in-process difflib (default: external)"
    )
    parser.add_argument(
        "--scratch-dir",
        metavar="PATH",
        default=os.environ.get("STATUSLINE_SCRATCH_DIR") or None,
        help="Parent directory for temporary files (default: system temp dir)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get("STATUSLINE_DEBUG")),
        help="Log diagnostics to stderr"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="[statusline] %(name)s: %(message)s"
        )

    try:
        differ = get_differ(args.diff)
    except ValueError as e:
        parser.error(str(e))

    try:
        session = parse_input(sys.stdin.buffer.read())
    except InputError as e:
        logger.debug("Invalid input: %s", e)
        return 1

    palette = Palette.plain() if args.no_color else Palette()

    print(build_status_line(session, differ, palette, args.scratch_dir))
    return 0


def build_status_line(
    session: SessionInput,
    differ=None,
    palette: Palette = Palette(),
    scratch_root: Optional[str] = None,
) -> str:
    """Gather every field for a session and render the status line."""
    branch = get_git_branch(session.cwd)

    file_originals = read_file_originals(session.transcript_path)
    stats = calculate_net_diff(file_originals, differ, scratch_root)

    gauge = render_token_gauge(session.context_window, palette)

    return render_status_line(branch, stats, session.model.display_name, gauge, palette)


if __name__ == "__main__":
    sys.exit(main())
