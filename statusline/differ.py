"""Net line diff of the files a session touched."""

import difflib
import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

from .filters import non_empty_lines
from .models import DiffStats
from .process import run_command

logger = logging.getLogger(__name__)

SCRATCH_FILE_NAME = "original"


class ExternalDiff:
    """Compare files with the system ``diff`` program."""

    name = "external"

    def __init__(self, command: str = "diff", runner=run_command):
        self.command = command
        self.runner = runner

    def compare(self, original_path: Path, current_path: Path) -> DiffStats:
        output = self.runner([self.command, str(original_path), str(current_path)])
        if output is None:
            return DiffStats()

        stats = DiffStats()
        for line in output.splitlines():
            if line.startswith(">"):
                stats.added += 1
            elif line.startswith("<"):
                stats.removed += 1
        return stats


class BuiltinDiff:
    """Compare files in-process with difflib.

    Needs no external program, so it also works where ``diff`` is not
    installed. Counts can differ slightly from ``diff`` on heavily
    reshuffled files since the matching heuristics differ.
    """

    name = "builtin"

    def compare(self, original_path: Path, current_path: Path) -> DiffStats:
        try:
            original = _read_lines(original_path)
            current = _read_lines(current_path)
        except OSError as e:
            logger.debug("Could not compare %s: %s", current_path, e)
            return DiffStats()

        stats = DiffStats()
        matcher = difflib.SequenceMatcher(None, original, current, autojunk=False)
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                continue
            stats.removed += i2 - i1
            stats.added += j2 - j1
        return stats


def _read_lines(path: Path) -> list:
    # Keep line endings so a missing final newline counts as a change
    with open(path, "rb") as f:
        return f.read().splitlines(keepends=True)


DIFFERS = {
    ExternalDiff.name: ExternalDiff,
    BuiltinDiff.name: BuiltinDiff,
}


def get_differ(name: str):
    """Return a differ instance by name ("external" or "builtin")."""
    try:
        return DIFFERS[name]()
    except KeyError:
        raise ValueError(f"Unknown diff backend: {name!r}") from None


@contextmanager
def scratch_directory(root: Optional[Union[str, Path]] = None) -> Iterator[Optional[Path]]:
    """Create a per-invocation scratch directory and always remove it.

    Args:
        root: Parent directory. Defaults to the platform temp directory.

    Yields:
        Path to the new directory, or None if it could not be created.
    """
    try:
        path = Path(tempfile.mkdtemp(prefix=f"statusline-{os.getpid()}-", dir=root))
    except (OSError, ValueError) as e:
        logger.debug("Could not create scratch directory in %s: %s", root, e)
        yield None
        return

    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


def calculate_net_diff(
    file_originals: dict,
    differ=None,
    scratch_root: Optional[Union[str, Path]] = None,
) -> DiffStats:
    """Sum added/removed lines across every tracked file.

    Files that no longer exist count every non-empty original line as
    removed. Existing files are compared against their original, which
    is written to a scratch file first. Per-file failures contribute
    nothing instead of aborting.

    Args:
        file_originals: Mapping of file path to original content, as
            returned by read_file_originals.
        differ: Object with a compare(original_path, current_path)
            method. Defaults to ExternalDiff.
        scratch_root: Parent directory for the scratch directory.

    Returns:
        Session-wide DiffStats.
    """
    differ = differ or ExternalDiff()
    totals = DiffStats()

    if not file_originals:
        return totals

    with scratch_directory(scratch_root) as scratch_dir:
        for file_path, original in file_originals.items():
            current_path = Path(file_path)

            if not current_path.exists():
                removed = len(non_empty_lines(original))
                logger.debug("%s deleted, %d line(s) removed", file_path, removed)
                totals.removed += removed
                continue

            if scratch_dir is None:
                continue

            scratch_file = scratch_dir / SCRATCH_FILE_NAME
            try:
                scratch_file.write_text(original, encoding="utf-8", newline="")
            except (OSError, UnicodeEncodeError) as e:
                logger.debug("Skipping %s, scratch write failed: %s", file_path, e)
                continue

            stats = differ.compare(scratch_file, current_path)
            logger.debug("%s +%d -%d", file_path, stats.added, stats.removed)
            totals.add(stats)

    return totals
