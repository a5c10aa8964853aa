"""Run the external programs the status line depends on."""

import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


def run_command(args: list, errors: str = "replace") -> Optional[str]:
    """Run a program and return its stdout.

    The exit status is ignored: ``diff`` exits 1 whenever the inputs
    differ, and ``git`` failures leave stdout empty anyway.

    Args:
        args: Program and arguments.
        errors: How to handle stdout that is not valid UTF-8, as for
            bytes.decode. With "strict", undecodable output gives None.

    Returns:
        Decoded stdout, or None if the program could not be launched
        or its output could not be decoded.
    """
    try:
        result = subprocess.run(
            args,
            stdin=subprocess.DEVNULL,
            capture_output=True,
        )
    except (OSError, ValueError) as e:
        # ValueError: an argument with an embedded NUL or a lone surrogate
        logger.debug("Could not run %s: %s", args[0], e)
        return None

    try:
        return result.stdout.decode("utf-8", errors=errors)
    except UnicodeDecodeError as e:
        logger.debug("Undecodable output from %s: %s", args[0], e)
        return None
