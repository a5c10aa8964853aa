"""Predicates for deciding which transcript data counts toward the diff."""

from .models import ToolUseResult


def has_file_payload(result: ToolUseResult) -> bool:
    """Check if a tool result names a file and carries some of its content."""
    if not result.file_path:
        return False

    return result.original_file is not None or result.content is not None


def non_empty_lines(text: str) -> list:
    """Split text on newlines and drop blank lines.

    A single trailing carriage return is stripped from each line, so
    CRLF content counts the same as LF content.
    """
    lines = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line:
            lines.append(line)
    return lines
