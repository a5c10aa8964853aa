"""Parse the status line payload and the session transcript."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from .models import (
    ContextWindow,
    CurrentUsage,
    InputError,
    ModelInfo,
    SessionInput,
    ToolUseResult,
)
from .filters import has_file_payload

logger = logging.getLogger(__name__)

TOKEN_FIELDS = (
    "input_tokens",
    "cache_creation_input_tokens",
    "cache_read_input_tokens",
)


def parse_input(raw: Union[str, bytes]) -> SessionInput:
    """Parse the JSON document the host writes to stdin.

    Args:
        raw: The complete stdin contents.

    Returns:
        SessionInput built from the document.

    Raises:
        InputError: If the document is not valid JSON or a required
            field is missing or has the wrong type.
    """
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise InputError(f"stdin is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise InputError("stdin must be a JSON object")

    cwd = _require_str(payload, "cwd")
    transcript_path = _require_str(payload, "transcript_path")

    model = payload.get("model")
    if not isinstance(model, dict):
        raise InputError("'model' must be an object")

    model_info = ModelInfo(
        display_name=_require_str(model, "display_name", "model.display_name"),
        id=_optional_str(model, "id", "model.id"),
    )

    return SessionInput(
        cwd=cwd,
        transcript_path=transcript_path,
        model=model_info,
        context_window=_parse_context_window(payload.get("context_window")),
    )


def _parse_context_window(value) -> Optional[ContextWindow]:
    """Parse the optional context_window object."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise InputError("'context_window' must be an object")

    usage = value.get("current_usage")
    current_usage = None
    if usage is not None:
        if not isinstance(usage, dict):
            raise InputError("'context_window.current_usage' must be an object")
        current_usage = CurrentUsage(**{
            name: _optional_count(usage, name, f"context_window.current_usage.{name}")
            for name in TOKEN_FIELDS
        })

    return ContextWindow(
        current_usage=current_usage,
        context_window_size=_optional_count(
            value, "context_window_size", "context_window.context_window_size"
        ),
    )


def _is_utf8(value: str) -> bool:
    # json.loads accepts lone surrogates such as "\ud800"
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _require_str(obj: dict, key: str, label: Optional[str] = None) -> str:
    value = obj.get(key)
    if not isinstance(value, str) or not _is_utf8(value):
        raise InputError(f"'{label or key}' must be a UTF-8 string")
    return value


def _optional_str(obj: dict, key: str, label: str) -> Optional[str]:
    value = obj.get(key)
    if value is not None and (not isinstance(value, str) or not _is_utf8(value)):
        raise InputError(f"'{label}' must be a UTF-8 string")
    return value


def _optional_count(obj: dict, key: str, label: str) -> Optional[int]:
    value = obj.get(key)
    if value is None:
        return None
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InputError(f"'{label}' must be a non-negative integer")
    return value


def parse_tool_use_result(entry) -> Optional[ToolUseResult]:
    """Extract a file-affecting tool result from one transcript entry.

    Returns:
        ToolUseResult, or None if the entry carries no usable result.
    """
    if not isinstance(entry, dict):
        return None

    result = entry.get("toolUseResult")
    if not isinstance(result, dict):
        return None

    file_path = result.get("filePath")
    original_file = result.get("originalFile")
    content = result.get("content")

    if not isinstance(file_path, str) or not _is_utf8(file_path):
        return None
    # Mistyped or unencodable payloads mean the entry is malformed
    for value in (original_file, content):
        if value is not None and (not isinstance(value, str) or not _is_utf8(value)):
            return None

    tool_result = ToolUseResult(
        file_path=file_path,
        original_file=original_file,
        content=content,
    )
    if not has_file_payload(tool_result):
        return None

    return tool_result


def read_file_originals(transcript_path: Union[str, Path]) -> dict:
    """Collect the pre-session content of every file the session touched.

    The transcript is read line by line; lines that are not valid UTF-8
    JSON are skipped. For each file only the first recorded original is
    kept, since later records describe content the session already
    changed.

    Args:
        transcript_path: Path to the session .jsonl transcript.

    Returns:
        Dict mapping file path to original content ("" when the
        transcript did not capture one). Empty if the transcript
        cannot be read.
    """
    file_originals = {}

    try:
        f = open(transcript_path, "rb")
    except (OSError, ValueError) as e:
        logger.debug("Transcript unavailable (%s): %s", transcript_path, e)
        return file_originals

    with f:
        try:
            for line in f:
                if not line.strip():
                    continue

                try:
                    entry = json.loads(line)
                except ValueError:
                    continue

                result = parse_tool_use_result(entry)
                if result is None:
                    continue

                if result.file_path not in file_originals:
                    file_originals[result.file_path] = result.original_file or ""
        except OSError as e:
            logger.debug("Stopped reading transcript %s: %s", transcript_path, e)

    logger.debug("Tracking %d file(s) from %s", len(file_originals), transcript_path)
    return file_originals
