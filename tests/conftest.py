import json
import shutil

import pytest


requires_diff = pytest.mark.skipif(shutil.which("diff") is None, reason="diff not installed")
requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def tool_entry(file_path, original=None, content=None, **extra):
    """Build a transcript line recording a file tool result."""
    result = {"filePath": file_path}
    if original is not None:
        result["originalFile"] = original
    if content is not None:
        result["content"] = content
    result.update(extra)
    return json.dumps({"type": "user", "toolUseResult": result})


@pytest.fixture
def write_transcript(tmp_path):
    """Write lines to a session.jsonl file and return its path."""
    def _write(*lines):
        path = tmp_path / "session.jsonl"
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
