"""Data models for the session status line."""

from dataclasses import dataclass
from typing import Optional


class InputError(ValueError):
    """Raised when the status line payload on stdin cannot be used."""


@dataclass(frozen=True)
class CurrentUsage:
    """Token counters for the most recent request."""
    input_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None

    @property
    def total(self) -> int:
        return (
            (self.input_tokens or 0)
            + (self.cache_creation_input_tokens or 0)
            + (self.cache_read_input_tokens or 0)
        )


@dataclass(frozen=True)
class ContextWindow:
    """Context window usage reported by the host."""
    current_usage: Optional[CurrentUsage] = None
    context_window_size: Optional[int] = None


@dataclass(frozen=True)
class ModelInfo:
    """The active model."""
    display_name: str
    id: Optional[str] = None


@dataclass(frozen=True)
class SessionInput:
    """Payload the host writes to stdin once per invocation."""
    cwd: str
    transcript_path: str
    model: ModelInfo
    context_window: Optional[ContextWindow] = None


@dataclass
class ToolUseResult:
    """File-affecting tool result recorded in the transcript."""
    file_path: str
    original_file: Optional[str] = None
    content: Optional[str] = None


@dataclass
class DiffStats:
    """Added/removed line counts for one file or a whole session."""
    added: int = 0
    removed: int = 0

    def add(self, other: "DiffStats") -> None:
        self.added += other.added
        self.removed += other.removed
