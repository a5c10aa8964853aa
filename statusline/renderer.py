"""Render the status line."""

from dataclasses import dataclass
from typing import Optional

from .models import ContextWindow, DiffStats

GAUGE_SEGMENTS = 5
GAUGE_FILLED = "\u25b0"  # ▰
GAUGE_EMPTY = "\u25b1"  # ▱


@dataclass(frozen=True)
class Palette:
    """ANSI sequences for each field (Catppuccin, 256-colour mode)."""
    branch: str = "\x1b[38;5;111m"  # blue
    added: str = "\x1b[38;5;151m"  # green
    removed: str = "\x1b[38;5;211m"  # pink
    model: str = "\x1b[38;5;183m"  # mauve
    tokens: str = "\x1b[38;5;216m"  # peach
    reset: str = "\x1b[0m"

    @classmethod
    def plain(cls) -> "Palette":
        """Palette that emits no escape sequences."""
        return cls(branch="", added="", removed="", model="", tokens="", reset="")


def render_token_gauge(context_window: Optional[ContextWindow], palette: Palette = Palette()) -> str:
    """Render the context window usage as a 5-segment gauge.

    Example: ``▰▰▱▱▱  84k/200k tokens``

    Returns:
        The coloured gauge, or "" if the window size is unknown or zero.
    """
    if context_window is None:
        return ""

    size = context_window.context_window_size or 0
    if size == 0:
        return ""

    usage = context_window.current_usage
    current = usage.total if usage else 0

    pct = current * 100 // size
    filled = min(pct // 20, GAUGE_SEGMENTS)
    bar = GAUGE_FILLED * filled + GAUGE_EMPTY * (GAUGE_SEGMENTS - filled)

    return f"{palette.tokens}{bar}  {current // 1000}k/{size // 1000}k tokens{palette.reset}"


def render_status_line(
    branch: str,
    stats: DiffStats,
    model_name: str,
    gauge: str,
    palette: Palette = Palette(),
) -> str:
    """Join the fields into the final status line."""
    p = palette
    return (
        f"{p.branch}{branch}{p.reset} | "
        f"{p.added}+{stats.added}{p.reset} {p.removed}-{stats.removed}{p.reset} | "
        f"{p.model}{model_name}{p.reset} | "
        f"{gauge}"
    )
