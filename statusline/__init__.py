"""Statusline - a one-line summary of a Claude Code session.

Statusline reads the session payload Claude Code writes to stdin and
prints the git branch, the net lines added/removed across files the
session touched, the model name and a context window gauge.

Basic usage:
    from statusline import parse_input, build_status_line

    session = parse_input(sys.stdin.buffer.read())
    print(build_status_line(session))

Net diff only:
    from statusline import read_file_originals, calculate_net_diff, BuiltinDiff

    originals = read_file_originals("~/.claude/projects/.../session.jsonl")
    stats = calculate_net_diff(originals, BuiltinDiff())
    print(stats.added, stats.removed)
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .models import (
    SessionInput,
    ModelInfo,
    ContextWindow,
    CurrentUsage,
    ToolUseResult,
    DiffStats,
    InputError,
)
from .parser import parse_input, parse_tool_use_result, read_file_originals
from .differ import (
    ExternalDiff,
    BuiltinDiff,
    get_differ,
    calculate_net_diff,
    scratch_directory,
)
from .git import get_git_branch, NO_GIT_BRANCH
from .renderer import Palette, render_token_gauge, render_status_line
from .cli import main, build_status_line

__all__ = [
    # Models
    "SessionInput",
    "ModelInfo",
    "ContextWindow",
    "CurrentUsage",
    "ToolUseResult",
    "DiffStats",
    "InputError",
    # Parser
    "parse_input",
    "parse_tool_use_result",
    "read_file_originals",
    # Differ
    "ExternalDiff",
    "BuiltinDiff",
    "get_differ",
    "calculate_net_diff",
    "scratch_directory",
    # Git
    "get_git_branch",
    "NO_GIT_BRANCH",
    # Renderer
    "Palette",
    "render_token_gauge",
    "render_status_line",
    # CLI
    "main",
    "build_status_line",
]
