import pytest

from statusline.models import ContextWindow, CurrentUsage, DiffStats
from statusline.renderer import Palette, render_status_line, render_token_gauge

PLAIN = Palette.plain()


def window(current, size):
    return ContextWindow(
        current_usage=CurrentUsage(input_tokens=current),
        context_window_size=size,
    )


class TestTokenGauge:
    @pytest.mark.parametrize("current,size,bar", [
        (0, 100, "▱▱▱▱▱"),
        (19, 100, "▱▱▱▱▱"),
        (20, 100, "▰▱▱▱▱"),
        (50, 100, "▰▰▱▱▱"),
        (99, 100, "▰▰▰▰▱"),
        (100, 100, "▰▰▰▰▰"),
    ])
    def test_segments(self, current, size, bar):
        gauge = render_token_gauge(window(current, size), PLAIN)
        assert gauge.startswith(bar + "  ")

    def test_over_full_window_is_clamped(self):
        assert render_token_gauge(window(250, 100), PLAIN).startswith("▰▰▰▰▰  ")

    def test_token_counts_in_thousands(self):
        gauge = render_token_gauge(window(84999, 200000), PLAIN)
        assert gauge == "▰▰▱▱▱  84k/200k tokens"

    def test_sums_all_counters(self):
        usage = CurrentUsage(
            input_tokens=1000,
            cache_creation_input_tokens=20000,
            cache_read_input_tokens=39000,
        )
        gauge = render_token_gauge(ContextWindow(usage, 100000), PLAIN)
        assert gauge == "▰▰▰▱▱  60k/100k tokens"

    def test_missing_usage_counts_as_zero(self):
        gauge = render_token_gauge(ContextWindow(None, 200000), PLAIN)
        assert gauge == "▱▱▱▱▱  0k/200k tokens"

    @pytest.mark.parametrize("context_window", [
        None,
        ContextWindow(CurrentUsage(input_tokens=10), None),
        ContextWindow(CurrentUsage(input_tokens=10), 0),
    ])
    def test_omitted(self, context_window):
        assert render_token_gauge(context_window) == ""

    def test_colored(self):
        gauge = render_token_gauge(window(0, 1000))
        assert gauge == "\x1b[38;5;216m▱▱▱▱▱  0k/1k tokens\x1b[0m"


class TestStatusLine:
    def test_plain(self):
        line = render_status_line("main", DiffStats(12, 3), "Opus", "", PLAIN)
        assert line == "main | +12 -3 | Opus | "

    def test_gauge_appended_verbatim(self):
        line = render_status_line("main", DiffStats(), "Opus", "<gauge>", PLAIN)
        assert line == "main | +0 -0 | Opus | <gauge>"

    def test_colored_fields_are_reset(self):
        line = render_status_line("main", DiffStats(1, 2), "Opus", "")
        assert line == (
            "\x1b[38;5;111mmain\x1b[0m | "
            "\x1b[38;5;151m+1\x1b[0m \x1b[38;5;211m-2\x1b[0m | "
            "\x1b[38;5;183mOpus\x1b[0m | "
        )
