"""
Fixed-width bars.

FixedWidthProgressBar    — binds a column budget to a ProgressBar.
InformativeProgressBar   — adds a count model and the default decorations:

     60 / 120 [===================                   ]  50.0 %

Both wrap the engine rather than extend it. The informative bar sizes its
inner bar once (on first render, or on an explicit recompute()) by
subtracting what its hooks emit from the total width. Changing the width,
the total or the hooks afterwards does not move the layout until
recompute() or invalidate() is called.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from rich.console import Console

from consolebar.bar import DecorationHook, ProgressBar, RenderContext, write_frame
from consolebar.errors import ZeroTotalError
from consolebar.style import DEFAULT_STYLE, BarStyle
from consolebar.text import CARRIAGE_RETURN, COUNT_SEPARATOR, NEWLINE, SPACE, format_number, pad_left

logger = logging.getLogger(__name__)


def terminal_width() -> int:
    """Usable columns: one less than the terminal so the cursor never wraps."""
    return Console().width - 1


# ── Count model ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CountModel:
    total: float
    digits_width: int   # len(format_number(total)); current count is padded to this

    @classmethod
    def for_total(cls, total: float) -> "CountModel":
        return cls(total=total, digits_width=len(format_number(total)))


# ── Default decorations ───────────────────────────────────────────────────────

def count_info_hook(ctx: RenderContext, buffer: str) -> str:
    """' <current> / <total> ' with the current count right-aligned."""
    model = ctx.count_model
    if model is None:
        return buffer
    current = pad_left(format_number(ctx.ratio * model.total), model.digits_width)
    return buffer + SPACE + current + COUNT_SEPARATOR + format_number(model.total) + SPACE


def percent_hook(ctx: RenderContext, buffer: str) -> str:
    """'<padded percent> '"""
    return buffer + ctx.percent_display() + SPACE


# ── Fixed width ───────────────────────────────────────────────────────────────

class FixedWidthProgressBar:
    """
    A ProgressBar whose bar always takes `width` columns.

    width=None (or negative) means the terminal width minus one.
    """

    def __init__(self, width: int | None = None, style: BarStyle = DEFAULT_STYLE) -> None:
        self.width = terminal_width() if width is None or width < 0 else width
        self.bar = ProgressBar(style)

    @property
    def style(self) -> BarStyle:
        return self.bar.style

    @style.setter
    def style(self, value: BarStyle) -> None:
        self.bar.style = value

    @property
    def pre_hooks(self) -> list[DecorationHook]:
        return self.bar.pre_hooks

    @property
    def post_hooks(self) -> list[DecorationHook]:
        return self.bar.post_hooks

    def build(self, ratio: float) -> str:
        return self.bar.build(ratio, self.width)

    def write_progress(self, ratio: float, file: TextIO | None = None) -> None:
        self.bar.write_progress(ratio, self.width, file)

    def write_progress_line(self, ratio: float, file: TextIO | None = None) -> None:
        self.bar.write_progress_line(ratio, self.width, file)

    def update_progress(self, ratio: float, file: TextIO | None = None) -> None:
        self.bar.update_progress(ratio, self.width, file)


# ── Informative ───────────────────────────────────────────────────────────────

class InformativeProgressBar:
    """
    Fixed-width bar driven by counts instead of ratios, decorated with a
    count display before the bar and a percentage after it.

    Usage:
        bar = InformativeProgressBar(120, width=90)
        for i in range(120):
            bar.update_progress(i + 1)
        bar.write_progress_line(120)
    """

    def __init__(
        self,
        total_count: float,
        width: int | None = None,
        style: BarStyle = DEFAULT_STYLE,
    ) -> None:
        self.fixed = FixedWidthProgressBar(width, style)
        self.total_count = total_count
        self.inner_bar_width: int | None = None

        self.bar.add_pre_hook(count_info_hook)
        self.bar.add_post_hook(percent_hook)

    # ── Configuration ─────────────────────────────────────────────────────────

    @property
    def bar(self) -> ProgressBar:
        return self.fixed.bar

    @property
    def width(self) -> int:
        return self.fixed.width

    @width.setter
    def width(self, value: int) -> None:
        self.fixed.width = value

    @property
    def style(self) -> BarStyle:
        return self.bar.style

    @style.setter
    def style(self, value: BarStyle) -> None:
        self.bar.style = value

    @property
    def pre_hooks(self) -> list[DecorationHook]:
        return self.bar.pre_hooks

    @property
    def post_hooks(self) -> list[DecorationHook]:
        return self.bar.post_hooks

    @property
    def total_count(self) -> float:
        return self.bar.count_model.total

    @total_count.setter
    def total_count(self, value: float) -> None:
        self.bar.count_model = CountModel.for_total(value)

    @property
    def count_model(self) -> CountModel:
        return self.bar.count_model

    @property
    def is_initialized(self) -> bool:
        return self.inner_bar_width is not None

    # ── Layout ────────────────────────────────────────────────────────────────

    def recompute(self) -> int:
        """Size the inner bar from the current width and hooks, and freeze it."""
        decoration = (
            self.bar.hook_generated_length(self.bar.pre_hooks)
            + self.bar.hook_generated_length(self.bar.post_hooks)
        )
        self.inner_bar_width = self.width - decoration
        logger.debug("Inner bar width: %d (decoration %d)", self.inner_bar_width, decoration)
        return self.inner_bar_width

    initialize = recompute

    def invalidate(self) -> None:
        """Drop the frozen layout; the next render recomputes it."""
        self.inner_bar_width = None

    # ── Rendering ─────────────────────────────────────────────────────────────

    def ratio(self, count: float) -> float:
        """count / total_count; a zero total raises ZeroTotalError."""
        if self.total_count == 0:
            raise ZeroTotalError(f"cannot render count {count} against a total of 0")
        return count / self.total_count

    def build(self, count: float) -> str:
        logger.debug("Progress count: %s", count)
        ratio = self.ratio(count)
        if self.inner_bar_width is None:
            self.recompute()
        return self.bar.build(ratio, self.inner_bar_width)

    def write_progress(self, count: float, file: TextIO | None = None) -> None:
        write_frame(self.build(count), file)

    def write_progress_line(self, count: float, file: TextIO | None = None) -> None:
        write_frame(self.build(count) + NEWLINE, file)

    def update_progress(self, count: float, file: TextIO | None = None) -> None:
        write_frame(self.build(count) + CARRIAGE_RETURN, file)
