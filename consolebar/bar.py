"""
ProgressBar — ratio-to-text layout engine.

Builds one frame of a decorated bar:

    <pre hooks>[=========          ]<post hooks>

Hooks are plain callables folded over the output buffer in registration
order. Each receives an immutable RenderContext and returns the extended
buffer. The engine never writes a partial frame: the whole line is built
first, then written in one call.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING, Callable, TextIO

from consolebar.style import DEFAULT_STYLE, BarStyle
from consolebar.text import CARRIAGE_RETURN, NEWLINE, pad_left, repeat

if TYPE_CHECKING:
    from consolebar.fixed import CountModel

logger = logging.getLogger(__name__)


# ── Render context ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RenderContext:
    """Everything a decoration hook may read while rendering one frame."""

    style: BarStyle
    ratio: float
    count_model: CountModel | None = None

    def percent_display(self) -> str:
        """Percentage text padded to a fixed width so columns stay put."""
        return percent_display(self.style, self.ratio)


DecorationHook = Callable[[RenderContext, str], str]


def percent_display(style: BarStyle, ratio: float) -> str:
    """
    Format ratio * 100 with style.percent_format, left-padded to
    style.percent_width:

        percent_display(style, 0.05)  →  "  5.0 %"
        percent_display(style, 1.0)   →  "100.0 %"
    """
    return pad_left(style.percent_format.format(ratio * 100), style.percent_width)


def run_hooks(hooks: list[DecorationHook], context: RenderContext, buffer: str = "") -> str:
    """Fold `hooks` over `buffer` in order."""
    return reduce(lambda acc, hook: hook(context, acc), hooks, buffer)


# ── Engine ────────────────────────────────────────────────────────────────────

class ProgressBar:
    """
    Lays out a bar for a given ratio and character budget.

    Ratios are expected in [0, 1] but are not rejected; values outside
    that range stretch or shrink the filled zone and are the caller's
    responsibility. Zone counts that would go negative clamp to zero.
    """

    def __init__(self, style: BarStyle = DEFAULT_STYLE) -> None:
        self._style = style
        self.count_model: CountModel | None = None
        self.pre_hooks: list[DecorationHook] = []
        self.post_hooks: list[DecorationHook] = []
        self.validated = False

    # ── Configuration ─────────────────────────────────────────────────────────

    @property
    def style(self) -> BarStyle:
        return self._style

    @style.setter
    def style(self, value: BarStyle) -> None:
        self._style = value
        self.validated = False

    def add_pre_hook(self, hook: DecorationHook) -> None:
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: DecorationHook) -> None:
        self.post_hooks.append(hook)

    def validate(self) -> None:
        """Validate the style; only a passing run marks the bar validated."""
        self._style.validate()
        self.validated = True

    def context(self, ratio: float) -> RenderContext:
        """The context hooks see for this ratio."""
        return RenderContext(style=self._style, ratio=ratio, count_model=self.count_model)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def build(self, ratio: float, progress_width: int) -> str:
        """
        Return the full decorated frame for `ratio`, with the bar itself
        (caps included) taking `progress_width` columns. No trailing newline.
        """
        logger.debug("Progress ratio: %s", ratio)
        logger.debug("Progress width: %s", progress_width)

        if not self.validated:
            self.validate()

        ctx = self.context(ratio)
        out = run_hooks(self.pre_hooks, ctx)
        if progress_width > 0:
            out += self.build_bar(ratio, progress_width)
        return run_hooks(self.post_hooks, ctx, out)

    def build_bar(self, ratio: float, progress_width: int) -> str:
        """
        The bar body only:

            build_bar(0.5, 10)  →  "[====    ]"

        Filled slots are truncated, not rounded. A width too small for the
        caps yields empty zones rather than an error.
        """
        style = self._style
        inner_width = progress_width - (len(style.left_cap) + len(style.right_cap))
        filled_slots = inner_width // len(style.filled_token)
        filled = int(ratio * filled_slots)
        if filled < 0:
            logger.debug("Clamping filled count %d to zero", filled)
            filled = 0
        unfilled = inner_width // len(style.unfilled_token) - filled
        if unfilled < 0:
            logger.debug("Clamping unfilled count %d to zero", unfilled)
            unfilled = 0

        parts = [style.left_cap, repeat(style.filled_token, filled)]
        if style.fill_unfilled_zone:
            parts.append(repeat(style.unfilled_token, unfilled))
        parts.append(style.right_cap)
        return "".join(parts)

    def percent_display(self, ratio: float) -> str:
        return percent_display(self._style, ratio)

    def hook_generated_length(self, hooks: list[DecorationHook]) -> int:
        """
        Length of what `hooks` emit at ratio 0, rendered into an empty buffer.

        Used to size decoration regions up front, so it assumes hook output
        width does not change with the ratio.
        """
        length = len(run_hooks(hooks, self.context(0)))
        logger.debug("Hook length: %d", length)
        return length

    # ── Terminal writes ───────────────────────────────────────────────────────

    def write_progress(self, ratio: float, progress_width: int, file: TextIO | None = None) -> None:
        """Write one frame with no line terminator."""
        write_frame(self.build(ratio, progress_width), file)

    def write_progress_line(self, ratio: float, progress_width: int, file: TextIO | None = None) -> None:
        """Write one frame followed by a newline."""
        write_frame(self.build(ratio, progress_width) + NEWLINE, file)

    def update_progress(self, ratio: float, progress_width: int, file: TextIO | None = None) -> None:
        """Write one frame followed by a carriage return, so the next frame overwrites it."""
        write_frame(self.build(ratio, progress_width) + CARRIAGE_RETURN, file)


def write_frame(frame: str, file: TextIO | None) -> None:
    """Write a fully built frame in a single call and flush."""
    stream = file if file is not None else sys.stdout
    stream.write(frame)
    stream.flush()
