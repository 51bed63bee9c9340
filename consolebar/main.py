"""
consolebar — entry point.

Animates an informative bar over a count, then a plain fixed-width bar
over ratios, redrawing each in place:

     60 / 120 [===================                   ]  50.0 %
    [=====================                   ]
"""

import math
import time
from pathlib import Path
from typing import Callable, Iterable

import click
from rich.console import Console
from rich.markup import escape

from consolebar import __version__
from consolebar.config import load_config
from consolebar.errors import ConsoleBarError
from consolebar.fixed import FixedWidthProgressBar, InformativeProgressBar, terminal_width
from consolebar.log import configure_logging
from consolebar.text import center, fill_row, format_number


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(highlight=False)

COLOR_DIM = "#787878"
COLOR_BRAND = "#7B9FD4"

FIXED_BAR_WIDTH = 90
FIXED_BAR_STEPS = 120


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="consolebar", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="consolebar")
@click.option("--total", type=float, default=120, show_default=True, help="Count the informative bar runs up to.")
@click.option(
    "--width",
    type=int,
    default=None,
    help="Columns for each rendered line (default: terminal width minus one).",
)
@click.option("--delay", type=float, default=0.05, show_default=True, help="Seconds between frames.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Style config file (default: ~/.config/consolebar/config.toml).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log layout decisions to stderr.")
def cli(
    total: float,
    width: int | None,
    delay: float,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Render in-place progress bars in the terminal."""
    if not math.isfinite(total):
        console.print("[red]Error:[/red] --total must be a finite number.")
        raise SystemExit(1)

    configure_logging(verbose)
    style = load_config(config_path)["style"]
    line_width = width if width is not None and width >= 0 else terminal_width()

    console.print(center(f"consolebar {__version__}", line_width, "─"), style=COLOR_BRAND)
    console.print()

    try:
        # ── Count-driven bar ──────────────────────────────────────────────────
        informative = InformativeProgressBar(total, width=line_width, style=style)
        console.print(f"  [{COLOR_DIM}]Counting to {format_number(total)}…[/{COLOR_DIM}]")
        _animate(informative.update_progress, range(1, int(total) + 1), delay)
        informative.write_progress_line(total)

        # ── Ratio-driven bar ──────────────────────────────────────────────────
        fixed = FixedWidthProgressBar(min(FIXED_BAR_WIDTH, line_width), style=style)
        console.print(f"  [{COLOR_DIM}]Fixed width, {fixed.width} columns…[/{COLOR_DIM}]")
        _animate(fixed.update_progress, (i / FIXED_BAR_STEPS for i in range(FIXED_BAR_STEPS)), delay)
        fixed.write_progress_line(1.0)
    except ConsoleBarError as exc:
        console.print()
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise SystemExit(1)

    console.print()
    console.print(fill_row("─", line_width), style=COLOR_DIM)


# ── Animation loop ────────────────────────────────────────────────────────────

def _animate(update: Callable[[float], None], values: Iterable[float], delay: float) -> None:
    """Redraw with each value in turn, sleeping `delay` seconds between frames."""
    for value in values:
        update(value)
        if delay > 0:
            time.sleep(delay)


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
