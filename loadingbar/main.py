"""
loadingbar — command line entry point.

Prints a single bar, or animates one from 0% to 100% to show how a caller
drives the renderer: one mutable Bar, re-rendered and printed every frame.
"""

import logging
import time
from typing import Optional

import click
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler

from loadingbar import __version__
from loadingbar.bar import Bar, render
from loadingbar.config import load_config
from loadingbar.styled import render_text


# ── Helpers ───────────────────────────────────────────────────────────────────

def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _run_demo(bar: Bar, steps: int, delay: float, styled: bool) -> None:
    """Fill `bar` in `steps` frames, overwriting the same line each time."""
    if styled:
        console = Console()
        with Live(render_text(bar), console=console, transient=False) as live:
            for step in range(steps + 1):
                bar.progress = step / steps
                live.update(render_text(bar))
                time.sleep(delay)
        return

    click.echo()
    for step in range(steps + 1):
        bar.progress = step / steps
        # the trailing line end moves the cursor back onto this line
        click.echo(render(bar))
        time.sleep(delay)
    click.echo()


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="loadingbar", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="loadingbar")
@click.argument("progress", type=float, default=0.0)
@click.option("--rtl/--ltr", default=None, help="Mirror the bar for right-to-left display.")
@click.option(
    "--width",
    type=click.IntRange(min=0),
    default=None,
    help="Columns to fill (default: terminal width).",
)
@click.option("--styled", is_flag=True, default=False, help="Draw with colors through rich.")
@click.option("--demo", is_flag=True, default=False, help="Animate a bar from 0% to 100%.")
@click.option("--steps", type=click.IntRange(min=1), default=42, show_default=True,
              help="With --demo: number of frames.")
@click.option("--delay", type=click.FloatRange(min=0), default=0.05, show_default=True,
              help="With --demo: seconds between frames.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(
    progress: float,
    rtl: Optional[bool],
    width: Optional[int],
    styled: bool,
    demo: bool,
    steps: int,
    delay: float,
    verbose: bool,
) -> None:
    """Print an ANSI progress bar for PROGRESS (a number between 0 and 1)."""
    _setup_logging(verbose)

    config = load_config()
    bar = Bar(
        progress=progress,
        rtl=config["rtl"] if rtl is None else rtl,
        width=config["width"] if width is None else width,
    )

    if demo:
        _run_demo(bar, steps, delay, styled)
        return

    if styled:
        Console().print(render_text(bar))
        return

    click.echo(render(bar))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
