"""
Bar renderer.

Stateless — takes a Bar, returns the full line as a string.
The caller owns the Bar, mutates it between frames and prints the result.

Output (width 40, progress 0.5):
    ⟳ [██████████████████▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒]\\x1b[1F

At width 5 the fill is replaced by the percentage:
    ⟳ [80%]\\x1b[1F
"""

import math
from dataclasses import dataclass

import numpy as np

from loadingbar.terminal import WidthQuery, query_terminal_width, resolve_width
from loadingbar.theme import (
    CAP_LEFT,
    CAP_RIGHT,
    CAPS_RESERVED,
    CELL_COMPLETE,
    CELL_INCOMPLETE,
    COMPLETE_PERCENT,
    DEFAULT_WIDTH,
    LINE_END,
    PERCENT_WIDTH,
    TEXT_COMPLETE,
    TEXT_INCOMPLETE,
    USIZE_MAX,
)


@dataclass
class Bar:
    """
    A progress bar value.

    progress: a number between 0 and 1 (not validated)
    rtl:      mirror the bar for right-to-left display
    width:    columns to fill; None resolves the terminal width on each render
    """

    progress: float = 0.0
    rtl: bool = False
    width: int | None = None

    @classmethod
    def from_rtl(cls, rtl: bool) -> "Bar":
        """Empty bar at the default fixed width."""
        return cls(progress=0.0, rtl=rtl, width=DEFAULT_WIDTH)

    @classmethod
    def from_progress(cls, progress: float) -> "Bar":
        """Left-to-right bar at the default fixed width."""
        return cls(progress=progress, rtl=False, width=DEFAULT_WIDTH)

    def __str__(self) -> str:
        return render(self)


# ── Arithmetic ────────────────────────────────────────────────────────────────

def _f32_product(a: float, b: float) -> float:
    """a * b computed in single precision, as progress is a 32-bit float."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.float32(a) * np.float32(b))


def _floor_count(value: float) -> int:
    """
    floor(value) as an unsigned count.

    NaN and negatives give 0; anything past USIZE_MAX, infinity included,
    gives USIZE_MAX.
    """
    if not value > 0:
        return 0
    if math.isinf(value):
        return USIZE_MAX
    return min(math.floor(value), USIZE_MAX)


def percent_text(progress: float) -> str:
    return f"{_floor_count(_f32_product(progress, 100.0))}%"


def indicator(percent: str) -> str:
    return TEXT_COMPLETE if percent == COMPLETE_PERCENT else TEXT_INCOMPLETE


def layout(bar: Bar, size: int) -> tuple[int, int]:
    """
    Split the fill area of a `size`-wide bar into (complete, incomplete) cells.

    The fill area is size - 4 cells, never negative. Complete cells are
    floored and kept within the fill area, so out-of-range progress shows an
    empty or full bar.
    """
    cells = max(size - CAPS_RESERVED, 0)
    complete = min(_floor_count(_f32_product(cells, bar.progress)), cells)
    return complete, cells - complete


def fill_cells(bar: Bar, size: int, percent: str) -> list[str]:
    """Bracketed fill segment as a list of cells, in left-to-right order."""
    if size == PERCENT_WIDTH:
        return [CAP_LEFT, percent, CAP_RIGHT]
    complete, incomplete = layout(bar, size)
    return [CAP_LEFT] + [CELL_COMPLETE] * complete + [CELL_INCOMPLETE] * incomplete + [CAP_RIGHT]


def arrange(head: str, fill: list[str], rtl: bool) -> list[str]:
    """
    Order the indicator and fill cells for display.

    RTL reverses twice: the fill cells first, then the components as a whole.
    The line end is not part of this and always goes last.
    """
    if rtl:
        fill = fill[::-1]
    components = [head] + fill
    if rtl:
        components.reverse()
    return components


# ── Rendering ─────────────────────────────────────────────────────────────────

def render(bar: Bar, query: WidthQuery = query_terminal_width) -> str:
    """
    Render `bar` as a single terminal line ending in the line-end sequence.

    Args:
        bar:   the bar to draw
        query: returns the terminal width in columns, or None if unknown;
               only called when bar.width is None

    Never raises; out-of-range values degrade as described in layout().
    """
    size = resolve_width(bar.width, query)
    percent = percent_text(bar.progress)
    components = arrange(indicator(percent), fill_cells(bar, size, percent), bar.rtl)
    components.append(LINE_END)
    return "".join(components)
