"""
loadingbar visual design system.

Glyphs, layout constants, and rich styles as named constants.
Import from here — never hardcode glyphs in other modules.
"""

from rich.style import Style


# ── Glyphs ────────────────────────────────────────────────────────────────────

TEXT_INCOMPLETE = "⟳ "     # ⟳ + space
TEXT_COMPLETE   = "✓ "     # ✓ + space
CAP_LEFT        = "["
CAP_RIGHT       = "]"
CELL_INCOMPLETE = "▒"      # ▒
CELL_COMPLETE   = "█"      # █
LINE_END        = "\x1b[1F"     # cursor to start of previous line


# ── Layout ────────────────────────────────────────────────────────────────────

DEFAULT_WIDTH = 80      # assumed when the terminal size is unknown
MIN_WIDTH = 7           # dynamic widths never go below this
PERCENT_WIDTH = 5       # at this width the fill becomes a plain percentage
CAPS_RESERVED = 4       # cells not available to the fill

COMPLETE_PERCENT = "100%"
USIZE_MAX = 2**64 - 1     # counts saturate here, like an unsigned cast


# ── Colors ────────────────────────────────────────────────────────────────────

COLOR_DIM               = "#787878"
PROGRESS_BAR_COLOR      = "#7B9FD4"
PROGRESS_COMPLETE_COLOR = "#4DBD74"

STYLE_DIM      = Style(color=COLOR_DIM)
STYLE_BAR      = Style(color=PROGRESS_BAR_COLOR)
STYLE_COMPLETE = Style(color=PROGRESS_COMPLETE_COLOR, bold=True)
