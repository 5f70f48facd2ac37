"""
Rich rendition of a Bar.

Same cells in the same order as render(), minus the line-end sequence,
so it can be handed to a rich Console or Live display. The fill is drawn
in the bar color, switching to the complete color once the percentage
reads 100%.
"""

from rich.text import Text

from loadingbar.bar import Bar, arrange, fill_cells, indicator, percent_text
from loadingbar.terminal import WidthQuery, query_terminal_width, resolve_width
from loadingbar.theme import (
    CAP_LEFT,
    CAP_RIGHT,
    CELL_INCOMPLETE,
    STYLE_BAR,
    STYLE_COMPLETE,
    STYLE_DIM,
    TEXT_COMPLETE,
)


def render_text(bar: Bar, query: WidthQuery = query_terminal_width) -> Text:
    """
    Return `bar` as a styled rich Text object.

    render_text(bar).plain + LINE_END == render(bar) for the same query.
    """
    size = resolve_width(bar.width, query)
    percent = percent_text(bar.progress)
    head = indicator(percent)
    done = head == TEXT_COMPLETE
    fill_style = STYLE_COMPLETE if done else STYLE_BAR

    t = Text()
    for cell in arrange(head, fill_cells(bar, size, percent), bar.rtl):
        if cell in (CAP_LEFT, CAP_RIGHT, CELL_INCOMPLETE):
            t.append(cell, style=STYLE_DIM)
        else:
            t.append(cell, style=fill_style)
    return t
