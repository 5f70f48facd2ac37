"""
Terminal width lookup.

The renderer never touches the terminal itself; it is handed a zero-argument
query returning the column count or None. This module supplies the default
query and the width resolution rules built on top of it.
"""

import logging
import os
import sys
from typing import Callable, Optional

from loadingbar.theme import DEFAULT_WIDTH, MIN_WIDTH

log = logging.getLogger("loadingbar.terminal")

WidthQuery = Callable[[], Optional[int]]


def query_terminal_width(fd: int | None = None) -> int | None:
    """
    Return the column count of the terminal attached to `fd` (stdout by default).

    Returns None when the descriptor is not a terminal or has been closed.
    Unlike shutil.get_terminal_size, COLUMNS is not consulted.
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        return os.get_terminal_size(fd).columns
    except (AttributeError, OSError, ValueError):
        log.debug("terminal width unavailable on fd %s", fd)
        return None


def resolve_width(width: int | None, query: WidthQuery = query_terminal_width) -> int:
    """
    Effective bar width.

    An explicit width wins and is used as-is. Otherwise the query is asked;
    an unknown width becomes DEFAULT_WIDTH and anything up to MIN_WIDTH is
    raised to MIN_WIDTH.
    """
    if width is not None:
        return width

    try:
        cols = query()
    except Exception:
        log.debug("terminal width query failed, assuming %d", DEFAULT_WIDTH)
        cols = None

    if cols is None:
        return DEFAULT_WIDTH
    if cols <= MIN_WIDTH:
        return MIN_WIDTH
    return cols
