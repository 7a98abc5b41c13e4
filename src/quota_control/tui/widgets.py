from __future__ import annotations

import curses
from typing import Any

# Curses colour-pair IDs
C_NORMAL = 1
C_WARNING = 2
C_CRITICAL = 3
C_HEADER = 4
C_DIM = 5


def init_colors() -> None:
    if not curses.has_colors():
        return
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(C_NORMAL, curses.COLOR_WHITE, -1)
    curses.init_pair(C_WARNING, curses.COLOR_YELLOW, -1)
    curses.init_pair(C_CRITICAL, curses.COLOR_RED, -1)
    curses.init_pair(C_HEADER, curses.COLOR_GREEN, -1)
    curses.init_pair(C_DIM, curses.COLOR_CYAN, -1)


def safe_addstr(win: Any, *args: Any) -> None:
    """addstr that ignores writes past the window edge."""
    try:
        win.addstr(*args)
    except curses.error:
        pass


def draw_box(win: Any, y: int, x: int, h: int, w: int, title: str = "") -> Any | None:
    """Draw a bordered box and return it, or None when it does not fit."""
    max_y, max_x = win.getmaxyx()
    h = min(h, max_y - y)
    w = min(w, max_x - x)
    if h < 3 or w < 4:
        return None
    try:
        sub = win.derwin(h, w, y, x)
        sub.box()
    except curses.error:
        return None
    if title and len(title) + 4 < w:
        safe_addstr(sub, 0, 2, f" {title} ", curses.A_BOLD)
    elif title:
        safe_addstr(sub, 0, 2, f" {title[: max(0, w - 6)]} ", curses.A_BOLD)
    return sub


def draw_tabs(win: Any, y: int, x: int, w: int, title: str, titles: tuple[str, ...], index: int) -> None:
    box = draw_box(win, y, x, 3, w, title)
    if box is None:
        return
    col = 2
    for i, t in enumerate(titles):
        if i:
            safe_addstr(box, 1, col, "|")
            col += 2
        attr = curses.A_BOLD | curses.A_UNDERLINE if i == index else curses.A_NORMAL
        safe_addstr(box, 1, col, t[: max(0, w - col - 2)], attr)
        col += len(t) + 1
