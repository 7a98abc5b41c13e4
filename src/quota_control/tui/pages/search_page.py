from __future__ import annotations

import curses
from typing import Any

from quota_control.models.common import CollectorResult
from quota_control.models.quota import QUOTA_COLUMNS, GroupSnapshot, Severity
from quota_control.tui.navigation import StatefulList
from quota_control.tui.widgets import C_CRITICAL, C_DIM, C_HEADER, C_WARNING, draw_box, safe_addstr

HIGHLIGHT = ">> "


def _widths(rows: list[list[str]]) -> list[int]:
    widths = [len(h) for h in QUOTA_COLUMNS]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    return widths


def _fmt(cells: list[str] | tuple[str, ...], widths: list[int]) -> str:
    return " ".join(c.ljust(w) for c, w in zip(cells, widths))


def draw_group_data(win: Any, y: int, x: int, h: int, w: int, result: CollectorResult[GroupSnapshot]) -> None:
    snapshot = result.data
    title = "Group Data"
    if snapshot is not None:
        title = f"Group Data: {snapshot.group} @ {snapshot.timestamp}" if snapshot.timestamp else f"Group Data: {snapshot.group}"
    box = draw_box(win, y, x, h, w, title)
    if box is None:
        return
    inner_w = w - 3
    row = 1

    if snapshot is not None:
        widths = _widths(snapshot.rows)
        safe_addstr(box, row, 1, _fmt(QUOTA_COLUMNS, widths)[:inner_w], curses.color_pair(C_HEADER) | curses.A_BOLD)
        row += 1
        for cells in snapshot.rows:
            if row >= h - 1:
                break
            safe_addstr(box, row, 1, _fmt(cells, widths)[:inner_w])
            row += 1
        row += 1

    for warning in result.warnings:
        if row >= h - 1:
            return
        color = C_CRITICAL if warning.severity is Severity.CRITICAL else C_WARNING
        safe_addstr(box, row, 1, "Warning: ", curses.color_pair(color) | curses.A_BOLD)
        safe_addstr(box, row, 10, warning.message[: max(0, inner_w - 9)])
        row += 1

    for note in result.notes:
        if row >= h - 1:
            return
        color = C_CRITICAL if result.status == "ERROR" else C_DIM
        safe_addstr(box, row, 1, note[:inner_w], curses.color_pair(color))
        row += 1


def draw_group_list(win: Any, y: int, x: int, h: int, w: int, groups: StatefulList[str]) -> None:
    box = draw_box(win, y, x, h, w, "Groups")
    if box is None:
        return
    inner_h = h - 2
    if not groups.items:
        safe_addstr(box, 1, 1, "No groups found", curses.color_pair(C_DIM))
        return

    # Keep the selection on screen.
    sel = groups.selected
    offset = 0
    if sel is not None and sel >= inner_h:
        offset = sel - inner_h + 1

    for row, i in enumerate(range(offset, min(len(groups.items), offset + inner_h)), start=1):
        name = groups.items[i]
        if i == sel:
            safe_addstr(box, row, 1, f"{HIGHLIGHT}{name}"[: w - 3], curses.A_BOLD)
        else:
            safe_addstr(box, row, 1, f"{' ' * len(HIGHLIGHT)}{name}"[: w - 3])
