from __future__ import annotations

import curses
from typing import Any

from quota_control.models.common import CollectorResult
from quota_control.models.quota import GroupSnapshot, Severity
from quota_control.tui.widgets import C_CRITICAL, C_DIM, C_HEADER, C_NORMAL, C_WARNING, draw_box, safe_addstr

_STATUS_COLORS = {
    "OK": C_NORMAL,
    "WARN": C_WARNING,
    "CRIT": C_CRITICAL,
    "ERROR": C_CRITICAL,
}


def summary_line(group: str, result: CollectorResult[GroupSnapshot]) -> str:
    crit = sum(1 for w in result.warnings if w.severity is Severity.CRITICAL)
    adv = result.warning_count - crit
    filesystems = len(result.data.records) if result.data is not None else 0
    ts = result.data.timestamp if result.data is not None and result.data.timestamp else "-"
    return f"{group:<20} {result.status:<6} {filesystems:>4} fs  {crit:>3} hard  {adv:>3} soft  {ts}"


def draw_overview(win: Any, y: int, x: int, h: int, w: int, results: list[tuple[str, CollectorResult[GroupSnapshot]]]) -> None:
    box = draw_box(win, y, x, h, w, "Quota Control")
    if box is None:
        return
    inner_w = w - 3
    hdr = f"{'GROUP':<20} {'STATUS':<6} {'FS':>7}  {'HARD':>8}  {'SOFT':>8}  SNAPSHOT"
    safe_addstr(box, 1, 1, hdr[:inner_w], curses.color_pair(C_HEADER) | curses.A_BOLD)

    if not results:
        safe_addstr(box, 2, 1, "No groups found", curses.color_pair(C_DIM))
        return

    row = 2
    for group, result in results:
        if row >= h - 1:
            break
        color = _STATUS_COLORS.get(result.status, C_NORMAL)
        safe_addstr(box, row, 1, summary_line(group, result)[:inner_w], curses.color_pair(color))
        row += 1
