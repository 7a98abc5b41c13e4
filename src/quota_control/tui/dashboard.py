from __future__ import annotations

import curses
from typing import Any

from loguru import logger

from quota_control.collectors.quota_collector import QuotaCollector
from quota_control.models.common import CollectorResult
from quota_control.models.quota import GroupSnapshot
from quota_control.tui.navigation import NavigationState, apply, key_to_command
from quota_control.tui.pages.overview_page import draw_overview
from quota_control.tui.pages.search_page import draw_group_data, draw_group_list
from quota_control.tui.widgets import draw_box, draw_tabs, init_colors, safe_addstr

MIN_W = 40
MIN_H = 10


class Dashboard:
    def __init__(self, collector: QuotaCollector, groups: list[str]) -> None:
        self._collector = collector
        self.state = NavigationState.initial(groups)

    def run(self, stdscr: Any) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        init_colors()

        while self.state.running:
            self.draw(stdscr)
            key = stdscr.getch()
            if key == curses.KEY_RESIZE:
                stdscr.clear()
                continue
            self.handle_key(key)

    def handle_key(self, key: int) -> None:
        command = key_to_command(key)
        if command is None:
            return
        self.state = apply(self.state, command)
        logger.debug("{} -> tab={} group={}", command.name, self.state.tabs.index, self.state.groups.selected)

    def draw(self, stdscr: Any) -> None:
        max_y, max_x = stdscr.getmaxyx()
        stdscr.erase()

        if max_y < MIN_H or max_x < MIN_W:
            safe_addstr(stdscr, 0, 0, f"Terminal too small (need {MIN_W}x{MIN_H}+)")
            stdscr.refresh()
            return

        # One line of margin around everything.
        y, x = 1, 1
        w = max_x - 2
        h = max_y - 2

        draw_tabs(stdscr, y, x, w, "Modes", self.state.tabs.titles, self.state.tabs.index)
        action_h = 3 if self.state.action.is_visible else 0
        body_y = y + 3
        body_h = h - 3 - action_h

        if self.state.tabs.index == 0:
            self._draw_search(stdscr, body_y, x, body_h, w)
        else:
            self._draw_overview(stdscr, body_y, x, body_h, w)

        if self.state.action.is_visible:
            tabs = self.state.action.tabs
            draw_tabs(stdscr, body_y + body_h, x, w, "Actions", tabs.titles, tabs.index)

        stdscr.refresh()

    def _draw_search(self, stdscr: Any, y: int, x: int, h: int, w: int) -> None:
        left_w = w // 2
        group = self.state.groups.current()
        if group is None:
            draw_box(stdscr, y, x, h, left_w, "Group Data")
        else:
            draw_group_data(stdscr, y, x, h, left_w, self._collector.collect(group))
        draw_group_list(stdscr, y, x + left_w, h, w - left_w, self.state.groups)

    def _draw_overview(self, stdscr: Any, y: int, x: int, h: int, w: int) -> None:
        results: list[tuple[str, CollectorResult[GroupSnapshot]]] = [
            (g, self._collector.collect(g)) for g in self.state.groups.items
        ]
        draw_overview(stdscr, y, x, h, w, results)


def run_dashboard(collector: QuotaCollector, groups: list[str]) -> None:
    curses.wrapper(Dashboard(collector, groups).run)
