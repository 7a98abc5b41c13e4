"""Tests for the dashboard navigation state machine and key map."""

import curses

from quota_control.tui.navigation import (
    Command,
    NavigationState,
    StatefulList,
    apply,
    key_to_command,
)


def state(groups=("a", "b", "c"), selected=None):
    s = NavigationState.initial(list(groups))
    if selected is not None:
        s = apply(s, Command.JUMP_TO_FIRST_GROUP)
        for _ in range(selected):
            s = apply(s, Command.SELECT_NEXT_GROUP)
    return s


def test_initial_state():
    s = NavigationState.initial(["a", "b"])
    assert s.tabs.index == 0
    assert s.tabs.current == "Search"
    assert s.action.tabs.index == 0
    assert s.action.is_visible is False
    assert s.groups.selected is None
    assert s.running is True


def test_top_tab_wraps():
    s = apply(state(), Command.ADVANCE_TOP_TAB)
    assert s.tabs.current == "Overview"
    s = apply(s, Command.ADVANCE_TOP_TAB)
    assert s.tabs.index == 0


def test_action_tab_wraps():
    s = state()
    for expected in (1, 2, 0):
        s = apply(s, Command.ADVANCE_ACTION_TAB)
        assert s.action.tabs.index == expected


def test_toggle_action_panel():
    s = apply(state(), Command.TOGGLE_ACTION_PANEL)
    assert s.action.is_visible is True
    assert apply(s, Command.TOGGLE_ACTION_PANEL).action.is_visible is False


def test_no_selection_defaults_to_first():
    assert apply(state(), Command.SELECT_NEXT_GROUP).groups.selected == 0
    assert apply(state(), Command.SELECT_PREVIOUS_GROUP).groups.selected == 0


def test_group_selection_wraps_both_ways():
    s = state(selected=0)
    assert apply(s, Command.SELECT_PREVIOUS_GROUP).groups.selected == 2
    s = state(selected=2)
    assert apply(s, Command.SELECT_NEXT_GROUP).groups.selected == 0
    assert apply(state(selected=1), Command.SELECT_NEXT_GROUP).groups.selected == 2


def test_jumps():
    for start in (None, 0, 1, 2):
        assert apply(state(selected=start), Command.JUMP_TO_LAST_GROUP).groups.selected == 2
        assert apply(state(selected=start), Command.JUMP_TO_FIRST_GROUP).groups.selected == 0


def test_empty_group_list_stays_unselected():
    s = state(groups=())
    for cmd in (
        Command.SELECT_NEXT_GROUP,
        Command.SELECT_PREVIOUS_GROUP,
        Command.JUMP_TO_FIRST_GROUP,
        Command.JUMP_TO_LAST_GROUP,
    ):
        s = apply(s, cmd)
        assert s.groups.selected is None
    assert s.groups.current() is None


def test_current_group():
    lst = StatefulList(("a", "b"))
    assert lst.current() == "a"
    assert lst.next().next().current() == "b"


def test_transitions_do_not_mutate():
    s = state()
    apply(s, Command.SELECT_NEXT_GROUP)
    apply(s, Command.ADVANCE_TOP_TAB)
    assert s.groups.selected is None
    assert s.tabs.index == 0


def test_quit():
    s = apply(state(), Command.QUIT)
    assert s.running is False


def test_key_map():
    assert key_to_command(ord("q")) is Command.QUIT
    assert key_to_command(ord("\t")) is Command.ADVANCE_TOP_TAB
    assert key_to_command(curses.KEY_DOWN) is Command.SELECT_NEXT_GROUP
    assert key_to_command(curses.KEY_UP) is Command.SELECT_PREVIOUS_GROUP
    assert key_to_command(curses.KEY_NPAGE) is Command.JUMP_TO_LAST_GROUP
    assert key_to_command(curses.KEY_PPAGE) is Command.JUMP_TO_FIRST_GROUP
    assert key_to_command(ord("x")) is None


def test_left_and_right_both_advance_action_tab():
    assert key_to_command(curses.KEY_LEFT) is Command.ADVANCE_ACTION_TAB
    assert key_to_command(curses.KEY_RIGHT) is Command.ADVANCE_ACTION_TAB
