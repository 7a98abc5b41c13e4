from __future__ import annotations

import curses
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Generic, TypeVar

T = TypeVar("T")

TOP_TABS: tuple[str, ...] = ("Search", "Overview")
ACTION_TABS: tuple[str, ...] = ("Hit", "Kick", "Delete")


class Command(Enum):
    ADVANCE_TOP_TAB = auto()
    ADVANCE_ACTION_TAB = auto()
    TOGGLE_ACTION_PANEL = auto()
    SELECT_NEXT_GROUP = auto()
    SELECT_PREVIOUS_GROUP = auto()
    JUMP_TO_FIRST_GROUP = auto()
    JUMP_TO_LAST_GROUP = auto()
    QUIT = auto()


@dataclass(frozen=True)
class TabsState:
    titles: tuple[str, ...]
    index: int = 0

    def next(self) -> TabsState:
        return replace(self, index=(self.index + 1) % len(self.titles))

    @property
    def current(self) -> str:
        return self.titles[self.index]


@dataclass(frozen=True)
class ActionState:
    tabs: TabsState = field(default_factory=lambda: TabsState(ACTION_TABS))
    is_visible: bool = False


@dataclass(frozen=True)
class StatefulList(Generic[T]):
    items: tuple[T, ...]
    selected: int | None = None

    def next(self) -> StatefulList[T]:
        if not self.items:
            return self
        if self.selected is None:
            i = 0
        elif self.selected >= len(self.items) - 1:
            i = 0
        else:
            i = self.selected + 1
        return replace(self, selected=i)

    def previous(self) -> StatefulList[T]:
        if not self.items:
            return self
        if self.selected is None:
            i = 0
        elif self.selected == 0:
            i = len(self.items) - 1
        else:
            i = self.selected - 1
        return replace(self, selected=i)

    def select(self, index: int) -> StatefulList[T]:
        if not self.items:
            return self
        return replace(self, selected=max(0, min(index, len(self.items) - 1)))

    def current(self) -> T | None:
        """Selected item, falling back to the first one when nothing is selected."""
        if not self.items:
            return None
        return self.items[self.selected if self.selected is not None else 0]


@dataclass(frozen=True)
class NavigationState:
    tabs: TabsState
    action: ActionState
    groups: StatefulList[str]
    running: bool = True

    @classmethod
    def initial(cls, groups: list[str]) -> NavigationState:
        return cls(
            tabs=TabsState(TOP_TABS),
            action=ActionState(),
            groups=StatefulList(tuple(groups)),
        )


def apply(state: NavigationState, command: Command) -> NavigationState:
    if command is Command.QUIT:
        return replace(state, running=False)
    if command is Command.ADVANCE_TOP_TAB:
        return replace(state, tabs=state.tabs.next())
    if command is Command.ADVANCE_ACTION_TAB:
        return replace(state, action=replace(state.action, tabs=state.action.tabs.next()))
    if command is Command.TOGGLE_ACTION_PANEL:
        return replace(state, action=replace(state.action, is_visible=not state.action.is_visible))
    if command is Command.SELECT_NEXT_GROUP:
        return replace(state, groups=state.groups.next())
    if command is Command.SELECT_PREVIOUS_GROUP:
        return replace(state, groups=state.groups.previous())
    if command is Command.JUMP_TO_FIRST_GROUP:
        return replace(state, groups=state.groups.select(0))
    if command is Command.JUMP_TO_LAST_GROUP:
        return replace(state, groups=state.groups.select(len(state.groups.items) - 1))
    return state


# Left and right both advance the action tabs.
KEYMAP: dict[int, Command] = {
    ord("q"): Command.QUIT,
    ord("\t"): Command.ADVANCE_TOP_TAB,
    ord("a"): Command.TOGGLE_ACTION_PANEL,
    curses.KEY_RIGHT: Command.ADVANCE_ACTION_TAB,
    curses.KEY_LEFT: Command.ADVANCE_ACTION_TAB,
    curses.KEY_DOWN: Command.SELECT_NEXT_GROUP,
    curses.KEY_UP: Command.SELECT_PREVIOUS_GROUP,
    curses.KEY_NPAGE: Command.JUMP_TO_LAST_GROUP,
    curses.KEY_PPAGE: Command.JUMP_TO_FIRST_GROUP,
}


def key_to_command(key: int) -> Command | None:
    return KEYMAP.get(key)
