"""Shared fixtures for quota-control tests."""

import pytest

HEADER = "filesystem,block_usage,block_soft,block_hard,block_grace,inode_usage,inode_soft,inode_hard,inode_grace"


@pytest.fixture
def quota_root(tmp_path):
    root = tmp_path / "quotas"
    root.mkdir()
    return root


@pytest.fixture
def write_snapshot(quota_root):
    """Write <group>.quota with the usual timestamp + header preamble."""

    def _write(group, lines, timestamp="2024-03-01 04:00:01"):
        p = quota_root / f"{group}.quota"
        p.write_text("\n".join([timestamp, HEADER, *lines]) + "\n", encoding="utf-8")
        return p

    return _write


class FakeWindow:
    """Records what the drawing code writes, in screen coordinates."""

    def __init__(self, h, w, y=0, x=0, log=None):
        self.h, self.w, self.y, self.x = h, w, y, x
        self.log = log if log is not None else []

    def getmaxyx(self):
        return self.h, self.w

    def derwin(self, h, w, y, x):
        return FakeWindow(h, w, self.y + y, self.x + x, self.log)

    def addstr(self, y, x, text, attr=0):
        import curses

        if y < 0 or y >= self.h or x < 0 or x >= self.w:
            raise curses.error("addstr out of range")
        self.log.append((self.y + y, self.x + x, text, attr))

    def box(self):
        pass

    def erase(self):
        self.log.clear()

    def refresh(self):
        pass

    def texts(self):
        return [t for _, _, t, _ in self.log]

    def find(self, fragment):
        return [entry for entry in self.log if fragment in entry[2]]


@pytest.fixture
def fake_screen(monkeypatch):
    """Factory for FakeWindow; colour pairs become plain numbers without initscr."""
    import curses

    monkeypatch.setattr(curses, "color_pair", lambda n: n << 8)
    return FakeWindow
