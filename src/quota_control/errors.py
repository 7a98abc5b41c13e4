from __future__ import annotations


class QuotaControlError(Exception):
    pass


class DirectoryError(QuotaControlError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path} {message}")
        self.path = path


class LoadError(QuotaControlError):
    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"cannot load {path}: {message}")
        self.path = path


class RecordError(QuotaControlError):
    """A single snapshot row that does not fit the quota schema."""
