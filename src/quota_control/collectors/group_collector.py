from __future__ import annotations

from pathlib import Path

from quota_control.collectors.quota_collector import QUOTA_SUFFIX
from quota_control.errors import DirectoryError


class GroupDirectory:
    def __init__(self, quota_root: str = "/home/quotas") -> None:
        self.quota_root = quota_root

    def list_groups(self) -> list[str]:
        root = Path(self.quota_root)
        if not root.exists() or not root.is_dir():
            raise DirectoryError(self.quota_root, "doesn't exist or is not a valid folder")

        groups: list[str] = []
        try:
            entries = list(root.iterdir())
        except OSError as e:
            raise DirectoryError(self.quota_root, f"cannot be listed: {e}") from e

        for p in entries:
            name = p.name
            if not name.endswith(QUOTA_SUFFIX) or name == QUOTA_SUFFIX:
                continue
            if not p.is_file():
                continue
            groups.append(name[: -len(QUOTA_SUFFIX)])

        groups.sort()
        return groups
