from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from quota_control.errors import RecordError

QUOTA_COLUMNS: tuple[str, ...] = (
    "filesystem",
    "block_usage",
    "block_soft",
    "block_hard",
    "block_grace",
    "inode_usage",
    "inode_soft",
    "inode_hard",
    "inode_grace",
)

U64_MAX = 2**64 - 1

_COUNT_RX = re.compile(r"[0-9]+")


def _shorten(value: str, limit: int = 24) -> str:
    return value if len(value) <= limit else value[:limit] + "..."


def _parse_count(column: str, value: str) -> int:
    if not _COUNT_RX.fullmatch(value):
        raise RecordError(f"{column}: invalid digit found in {_shorten(value)!r}")
    digits = value.lstrip("0") or "0"
    # u64 max has 20 digits; longer strings never reach int()
    if len(digits) > 20:
        raise RecordError(f"{column}: number too large to fit in 64 bits ({_shorten(value)})")
    n = int(digits)
    if n > U64_MAX:
        raise RecordError(f"{column}: number too large to fit in 64 bits ({value})")
    return n


@dataclass(frozen=True)
class QuotaRecord:
    filesystem: str
    block_usage: int
    block_soft: int
    block_hard: int
    block_grace: str
    inode_usage: int
    inode_soft: int
    inode_hard: int
    inode_grace: str

    @classmethod
    def from_row(cls, row: list[str]) -> QuotaRecord:
        """Build a record from one header-less snapshot row.

        Raises RecordError when the row has the wrong number of columns, an
        empty filesystem, or a count that is not an unsigned 64-bit integer.
        Grace columns are kept as-is ("none" or a free-form period).
        """
        if len(row) != len(QUOTA_COLUMNS):
            raise RecordError(
                f"found record with {len(row)} fields, but the schema has {len(QUOTA_COLUMNS)} fields"
            )
        filesystem, b_use, b_soft, b_hard, b_grace, i_use, i_soft, i_hard, i_grace = row
        if not filesystem:
            raise RecordError("filesystem: empty value")
        return cls(
            filesystem=filesystem,
            block_usage=_parse_count("block_usage", b_use),
            block_soft=_parse_count("block_soft", b_soft),
            block_hard=_parse_count("block_hard", b_hard),
            block_grace=b_grace,
            inode_usage=_parse_count("inode_usage", i_use),
            inode_soft=_parse_count("inode_soft", i_soft),
            inode_hard=_parse_count("inode_hard", i_hard),
            inode_grace=i_grace,
        )


@dataclass(frozen=True)
class RecordIssue:
    line: int
    message: str


@dataclass(frozen=True)
class GroupSnapshot:
    group: str
    path: str
    timestamp: str
    rows: list[list[str]]
    records: list[QuotaRecord]
    issues: list[RecordIssue] = field(default_factory=list)


class Severity(Enum):
    ADVISORY = "advisory"
    CRITICAL = "critical"


@dataclass(frozen=True)
class QuotaWarning:
    severity: Severity
    dimension: str
    message: str
