from __future__ import annotations

import csv
import os
from datetime import datetime
from pathlib import Path

from loguru import logger

from quota_control.errors import LoadError, RecordError
from quota_control.models.common import CollectorResult
from quota_control.models.quota import GroupSnapshot, QuotaRecord, QuotaWarning, RecordIssue
from quota_control.services.units import human_readable
from quota_control.services.warning_service import evaluate, status_for

QUOTA_SUFFIX = ".quota"

# Lines 1 and 2 are the timestamp and the malformed header.
_PREAMBLE_LINES = 2


def display_row(record: QuotaRecord) -> list[str]:
    return [
        record.filesystem,
        human_readable(record.block_usage, True),
        human_readable(record.block_soft, True),
        human_readable(record.block_hard, True),
        record.block_grace,
        human_readable(record.inode_usage, False),
        human_readable(record.inode_soft, False),
        human_readable(record.inode_hard, False),
        record.inode_grace,
    ]


class QuotaLoader:
    def __init__(self, quota_root: str = "/home/quotas", cache: bool = False) -> None:
        self.quota_root = quota_root
        self.cache = bool(cache)
        self._cache: dict[str, tuple[int, int, GroupSnapshot]] = {}

    def path_for(self, group: str) -> Path:
        return Path(self.quota_root) / f"{group}{QUOTA_SUFFIX}"

    def load(self, group: str) -> GroupSnapshot:
        p = self.path_for(group)
        if not self.cache:
            return self._read(group, p)

        try:
            st = p.stat()
        except OSError as e:
            self._cache.pop(str(p), None)
            raise LoadError(str(p), e.strerror or str(e)) from e

        hit = self._cache.get(str(p))
        if hit is not None and hit[0] == st.st_mtime_ns and hit[1] == st.st_size:
            return hit[2]

        snapshot = self._read(group, p)
        self._cache[str(p)] = (st.st_mtime_ns, st.st_size, snapshot)
        return snapshot

    def _read(self, group: str, p: Path) -> GroupSnapshot:
        rows: list[list[str]] = []
        records: list[QuotaRecord] = []
        issues: list[RecordIssue] = []

        try:
            f = open(p, "r", encoding="utf-8", errors="replace", newline="")
        except OSError as e:
            raise LoadError(str(p), e.strerror or str(e)) from e

        with f:
            try:
                timestamp = f.readline().rstrip("\r\n")
                f.readline()
            except OSError as e:
                raise LoadError(str(p), f"reading preamble failed: {e}") from e

            reader = csv.reader(f)
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    break
                except csv.Error as e:
                    issues.append(self._issue(p, _PREAMBLE_LINES + reader.line_num, str(e)))
                    continue
                except OSError as e:
                    raise LoadError(str(p), f"read failed: {e}") from e

                if not row:
                    continue
                try:
                    record = QuotaRecord.from_row(row)
                except RecordError as e:
                    issues.append(self._issue(p, _PREAMBLE_LINES + reader.line_num, str(e)))
                    continue
                records.append(record)
                rows.append(display_row(record))

        logger.debug("loaded {} ({} records, {} skipped)", p, len(records), len(issues))
        return GroupSnapshot(
            group=group,
            path=str(p),
            timestamp=timestamp,
            rows=rows,
            records=records,
            issues=issues,
        )

    def _issue(self, p: Path, line: int, message: str) -> RecordIssue:
        logger.warning("reading CSV from {} line {}: {}", p, line, message)
        return RecordIssue(line=line, message=message)


class QuotaCollector:
    def __init__(self, loader: QuotaLoader) -> None:
        self.loader = loader

    def collect(self, group: str) -> CollectorResult[GroupSnapshot]:
        ts = datetime.now()
        notes: list[str] = []

        try:
            snapshot = self.loader.load(group)
        except LoadError as e:
            logger.error("{}", e)
            notes.append(f"Could not load {group}: {e}")
            return CollectorResult(
                ts=ts,
                status="ERROR",
                warning_count=0,
                data=None,
                warnings=[],
                notes=notes,
            )

        warnings: list[QuotaWarning] = []
        for record in snapshot.records:
            warnings.extend(evaluate(record, group))

        for issue in snapshot.issues:
            notes.append(f"Skipped line {issue.line} of {os.path.basename(snapshot.path)}: {issue.message}")

        return CollectorResult(
            ts=ts,
            status=status_for(warnings),
            warning_count=len(warnings),
            data=snapshot,
            warnings=warnings,
            notes=notes,
        )
