from __future__ import annotations

from quota_control.models.quota import QuotaRecord, QuotaWarning, Severity
from quota_control.services.units import human_readable


def _check(
    dimension: str,
    usage: int,
    soft: int,
    hard: int,
    grace: str,
    is_bytes: bool,
    filesystem: str,
    group: str,
) -> QuotaWarning | None:
    # Hard wins over soft; equal to the limit is still within it.
    if hard < usage:
        kind, limit, severity = "Hard", hard, Severity.CRITICAL
    elif soft < usage:
        kind, limit, severity = "Soft", soft, Severity.ADVISORY
    else:
        return None
    return QuotaWarning(
        severity=severity,
        dimension=dimension,
        message=(
            f"{kind} {dimension} limit ({human_readable(limit, is_bytes)}) for {filesystem} "
            f"by {group} exceeded. Grace Period: {grace}"
        ),
    )


def evaluate(record: QuotaRecord, group: str) -> list[QuotaWarning]:
    """Return at most one block warning followed by at most one inode warning."""
    warnings: list[QuotaWarning] = []

    block = _check(
        "block",
        record.block_usage,
        record.block_soft,
        record.block_hard,
        record.block_grace,
        True,
        record.filesystem,
        group,
    )
    if block is not None:
        warnings.append(block)

    inode = _check(
        "inode",
        record.inode_usage,
        record.inode_soft,
        record.inode_hard,
        record.inode_grace,
        False,
        record.filesystem,
        group,
    )
    if inode is not None:
        warnings.append(inode)

    return warnings


def status_for(warnings: list[QuotaWarning]) -> str:
    if any(w.severity is Severity.CRITICAL for w in warnings):
        return "CRIT"
    if warnings:
        return "WARN"
    return "OK"
