"""Tests for quota threshold evaluation."""

from quota_control.models.quota import QuotaRecord, Severity
from quota_control.services.warning_service import evaluate, status_for

GiB = 1024**3


def make_record(**kw):
    fields = dict(
        filesystem="/home",
        block_usage=0,
        block_soft=10 * GiB,
        block_hard=20 * GiB,
        block_grace="none",
        inode_usage=0,
        inode_soft=1000,
        inode_hard=2000,
        inode_grace="none",
    )
    fields.update(kw)
    return QuotaRecord(**fields)


def test_within_limits_is_quiet():
    assert evaluate(make_record(block_usage=10 * GiB, inode_usage=1000), "bz_lab") == []


def test_soft_block_breach():
    warnings = evaluate(make_record(block_usage=10 * GiB + 1, block_grace="6days"), "bz_lab")
    assert len(warnings) == 1
    w = warnings[0]
    assert w.severity is Severity.ADVISORY
    assert w.dimension == "block"
    assert w.message == "Soft block limit (10 GB) for /home by bz_lab exceeded. Grace Period: 6days"


def test_hard_block_breach_suppresses_soft():
    warnings = evaluate(make_record(block_usage=20 * GiB + 1), "bz_lab")
    assert [w.severity for w in warnings] == [Severity.CRITICAL]
    assert warnings[0].message.startswith("Hard block limit (20 GB) for /home by bz_lab")


def test_usage_equal_to_hard_limit_is_only_soft():
    warnings = evaluate(make_record(block_usage=20 * GiB), "g")
    assert [w.severity for w in warnings] == [Severity.ADVISORY]


def test_inode_is_independent_of_block():
    warnings = evaluate(make_record(block_usage=20 * GiB + 1, inode_usage=1500, inode_grace="2days"), "hz")
    assert [(w.dimension, w.severity) for w in warnings] == [
        ("block", Severity.CRITICAL),
        ("inode", Severity.ADVISORY),
    ]
    assert warnings[1].message == "Soft inode limit (1000) for /home by hz exceeded. Grace Period: 2days"


def test_inode_limits_render_without_byte_suffix():
    warnings = evaluate(make_record(inode_soft=2048, inode_hard=4096, inode_usage=5000), "g")
    assert warnings[0].message.startswith("Hard inode limit (4 K) for")


def test_soft_above_hard_still_evaluates():
    # only the hard check can fire once usage passes the hard limit
    warnings = evaluate(make_record(block_soft=30 * GiB, block_hard=20 * GiB, block_usage=25 * GiB), "g")
    assert [w.severity for w in warnings] == [Severity.CRITICAL]


def test_zero_limits_flag_any_usage():
    warnings = evaluate(make_record(block_soft=0, block_hard=0, block_usage=1), "g")
    assert warnings[0].message == "Hard block limit (0 B) for /home by g exceeded. Grace Period: none"


def test_status_for():
    assert status_for([]) == "OK"
    assert status_for(evaluate(make_record(inode_usage=1001), "g")) == "WARN"
    assert status_for(evaluate(make_record(inode_usage=1001, block_usage=21 * GiB), "g")) == "CRIT"
