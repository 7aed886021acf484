import pytest

from aimarket.services.recent_log import RecentLog


def test_newest_first():
    log = RecentLog(3)
    for entry in ("a", "b", "c"):
        log.record(entry)
    assert log.list() == ["c", "b", "a"]
    assert log.latest() == "c"


def test_evicts_oldest_beyond_capacity():
    log = RecentLog(8)
    for i in range(9):
        log.record(i)
    assert len(log) == 8
    assert log.list() == [8, 7, 6, 5, 4, 3, 2, 1]


def test_list_is_a_snapshot():
    log = RecentLog(2)
    log.record("x")
    snapshot = log.list()
    snapshot.append("y")
    assert log.list() == ["x"]


def test_empty_log():
    log = RecentLog(6)
    assert log.list() == []
    assert log.latest() is None
    assert len(log) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        RecentLog(0)
