import pytest

from tm2c.ssht import Bucket
from tm2c.sshtlog import SSHT_LOG_SET_SIZE, SshtLogSet


def test_insert_points_at_bucket_slot():
    bucket = Bucket()
    bucket.addr[1] = 0x40
    log = SshtLogSet()
    log_entry = log.insert(bucket, 1)
    assert len(log) == 1
    assert log_entry.address == 0x40
    assert log_entry.entry is bucket.entry[1]


def test_address_follows_bucket_changes():
    bucket = Bucket()
    log = SshtLogSet()
    log_entry = log.insert(bucket, 0)
    bucket.addr[0] = 0x80
    assert log_entry.address == 0x80


def test_iteration_keeps_insertion_order():
    bucket = Bucket()
    log = SshtLogSet()
    for slot in range(3):
        log.insert(bucket, slot)
    assert [e.slot for e in log] == [0, 1, 2]


def test_swap_remove_moves_last_into_place():
    bucket = Bucket()
    log = SshtLogSet()
    for slot in range(3):
        log.insert(bucket, slot)
    removed = log.swap_remove(0)
    assert removed.slot == 0
    assert [e.slot for e in log] == [2, 1]


def test_swap_remove_last_entry():
    bucket = Bucket()
    log = SshtLogSet()
    log.insert(bucket, 0)
    log.insert(bucket, 1)
    log.swap_remove(1)
    assert [e.slot for e in log] == [0]


def test_swap_remove_out_of_range():
    log = SshtLogSet()
    with pytest.raises(IndexError):
        log.swap_remove(0)


def test_empty_returns_same_log():
    bucket = Bucket()
    log = SshtLogSet()
    log.insert(bucket, 0)
    assert log.empty() is log
    assert len(log) == 0


def test_grows_past_initial_size():
    bucket = Bucket()
    log = SshtLogSet()
    count = SSHT_LOG_SET_SIZE * 2 + 1
    for i in range(count):
        log.insert(bucket, i % 3)
    assert len(log) == count