import pytest

from tm2c.rwentry import MAX_READERS, NO_READERS, NO_WRITER, BitRwEntry


def test_new_entry_is_empty():
    entry = BitRwEntry()
    assert entry.is_empty()
    assert not entry.has_readers()
    assert not entry.has_writer()
    assert entry.readers == NO_READERS
    assert entry.writer == NO_WRITER


def test_set_and_unset_reader_round_trip():
    entry = BitRwEntry()
    entry.set(5)
    assert entry.is_member(5)
    assert not entry.is_member(4)
    assert entry.has_readers()
    assert not entry.is_empty()
    entry.unset(5)
    assert not entry.is_member(5)
    assert entry.is_empty()


def test_highest_reader_is_supported():
    entry = BitRwEntry()
    entry.set(MAX_READERS - 1)
    assert entry.is_member(MAX_READERS - 1)
    assert entry.is_unique_reader(MAX_READERS - 1)


def test_unique_reader():
    entry = BitRwEntry()
    entry.set(3)
    assert entry.is_unique_reader(3)
    assert not entry.is_unique_reader(2)
    entry.set(7)
    assert not entry.is_unique_reader(3)


def test_fetch_readers_matches_membership():
    entry = BitRwEntry()
    for node in (0, 2, 9):
        entry.set(node)
    fetched = entry.fetch_readers(12)
    assert len(fetched) == 12
    assert fetched == [entry.is_member(i) for i in range(12)]
    assert sum(fetched) == 3


def test_writer_round_trip():
    entry = BitRwEntry()
    entry.set_writer(4)
    assert entry.has_writer()
    assert entry.is_writer(4)
    assert not entry.is_writer(3)
    entry.unset_writer()
    assert not entry.has_writer()
    assert entry.writer == NO_WRITER


def test_clear_drops_everything():
    entry = BitRwEntry()
    entry.set(1)
    entry.set_writer(2)
    entry.clear()
    assert entry.is_empty()


def test_readers_str():
    entry = BitRwEntry()
    assert entry.readers_str() == "NULL\n"
    entry.set(0)
    entry.set(2)
    assert entry.readers_str() == "0 -> 2 -> NULL\n"


@pytest.mark.parametrize("node", [-1, MAX_READERS])
def test_reader_out_of_range(node):
    with pytest.raises(ValueError):
        BitRwEntry().set(node)


def test_writer_out_of_range():
    with pytest.raises(ValueError):
        BitRwEntry().set_writer(NO_WRITER)