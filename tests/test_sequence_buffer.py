import pytest

from laminar.sequence_buffer import (
    CongestionData,
    ReassemblyData,
    SequenceBuffer,
    sequence_greater_than,
    sequence_less_than,
)

U16_MAX = 65535


def test_sequence_comparisons():
    assert sequence_greater_than(1, 0)
    assert sequence_less_than(0, 1)
    assert sequence_greater_than(32768, 0)
    assert sequence_less_than(32769, 0)
    assert sequence_greater_than(0, U16_MAX)


def test_max_sequence_number_should_not_exist_by_default():
    buffer = SequenceBuffer(2)
    assert not buffer.exists(U16_MAX)


def test_capacity_matches_size():
    buffer = SequenceBuffer(2)
    assert buffer.capacity == 2
    assert len(buffer) == 0


def test_normal_inserts_should_fill_buffer():
    buffer = SequenceBuffer(8)
    for i in range(8):
        buffer.insert(i, "stub")
    assert len(buffer) == 8


def test_insert_into_buffer():
    buffer = SequenceBuffer(2)
    buffer.insert(0, "stub")
    assert buffer.exists(0)
    assert 0 in buffer


def test_remove_from_buffer():
    buffer = SequenceBuffer(2)
    buffer.insert(0, "stub")
    buffer.remove(0)
    assert not buffer.exists(0)


def test_insert_into_buffer_old_entry():
    buffer = SequenceBuffer(8)
    buffer.insert(8, "stub")
    buffer.insert(0, "stub")
    assert not buffer.exists(0)

    buffer.insert(16, "stub")
    assert buffer.exists(16)
    assert len(buffer) == 1


def test_new_sequence_nums_evict_old_ones():
    buffer = SequenceBuffer(2)
    for i in range(3):
        buffer.insert(i, "stub")
        assert buffer.sequence_num == i + 1
    assert not buffer.exists(0)
    assert buffer.exists(1)
    assert buffer.exists(2)
    assert len(buffer) == 2


def test_older_sequence_numbers_arent_inserted():
    buffer = SequenceBuffer(8)
    buffer.insert(10, "stub")
    assert buffer.sequence_num == 11

    assert buffer.insert(2, "stub") is None
    assert not buffer.exists(2)

    buffer.insert(U16_MAX, "stub")
    buffer.insert(0, "stub")
    assert not buffer.exists(U16_MAX)
    assert not buffer.exists(0)
    assert len(buffer) == 1


def test_get_returns_stored_entry():
    buffer = SequenceBuffer(4)
    assert buffer.insert(3, "three") == "three"
    assert buffer.get(3) == "three"
    assert buffer.get(2) is None


def test_default_factory_fills_removed_slots():
    buffer = SequenceBuffer(4, default_factory=list)
    buffer.insert(1, [1])
    buffer.remove(1)
    assert buffer.get(1) is None
    assert len(buffer) == 0


def test_sequence_number_wraps():
    buffer = SequenceBuffer(4)
    buffer.insert(U16_MAX, "last")
    assert buffer.sequence_num == 0
    buffer.insert(0, "first")
    assert buffer.exists(U16_MAX)
    assert buffer.exists(0)


@pytest.mark.parametrize("size", [0, -1, 65536])
def test_invalid_capacity(size):
    with pytest.raises(ValueError):
        SequenceBuffer(size)


def test_reassembly_data_defaults_are_independent():
    first = ReassemblyData()
    second = ReassemblyData(sequence=5, num_fragments_total=3)
    first.fragments_received[0] = True
    first.buffer.extend(b"abc")
    assert second.fragments_received[0] is False
    assert len(second.fragments_received) == 16
    assert second.buffer == bytearray()
    assert second.num_fragments_received == 0


def test_congestion_data_holds_values():
    data = CongestionData(7, 12.5)
    assert data.sequence == 7
    assert data.sending_time == 12.5
    assert CongestionData().sequence == 0