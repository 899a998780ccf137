"""A fixed-capacity ring buffer indexed by 16-bit wrapping sequence numbers."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from .protocol import MAX_FRAGMENTS_DEFAULT, SequenceNumber

T = TypeVar("T")

_SEQUENCE_MOD = 65536
_HALF = 32768


def sequence_greater_than(s1: int, s2: int) -> bool:
    """Return whether ``s1`` is newer than ``s2``, accounting for wrap-around."""
    return (s1 > s2 and s1 - s2 <= _HALF) or (s1 < s2 and s2 - s1 > _HALF)


def sequence_less_than(s1: int, s2: int) -> bool:
    """Return whether ``s1`` is older than ``s2``, accounting for wrap-around."""
    return sequence_greater_than(s2, s1)


class SequenceBuffer(Generic[T]):
    """Stores entries keyed by sequence number, evicting entries that fall too far behind."""

    def __init__(self, size: int, default_factory: Callable[[], T] | None = None) -> None:
        if not 0 < size < _SEQUENCE_MOD:
            raise ValueError(f"capacity must be between 1 and 65535, got {size}")
        self._sequence_num = 0
        self._default_factory = default_factory
        self._entry_sequences: list[int | None] = [None] * size
        self._entries: list[T | None] = [self._blank() for _ in range(size)]

    def _blank(self) -> T | None:
        return self._default_factory() if self._default_factory else None

    @property
    def capacity(self) -> int:
        """The number of slots in the buffer."""
        return len(self._entry_sequences)

    @property
    def sequence_num(self) -> SequenceNumber:
        """One past the most recently stored sequence number."""
        return self._sequence_num

    def get(self, sequence_num: SequenceNumber) -> T | None:
        """Return the entry stored for ``sequence_num``, or None."""
        if self.exists(sequence_num):
            return self._entries[self._index(sequence_num)]
        return None

    def insert(self, sequence_num: SequenceNumber, entry: T) -> T | None:
        """Store ``entry``; return it, or None if ``sequence_num`` is too old."""
        oldest = (self._sequence_num - self.capacity) % _SEQUENCE_MOD
        if sequence_less_than(sequence_num, oldest):
            return None
        self._advance_sequence(sequence_num)
        index = self._index(sequence_num)
        self._entry_sequences[index] = sequence_num
        self._entries[index] = entry
        return entry

    def exists(self, sequence_num: SequenceNumber) -> bool:
        """Return whether an entry is stored for ``sequence_num``."""
        return self._entry_sequences[self._index(sequence_num)] == sequence_num

    def __contains__(self, sequence_num: object) -> bool:
        return isinstance(sequence_num, int) and self.exists(sequence_num)

    def remove(self, sequence_num: SequenceNumber) -> None:
        """Remove the entry for ``sequence_num`` if present."""
        if self.exists(sequence_num):
            index = self._index(sequence_num)
            self._entries[index] = self._blank()
            self._entry_sequences[index] = None

    def __len__(self) -> int:
        return sum(seq is not None for seq in self._entry_sequences)

    def _advance_sequence(self, sequence_num: SequenceNumber) -> None:
        following = (sequence_num + 1) % _SEQUENCE_MOD
        if sequence_greater_than(following, self._sequence_num):
            self._remove_entries(sequence_num)
            self._sequence_num = following

    def _remove_entries(self, finish: int) -> None:
        start = self._sequence_num
        if finish < start:
            finish += _SEQUENCE_MOD
        if finish - start < self.capacity:
            for sequence in range(start, finish + 1):
                self.remove(sequence % _SEQUENCE_MOD)
        else:
            self._entry_sequences = [None] * self.capacity
            self._entries = [self._blank() for _ in range(self.capacity)]

    def _index(self, sequence: SequenceNumber) -> int:
        return sequence % self.capacity


@dataclass
class CongestionData:
    """A sent packet's sequence number and the time it was sent."""

    sequence: SequenceNumber = 0
    sending_time: float = field(default_factory=time.monotonic)


@dataclass
class ReassemblyData:
    """State needed to reassemble the fragments of one packet."""

    sequence: SequenceNumber = 0
    num_fragments_total: int = 0
    num_fragments_received: int = 0
    buffer: bytearray = field(default_factory=bytearray)
    fragments_received: list[bool] = field(
        default_factory=lambda: [False] * MAX_FRAGMENTS_DEFAULT
    )