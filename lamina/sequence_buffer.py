"""Fixed-size ring storage keyed by wrapping 16-bit sequence numbers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from lamina.constants import MAX_FRAGMENTS_DEFAULT
from lamina.enums import SequenceNumber
from lamina.headers import AckedPacketHeader

__all__ = [
    "sequence_greater_than",
    "sequence_less_than",
    "SequenceBuffer",
    "CongestionData",
    "ReassemblyData",
]

_SEQUENCE_SPACE = 1 << 16
_SEQUENCE_MASK = _SEQUENCE_SPACE - 1
_HALF_SPACE = 1 << 15

T = TypeVar("T")


def _check_sequence(value: int) -> None:
    if not 0 <= value <= _SEQUENCE_MASK:
        raise ValueError(f"sequence number out of range: {value}")


def sequence_greater_than(s1: SequenceNumber, s2: SequenceNumber) -> bool:
    """Tell whether ``s1`` is newer than ``s2``, allowing for wrap-around."""
    return (s1 > s2 and s1 - s2 <= _HALF_SPACE) or (s1 < s2 and s2 - s1 > _HALF_SPACE)


def sequence_less_than(s1: SequenceNumber, s2: SequenceNumber) -> bool:
    """Tell whether ``s1`` is older than ``s2``, allowing for wrap-around."""
    return sequence_greater_than(s2, s1)


class SequenceBuffer(Generic[T]):
    """Stores entries under sequence numbers, evicting ones that fall too far behind."""

    def __init__(self, capacity: int) -> None:
        if not 0 < capacity <= _SEQUENCE_MASK:
            raise ValueError(f"capacity out of range: {capacity}")
        self._sequence_num: SequenceNumber = 0
        self._entry_sequences: List[Optional[SequenceNumber]] = [None] * capacity
        self._entries: List[Optional[T]] = [None] * capacity

    @property
    def capacity(self) -> int:
        """Number of slots in the buffer."""
        return len(self._entries)

    @property
    def sequence_num(self) -> SequenceNumber:
        """One past the most recently stored sequence number."""
        return self._sequence_num

    def __len__(self) -> int:
        return sum(1 for seq in self._entry_sequences if seq is not None)

    def __contains__(self, sequence_num: object) -> bool:
        return isinstance(sequence_num, int) and self.exists(sequence_num)

    def _index(self, sequence_num: SequenceNumber) -> int:
        return sequence_num % len(self._entries)

    def get(self, sequence_num: SequenceNumber) -> Optional[T]:
        """Return the entry stored under ``sequence_num``, or None."""
        if self.exists(sequence_num):
            return self._entries[self._index(sequence_num)]
        return None

    def insert(self, sequence_num: SequenceNumber, entry: T) -> Optional[T]:
        """Store ``entry`` and return it; return None if the number is too old."""
        _check_sequence(sequence_num)
        oldest = (self._sequence_num - len(self._entries)) & _SEQUENCE_MASK
        if sequence_less_than(sequence_num, oldest):
            return None
        self._advance_sequence(sequence_num)
        index = self._index(sequence_num)
        self._entry_sequences[index] = sequence_num
        self._entries[index] = entry
        return entry

    def exists(self, sequence_num: SequenceNumber) -> bool:
        """Tell whether an entry is stored under ``sequence_num``."""
        _check_sequence(sequence_num)
        return self._entry_sequences[self._index(sequence_num)] == sequence_num

    def remove(self, sequence_num: SequenceNumber) -> Optional[T]:
        """Remove and return the entry under ``sequence_num``, or None."""
        if not self.exists(sequence_num):
            return None
        index = self._index(sequence_num)
        value = self._entries[index]
        self._entries[index] = None
        self._entry_sequences[index] = None
        return value

    def _advance_sequence(self, sequence_num: SequenceNumber) -> None:
        following = (sequence_num + 1) & _SEQUENCE_MASK
        if sequence_greater_than(following, self._sequence_num):
            self._remove_entries(sequence_num)
            self._sequence_num = following

    def _remove_entries(self, finish_sequence: int) -> None:
        start_sequence = self._sequence_num
        if finish_sequence < start_sequence:
            finish_sequence += _SEQUENCE_SPACE
        if finish_sequence - start_sequence < len(self._entries):
            for sequence in range(start_sequence, finish_sequence + 1):
                self.remove(sequence & _SEQUENCE_MASK)
        else:
            self._entries = [None] * len(self._entries)
            self._entry_sequences = [None] * len(self._entry_sequences)


@dataclass
class CongestionData:
    """When a packet with a given sequence number was sent."""

    sequence: SequenceNumber = 0
    sending_time: float = field(default_factory=time.monotonic)


@dataclass
class ReassemblyData:
    """State needed to reassemble the fragments of one packet."""

    sequence: SequenceNumber = 0
    num_fragments_total: int = 0
    num_fragments_received: int = 0
    buffer: bytearray = field(default_factory=bytearray)
    fragments_received: List[bool] = field(
        default_factory=lambda: [False] * MAX_FRAGMENTS_DEFAULT
    )
    acked_header: Optional[AckedPacketHeader] = None