"""Delivery, ordering and packet type identifiers used in packet headers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from lamina.errors import DecodingError

SequenceNumber = int
"""A 16-bit wrapping sequence number."""


class DeliveryGuarantee(IntEnum):
    """How a packet should be delivered."""

    UNRELIABLE = 0
    RELIABLE = 1

    @classmethod
    def from_code(cls, value: int) -> DeliveryGuarantee:
        """Decode the wire value of a delivery guarantee."""
        try:
            return cls(value)
        except ValueError:
            raise DecodingError("delivery guarantee") from None


class PacketType(IntEnum):
    """Identifies what kind of packet is on the wire."""

    PACKET = 0
    FRAGMENT = 1
    HEARTBEAT = 2

    @classmethod
    def from_code(cls, value: int) -> PacketType:
        """Decode the wire value of a packet type."""
        try:
            return cls(value)
        except ValueError:
            raise DecodingError("packet type") from None


class OrderingKind(IntEnum):
    """The arranging strategy, as encoded on the wire."""

    NONE = 0
    SEQUENCED = 1
    ORDERED = 2


@dataclass(frozen=True)
class OrderingGuarantee:
    """How a packet should be arranged, optionally on a given stream."""

    kind: OrderingKind = OrderingKind.NONE
    stream_id: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", OrderingKind(self.kind))
        if self.stream_id is not None:
            if self.kind is OrderingKind.NONE:
                raise ValueError("an unarranged guarantee carries no stream")
            if not 0 <= self.stream_id <= 0xFF:
                raise ValueError(f"stream id out of range: {self.stream_id}")

    @classmethod
    def none(cls) -> OrderingGuarantee:
        """No arranging."""
        return cls(OrderingKind.NONE)

    @classmethod
    def sequenced(cls, stream_id: Optional[int] = None) -> OrderingGuarantee:
        """Arrange packets in sequence, dropping older ones."""
        return cls(OrderingKind.SEQUENCED, stream_id)

    @classmethod
    def ordered(cls, stream_id: Optional[int] = None) -> OrderingGuarantee:
        """Arrange packets in order."""
        return cls(OrderingKind.ORDERED, stream_id)

    @classmethod
    def from_code(cls, value: int) -> OrderingGuarantee:
        """Decode the wire value of an ordering guarantee; no stream is set."""
        try:
            return cls(OrderingKind(value))
        except ValueError:
            raise DecodingError("ordering guarantee") from None

    def code(self) -> int:
        """Return the wire value of this guarantee."""
        return int(self.kind)