"""Binary headers that precede the payload of every packet."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, ClassVar

from lamina.constants import (
    ACKED_PACKET_HEADER,
    ARRANGING_PACKET_HEADER,
    FRAGMENT_HEADER_SIZE,
    STANDARD_HEADER_SIZE,
)
from lamina.enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from lamina.errors import HeaderReadError
from lamina.protocol_version import is_valid_version, version_crc16

__all__ = [
    "StandardHeader",
    "AckedPacketHeader",
    "ArrangingHeader",
    "FragmentHeader",
]

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def _check_range(name: str, value: int, limit: int) -> None:
    if not 0 <= value <= limit:
        raise ValueError(f"{name} out of range: {value}")


def _read_exact(stream: BinaryIO, size: int, header: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise HeaderReadError(header)
    return data


@dataclass(frozen=True)
class StandardHeader:
    """Basic information included in every packet."""

    SIZE: ClassVar[int] = STANDARD_HEADER_SIZE
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HBBB")

    protocol_version: int
    packet_type: PacketType
    delivery: DeliveryGuarantee
    ordering: OrderingGuarantee = field(default_factory=OrderingGuarantee.none)

    def __post_init__(self) -> None:
        _check_range("protocol version", self.protocol_version, _U16)

    @classmethod
    def create(
        cls,
        delivery: DeliveryGuarantee = DeliveryGuarantee.UNRELIABLE,
        ordering: OrderingGuarantee | None = None,
        packet_type: PacketType = PacketType.PACKET,
    ) -> StandardHeader:
        """Build a header stamped with the current protocol version."""
        if ordering is None:
            ordering = OrderingGuarantee.none()
        return cls(version_crc16(), packet_type, delivery, ordering)

    def encode(self) -> bytes:
        """Serialize this header to its wire form."""
        return self._FORMAT.pack(
            self.protocol_version,
            int(self.packet_type),
            int(self.delivery),
            self.ordering.code(),
        )

    @classmethod
    def read(cls, stream: BinaryIO) -> StandardHeader:
        """Read a header from a binary stream."""
        data = _read_exact(stream, cls.SIZE, "standard")
        version, packet_id, delivery_id, ordering_id = cls._FORMAT.unpack(data)
        return cls(
            version,
            PacketType.from_code(packet_id),
            DeliveryGuarantee.from_code(delivery_id),
            OrderingGuarantee.from_code(ordering_id),
        )

    def is_heartbeat(self) -> bool:
        """Tell whether this is a heartbeat packet."""
        return self.packet_type is PacketType.HEARTBEAT

    def is_fragment(self) -> bool:
        """Tell whether this is a fragment of a larger packet."""
        return self.packet_type is PacketType.FRAGMENT

    def is_current_protocol(self) -> bool:
        """Tell whether the packet was written with the current protocol."""
        return is_valid_version(self.protocol_version)


@dataclass(frozen=True)
class AckedPacketHeader:
    """Reliability information: own sequence, last acked and ack bitfield.

    Bit ``n`` of ``ack_field`` is set when ``ack_seq - n`` was received.
    """

    SIZE: ClassVar[int] = ACKED_PACKET_HEADER
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HHI")

    sequence: int
    ack_seq: int
    ack_field: int

    def __post_init__(self) -> None:
        _check_range("sequence", self.sequence, _U16)
        _check_range("ack sequence", self.ack_seq, _U16)
        _check_range("ack field", self.ack_field, _U32)

    def encode(self) -> bytes:
        """Serialize this header to its wire form."""
        return self._FORMAT.pack(self.sequence, self.ack_seq, self.ack_field)

    @classmethod
    def read(cls, stream: BinaryIO) -> AckedPacketHeader:
        """Read a header from a binary stream."""
        data = _read_exact(stream, cls.SIZE, "acknowledgment")
        return cls(*cls._FORMAT.unpack(data))


@dataclass(frozen=True)
class ArrangingHeader:
    """Identifier and stream used to order or sequence a packet."""

    SIZE: ClassVar[int] = ARRANGING_PACKET_HEADER
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HB")

    arranging_id: int
    stream_id: int

    def __post_init__(self) -> None:
        _check_range("arranging id", self.arranging_id, _U16)
        _check_range("stream id", self.stream_id, _U8)

    def encode(self) -> bytes:
        """Serialize this header to its wire form."""
        return self._FORMAT.pack(self.arranging_id, self.stream_id)

    @classmethod
    def read(cls, stream: BinaryIO) -> ArrangingHeader:
        """Read a header from a binary stream."""
        data = _read_exact(stream, cls.SIZE, "arranging")
        return cls(*cls._FORMAT.unpack(data))


@dataclass(frozen=True)
class FragmentHeader:
    """Position of a fragment within a fragmented packet."""

    SIZE: ClassVar[int] = FRAGMENT_HEADER_SIZE
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HBB")

    sequence: int
    fragment_id: int
    fragment_count: int

    def __post_init__(self) -> None:
        _check_range("sequence", self.sequence, _U16)
        _check_range("fragment id", self.fragment_id, _U8)
        _check_range("fragment count", self.fragment_count, _U8)

    def encode(self) -> bytes:
        """Serialize this header to its wire form."""
        return self._FORMAT.pack(self.sequence, self.fragment_id, self.fragment_count)

    @classmethod
    def read(cls, stream: BinaryIO) -> FragmentHeader:
        """Read a header from a binary stream."""
        data = _read_exact(stream, cls.SIZE, "fragment")
        return cls(*cls._FORMAT.unpack(data))