"""Assembly of outgoing packets from headers and a payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lamina.constants import DEFAULT_ORDERING_STREAM, DEFAULT_SEQUENCING_STREAM
from lamina.enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from lamina.headers import (
    AckedPacketHeader,
    ArrangingHeader,
    FragmentHeader,
    StandardHeader,
)

__all__ = ["OutgoingPacketBuilder", "OutgoingPacket"]


@dataclass(frozen=True)
class OutgoingPacket:
    """Header bytes and payload ready to be sent to a remote endpoint."""

    header: bytes
    payload: bytes

    def contents(self) -> bytes:
        """Return the header followed by the payload."""
        return self.header + self.payload


class OutgoingPacketBuilder:
    """Appends headers in call order in front of a payload."""

    def __init__(self, payload: bytes) -> None:
        self._payload = bytes(payload)
        self._header = bytearray()

    def with_fragment_header(
        self, packet_seq: int, fragment_id: int, num_fragments: int
    ) -> OutgoingPacketBuilder:
        """Append a fragment header."""
        self._header += FragmentHeader(packet_seq, fragment_id, num_fragments).encode()
        return self

    def with_default_header(
        self,
        packet_type: PacketType,
        delivery: DeliveryGuarantee,
        ordering: OrderingGuarantee,
    ) -> OutgoingPacketBuilder:
        """Append the standard header."""
        self._header += StandardHeader.create(delivery, ordering, packet_type).encode()
        return self

    def with_acknowledgment_header(
        self, seq_num: int, last_seq: int, bit_field: int
    ) -> OutgoingPacketBuilder:
        """Append an acknowledgment header."""
        self._header += AckedPacketHeader(seq_num, last_seq, bit_field).encode()
        return self

    def with_sequencing_header(
        self, arranging_id: int, stream_id: Optional[int] = None
    ) -> OutgoingPacketBuilder:
        """Append an arranging header on a sequencing stream (default stream if None)."""
        stream = DEFAULT_SEQUENCING_STREAM if stream_id is None else stream_id
        self._header += ArrangingHeader(arranging_id, stream).encode()
        return self

    def with_ordering_header(
        self, arranging_id: int, stream_id: Optional[int] = None
    ) -> OutgoingPacketBuilder:
        """Append an arranging header on an ordering stream (default stream if None)."""
        stream = DEFAULT_ORDERING_STREAM if stream_id is None else stream_id
        self._header += ArrangingHeader(arranging_id, stream).encode()
        return self

    def build(self) -> OutgoingPacket:
        """Return the packet assembled so far."""
        return OutgoingPacket(bytes(self._header), self._payload)