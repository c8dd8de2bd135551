"""User-facing packets with their delivery and ordering guarantees."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from lamina.enums import DeliveryGuarantee, OrderingGuarantee, PacketType

Address = Tuple[str, int]


@dataclass(frozen=True)
class Packet:
    """A payload together with its remote endpoint and guarantees.

    ``addr`` is the sender for received packets and the destination for
    packets about to be sent.
    """

    addr: Address
    payload: bytes
    delivery: DeliveryGuarantee
    ordering: OrderingGuarantee = field(default_factory=OrderingGuarantee.none)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def unreliable(cls, addr: Address, payload: bytes) -> Packet:
        """Bare datagram: may be dropped, duplicated or reordered."""
        return cls(addr, payload, DeliveryGuarantee.UNRELIABLE, OrderingGuarantee.none())

    @classmethod
    def unreliable_sequenced(
        cls, addr: Address, payload: bytes, stream_id: Optional[int] = None
    ) -> Packet:
        """May be dropped, but only the newest packets are let through."""
        return cls(
            addr,
            payload,
            DeliveryGuarantee.UNRELIABLE,
            OrderingGuarantee.sequenced(stream_id),
        )

    @classmethod
    def reliable_unordered(cls, addr: Address, payload: bytes) -> Packet:
        """Always delivered, in no particular order."""
        return cls(addr, payload, DeliveryGuarantee.RELIABLE, OrderingGuarantee.none())

    @classmethod
    def reliable_ordered(
        cls, addr: Address, payload: bytes, stream_id: Optional[int] = None
    ) -> Packet:
        """Always delivered, in the order sent on the stream."""
        return cls(
            addr,
            payload,
            DeliveryGuarantee.RELIABLE,
            OrderingGuarantee.ordered(stream_id),
        )

    @classmethod
    def reliable_sequenced(
        cls, addr: Address, payload: bytes, stream_id: Optional[int] = None
    ) -> Packet:
        """Always received, but only the newest reaches the user."""
        return cls(
            addr,
            payload,
            DeliveryGuarantee.RELIABLE,
            OrderingGuarantee.sequenced(stream_id),
        )


@dataclass(frozen=True)
class PacketInfo:
    """An unaddressed packet description, carrying its packet type."""

    packet_type: PacketType
    payload: bytes
    delivery: DeliveryGuarantee
    ordering: OrderingGuarantee

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def user_packet(
        cls,
        payload: bytes,
        delivery: DeliveryGuarantee,
        ordering: OrderingGuarantee,
    ) -> PacketInfo:
        """A packet that is handed to the user on arrival."""
        return cls(PacketType.PACKET, payload, delivery, ordering)

    @classmethod
    def heartbeat_packet(cls, payload: bytes = b"") -> PacketInfo:
        """An unreliable, unordered heartbeat packet."""
        return cls(
            PacketType.HEARTBEAT,
            payload,
            DeliveryGuarantee.UNRELIABLE,
            OrderingGuarantee.none(),
        )