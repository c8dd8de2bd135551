"""Events delivered to the user by a socket."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from lamina.packet import Packet

__all__ = ["PacketReceived", "Connected", "TimedOut", "SocketEvent"]

Address = Tuple[str, int]


@dataclass(frozen=True)
class PacketReceived:
    """A packet was received from a client."""

    packet: Packet

    @property
    def address(self) -> Address:
        """The address the packet came from."""
        return self.packet.addr


@dataclass(frozen=True)
class Connected:
    """A new client connected, identified by its ip and port."""

    address: Address


@dataclass(frozen=True)
class TimedOut:
    """The client has been idle for longer than the configured timeout."""

    address: Address


SocketEvent = Union[PacketReceived, Connected, TimedOut]