"""An in-memory datagram network for exercising sockets without I/O."""

from __future__ import annotations

import errno
from collections import deque
from typing import Deque, Dict, Optional, Tuple

from lamina.link_conditioner import LinkConditioner

__all__ = ["NetworkEmulator", "EmulatedSocket"]

Address = Tuple[str, int]
_Inbox = Deque[Tuple[Address, bytes]]


class NetworkEmulator:
    """Shared state of all sockets bound through the same emulator."""

    def __init__(self) -> None:
        self._bindings: Dict[Address, _Inbox] = {}

    def new_socket(self, address: Address) -> EmulatedSocket:
        """Bind a socket to ``address``.

        Raises ``OSError`` with ``EADDRINUSE`` if the address is taken.
        """
        if address in self._bindings:
            raise OSError(errno.EADDRINUSE, "Cannot bind to address")
        self._bindings[address] = deque()
        return EmulatedSocket(self._bindings, address)

    def clear_packets(self, address: Address) -> None:
        """Drop every packet waiting for the socket bound to ``address``."""
        inbox = self._bindings.get(address)
        if inbox is not None:
            inbox.clear()


class EmulatedSocket:
    """A non-blocking datagram socket living inside a ``NetworkEmulator``."""

    def __init__(
        self,
        bindings: Dict[Address, _Inbox],
        address: Address,
        conditioner: Optional[LinkConditioner] = None,
    ) -> None:
        self._bindings = bindings
        self._address = address
        self.conditioner = conditioner

    def __repr__(self) -> str:
        return f"EmulatedSocket({self._address!r})"

    def send_packet(self, address: Address, payload: bytes) -> int:
        """Deliver ``payload`` to ``address`` and return the bytes sent.

        Packets to unbound addresses vanish; packets dropped by the
        conditioner count as zero bytes sent.
        """
        if self.conditioner is not None and not self.conditioner.should_send():
            return 0
        inbox = self._bindings.get(address)
        if inbox is not None:
            inbox.append((self._address, bytes(payload)))
        return len(payload)

    def receive_packet(self) -> Tuple[bytes, Address]:
        """Return the oldest waiting payload and its sender.

        Raises ``BlockingIOError`` when nothing is waiting.
        """
        inbox = self._bindings[self._address]
        if not inbox:
            raise BlockingIOError(errno.EWOULDBLOCK, "no packet available")
        sender, payload = inbox.popleft()
        return payload, sender

    def local_addr(self) -> Address:
        """Return the address this socket is bound to."""
        return self._address

    def is_blocking_mode(self) -> bool:
        """Emulated sockets never block."""
        return False