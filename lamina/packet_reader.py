"""Reading of headers and payload from a received datagram."""

from __future__ import annotations

import io
from typing import Optional, Tuple

from lamina.constants import STANDARD_HEADER_SIZE
from lamina.errors import HeaderReadError
from lamina.headers import (
    AckedPacketHeader,
    ArrangingHeader,
    FragmentHeader,
    StandardHeader,
)

__all__ = ["PacketReader"]


class PacketReader:
    """Reads the headers and payload of a packet.

    The reader knows where each header sits in the buffer, so callers need
    not track the read position themselves, except for fragments and the
    payload, which continue from where the last read ended.
    """

    def __init__(self, buffer: bytes) -> None:
        self._buffer = bytes(buffer)
        self._stream = io.BytesIO(self._buffer)

    @property
    def position(self) -> int:
        """Current read position in the buffer."""
        return self._stream.tell()

    def can_read(self, length: int) -> bool:
        """Tell whether ``length`` more bytes are available."""
        return len(self._buffer) - self.position >= length

    def read_standard_header(self) -> StandardHeader:
        """Read the standard header at the start of the buffer."""
        self._stream.seek(0)
        if not self.can_read(StandardHeader.SIZE):
            raise HeaderReadError("standard")
        return StandardHeader.read(self._stream)

    def read_arranging_header(self, start_offset: int) -> ArrangingHeader:
        """Read the arranging header starting at ``start_offset``."""
        self._stream.seek(start_offset)
        if not self.can_read(ArrangingHeader.SIZE):
            raise HeaderReadError("arranging")
        return ArrangingHeader.read(self._stream)

    def read_acknowledge_header(self) -> AckedPacketHeader:
        """Read the acknowledgment header that follows the standard header."""
        self._stream.seek(STANDARD_HEADER_SIZE)
        if not self.can_read(AckedPacketHeader.SIZE):
            raise HeaderReadError("acknowledgment")
        return AckedPacketHeader.read(self._stream)

    def read_fragment(self) -> Tuple[FragmentHeader, Optional[AckedPacketHeader]]:
        """Read a fragment header from the current position.

        Only the first fragment of a packet carries acknowledgment data, so
        the acknowledgment header is returned for fragment id 0 only.
        """
        if not self.can_read(FragmentHeader.SIZE):
            raise HeaderReadError("fragment")
        fragment_header = FragmentHeader.read(self._stream)
        acked_header = (
            AckedPacketHeader.read(self._stream)
            if fragment_header.fragment_id == 0
            else None
        )
        return fragment_header, acked_header

    def read_payload(self) -> bytes:
        """Return every byte from the current position to the end."""
        return self._buffer[self.position:]