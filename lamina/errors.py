"""Exceptions raised while encoding and decoding packets."""


class ProtocolError(Exception):
    """Base class for errors in the packet protocol."""


class DecodingError(ProtocolError):
    """A header field held a value that does not map to a known variant."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"could not decode {field}")


class HeaderReadError(ProtocolError):
    """A header could not be read because the buffer was too short."""

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(f"could not read {header} header")