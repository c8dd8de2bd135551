"""CRC16 fingerprint of the protocol version and its validation."""

from functools import lru_cache

from lamina.constants import PROTOCOL_VERSION

__all__ = ["PROTOCOL_VERSION", "crc16_x25", "version_crc16", "is_valid_version"]


def _build_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ 0x8408 if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _build_table()


def crc16_x25(data: bytes) -> int:
    """Return the CRC-16/X-25 checksum of ``data``."""
    crc = 0xFFFF
    for byte in data:
        crc = (crc >> 8) ^ _TABLE[(crc ^ byte) & 0xFF]
    return crc ^ 0xFFFF


@lru_cache(maxsize=None)
def version_crc16() -> int:
    """Return the CRC16 of the current protocol version."""
    return crc16_x25(PROTOCOL_VERSION.encode("ascii"))


def is_valid_version(crc16: int) -> bool:
    """Tell whether ``crc16`` matches the current protocol version."""
    return crc16 == version_crc16()