"""Wire protocol constants and protocol version checks."""

from __future__ import annotations

from typing import TypeAlias

SequenceNumber: TypeAlias = int
"""A 16-bit wrapping sequence number."""

FRAGMENT_HEADER_SIZE = 4
"""The size of the fragment header."""
ACKED_PACKET_HEADER = 8
"""The size of the acknowledgment header."""
ARRANGING_PACKET_HEADER = 3
"""The size of the arranging header."""
STANDARD_HEADER_SIZE = 5
"""The size of the standard header."""
DEFAULT_ORDERING_STREAM = 255
"""Stream used for ordering when none is given."""
DEFAULT_SEQUENCING_STREAM = 255
"""Stream used for sequencing when none is given."""
MAX_FRAGMENTS_DEFAULT = 16
"""Default maximum number of fragments per packet."""
FRAGMENT_SIZE_DEFAULT = 1024
"""Default maximum size of each fragment."""
DEFAULT_MTU = 1452
"""Maximum transmission unit of the payload (1500 - 40 - 8 - 8)."""
PROTOCOL_VERSION = "laminar-0.1.0"
"""The current protocol version, hashed into every packet header."""


def crc16_x25(data: bytes) -> int:
    """Return the CRC-16/X-25 checksum of ``data``."""
    crc = 0xFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ 0x8408
            else:
                crc >>= 1
    return crc ^ 0xFFFF


_VERSION_CRC16 = crc16_x25(PROTOCOL_VERSION.encode("utf-8"))


def protocol_crc16() -> int:
    """Return the CRC16 of the current protocol version."""
    return _VERSION_CRC16


def is_valid_version(protocol_version_crc16: int) -> bool:
    """Return whether ``protocol_version_crc16`` matches the current protocol version."""
    return protocol_version_crc16 == _VERSION_CRC16