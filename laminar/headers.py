"""Fixed-size packet headers and their big-endian wire encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import BinaryIO, ClassVar

from .enums import DeliveryGuarantee, LaminarError, OrderingGuarantee, PacketType
from .protocol import (
    ACKED_PACKET_HEADER,
    ARRANGING_PACKET_HEADER,
    FRAGMENT_HEADER_SIZE,
    STANDARD_HEADER_SIZE,
    SequenceNumber,
    is_valid_version,
    protocol_crc16,
)

__all__ = [
    "TruncatedHeaderError",
    "AckedPacketHeader",
    "ArrangingHeader",
    "FragmentHeader",
    "StandardHeader",
]


class TruncatedHeaderError(LaminarError):
    """The stream ended before a whole header could be read."""

    def __init__(self, header: str, expected: int, available: int) -> None:
        super().__init__(
            f"{header} header needs {expected} bytes, only {available} available"
        )
        self.header = header
        self.expected = expected
        self.available = available


def _read_exact(stream: BinaryIO, size: int, header: str) -> bytes:
    data = stream.read(size)
    if len(data) < size:
        raise TruncatedHeaderError(header, size, len(data))
    return data


@dataclass(frozen=True)
class AckedPacketHeader:
    """Reliability information: own sequence, last acked sequence and a 32-bit ack field."""

    sequence: SequenceNumber
    ack_seq: SequenceNumber
    ack_field: int

    SIZE: ClassVar[int] = ACKED_PACKET_HEADER
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HHI")

    def to_bytes(self) -> bytes:
        """Encode the header."""
        return self._FORMAT.pack(self.sequence, self.ack_seq, self.ack_field)

    @classmethod
    def read(cls, stream: BinaryIO) -> AckedPacketHeader:
        """Read the header from the current position of ``stream``."""
        data = _read_exact(stream, cls.SIZE, "acknowledgment")
        return cls(*cls._FORMAT.unpack(data))


@dataclass(frozen=True)
class ArrangingHeader:
    """Identifies a packet's position within a sequencing or ordering stream."""

    arranging_id: SequenceNumber
    stream_id: int

    SIZE: ClassVar[int] = ARRANGING_PACKET_HEADER
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HB")

    def to_bytes(self) -> bytes:
        """Encode the header."""
        return self._FORMAT.pack(self.arranging_id, self.stream_id)

    @classmethod
    def read(cls, stream: BinaryIO) -> ArrangingHeader:
        """Read the header from the current position of ``stream``."""
        data = _read_exact(stream, cls.SIZE, "arranging")
        return cls(*cls._FORMAT.unpack(data))


@dataclass(frozen=True)
class FragmentHeader:
    """Identifies one fragment of a larger packet."""

    sequence: SequenceNumber
    fragment_id: int
    fragment_count: int

    SIZE: ClassVar[int] = FRAGMENT_HEADER_SIZE
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HBB")

    def to_bytes(self) -> bytes:
        """Encode the header."""
        return self._FORMAT.pack(self.sequence, self.fragment_id, self.fragment_count)

    @classmethod
    def read(cls, stream: BinaryIO) -> FragmentHeader:
        """Read the header from the current position of ``stream``."""
        data = _read_exact(stream, cls.SIZE, "fragment")
        return cls(*cls._FORMAT.unpack(data))


@dataclass(frozen=True)
class StandardHeader:
    """Header carried by every packet: protocol version, type and guarantees."""

    delivery_guarantee: DeliveryGuarantee = DeliveryGuarantee.UNRELIABLE
    ordering_guarantee: OrderingGuarantee = field(default_factory=OrderingGuarantee.none)
    packet_type: PacketType = PacketType.PACKET
    protocol_version: int = field(default_factory=protocol_crc16)

    SIZE: ClassVar[int] = STANDARD_HEADER_SIZE
    _FORMAT: ClassVar[struct.Struct] = struct.Struct(">HBBB")

    def to_bytes(self) -> bytes:
        """Encode the header."""
        return self._FORMAT.pack(
            self.protocol_version,
            self.packet_type.to_u8(),
            self.delivery_guarantee.to_u8(),
            self.ordering_guarantee.to_u8(),
        )

    @classmethod
    def read(cls, stream: BinaryIO) -> StandardHeader:
        """Read the header; raises DecodingError for unknown enumeration values."""
        data = _read_exact(stream, cls.SIZE, "standard")
        version, packet_id, delivery_id, ordering_id = cls._FORMAT.unpack(data)
        return cls(
            delivery_guarantee=DeliveryGuarantee.from_u8(delivery_id),
            ordering_guarantee=OrderingGuarantee.from_u8(ordering_id),
            packet_type=PacketType.from_u8(packet_id),
            protocol_version=version,
        )

    def is_fragment(self) -> bool:
        """Return whether the packet is a fragment."""
        return self.packet_type is PacketType.FRAGMENT

    def is_current_protocol(self) -> bool:
        """Return whether the packet carries the current protocol version."""
        return is_valid_version(self.protocol_version)