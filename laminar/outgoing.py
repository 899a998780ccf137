"""Building the bytes of packets that are ready to be sent."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from .headers import AckedPacketHeader, ArrangingHeader, FragmentHeader, StandardHeader
from .protocol import DEFAULT_ORDERING_STREAM, DEFAULT_SEQUENCING_STREAM

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
        self._header = bytearray()
        self._payload = bytes(payload)

    def with_fragment_header(
        self, packet_seq: int, fragment_id: int, num_fragments: int
    ) -> OutgoingPacketBuilder:
        """Append a fragment header."""
        self._header += FragmentHeader(packet_seq, fragment_id, num_fragments).to_bytes()
        return self

    def with_default_header(
        self,
        packet_type: PacketType,
        delivery_guarantee: DeliveryGuarantee,
        ordering_guarantee: OrderingGuarantee,
    ) -> OutgoingPacketBuilder:
        """Append the standard header."""
        header = StandardHeader(delivery_guarantee, ordering_guarantee, packet_type)
        self._header += header.to_bytes()
        return self

    def with_acknowledgment_header(
        self, seq_num: int, last_seq: int, bit_field: int
    ) -> OutgoingPacketBuilder:
        """Append an acknowledgment header."""
        self._header += AckedPacketHeader(seq_num, last_seq, bit_field).to_bytes()
        return self

    def with_sequencing_header(
        self, arranging_id: int, stream_id: int | None = None
    ) -> OutgoingPacketBuilder:
        """Append an arranging header for sequencing, on the default stream if none is given."""
        stream = DEFAULT_SEQUENCING_STREAM if stream_id is None else stream_id
        self._header += ArrangingHeader(arranging_id, stream).to_bytes()
        return self

    def with_ordering_header(
        self, arranging_id: int, stream_id: int | None = None
    ) -> OutgoingPacketBuilder:
        """Append an arranging header for ordering, on the default stream if none is given."""
        stream = DEFAULT_ORDERING_STREAM if stream_id is None else stream_id
        self._header += ArrangingHeader(arranging_id, stream).to_bytes()
        return self

    def build(self) -> OutgoingPacket:
        """Return the packet built so far."""
        return OutgoingPacket(bytes(self._header), self._payload)