import dataclasses

import pytest

from laminar.enums import DeliveryGuarantee, OrderingGuarantee
from laminar.packet import ConnectEvent, Packet, PacketEvent, TimeoutEvent

ADDR = ("127.0.0.1", 12345)
PAYLOAD = b"test"


def test_creation_unreliable_packet():
    packet = Packet.unreliable(ADDR, PAYLOAD)
    assert packet.addr == ADDR
    assert packet.payload == PAYLOAD
    assert packet.delivery_guarantee is DeliveryGuarantee.UNRELIABLE
    assert packet.ordering_guarantee == OrderingGuarantee.none()


def test_creation_unreliable_sequenced():
    packet = Packet.unreliable_sequenced(ADDR, PAYLOAD, 1)
    assert packet.addr == ADDR
    assert packet.payload == PAYLOAD
    assert packet.delivery_guarantee is DeliveryGuarantee.UNRELIABLE
    assert packet.ordering_guarantee == OrderingGuarantee.sequenced(1)


def test_creation_reliable():
    packet = Packet.reliable_unordered(ADDR, PAYLOAD)
    assert packet.addr == ADDR
    assert packet.payload == PAYLOAD
    assert packet.delivery_guarantee is DeliveryGuarantee.RELIABLE
    assert packet.ordering_guarantee == OrderingGuarantee.none()


def test_creation_reliable_ordered():
    packet = Packet.reliable_ordered(ADDR, PAYLOAD, 1)
    assert packet.addr == ADDR
    assert packet.payload == PAYLOAD
    assert packet.delivery_guarantee is DeliveryGuarantee.RELIABLE
    assert packet.ordering_guarantee == OrderingGuarantee.ordered(1)


def test_creation_reliable_sequence():
    packet = Packet.reliable_sequenced(ADDR, PAYLOAD, 1)
    assert packet.addr == ADDR
    assert packet.payload == PAYLOAD
    assert packet.delivery_guarantee is DeliveryGuarantee.RELIABLE
    assert packet.ordering_guarantee == OrderingGuarantee.sequenced(1)


def test_default_stream_is_none():
    packet = Packet.reliable_ordered(ADDR, PAYLOAD)
    assert packet.ordering_guarantee.stream_id is None


def test_payload_is_converted_to_bytes():
    packet = Packet.unreliable(ADDR, bytearray([1, 2, 3]))
    assert packet.payload == b"\x01\x02\x03"
    assert isinstance(packet.payload, bytes)


def test_packets_compare_by_value():
    assert Packet.unreliable(ADDR, [0, 1, 2]) == Packet.unreliable(ADDR, b"\x00\x01\x02")
    assert Packet.unreliable(ADDR, PAYLOAD) != Packet.reliable_unordered(ADDR, PAYLOAD)


def test_packet_is_immutable():
    packet = Packet.unreliable(ADDR, PAYLOAD)
    with pytest.raises(dataclasses.FrozenInstanceError):
        packet.payload = b"other"
    assert packet.payload == PAYLOAD
    assert packet == Packet.unreliable(ADDR, PAYLOAD)


def test_events_compare_by_value():
    assert ConnectEvent(ADDR) == ConnectEvent(("127.0.0.1", 12345))
    assert ConnectEvent(ADDR) != TimeoutEvent(ADDR)
    assert PacketEvent(Packet.unreliable(ADDR, PAYLOAD)).packet.payload == PAYLOAD


def test_events_match_by_kind():
    events = [
        ConnectEvent(ADDR),
        PacketEvent(Packet.unreliable(ADDR, b"x")),
        TimeoutEvent(ADDR),
    ]
    kinds = []
    for event in events:
        match event:
            case ConnectEvent(addr=addr):
                kinds.append(("connect", addr))
            case PacketEvent(packet=packet):
                kinds.append(("packet", packet.payload))
            case TimeoutEvent(addr=addr):
                kinds.append(("timeout", addr))
    assert kinds == [("connect", ADDR), ("packet", b"x"), ("timeout", ADDR)]