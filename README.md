# laminar

Building blocks for a semi-reliable protocol on top of UDP:

- the wire format of packet headers, and a builder and a reader for it;
- delivery and ordering guarantees and their one-byte encodings;
- 16-bit sequence numbers that wrap, with a ring buffer indexed by them;
- user-facing packets and socket event types;
- a throughput monitor and a link conditioner that simulates packet loss.

There are no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Packets and events

`laminar.packet.Packet` is a frozen dataclass holding an address (a
`(host, port)` tuple), a payload as `bytes`, a `DeliveryGuarantee` and an
`OrderingGuarantee`. Its class methods cover the usual combinations:

```python
from laminar.packet import Packet

addr = ("127.0.0.1", 12345)

Packet.unreliable(addr, b"hello")
Packet.unreliable_sequenced(addr, b"position", 1)
Packet.reliable_unordered(addr, b"chat message")
Packet.reliable_ordered(addr, b"inventory change", None)
Packet.reliable_sequenced(addr, b"state", None)
```

A stream id of `None` means the default stream (255 on the wire).

The same module defines the event types `PacketEvent(packet)`,
`ConnectEvent(addr)` and `TimeoutEvent(addr)`, and the alias
`SocketEvent` for any of them.

## Guarantees and packet types

`laminar.enums` provides:

- `DeliveryGuarantee.UNRELIABLE` / `RELIABLE` (wire values 0 and 1);
- `OrderingGuarantee`, a dataclass of an `OrderingKind` (`NONE`,
  `SEQUENCED`, `ORDERED`, wire values 0 to 2) and an optional stream id
  from 0 to 255, built with `OrderingGuarantee.none()`,
  `.sequenced(stream_id)` and `.ordered(stream_id)`;
- `PacketType.PACKET` / `FRAGMENT` (wire values 0 and 1).

Each has `to_u8()` and `from_u8(value)`. Decoding an ordering guarantee
leaves the stream id unset, since it is not part of that byte. An unknown
value raises `DecodingError`.

## Headers

`laminar.headers` has four frozen dataclasses, each with a `SIZE`,
`to_bytes()` and a class method `read(stream)` that reads from a binary
stream such as `io.BytesIO`. All integers are big-endian.

| Header              | Size | Fields                                              |
| ------------------- | ---- | --------------------------------------------------- |
| `StandardHeader`    | 5    | protocol version (u16), packet type, delivery, ordering |
| `AckedPacketHeader` | 8    | `sequence` (u16), `ack_seq` (u16), `ack_field` (u32) |
| `ArrangingHeader`   | 3    | `arranging_id` (u16), `stream_id` (u8)              |
| `FragmentHeader`    | 4    | `sequence` (u16), `fragment_id` (u8), `fragment_count` (u8) |

`StandardHeader` fills in the current protocol version by default and has
`is_fragment()` and `is_current_protocol()`. A stream that ends too early
raises `TruncatedHeaderError`.

The protocol version is the CRC-16/X-25 checksum of the string
`"laminar-0.1.0"`. `laminar.protocol` exposes `crc16_x25(data)`,
`protocol_crc16()` and `is_valid_version(crc)`, along with the header
sizes and other protocol constants.

## Building outgoing packets

`OutgoingPacketBuilder` appends headers, in the order its methods are
called, in front of a payload:

```python
from laminar.enums import DeliveryGuarantee, OrderingGuarantee, PacketType
from laminar.outgoing import OutgoingPacketBuilder

packet = (
    OutgoingPacketBuilder(b"payload")
    .with_default_header(
        PacketType.PACKET,
        DeliveryGuarantee.RELIABLE,
        OrderingGuarantee.ordered(None),
    )
    .with_acknowledgment_header(1, 0, 0)
    .with_ordering_header(0, None)
    .build()
)
wire_bytes = packet.contents()
```

`with_fragment_header(packet_seq, fragment_id, num_fragments)` and
`with_sequencing_header(arranging_id, stream_id)` are also available.

## Reading incoming packets

```python
from laminar.reader import PacketReader

reader = PacketReader(wire_bytes)
header = reader.read_standard_header()
if header.is_current_protocol():
    acked = reader.read_acknowledge_header()
    arranging = reader.read_arranging_header(5 + 8)
    payload = reader.read_payload()
```

`read_standard_header`, `read_acknowledge_header` and
`read_arranging_header(start_offset)` read from fixed offsets.
`read_fragment()` and `read_payload()` continue from wherever the previous
read stopped. `read_fragment()` returns the fragment header and, for the
first fragment only, the acknowledgment header that follows it, otherwise
`None`. When the buffer is too short for the header being asked for,
`CouldNotReadHeader` is raised. All errors derive from
`laminar.enums.LaminarError`.

## Sequence numbers

`sequence_greater_than(s1, s2)` and `sequence_less_than(s1, s2)` compare
16-bit sequence numbers across the wrap. A number more than 32768 behind
is treated as newer.

`SequenceBuffer(size, default_factory=None)` keeps `size` slots indexed by
sequence number. Inserting a newer number evicts the entries it passes
over. Inserting one that is older than the window is refused, and
`insert` returns `None`.

```python
from laminar.sequence_buffer import SequenceBuffer

buffer = SequenceBuffer(8, dict)
buffer.insert(10, {"sent": True})
assert 10 in buffer
assert buffer.sequence_num == 11
assert buffer.insert(2, {}) is None
```

It also has `get`, `exists`, `remove`, `capacity` and `len()` (the number
of stored entries). The dataclasses `CongestionData` and `ReassemblyData`
hold per-packet send times and fragment reassembly state.

## Throughput and link conditioning

`ThroughputMonitoring(throughput_duration, clock=time.monotonic)` counts
calls to `tick()` per window of `throughput_duration` seconds. A `tick()`
that finds the window elapsed records the window's count and returns
`True`, and does not count itself. `last_throughput()`, `average()`
(integer mean) and `total_measured_ticks()` report the history, and
`reset()` clears it.

`LinkConditioner(packet_loss=0.0, latency=0.0, seed=0)` answers
`should_send()` with `False` at the given loss rate. Its answers are
reproducible for a given seed:

```python
from laminar.link_conditioner import LinkConditioner

conditioner = LinkConditioner(packet_loss=0.2, seed=0)
if conditioner.should_send():
    ...
```

`latency` is only stored; nothing in the package delays packets.

## What the package does not do

This package provides the pieces but not the transport. It has:

- no socket, and it does not send or receive anything;
- no connection tracking or idle timeouts;
- no acknowledgment handling or resending of dropped packets;
- no splitting of payloads into fragments or reassembly of them;
- no sequencing or ordering streams that hold back or drop packets.

The headers, readers, buffers and event types are what such a layer would
be built from.