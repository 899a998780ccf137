"""User-facing packets and the events a socket reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, Union

from .enums import DeliveryGuarantee, OrderingGuarantee

__all__ = [
    "Address",
    "Packet",
    "PacketEvent",
    "ConnectEvent",
    "TimeoutEvent",
    "SocketEvent",
]

Address: TypeAlias = tuple[str, int]
"""A remote endpoint as a (host, port) pair."""


@dataclass(frozen=True)
class Packet:
    """A payload with its endpoint and the guarantees for its delivery and arranging.

    The address is the sender for a received packet and the destination
    for one that is to be sent.
    """

    addr: Address
    payload: bytes
    delivery_guarantee: DeliveryGuarantee = DeliveryGuarantee.UNRELIABLE
    ordering_guarantee: OrderingGuarantee = field(default_factory=OrderingGuarantee.none)

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def unreliable(cls, addr: Address, payload: bytes) -> Packet:
        """A packet that may be dropped, duplicated or arrive out of order."""
        return cls(addr, payload, DeliveryGuarantee.UNRELIABLE, OrderingGuarantee.none())

    @classmethod
    def unreliable_sequenced(
        cls, addr: Address, payload: bytes, stream_id: int | None = None
    ) -> Packet:
        """A packet that may be dropped; only the newest on its stream is kept."""
        return cls(
            addr,
            payload,
            DeliveryGuarantee.UNRELIABLE,
            OrderingGuarantee.sequenced(stream_id),
        )

    @classmethod
    def reliable_unordered(cls, addr: Address, payload: bytes) -> Packet:
        """A packet that will arrive, in no particular order."""
        return cls(addr, payload, DeliveryGuarantee.RELIABLE, OrderingGuarantee.none())

    @classmethod
    def reliable_ordered(
        cls, addr: Address, payload: bytes, stream_id: int | None = None
    ) -> Packet:
        """A packet that will arrive, in order on its stream."""
        return cls(
            addr,
            payload,
            DeliveryGuarantee.RELIABLE,
            OrderingGuarantee.ordered(stream_id),
        )

    @classmethod
    def reliable_sequenced(
        cls, addr: Address, payload: bytes, stream_id: int | None = None
    ) -> Packet:
        """A packet that will arrive; older packets on its stream are discarded."""
        return cls(
            addr,
            payload,
            DeliveryGuarantee.RELIABLE,
            OrderingGuarantee.sequenced(stream_id),
        )


@dataclass(frozen=True)
class PacketEvent:
    """A packet was received from a client."""

    packet: Packet


@dataclass(frozen=True)
class ConnectEvent:
    """A new client, identified by its address, connected."""

    addr: Address


@dataclass(frozen=True)
class TimeoutEvent:
    """A client has been idle longer than the configured timeout."""

    addr: Address


SocketEvent: TypeAlias = Union[PacketEvent, ConnectEvent, TimeoutEvent]