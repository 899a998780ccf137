"""Delivery, ordering and packet type enumerations and their wire encoding."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class LaminarError(Exception):
    """Base class for errors raised by this package."""


class DecodingError(LaminarError):
    """A byte could not be decoded into the named enumeration."""

    def __init__(self, what: str, value: int) -> None:
        super().__init__(f"could not decode {what} from value {value}")
        self.what = what
        self.value = value


class DeliveryGuarantee(enum.Enum):
    """How a packet should be delivered."""

    UNRELIABLE = 0
    RELIABLE = 1

    def to_u8(self) -> int:
        """Return the wire value."""
        return self.value

    @classmethod
    def from_u8(cls, value: int) -> DeliveryGuarantee:
        """Decode a wire value, raising DecodingError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise DecodingError("delivery guarantee", value) from None


class OrderingKind(enum.Enum):
    """The kind of arranging applied to a packet."""

    NONE = 0
    SEQUENCED = 1
    ORDERED = 2


@dataclass(frozen=True)
class OrderingGuarantee:
    """How a packet should be arranged, with an optional stream id."""

    kind: OrderingKind = OrderingKind.NONE
    stream_id: int | None = None

    def __post_init__(self) -> None:
        if self.kind is OrderingKind.NONE and self.stream_id is not None:
            raise ValueError("an unarranged guarantee takes no stream id")
        if self.stream_id is not None and not 0 <= self.stream_id <= 255:
            raise ValueError(f"stream id out of range: {self.stream_id}")

    @classmethod
    def none(cls) -> OrderingGuarantee:
        """No arranging."""
        return cls(OrderingKind.NONE)

    @classmethod
    def sequenced(cls, stream_id: int | None = None) -> OrderingGuarantee:
        """Arrange packets in sequence on the given stream."""
        return cls(OrderingKind.SEQUENCED, stream_id)

    @classmethod
    def ordered(cls, stream_id: int | None = None) -> OrderingGuarantee:
        """Arrange packets in order on the given stream."""
        return cls(OrderingKind.ORDERED, stream_id)

    def to_u8(self) -> int:
        """Return the wire value."""
        return self.kind.value

    @classmethod
    def from_u8(cls, value: int) -> OrderingGuarantee:
        """Decode a wire value; the stream id is left unset."""
        try:
            kind = OrderingKind(value)
        except ValueError:
            raise DecodingError("ordering guarantee", value) from None
        return cls(kind)


class PacketType(enum.Enum):
    """Whether a packet is whole or a fragment."""

    PACKET = 0
    FRAGMENT = 1

    def to_u8(self) -> int:
        """Return the wire value."""
        return self.value

    @classmethod
    def from_u8(cls, value: int) -> PacketType:
        """Decode a wire value, raising DecodingError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise DecodingError("packet type", value) from None