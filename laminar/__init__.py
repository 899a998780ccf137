"""Packet headers, guarantees, wrapping sequence numbers and test helpers for a semi-reliable UDP protocol."""

__version__ = "0.1.0"

__all__ = [
    "enums",
    "headers",
    "link_conditioner",
    "outgoing",
    "packet",
    "protocol",
    "reader",
    "sequence_buffer",
    "throughput",
]