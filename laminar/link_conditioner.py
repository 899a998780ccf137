"""Simulating lossy and slow network links for testing."""

from __future__ import annotations

import random

__all__ = ["LinkConditioner"]


class LinkConditioner:
    """Decides whether packets get through a simulated link.

    ``packet_loss`` is the chance, between 0 and 1, that a packet is dropped;
    ``latency`` is the delay in seconds to impose between packets.
    """

    def __init__(
        self, packet_loss: float = 0.0, latency: float = 0.0, seed: int = 0
    ) -> None:
        self.packet_loss = packet_loss
        self.latency = latency
        self._random = random.Random(seed)

    def should_send(self) -> bool:
        """Return whether the next packet should be sent rather than dropped."""
        return self._random.random() >= self.packet_loss

    def __repr__(self) -> str:
        return f"LinkConditioner(packet_loss={self.packet_loss!r}, latency={self.latency!r})"