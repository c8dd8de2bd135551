"""Simulation of lossy and slow links for testing."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

__all__ = ["LinkConditioner"]


@dataclass
class LinkConditioner:
    """Decides which packets a simulated link drops.

    ``packet_loss`` is the chance, between 0 and 1, that a packet is dropped.
    ``latency`` is the delay in seconds imposed between packets. The random
    generator is seeded with 0, so every new conditioner behaves the same.
    """

    packet_loss: float = 0.0
    latency: float = 0.0
    _random: random.Random = field(
        default_factory=lambda: random.Random(0), repr=False, compare=False
    )

    def should_send(self) -> bool:
        """Tell whether the next packet gets through."""
        return self._random.random() >= self.packet_loss