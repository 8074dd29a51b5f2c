from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Bus:
    name: str
    stops: tuple[int, ...]  # registry handles, repeats allowed
    is_roundtrip: bool

    def directions(self) -> tuple[tuple[int, ...], ...]:
        """Stop sequences actually travelled: forward, then backward if linear."""

        if self.is_roundtrip:
            return (self.stops,)
        return (self.stops, tuple(reversed(self.stops)))


@dataclass(frozen=True, slots=True)
class BusStats:
    stop_count: int
    unique_stop_count: int
    route_length: int  # meters of road
    curvature: float
