from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RoutingSettings:
    bus_wait_time: int  # minutes paid once per boarding
    bus_velocity: float  # km/h

    def __post_init__(self) -> None:
        if self.bus_wait_time < 0:
            raise ValueError(f"Invalid bus_wait_time: {self.bus_wait_time}")
        if self.bus_velocity <= 0:
            raise ValueError(f"Invalid bus_velocity: {self.bus_velocity}")

    def travel_minutes(self, distance_m: float) -> float:
        return (distance_m / (self.bus_velocity / 3.6)) / 60.0
