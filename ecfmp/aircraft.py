"""Aircraft data that flow measure filters are checked against."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Aircraft:
    """The parts of a flight that flow measure filters look at."""

    cid: int
    departure_airport: str
    destination_airport: str
    cruise_altitude: int
    range_to_destination: float
    route_string: str


class ChecksAircraftApplicability(ABC):
    """Something that can decide whether it applies to an aircraft."""

    @abstractmethod
    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        """Return whether the given aircraft is applicable."""