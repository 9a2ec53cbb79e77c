"""Flow measure filters on airports, events, range to destination and routes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable

from .aircraft import Aircraft, ChecksAircraftApplicability
from .events import Event

_WILDCARD = "*"


class AirportFilterType(Enum):
    """Whether an airport filter looks at the destination or departure airport."""

    DESTINATION = "destination"
    DEPARTURE = "departure"


@dataclass(frozen=True)
class AirportFilter(ChecksAircraftApplicability):
    """Applies to aircraft departing from, or arriving at, matching airports.

    Airport strings may contain a wildcard (*); everything from the first
    wildcard on is ignored and the rest must prefix the airport.
    """

    airport_strings: frozenset[str]
    type: AirportFilterType

    def __init__(self, airport_strings: Iterable[str], type: AirportFilterType) -> None:
        object.__setattr__(self, "airport_strings", frozenset(airport_strings))
        object.__setattr__(self, "type", AirportFilterType(type))

    def applicable_to_airport(self, airport: str) -> bool:
        """Return whether the airport matches at least one of the airport strings."""
        for airport_string in self.airport_strings:
            prefix = airport_string.split(_WILDCARD, 1)[0]
            if airport[: len(prefix)] == prefix:
                return True
        return False

    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        airport = (
            aircraft.departure_airport
            if self.type is AirportFilterType.DEPARTURE
            else aircraft.destination_airport
        )
        return self.applicable_to_airport(airport)

    def description(self) -> str:
        """Return a human readable description of the filter."""
        heading = "Departing" if self.type is AirportFilterType.DEPARTURE else "Arriving"
        parts = [
            f"Any of: {airport}" if _WILDCARD in airport else airport
            for airport in sorted(self.airport_strings)
        ]
        if not parts:
            return heading
        return f"{heading}: " + ", ".join(parts)


class EventParticipation(IntEnum):
    """Whether a filter is about pilots taking part in an event or not."""

    PARTICIPATING = 0
    NOT_PARTICIPATING = 1


@dataclass(frozen=True)
class EventFilter(ChecksAircraftApplicability):
    """Applies to aircraft that are, or are not, taking part in an event."""

    event: Event
    participation: EventParticipation

    def __post_init__(self) -> None:
        if self.event is None:
            raise ValueError("Event not set in event filter")
        object.__setattr__(self, "participation", EventParticipation(self.participation))

    def applicable_to_event(self, event: Event) -> bool:
        """Return whether this filter is about the given event."""
        return event == self.event

    @property
    def is_participating(self) -> bool:
        """True if this is a "participating in" filter."""
        return self.participation is EventParticipation.PARTICIPATING

    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        # A CID of zero means it is unknown, so the filter cannot rule the aircraft out.
        if aircraft.cid == 0:
            return True
        taking_part = aircraft.cid in self.event.participant_cids()
        return self.is_participating == taking_part

    def description(self) -> str:
        """Return a human readable description of the filter."""
        heading = (
            "Participating in event: "
            if self.is_participating
            else "Not participating in event: "
        )
        return heading + self.event.name


@dataclass(frozen=True)
class RangeToDestinationFilter(ChecksAircraftApplicability):
    """Applies to aircraft within a range (in nautical miles) of their destination."""

    range: int

    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        return math.ceil(aircraft.range_to_destination) <= self.range

    def description(self) -> str:
        """Return a human readable description of the filter."""
        return f"Range to Destination Less Than: {self.range}nm"


@dataclass(frozen=True)
class RouteFilter(ChecksAircraftApplicability):
    """Applies to aircraft whose route contains any of the given route strings."""

    routes: frozenset[str]

    def __init__(self, routes: Iterable[str]) -> None:
        object.__setattr__(self, "routes", frozenset(routes))

    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        return any(route in aircraft.route_string for route in self.routes)

    def description(self) -> str:
        """Return a human readable description of the filter."""
        if not self.routes:
            return "On route(s)"
        return "On route(s): " + ", ".join(sorted(self.routes))