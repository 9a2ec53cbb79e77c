"""Network events and their participants."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .fir import FlightInformationRegion


@dataclass(frozen=True)
class EventParticipant:
    """A pilot taking part in an event."""

    cid: int
    origin_airport: str = ""
    destination_airport: str = ""


@dataclass(frozen=True)
class Event:
    """An event on the network."""

    id: int
    name: str
    start: datetime
    end: datetime
    flight_information_region: FlightInformationRegion
    vatcan_code: str = ""
    participants: tuple[EventParticipant, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "participants", tuple(self.participants))

    def participant_cids(self) -> frozenset[int]:
        """Return the CIDs of everyone taking part in the event."""
        return frozenset(participant.cid for participant in self.participants)