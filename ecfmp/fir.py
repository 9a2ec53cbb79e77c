"""Flight information regions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FlightInformationRegion:
    """A flight information region, e.g. EGTT (London)."""

    id: int
    identifier: str
    name: str