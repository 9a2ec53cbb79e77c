"""Filters on the cruising level of an aircraft."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from .aircraft import Aircraft, ChecksAircraftApplicability


class LevelRangeFilterType(IntEnum):
    """Whether a level filter covers levels above or below its level."""

    AT_OR_ABOVE = 1
    AT_OR_BELOW = 2


@dataclass(frozen=True)
class LevelRangeFilter(ChecksAircraftApplicability):
    """Applies to aircraft cruising at or above, or at or below, a flight level."""

    type: LevelRangeFilterType
    level: int

    @property
    def altitude(self) -> int:
        """The filter level as an altitude, e.g. 350 becomes 35000."""
        return self.level * 100

    def applicable_to_level(self, level: int) -> bool:
        """Return whether the filter applies to a flight level (e.g. 350)."""
        return self.applicable_to_altitude(level * 100)

    def applicable_to_altitude(self, altitude: int) -> bool:
        """Return whether the filter applies to an altitude (e.g. 35000)."""
        if self.type is LevelRangeFilterType.AT_OR_BELOW:
            return altitude <= self.altitude
        return altitude >= self.altitude

    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        return self.applicable_to_altitude(aircraft.cruise_altitude)

    def description(self) -> str:
        """Return a human readable description of the filter."""
        if self.type is LevelRangeFilterType.AT_OR_BELOW:
            return f"At or below: FL{self.level}"
        return f"At or above: FL{self.level}"


@dataclass(frozen=True)
class MultipleLevelFilter(ChecksAircraftApplicability):
    """Applies to aircraft cruising at exactly one of several flight levels."""

    levels: tuple[int, ...]

    def __init__(self, levels: Iterable[int]) -> None:
        object.__setattr__(self, "levels", tuple(levels))

    @property
    def altitudes(self) -> tuple[int, ...]:
        """The filter levels as altitudes, e.g. 350 becomes 35000."""
        return tuple(level * 100 for level in self.levels)

    def applicable_to_level(self, level: int) -> bool:
        """Return whether the filter applies to a flight level (e.g. 350)."""
        return level in self.levels

    def applicable_to_altitude(self, altitude: int) -> bool:
        """Return whether the filter applies to an altitude (e.g. 35000)."""
        return altitude in self.altitudes

    def applicable_to_aircraft(self, aircraft: Aircraft) -> bool:
        return self.applicable_to_altitude(aircraft.cruise_altitude)

    def description(self) -> str:
        """Return a human readable description of the filter."""
        if not self.levels:
            return "At Levels"
        return "At Levels: " + ", ".join(str(level) for level in self.levels)