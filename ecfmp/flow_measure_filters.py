"""The collection of filters that decide which aircraft a flow measure applies to."""

from __future__ import annotations

from itertools import chain
from typing import Any, Callable, Iterable, Optional, TypeVar

from .aircraft import Aircraft, ChecksAircraftApplicability
from .filters import AirportFilter, EventFilter, RangeToDestinationFilter, RouteFilter
from .level_filters import LevelRangeFilter, MultipleLevelFilter

AircraftFactory = Callable[[Any, Any], Aircraft]
"""Builds an Aircraft from a flight plan and a radar target."""

F = TypeVar("F")


def _first(filters: Iterable[F], predicate: Callable[[F], bool]) -> Optional[F]:
    return next((item for item in filters if predicate(item)), None)


class FlowMeasureFilters:
    """All the standard filters of a flow measure, with helpers for common queries.

    Different kinds of filter combine with logical AND; an aircraft must pass
    every filter to be applicable. Custom filters provided by users are not
    part of this collection.
    """

    def __init__(
        self,
        airport_filters: Iterable[AirportFilter],
        event_filters: Iterable[EventFilter],
        route_filters: Iterable[RouteFilter],
        level_filters: Iterable[LevelRangeFilter],
        multiple_level_filters: Iterable[MultipleLevelFilter],
        range_to_destination_filters: Iterable[RangeToDestinationFilter],
        aircraft_factory: AircraftFactory,
    ) -> None:
        if aircraft_factory is None:
            raise ValueError("The aircraft factory cannot be null.")
        self.airport_filters: tuple[AirportFilter, ...] = tuple(airport_filters)
        self.event_filters: tuple[EventFilter, ...] = tuple(event_filters)
        self.route_filters: tuple[RouteFilter, ...] = tuple(route_filters)
        self.level_filters: tuple[LevelRangeFilter, ...] = tuple(level_filters)
        self.multiple_level_filters: tuple[MultipleLevelFilter, ...] = tuple(
            multiple_level_filters
        )
        self.range_to_destination_filters: tuple[RangeToDestinationFilter, ...] = tuple(
            range_to_destination_filters
        )
        self._aircraft_factory = aircraft_factory

    def _in_check_order(self) -> Iterable[ChecksAircraftApplicability]:
        return chain(
            self.airport_filters,
            self.event_filters,
            self.level_filters,
            self.multiple_level_filters,
            self.route_filters,
            self.range_to_destination_filters,
        )

    def applicable_to_airport(self, airport: str) -> bool:
        """Return True if any airport filter applies to the given airport."""
        return self.first_airport_filter(
            lambda airport_filter: airport_filter.applicable_to_airport(airport)
        ) is not None

    def applicable_to_aircraft(self, flightplan: Any, radar_target: Any) -> bool:
        """Return True if the aircraft passes every filter."""
        aircraft = self._aircraft_factory(flightplan, radar_target)
        return all(f.applicable_to_aircraft(aircraft) for f in self._in_check_order())

    def first_airport_filter(
        self, predicate: Callable[[AirportFilter], bool]
    ) -> Optional[AirportFilter]:
        """Return the first airport filter matching the predicate, or None."""
        return _first(self.airport_filters, predicate)

    def first_event_filter(
        self, predicate: Callable[[EventFilter], bool]
    ) -> Optional[EventFilter]:
        """Return the first event filter matching the predicate, or None."""
        return _first(self.event_filters, predicate)

    def first_level_filter(
        self, predicate: Callable[[LevelRangeFilter], bool]
    ) -> Optional[LevelRangeFilter]:
        """Return the first level range filter matching the predicate, or None."""
        return _first(self.level_filters, predicate)

    def first_multiple_level_filter(
        self, predicate: Callable[[MultipleLevelFilter], bool]
    ) -> Optional[MultipleLevelFilter]:
        """Return the first multiple level filter matching the predicate, or None."""
        return _first(self.multiple_level_filters, predicate)

    def first_route_filter(
        self, predicate: Callable[[RouteFilter], bool]
    ) -> Optional[RouteFilter]:
        """Return the first route filter matching the predicate, or None."""
        return _first(self.route_filters, predicate)

    def first_range_to_destination_filter(
        self, predicate: Callable[[RangeToDestinationFilter], bool]
    ) -> Optional[RangeToDestinationFilter]:
        """Return the first range to destination filter matching the predicate, or None."""
        return _first(self.range_to_destination_filters, predicate)

    def descriptions(self) -> list[str]:
        """Return a description of every filter."""
        return [f.description() for f in self._in_check_order()]