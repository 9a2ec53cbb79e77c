"""Flow measures and the custom filters consumers may attach to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from functools import cached_property
from typing import Any, Optional, Sequence, Union

from .canonical import CanonicalFlowMeasureInfo
from .events import Event
from .fir import FlightInformationRegion
from .flow_measure_filters import FlowMeasureFilters
from .measure import Measure


class MeasureStatus(IntEnum):
    """The lifecycle status of a flow measure."""

    NOTIFIED = 0
    ACTIVE = 1
    WITHDRAWN = 2
    EXPIRED = 3


class FlowMeasureNotWithdrawnError(ValueError):
    """Raised when asking for the withdrawal time of a measure that is not withdrawn."""

    def __init__(self) -> None:
        super().__init__("Flow measure not withdrawn")


class CustomFlowMeasureFilter(ABC):
    """A filter that consumers can provide to further restrict flow measures."""

    @abstractmethod
    def applicable_to_aircraft(
        self, flightplan: Any, radar_target: Any, flow_measure: FlowMeasure
    ) -> bool:
        """Return True if the aircraft is applicable to the flow measure."""


@dataclass(frozen=True, eq=False)
class FlowMeasure:
    """An individual flow measure from the API.

    The custom filters sequence is kept by reference, so filters added to it
    later by its owner are taken into account.
    """

    id: int
    event: Optional[Event]
    identifier: str
    reason: str
    start_time: datetime
    end_time: datetime
    withdrawn_time: datetime
    status: MeasureStatus
    notified_firs: tuple[FlightInformationRegion, ...]
    measure: Measure
    filters: FlowMeasureFilters
    custom_filters: Sequence[CustomFlowMeasureFilter] = field(repr=False)

    def __post_init__(self) -> None:
        if self.measure is None:
            raise ValueError("Measure not set in flow measure")
        if self.filters is None:
            raise ValueError("Filters not set in flow measure")
        if self.custom_filters is None:
            raise ValueError("Custom filters not set in flow measure")
        object.__setattr__(self, "status", MeasureStatus(self.status))
        object.__setattr__(self, "notified_firs", tuple(self.notified_firs))

    @cached_property
    def canonical_information(self) -> CanonicalFlowMeasureInfo:
        """The canonical identifier and revision of this measure."""
        return CanonicalFlowMeasureInfo(self.identifier)

    def withdrawn_at(self) -> datetime:
        """Return the time of withdrawal; raise if the measure is not withdrawn."""
        if not self.has_status(MeasureStatus.WITHDRAWN):
            raise FlowMeasureNotWithdrawnError()
        return self.withdrawn_time

    def has_status(self, status: MeasureStatus) -> bool:
        """Return True if the measure has the given status."""
        return self.status == status

    def is_applicable_to_fir(self, fir: Union[FlightInformationRegion, str]) -> bool:
        """Return True if the given FIR (or FIR identifier) was notified of the measure."""
        identifier = fir.identifier if isinstance(fir, FlightInformationRegion) else fir
        return any(notified.identifier == identifier for notified in self.notified_firs)

    def applicable_to_aircraft(self, flightplan: Any, radar_target: Any) -> bool:
        """Return True if the aircraft passes the standard and all custom filters."""
        return self.filters.applicable_to_aircraft(flightplan, radar_target) and all(
            custom.applicable_to_aircraft(flightplan, radar_target, self)
            for custom in self.custom_filters
        )