"""Turns updated flow measure collections into status change events."""

from __future__ import annotations

import threading
from typing import Protocol

from .flow_measure import FlowMeasure, MeasureStatus
from .log import Logger
from .sdk_events import (
    FlowMeasureActivatedEvent,
    FlowMeasureExpiredEvent,
    FlowMeasureNotifiedEvent,
    FlowMeasureReissuedEvent,
    FlowMeasureWithdrawnEvent,
    InternalFlowMeasuresUpdatedEvent,
)


class EventPublisher(Protocol):
    """Anything that events can be published to."""

    def on_event(self, event: object) -> None: ...


_STATUS_EVENTS = {
    MeasureStatus.NOTIFIED: ("Notified", FlowMeasureNotifiedEvent),
    MeasureStatus.ACTIVE: ("Activated", FlowMeasureActivatedEvent),
    MeasureStatus.WITHDRAWN: ("Withdrawn", FlowMeasureWithdrawnEvent),
    MeasureStatus.EXPIRED: ("Expired", FlowMeasureExpiredEvent),
}


class FlowMeasureStatusUpdates:
    """Publishes an event whenever a flow measure appears, changes status or is reissued."""

    def __init__(self, event_bus: EventPublisher, logger: Logger) -> None:
        if event_bus is None:
            raise ValueError("The event bus cannot be null.")
        if logger is None:
            raise ValueError("The logger cannot be null.")
        self._event_bus = event_bus
        self._logger = logger
        self._lock = threading.Lock()
        self._canonical_measures: dict[str, FlowMeasure] = {}

    def on_event(self, event: InternalFlowMeasuresUpdatedEvent) -> None:
        """Compare the new flow measures with those seen before and publish changes."""
        with self._lock:
            for measure in event.flow_measures:
                canonical = measure.canonical_information
                previous = self._canonical_measures.get(canonical.identifier)
                self._canonical_measures[canonical.identifier] = measure

                if previous is None:
                    self._broadcast_status(measure)
                    continue

                if canonical.is_after(previous.canonical_information):
                    self._event_bus.on_event(FlowMeasureReissuedEvent(previous, measure))

                if previous.status != measure.status:
                    self._broadcast_status(measure)

    def _broadcast_status(self, measure: FlowMeasure) -> None:
        label, event_type = _STATUS_EVENTS[measure.status]
        self._logger.info(
            f"Flow measure {measure.identifier} now has a status of {label}."
        )
        self._event_bus.on_event(event_type(measure))