"""The public facade of the SDK and its implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from .api import ApiElementCollection, StringIdentifierApiElementCollection
from .events import Event
from .fir import FlightInformationRegion
from .flow_measure import CustomFlowMeasureFilter, FlowMeasure
from .sdk_events import (
    EuroscopeTimerTickEvent,
    EventsUpdatedEvent,
    FlightInformationRegionsUpdatedEvent,
    FlowMeasuresUpdatedEvent,
)
from .status_updates import EventPublisher


class Sdk(ABC):
    """The public-facing facade of the SDK."""

    @abstractmethod
    def flight_information_regions(
        self,
    ) -> StringIdentifierApiElementCollection[FlightInformationRegion]:
        """All the flight information regions currently loaded."""

    @abstractmethod
    def events(self) -> ApiElementCollection[Event]:
        """All the events currently loaded."""

    @abstractmethod
    def flow_measures(self) -> StringIdentifierApiElementCollection[FlowMeasure]:
        """All the flow measures currently loaded."""

    @abstractmethod
    def event_bus(self) -> EventPublisher:
        """The event bus, which can be used to subscribe to events."""

    @abstractmethod
    def on_euroscope_timer_tick(self) -> None:
        """Called once a second by the host's timer."""

    @abstractmethod
    def destroy(self) -> None:
        """Destroy this SDK instance; it cannot be used afterwards."""


_SdkUpdate = Union[
    FlightInformationRegionsUpdatedEvent, EventsUpdatedEvent, FlowMeasuresUpdatedEvent
]


class InternalSdk(Sdk):
    """The SDK implementation, kept up to date by events from the event bus."""

    def __init__(
        self,
        event_bus: EventPublisher,
        custom_flow_measure_filters: Sequence[CustomFlowMeasureFilter],
    ) -> None:
        if event_bus is None:
            raise ValueError("Event bus not set in SDK")
        if custom_flow_measure_filters is None:
            raise ValueError("Custom flow measure filters not set in SDK")
        self._event_bus: Optional[EventPublisher] = event_bus
        self._custom_flow_measure_filters = custom_flow_measure_filters
        self._lock = threading.Lock()
        self._firs: StringIdentifierApiElementCollection[FlightInformationRegion] = (
            StringIdentifierApiElementCollection()
        )
        self._events: ApiElementCollection[Event] = ApiElementCollection()
        self._flow_measures: StringIdentifierApiElementCollection[FlowMeasure] = (
            StringIdentifierApiElementCollection()
        )

    def flight_information_regions(
        self,
    ) -> StringIdentifierApiElementCollection[FlightInformationRegion]:
        with self._lock:
            return self._firs

    def events(self) -> ApiElementCollection[Event]:
        with self._lock:
            return self._events

    def flow_measures(self) -> StringIdentifierApiElementCollection[FlowMeasure]:
        with self._lock:
            return self._flow_measures

    def event_bus(self) -> EventPublisher:
        if self._event_bus is None:
            raise RuntimeError("The SDK has been destroyed")
        return self._event_bus

    def custom_flow_measure_filters(self) -> Sequence[CustomFlowMeasureFilter]:
        """The custom flow measure filters provided by the consumer."""
        return self._custom_flow_measure_filters

    def on_euroscope_timer_tick(self) -> None:
        self.event_bus().on_event(EuroscopeTimerTickEvent())

    def on_event(self, event: _SdkUpdate) -> None:
        """Replace the loaded data with that carried by an update event."""
        with self._lock:
            if isinstance(event, FlightInformationRegionsUpdatedEvent):
                self._firs = event.firs
            elif isinstance(event, EventsUpdatedEvent):
                self._events = event.events
            elif isinstance(event, FlowMeasuresUpdatedEvent):
                self._flow_measures = event.flow_measures
            else:
                raise TypeError(f"Unsupported event: {type(event).__name__}")

    def destroy(self) -> None:
        self._event_bus = None