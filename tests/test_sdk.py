from datetime import datetime, timezone

import pytest

from ecfmp.api import ApiElementCollection, StringIdentifierApiElementCollection
from ecfmp.events import Event
from ecfmp.fir import FlightInformationRegion
from ecfmp.flow_measure import FlowMeasure, MeasureStatus
from ecfmp.flow_measure_filters import FlowMeasureFilters
from ecfmp.measure import prohibit
from ecfmp.sdk import InternalSdk, Sdk
from ecfmp.sdk_events import (
    EuroscopeTimerTickEvent,
    EventsUpdatedEvent,
    FlightInformationRegionsUpdatedEvent,
    FlowMeasuresUpdatedEvent,
)

TIME = datetime(2023, 1, 1, tzinfo=timezone.utc)
FIR = FlightInformationRegion(1, "EGTT", "London")


class RecordingBus:
    def __init__(self):
        self.events = []

    def on_event(self, event):
        self.events.append(event)


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def sdk(bus):
    return InternalSdk(bus, [])


def test_is_an_sdk():
    bus = RecordingBus()
    internal = InternalSdk(bus, [])
    assert isinstance(internal, Sdk)
    assert internal.event_bus() is bus


def test_starts_empty(sdk):
    assert sdk.flight_information_regions().count() == 0
    assert sdk.events().count() == 0
    assert sdk.flow_measures().count() == 0


def test_fir_update_replaces_firs(sdk):
    firs = StringIdentifierApiElementCollection([FIR])
    sdk.on_event(FlightInformationRegionsUpdatedEvent(firs))
    assert sdk.flight_information_regions() is firs
    assert sdk.flight_information_regions().first_by_identifier("EGTT") == FIR


def test_events_update_replaces_events(sdk):
    event = Event(1, "Event", TIME, TIME, FIR)
    events = ApiElementCollection([event])
    sdk.on_event(EventsUpdatedEvent(events))
    assert sdk.events().get(1) == event


def test_flow_measures_update_replaces_flow_measures(sdk):
    filters = FlowMeasureFilters([], [], [], [], [], [], lambda fp, rt: None)
    measure = FlowMeasure(
        3, None, "EGTT01A", "reason", TIME, TIME, TIME, MeasureStatus.ACTIVE,
        [FIR], prohibit(), filters, [],
    )
    measures = StringIdentifierApiElementCollection([measure])
    sdk.on_event(FlowMeasuresUpdatedEvent(measures))
    assert sdk.flow_measures().first_by_identifier("EGTT01A") is measure


def test_unknown_event_is_rejected(sdk):
    with pytest.raises(TypeError):
        sdk.on_event(EuroscopeTimerTickEvent())


def test_timer_tick_publishes_event(sdk, bus):
    sdk.on_euroscope_timer_tick()
    assert bus.events == [EuroscopeTimerTickEvent()]


def test_event_bus_is_returned(sdk, bus):
    assert sdk.event_bus() is bus


def test_custom_filters_are_returned(bus):
    filters = []
    sdk = InternalSdk(bus, filters)
    assert sdk.custom_flow_measure_filters() is filters


def test_destroyed_sdk_has_no_event_bus(sdk):
    sdk.destroy()
    with pytest.raises(RuntimeError):
        sdk.event_bus()
    with pytest.raises(RuntimeError):
        sdk.on_euroscope_timer_tick()


def test_requires_event_bus():
    with pytest.raises(ValueError):
        InternalSdk(None, [])


def test_requires_custom_filters(bus):
    with pytest.raises(ValueError):
        InternalSdk(bus, None)