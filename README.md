# ecfmp

A library for working with ECFMP air traffic flow management data. It covers flow measures, the filters that decide which aircraft a measure applies to, events, and flight information regions (FIRs).

## Installation

```
pip install ecfmp
```

To run the test suite, install the test extra:

```
pip install "ecfmp[test]"
pytest
```

## Modules

- `ecfmp.api`: `ApiElementCollection` and `StringIdentifierApiElementCollection`.
  - These are thread-safe collections of API elements, keyed by numeric id.
  - Both support `get`, `first`, `count`, `contains_where`, `len()`, `in` (by id) and iteration.
  - The string-identifier collection also has `contains_identifier` and `first_by_identifier`.
- `ecfmp.fir`: `FlightInformationRegion`, with `id`, `identifier` and `name`.
- `ecfmp.events`: `Event` and `EventParticipant`.
  - `Event.participant_cids()` returns the CIDs of the participants.
- `ecfmp.aircraft`: `Aircraft` and `ChecksAircraftApplicability`.
  - `Aircraft` holds the flight data the filters look at: CID, departure and destination airports, cruise altitude, range to destination and route string.
  - `ChecksAircraftApplicability` is the base of every filter.
- `ecfmp.measure`: `Measure`, `MeasureType`, `MeasureValueType` and `IllegalFlowMeasureValueError`, plus factory helpers:
  - integer measures: `minimum_departure_interval`, `average_departure_interval`, `per_hour`, `miles_in_trail`, `max_indicated_airspeed`, `indicated_airspeed_reduction`;
  - Mach measures: `max_mach`, `mach_reduction`;
  - route measures: `mandatory_route`;
  - measures with no value: `prohibit`, `ground_stop`.

  Asking a measure for a value of the wrong kind raises `IllegalFlowMeasureValueError`.
- `ecfmp.level_filters`: `LevelRangeFilter` and `MultipleLevelFilter`.
  - `LevelRangeFilter` applies at or above, or at or below, a flight level, as set by `LevelRangeFilterType`.
  - `MultipleLevelFilter` applies at exact flight levels.
- `ecfmp.filters`: `AirportFilter`, `EventFilter`, `RouteFilter` and `RangeToDestinationFilter`.
  - Airport strings may contain a `*` wildcard.
  - An `EventFilter` lets an aircraft with CID `0` through.
- `ecfmp.flow_measure_filters`: `FlowMeasureFilters`.
  - It combines all the standard filters of a measure. An aircraft must pass every filter.
  - It offers `first_*_filter` lookups and `descriptions()`.
- `ecfmp.flow_measure`: `FlowMeasure`, `MeasureStatus`, `FlowMeasureNotWithdrawnError` and `CustomFlowMeasureFilter`.
  - `FlowMeasure.withdrawn_at()` raises unless the measure is withdrawn.
  - `applicable_to_aircraft` checks the standard filters and every custom filter.
- `ecfmp.canonical`: `CanonicalFlowMeasureInfo`.
  - It splits an identifier such as `EGTT05A-2` into its canonical identifier and its revision.
- `ecfmp.sdk_events`: the event types published when FIRs, events or flow measures change, and when a measure is notified, activated, withdrawn, expired or reissued.
- `ecfmp.status_updates`: `FlowMeasureStatusUpdates`.
  - It compares each new set of flow measures with the ones seen before.
  - It publishes status change and reissue events to any object with an `on_event` method.
- `ecfmp.sdk`: `Sdk` and `InternalSdk`.
  - `InternalSdk` holds the currently loaded FIRs, events and flow measures.
  - It replaces them when it receives the matching update events.
- `ecfmp.log`: `Logger`, `NullLogger`, `LogDecorator` and `decorate_message`.
  - The decorator prefixes messages with `ECFMP: `.
- `ecfmp.clock`: `time_now`, `set_test_now` and `unset_test_now`, a clock that tests can control.
- `ecfmp.thread_pool`: `ThreadPool`.
  - It is a two-worker pool that can be used as a context manager.
  - Tasks still queued at shutdown are discarded.

## Example

```python
from ecfmp.measure import minimum_departure_interval, mandatory_route
from ecfmp.canonical import CanonicalFlowMeasureInfo

print(minimum_departure_interval(150).description())
# Minimum Departure Interval: 2 minutes 30 seconds

print(mandatory_route({"LOGAN", "UL612"}).description())
# Mandatory Route(s): LOGAN, UL612

info = CanonicalFlowMeasureInfo("EGTT05A-2")
print(info.identifier, info.revision)
# EGTT05A 2
print(info.is_after(CanonicalFlowMeasureInfo("EGTT05A-1")))
# True
```

## Logging

Subclass `Logger` and wrap the subclass in `LogDecorator`. Every message then carries the library's prefix:

```python
from ecfmp.log import LogDecorator, Logger

class PrintLogger(Logger):
    def debug(self, message): print("DEBUG", message)
    def info(self, message): print("INFO", message)
    def warning(self, message): print("WARN", message)
    def error(self, message): print("ERROR", message)

LogDecorator(PrintLogger()).info("loaded")
# INFO ECFMP: loaded
```

## What this package does not do

- It does not download data from the ECFMP API.
- It does not parse API responses into FIRs, events or flow measures. Build those objects yourself and put them into the collections in `ecfmp.api`.
- It has no event bus. `InternalSdk` and `FlowMeasureStatusUpdates` publish to any object you supply that has an `on_event` method.
- It does not read flight plans or radar targets from a controller client. `FlowMeasureFilters` takes an `aircraft_factory` callable that turns a flight plan and radar target into an `Aircraft`.