"""Events published on the SDK event bus."""

from __future__ import annotations

from dataclasses import dataclass

from .api import ApiElementCollection, StringIdentifierApiElementCollection
from .events import Event
from .fir import FlightInformationRegion
from .flow_measure import FlowMeasure


@dataclass(frozen=True)
class EventsUpdatedEvent:
    """The loaded events have been replaced."""

    events: ApiElementCollection[Event]


@dataclass(frozen=True)
class FlowMeasuresUpdatedEvent:
    """The loaded flow measures have been replaced."""

    flow_measures: StringIdentifierApiElementCollection[FlowMeasure]


@dataclass(frozen=True)
class FlowMeasureNotifiedEvent:
    """A flow measure has become notified."""

    flow_measure: FlowMeasure


@dataclass(frozen=True)
class FlowMeasureActivatedEvent:
    """A flow measure has become active."""

    flow_measure: FlowMeasure


@dataclass(frozen=True)
class FlowMeasureExpiredEvent:
    """A flow measure has expired."""

    flow_measure: FlowMeasure


@dataclass(frozen=True)
class FlowMeasureWithdrawnEvent:
    """A flow measure has been withdrawn."""

    flow_measure: FlowMeasure


@dataclass(frozen=True)
class FlowMeasureReissuedEvent:
    """A flow measure has been replaced by a later revision."""

    original: FlowMeasure
    reissued: FlowMeasure


@dataclass(frozen=True)
class ApiDataDownloadRequiredEvent:
    """Fresh data should be downloaded from the API."""


@dataclass(frozen=True)
class FlightInformationRegionsUpdatedEvent:
    """The loaded flight information regions have been replaced."""

    firs: StringIdentifierApiElementCollection[FlightInformationRegion]


@dataclass(frozen=True)
class InternalFlowMeasuresUpdatedEvent:
    """Newly parsed flow measures, before status changes are worked out."""

    flow_measures: StringIdentifierApiElementCollection[FlowMeasure]


@dataclass(frozen=True)
class EuroscopeTimerTickEvent:
    """The host's once-a-second timer has ticked."""