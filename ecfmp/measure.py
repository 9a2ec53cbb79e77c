"""Flow measure types and values."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import AbstractSet, Iterable, Optional, Union


class MeasureType(IntEnum):
    """The kinds of flow measure."""

    MINIMUM_DEPARTURE_INTERVAL = 0
    AVERAGE_DEPARTURE_INTERVAL = 1
    PER_HOUR = 2
    MILES_IN_TRAIL = 3
    MAX_INDICATED_AIRSPEED = 4
    MAX_MACH = 5
    INDICATED_AIRSPEED_REDUCTION = 6
    MACH_REDUCTION = 7
    PROHIBIT = 8
    GROUND_STOP = 9
    MANDATORY_ROUTE = 10


class MeasureValueType(Enum):
    """The kind of value a measure carries."""

    NONE = "none"
    INTEGER = "integer"
    DOUBLE = "double"
    SET = "set"


class IllegalFlowMeasureValueError(ValueError):
    """Raised when asking a measure for a value of the wrong kind."""

    def __init__(self) -> None:
        super().__init__("Illegal flow measure value - flow measure is not of appropriate type")


_TYPE_NAMES = {
    MeasureType.MINIMUM_DEPARTURE_INTERVAL: "Minimum Departure Interval",
    MeasureType.AVERAGE_DEPARTURE_INTERVAL: "Average Departure Interval",
    MeasureType.PER_HOUR: "Per Hour",
    MeasureType.MILES_IN_TRAIL: "Miles in Trail",
    MeasureType.MAX_INDICATED_AIRSPEED: "Max IAS",
    MeasureType.INDICATED_AIRSPEED_REDUCTION: "IAS Reduction",
    MeasureType.MAX_MACH: "Max Mach",
    MeasureType.MACH_REDUCTION: "Mach Reduction",
    MeasureType.MANDATORY_ROUTE: "Mandatory Route(s)",
    MeasureType.PROHIBIT: "Prohibit",
    MeasureType.GROUND_STOP: "Ground Stop",
}

MeasureValue = Union[None, int, float, Iterable[str]]


class Measure:
    """A flow measure: its type and, depending on the type, a value.

    An int value makes an integer measure, a float a double measure and an
    iterable of strings a set measure (which is always a mandatory route).
    """

    __slots__ = ("type", "value_type", "_int_value", "_double_value", "_set_value")

    def __init__(self, type: MeasureType, value: MeasureValue = None) -> None:
        self.type = MeasureType(type)
        self._int_value = -1
        self._double_value = -1.0
        self._set_value: frozenset[str] = frozenset()

        if value is None:
            self.value_type = MeasureValueType.NONE
        elif isinstance(value, bool) or isinstance(value, (str, bytes)):
            raise TypeError(f"Unsupported measure value: {value!r}")
        elif isinstance(value, int):
            self.value_type = MeasureValueType.INTEGER
            self._int_value = value
        elif isinstance(value, float):
            self.value_type = MeasureValueType.DOUBLE
            self._double_value = value
        else:
            try:
                routes = frozenset(value)
            except TypeError:
                raise TypeError(f"Unsupported measure value: {value!r}") from None
            self.type = MeasureType.MANDATORY_ROUTE
            self.value_type = MeasureValueType.SET
            self._set_value = routes

    def _require(self, allowed: MeasureValueType) -> None:
        if self.value_type is not allowed:
            raise IllegalFlowMeasureValueError()

    def integer_value(self) -> int:
        """Return the integer value; raise if the measure has none."""
        self._require(MeasureValueType.INTEGER)
        return self._int_value

    def double_value(self) -> float:
        """Return the floating point value; raise if the measure has none."""
        self._require(MeasureValueType.DOUBLE)
        return self._double_value

    def set_value(self) -> AbstractSet[str]:
        """Return the set of routes; raise if the measure has none."""
        self._require(MeasureValueType.SET)
        return self._set_value

    def description(self) -> str:
        """Return a human readable description of the measure."""
        name = _TYPE_NAMES.get(self.type, "Unknown")
        if self.type in (MeasureType.GROUND_STOP, MeasureType.PROHIBIT):
            return name
        return f"{name}: {self._value_description()}"

    def _value_description(self) -> str:
        if self.type in (
            MeasureType.MINIMUM_DEPARTURE_INTERVAL,
            MeasureType.AVERAGE_DEPARTURE_INTERVAL,
        ):
            minutes, seconds = divmod(abs(self._int_value), 60)
            if self._int_value < 0:
                minutes, seconds = -minutes, -seconds
            if minutes == 0:
                return f"{seconds} seconds"
            if seconds == 0:
                return f"{minutes} minutes"
            return f"{minutes} minutes {seconds} seconds"
        if self.type in (MeasureType.PER_HOUR, MeasureType.MILES_IN_TRAIL):
            return str(self._int_value)
        if self.type in (
            MeasureType.MAX_INDICATED_AIRSPEED,
            MeasureType.INDICATED_AIRSPEED_REDUCTION,
        ):
            return f"{self._int_value}kts"
        if self.type in (MeasureType.MAX_MACH, MeasureType.MACH_REDUCTION):
            return f"{self._double_value:.2f}"
        if self.type is MeasureType.MANDATORY_ROUTE:
            return ", ".join(sorted(self._set_value))
        raise ValueError("Prohibit and ground stop measures have no value")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return (
            self.type == other.type
            and self.value_type == other.value_type
            and self._int_value == other._int_value
            and self._double_value == other._double_value
            and self._set_value == other._set_value
        )

    def __hash__(self) -> int:
        return hash(
            (self.type, self.value_type, self._int_value, self._double_value, self._set_value)
        )

    def __repr__(self) -> str:
        value: Optional[object] = {
            MeasureValueType.NONE: None,
            MeasureValueType.INTEGER: self._int_value,
            MeasureValueType.DOUBLE: self._double_value,
            MeasureValueType.SET: set(self._set_value),
        }[self.value_type]
        return f"Measure({self.type.name}, {value!r})"


def minimum_departure_interval(interval: int) -> Measure:
    """A minimum departure interval, in seconds."""
    return Measure(MeasureType.MINIMUM_DEPARTURE_INTERVAL, int(interval))


def average_departure_interval(interval: int) -> Measure:
    """An average departure interval, in seconds."""
    return Measure(MeasureType.AVERAGE_DEPARTURE_INTERVAL, int(interval))


def per_hour(per_hour: int) -> Measure:
    """A limit on flights per hour."""
    return Measure(MeasureType.PER_HOUR, int(per_hour))


def miles_in_trail(miles_in_trail: int) -> Measure:
    """A miles-in-trail spacing."""
    return Measure(MeasureType.MILES_IN_TRAIL, int(miles_in_trail))


def max_indicated_airspeed(airspeed: int) -> Measure:
    """A maximum indicated airspeed, in knots."""
    return Measure(MeasureType.MAX_INDICATED_AIRSPEED, int(airspeed))


def indicated_airspeed_reduction(airspeed: int) -> Measure:
    """An indicated airspeed reduction, in knots."""
    return Measure(MeasureType.INDICATED_AIRSPEED_REDUCTION, int(airspeed))


def max_mach(mach: float) -> Measure:
    """A maximum Mach number."""
    return Measure(MeasureType.MAX_MACH, float(mach))


def mach_reduction(mach: float) -> Measure:
    """A Mach number reduction."""
    return Measure(MeasureType.MACH_REDUCTION, float(mach))


def mandatory_route(routes: Iterable[str]) -> Measure:
    """One or more mandatory routes."""
    return Measure(MeasureType.MANDATORY_ROUTE, frozenset(routes))


def prohibit() -> Measure:
    """A prohibition."""
    return Measure(MeasureType.PROHIBIT)


def ground_stop() -> Measure:
    """A ground stop."""
    return Measure(MeasureType.GROUND_STOP)