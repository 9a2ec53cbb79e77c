"""Thread-safe collections of elements received from the API."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Iterable, Iterator, Optional, Protocol, TypeVar


class ApiElement(Protocol):
    """An element that comes from the API and has a numeric id."""

    @property
    def id(self) -> int: ...


class StringIdentifiableApiElement(ApiElement, Protocol):
    """An API element that also has a string identifier, e.g. "EGTT"."""

    @property
    def identifier(self) -> str: ...


T = TypeVar("T", bound=ApiElement)
S = TypeVar("S", bound=StringIdentifiableApiElement)


class ApiElementCollection(Generic[T]):
    """A collection of API elements keyed by their id."""

    def __init__(self, elements: Iterable[T] = ()) -> None:
        self._lock = threading.RLock()
        self._elements: dict[int, T] = {element.id: element for element in elements}

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first element matching the predicate, or None."""
        with self._lock:
            return next((e for e in self._elements.values() if predicate(e)), None)

    def get(self, id: int) -> Optional[T]:
        """Return the element with the given API id, or None."""
        with self._lock:
            return self._elements.get(id)

    def count(self) -> int:
        """Return the number of elements in the collection."""
        with self._lock:
            return len(self._elements)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, id: object) -> bool:
        with self._lock:
            return id in self._elements

    def contains_where(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if any element satisfies the predicate."""
        with self._lock:
            return any(predicate(e) for e in self._elements.values())

    def __iter__(self) -> Iterator[T]:
        with self._lock:
            snapshot = list(self._elements.values())
        return iter(snapshot)


class StringIdentifierApiElementCollection(ApiElementCollection[S]):
    """A collection whose elements can also be found by string identifier."""

    def contains_identifier(self, identifier: str) -> bool:
        """Return True if an element has the given identifier."""
        return self.contains_where(lambda element: element.identifier == identifier)

    def first_by_identifier(self, identifier: str) -> Optional[S]:
        """Return the first element with the given identifier, or None."""
        return self.first(lambda element: element.identifier == identifier)