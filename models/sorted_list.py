"""Sortierte Liste: fügt Elemente anhand einer Schlüsselfunktion geordnet ein."""

from bisect import bisect_right
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class SortedList(Generic[T]):
    """Geordneter Container mit linearem Zugriff.

    Gleiche Schlüssel behalten ihre Einfügereihenfolge. Duplikate werden
    NICHT abgewiesen – das ist Aufgabe des Aufrufers.
    """

    def __init__(self, key: Callable[[T], object]) -> None:
        self._key = key
        self._items: list[T] = []
        self._keys: list = []

    def add(self, item: T) -> None:
        """Fügt ein Element an der sortierten Position ein."""
        k = self._key(item)
        pos = bisect_right(self._keys, k)
        self._keys.insert(pos, k)
        self._items.insert(pos, item)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"SortedList({len(self._items)} Elemente)"
