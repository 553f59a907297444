from __future__ import annotations

from typing import List, Callable, Iterator, Iterable
from ordered_set import OrderedSet


class Seq[T]:
    _value: List[T]

    def __init__(self, value: Iterable[T]) -> None:
        self._value = list(value)

    def map[U](self, func: Callable[[T], U]) -> Seq[U]:
        return Seq([func(v) for v in self._value])

    def filter(self, func: Callable[[T], bool]) -> Seq[T]:
        return Seq([v for v in self._value if func(v)])

    def flat_map[U](self, func: Callable[[T], Iterable[U]]) -> Seq[U]:
        return Seq([y for x in self._value for y in func(x)])

    def join(self, separator: str = "") -> str:
        return separator.join(self._value)

    def print(self, printer, separator: str = "") -> str:
        mapped = self.map(lambda x: x.print(printer))
        joined = mapped.join(separator)
        return joined

    def unique_items(self) -> Seq[T]:
        return Seq(OrderedSet(self._value))

    def __iter__(self) -> Iterator[T]:
        return iter(self._value)

    @property
    def value(self) -> List[T]:
        return self._value


__all__ = ["Seq"]
