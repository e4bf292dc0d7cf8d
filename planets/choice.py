#!/usr/bin/env python3
"""
Ordered preset selection.

A ChoiceSet is a fixed, immutable list of options (speeds, presets). A Choice
is a position within one, so "faster"/"slower" can step through the list and a
UI can show which option is selected.
"""
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")


class ChoiceSet(Generic[T]):
    def __init__(self, values: Iterable[T]):
        self._values: Tuple[T, ...] = tuple(values)
        if not self._values:
            raise ValueError("ChoiceSet needs at least one value")

    def by_index(self, index: int) -> "Choice[T]":
        if not 0 <= index < len(self._values):
            raise IndexError(f"choice index {index} out of range 0..{len(self._values) - 1}")
        return Choice(self, index)

    def by_value(self, value: T) -> "Choice[T]":
        try:
            index = self._values.index(value)
        except ValueError:
            raise ValueError(f"{value!r} not in choice set") from None
        return self.by_index(index)

    def __getitem__(self, index: int) -> T:
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChoiceSet):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"ChoiceSet({list(self._values)!r})"


@dataclass(frozen=True)
class Choice(Generic[T]):
    choice_set: ChoiceSet[T]
    index: int

    def get(self) -> T:
        return self.choice_set[self.index]

    def next(self) -> "Choice[T]":
        """Next option, staying on the last one."""
        return self.choice_set.by_index(min(self.index + 1, len(self.choice_set) - 1))

    def prev(self) -> "Choice[T]":
        """Previous option, staying on the first one."""
        return self.choice_set.by_index(max(self.index - 1, 0))

    def circular_next(self) -> "Choice[T]":
        return self.choice_set.by_index((self.index + 1) % len(self.choice_set))

    def circular_prev(self) -> "Choice[T]":
        return self.choice_set.by_index((self.index - 1) % len(self.choice_set))
