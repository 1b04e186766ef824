"""
Person rows displayed by the list.

A PersonList is fixed for the lifetime of a session: insertion order is
display order and nothing mutates it after construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import overload

from ..config.constants import DEFAULT_IMAGE_REF


@dataclass(frozen=True)
class Person:
    """A single displayed row.

    ``image_ref`` is opaque: it is handed to whatever renders the avatar
    without being parsed or checked.
    """

    name: str
    age: int
    image_ref: str = ""

    @property
    def summary(self) -> str:
        return f"I am {self.age} years old"


class PersonList(Sequence[Person]):
    """Immutable, ordered sequence of people."""

    def __init__(self, people: Iterable[Person] = ()) -> None:
        self._people: tuple[Person, ...] = tuple(people)

    @overload
    def __getitem__(self, index: int) -> Person: ...

    @overload
    def __getitem__(self, index: slice) -> PersonList: ...

    def __getitem__(self, index: int | slice) -> Person | PersonList:
        if isinstance(index, slice):
            return PersonList(self._people[index])
        return self._people[index]

    def __len__(self) -> int:
        return len(self._people)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._people)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PersonList):
            return self._people == other._people
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._people)

    def __repr__(self) -> str:
        return f"PersonList({len(self._people)} people)"

    @property
    def is_empty(self) -> bool:
        return not self._people


_ROSTER = (
    "Andrew",
    "Maria",
    "Ivan",
    "Olga",
    "Dmitry",
    "Anna",
    "Sergey",
    "Elena",
    "Pavel",
    "Natalia",
)


def sample_people(count: int, image_ref: str = DEFAULT_IMAGE_REF) -> PersonList:
    """Build a demo list of ``count`` people.

    Names cycle through a fixed roster and ages are derived from the
    position, so the same count always produces the same list.
    """
    return PersonList(
        Person(
            name=_ROSTER[i % len(_ROSTER)],
            age=18 + (i * 7) % 50,
            image_ref=image_ref,
        )
        for i in range(max(0, count))
    )
