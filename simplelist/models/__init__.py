"""Data models for simplelist."""

from .person import Person, PersonList, sample_people

__all__ = [
    "Person",
    "PersonList",
    "sample_people",
]
