"""Predicates that select which persons the filtered view shows."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from addrctl.domain.person import Person

PersonPredicate = Callable[[Person], bool]


def show_all(_person: Person) -> bool:
    return True


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches persons whose name contains any keyword as a whole word.

    Matching is case-insensitive. ``find alex`` matches "Alex Yeoh" but
    ``find al`` does not.
    """

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {w.casefold() for w in person.name.split()}
        return any(k.casefold() in words for k in self.keywords)
