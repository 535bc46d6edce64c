"""Keyed, ordered store of icons."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from iconsheet.models.icon import IconFragment


@dataclass
class Collection:
    """Icons keyed by keyword, with an optional icon set prefix.

    Insertion order is kept so exports are deterministic. ``add`` overwrites
    silently; callers that care about collisions check ``in`` first.
    """

    prefix: str | None = None
    items: dict[str, IconFragment] = field(default_factory=dict)

    def add(self, keyword: str, fragment: IconFragment) -> None:
        self.items[keyword] = fragment

    def get(self, keyword: str) -> IconFragment | None:
        return self.items.get(keyword)

    def keywords(self) -> list[str]:
        return list(self.items)

    def length(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.items
