"""Named resources and a simple owning collection of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar


@dataclass
class Resource:
    """Something loaded by the engine and identified by its name."""

    name: str = ""


R = TypeVar("R", bound=Resource)


class ResourceList(Generic[R]):
    """An ordered collection of resources searchable by name."""

    def __init__(self) -> None:
        self._items: list[R] = []

    def add(self, resource: R) -> R:
        """Store a resource and hand it back."""
        self._items.append(resource)
        return resource

    def find(self, name: str) -> R | None:
        """Return the first resource with the given name, or None."""
        return next((res for res in self._items if res.name == name), None)

    def clear(self) -> None:
        """Drop every resource."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[R]:
        return iter(self._items)