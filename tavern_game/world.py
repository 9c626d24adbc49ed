"""An entity store with components, parent/child links and event queues."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


class SingleEntityError(LookupError):
    """Raised when a query expected exactly one match and found another number."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"expected exactly one matching entity, found {count}")


def _flatten(components: Iterable[Any]) -> Iterator[Any]:
    for component in components:
        if isinstance(component, (tuple, list)):
            yield from _flatten(component)
        else:
            yield component


class World:
    """Entities are integers; each holds at most one component of each type."""

    def __init__(self) -> None:
        self._ids = itertools.count()
        self._components: dict[int, dict[type, Any]] = {}
        self._parents: dict[int, int] = {}
        self._children: dict[int, list[int]] = {}
        self._events: list[Any] = []

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def __len__(self) -> int:
        return len(self._components)

    @property
    def entities(self) -> list[int]:
        return list(self._components)

    def spawn(self, *args: Any, parent: int | None = None) -> int:
        """Create an entity from components or tuples of components."""
        if parent is not None and parent not in self._components:
            raise KeyError(parent)
        entity = next(self._ids)
        self._components[entity] = {}
        self._children[entity] = []
        self.insert(entity, *args)
        if parent is not None:
            self._parents[entity] = parent
            self._children[parent].append(entity)
        return entity

    def insert(self, entity: int, *args: Any) -> None:
        """Add components, replacing any of the same type."""
        components = self._components[entity]
        for component in _flatten(args):
            components[type(component)] = component

    def despawn(self, entity: int) -> None:
        """Remove an entity and all its descendants."""
        if entity not in self._components:
            return
        for child in list(self._children[entity]):
            self.despawn(child)
        parent = self._parents.pop(entity, None)
        if parent is not None:
            self._children[parent].remove(entity)
        del self._children[entity]
        del self._components[entity]

    def get(self, entity: int, component_type: type[T]) -> T | None:
        return self._components.get(entity, {}).get(component_type)

    def has(self, entity: int, component_type: type) -> bool:
        return component_type in self._components.get(entity, {})

    def query(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, component, ...)`` for entities holding every type."""
        if not args:
            raise TypeError("query needs at least one component type")
        for entity, components in list(self._components.items()):
            if all(kind in components for kind in args):
                yield (entity, *(components[kind] for kind in args))

    def single(self, *args: type) -> tuple[Any, ...]:
        matches = list(self.query(*args))
        if len(matches) != 1:
            raise SingleEntityError(len(matches))
        return matches[0]

    def children(self, entity: int) -> list[int]:
        return list(self._children.get(entity, ()))

    def parent_of(self, entity: int) -> int | None:
        return self._parents.get(entity)

    def send(self, event: Any) -> None:
        self._events.append(event)

    def read(self, event_type: type[T]) -> list[T]:
        """Events of the given type sent since the last clear, oldest first."""
        return [event for event in self._events if type(event) is event_type]

    def clear_events(self) -> None:
        self._events.clear()