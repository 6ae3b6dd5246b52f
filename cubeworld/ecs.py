"""A small entity-component system with per-component event subscribers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Callable, Optional

ENTITY_NONE = 0
"""Identifier stored for slots that hold no entity."""

INITIAL_CAPACITY = 64

Subscriber = Callable[[Any, "Entity"], None]


class Component(IntEnum):
    POSITION = 0
    CAMERA = 1
    CONTROL = 2
    PHYSICS = 3
    MOVEMENT = 4
    BLOCKLOOK = 5
    DEBUG = 6
    LIGHT = 7


class Event(Enum):
    INIT = 0
    DESTROY = 1
    RENDER = 2
    UPDATE = 3
    TICK = 4


@dataclass(frozen=True)
class Entity:
    """Handle to an entity: its unique id and its storage slot."""

    id: int
    index: int
    ecs: Optional["ECS"] = field(default=None, compare=False, repr=False)


@dataclass
class System:
    """Callbacks run for one component type; any of them may be None."""

    init: Optional[Subscriber] = None
    destroy: Optional[Subscriber] = None
    render: Optional[Subscriber] = None
    update: Optional[Subscriber] = None
    tick: Optional[Subscriber] = None
    default: Optional[Callable[[], Any]] = None

    def subscriber(self, event: Event) -> Optional[Subscriber]:
        """The callback registered for ``event``, or None."""
        return getattr(self, event.name.lower())


@dataclass
class _ComponentList:
    system: System
    values: dict[int, Any] = field(default_factory=dict)


class ECS:
    """Stores components per entity slot and dispatches events to systems."""

    def __init__(self, world: Any = None) -> None:
        self.world = world
        self.capacity = INITIAL_CAPACITY
        self._ids = [ENTITY_NONE] * self.capacity
        self._used = [False] * self.capacity
        self._next_entity_id = 1
        self._lists = {component: _ComponentList(System()) for component in Component}

    def register(self, component: Component, system: System) -> None:
        """Install ``system`` for ``component``, discarding stored values."""
        self._lists[Component(component)] = _ComponentList(system)

    def new(self) -> Entity:
        """Create an entity in the first free slot, growing storage if full."""
        index = next((i for i, used in enumerate(self._used) if not used), None)
        if index is None:
            index = self.capacity
            self.capacity *= 2
            grow = self.capacity - len(self._used)
            self._used.extend([False] * grow)
            self._ids.extend([ENTITY_NONE] * grow)

        self._used[index] = True
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        self._ids[index] = entity_id
        return Entity(entity_id, index, self)

    def _check_alive(self, entity: Entity) -> None:
        if not (0 <= entity.index < self.capacity and self._used[entity.index]):
            raise KeyError(f"no entity in slot {entity.index}")

    def delete(self, entity: Entity) -> None:
        """Remove every component of ``entity`` and free its slot."""
        self._check_alive(entity)
        for component in Component:
            component_list = self._lists[component]
            if entity.index not in component_list.values:
                continue
            value = component_list.values.pop(entity.index)
            if component_list.system.destroy is not None:
                component_list.system.destroy(value, entity)
        self._used[entity.index] = False
        self._ids[entity.index] = ENTITY_NONE

    def add(self, entity: Entity, component: Component, value: Any = None) -> Any:
        """Attach ``component`` to ``entity`` and run its init callback."""
        component_list = self._lists[Component(component)]
        if entity.index in component_list.values:
            raise ValueError(f"entity {entity.id} already has {Component(component).name}")
        if value is None and component_list.system.default is not None:
            value = component_list.system.default()
        component_list.values[entity.index] = value
        if component_list.system.init is not None:
            component_list.system.init(value, entity)
        return value

    def remove(self, entity: Entity, component: Component) -> None:
        """Detach ``component`` from ``entity`` and run its destroy callback."""
        component_list = self._lists[Component(component)]
        if entity.index not in component_list.values:
            raise KeyError(f"entity {entity.id} has no {Component(component).name}")
        value = component_list.values.pop(entity.index)
        if component_list.system.destroy is not None:
            component_list.system.destroy(value, entity)

    def has(self, entity: Entity, component: Component) -> bool:
        """True if ``entity`` carries ``component``."""
        return entity.index in self._lists[Component(component)].values

    def get(self, entity: Entity, component: Component) -> Any:
        """The value of ``component`` on ``entity``; KeyError if absent."""
        component_list = self._lists[Component(component)]
        if entity.index not in component_list.values:
            raise KeyError(f"entity {entity.id} has no {Component(component).name}")
        return component_list.values[entity.index]

    def event(self, event: Event) -> None:
        """Run the ``event`` callback of each component type on every holder."""
        for component in Component:
            component_list = self._lists[component]
            subscriber = component_list.system.subscriber(Event(event))
            if subscriber is None:
                continue
            for index in sorted(component_list.values):
                if index not in component_list.values:
                    continue
                subscriber(
                    component_list.values[index],
                    Entity(self._ids[index], index, self),
                )