"""The application loop: schedules, systems, states, resources, events and input."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from tavern_game.components import Player
from tavern_game.states import (
    ActiveDevice,
    InterfaceFlowSet,
    InterfaceSetup,
    Scenes,
    StateMachine,
    UIState,
)
from tavern_game.world import World

T = TypeVar("T")
System = Callable[["App"], None]
Condition = Callable[["App"], bool]
Plugin = Callable[["App"], None]

DEFAULT_DELTA = 1.0 / 60.0


class Schedule(Enum):
    """Per-frame schedules, run in declaration order with state changes between."""

    PRE_UPDATE = "PreUpdate"
    UPDATE = "Update"


class KeyCode(Enum):
    W = "KeyW"
    A = "KeyA"
    S = "KeyS"
    D = "KeyD"
    F = "KeyF"
    I = "KeyI"  # noqa: E741
    ESCAPE = "Escape"


class KeyInput:
    """Held keys plus the keys pressed or released since the last clear."""

    def __init__(self) -> None:
        self._pressed: set[KeyCode] = set()
        self._just_pressed: set[KeyCode] = set()
        self._just_released: set[KeyCode] = set()

    def press(self, key: KeyCode) -> None:
        if key not in self._pressed:
            self._pressed.add(key)
            self._just_pressed.add(key)

    def release(self, key: KeyCode) -> None:
        if key in self._pressed:
            self._pressed.discard(key)
            self._just_released.add(key)

    def pressed(self, key: KeyCode) -> bool:
        return key in self._pressed

    def just_pressed(self, key: KeyCode) -> bool:
        return key in self._just_pressed

    def just_released(self, key: KeyCode) -> bool:
        return key in self._just_released

    def clear(self) -> None:
        """Forget this frame's presses and releases; held keys stay held."""
        self._just_pressed.clear()
        self._just_released.clear()


@dataclass(frozen=True)
class _SystemEntry:
    system: System
    in_set: Any
    run_if: Condition | None


class App:
    """Holds the world and runs registered systems once per ``update``.

    Events live for the rest of the frame they are sent in and the whole
    following frame; each system sees each event at most once through ``read``.
    """

    def __init__(self) -> None:
        self.world = World()
        self.keys = KeyInput()
        self.delta = 0.0
        self.elapsed = 0.0
        self.frame = 0
        self._plugins: list[Plugin] = []
        self._systems: dict[Schedule, list[_SystemEntry]] = {s: [] for s in Schedule}
        self._set_order: dict[Schedule, list[Any]] = {s: [] for s in Schedule}
        self._on_enter: dict[Enum, list[System]] = defaultdict(list)
        self._on_exit: dict[Enum, list[System]] = defaultdict(list)
        self._states: dict[type, StateMachine[Any]] = {}
        self._resources: dict[type, Any] = {}
        self._events: list[tuple[int, Any]] = []
        self._next_seq = 0
        self._frame_start = 0
        self._cursors: dict[tuple[Any, type], int] = {}
        self._running: System | None = None
        self._started = False

    # Plugins and systems

    def add_plugin(self, plugin: Plugin) -> App:
        """Run ``plugin`` against this app; each plugin may be added only once."""
        if plugin in self._plugins:
            name = getattr(plugin, "__name__", repr(plugin))
            raise ValueError(f"plugin {name} was already added")
        self._plugins.append(plugin)
        plugin(self)
        return self

    def add_system(
        self,
        schedule: Schedule,
        system: System,
        in_set: Any = None,
        run_if: Condition | None = None,
    ) -> App:
        self._systems[schedule].append(_SystemEntry(system, in_set, run_if))
        return self

    def configure_sets(self, schedule: Schedule, *sets: Any) -> App:
        """Order the given sets; systems in no configured set run after them."""
        if len(set(sets)) != len(sets):
            raise ValueError("a set may appear only once in an ordering")
        self._set_order[schedule] = list(sets)
        return self

    def on_enter(self, state: Enum, system: System) -> App:
        self._on_enter[state].append(system)
        return self

    def on_exit(self, state: Enum, system: System) -> App:
        self._on_exit[state].append(system)
        return self

    # States and resources

    def init_state(self, state_type: type[Enum], initial: Enum | None = None) -> StateMachine[Any]:
        """Register a state type, starting at ``initial`` or its first member."""
        if state_type not in self._states:
            start = initial if initial is not None else next(iter(state_type))
            self._states[state_type] = StateMachine(start)
        return self._states[state_type]

    def state(self, state_type: type[Enum]) -> StateMachine[Any]:
        try:
            return self._states[state_type]
        except KeyError:
            raise KeyError(f"state {state_type.__name__} was never initialised") from None

    def init_resource(self, resource_type: type[T]) -> T:
        """Create a default resource unless one of that type already exists."""
        if resource_type not in self._resources:
            self._resources[resource_type] = resource_type()
        return self._resources[resource_type]

    def insert_resource(self, resource: Any) -> None:
        self._resources[type(resource)] = resource

    def resource(self, resource_type: type[T]) -> T:
        try:
            return self._resources[resource_type]
        except KeyError:
            raise KeyError(f"resource {resource_type.__name__} does not exist") from None

    # Events

    def send(self, event: Any) -> None:
        self._events.append((self._next_seq, event))
        self._next_seq += 1

    def _unread(self, event_type: type[T]) -> list[tuple[int, T]]:
        cursor = self._cursors.get((self._running, event_type), -1)
        return [
            (seq, event)
            for seq, event in self._events
            if seq > cursor and type(event) is event_type
        ]

    def read(self, event_type: type[T]) -> list[T]:
        """Events of this type the running system has not read yet, oldest first."""
        unread = self._unread(event_type)
        if unread:
            self._cursors[(self._running, event_type)] = unread[-1][0]
        return [event for _, event in unread]

    def peek(self, event_type: type[T]) -> list[T]:
        """Like ``read`` but leaves the events unread."""
        return [event for _, event in self._unread(event_type)]

    # Running

    def _call(self, system: System) -> None:
        self._running = system
        try:
            system(self)
        finally:
            self._running = None

    def _call_all(self, systems: Iterable[System]) -> None:
        for system in list(systems):
            self._call(system)

    def _run_schedule(self, schedule: Schedule) -> None:
        rank = {item: index for index, item in enumerate(self._set_order[schedule])}
        last = len(rank)
        ordered = sorted(
            self._systems[schedule],
            key=lambda entry: rank.get(entry.in_set, last),
        )
        for entry in ordered:
            if entry.run_if is not None and not entry.run_if(self):
                continue
            self._call(entry.system)

    def _apply_transitions(self) -> None:
        for machine in list(self._states.values()):
            change = machine.apply()
            if change is None:
                continue
            exited, entered = change
            self._call_all(self._on_exit[exited])
            self._call_all(self._on_enter[entered])

    def update(self, delta: float = DEFAULT_DELTA) -> None:
        """Advance one frame of ``delta`` seconds."""
        if delta < 0:
            raise ValueError("frame time cannot be negative")
        self.delta = delta
        self.elapsed += delta
        if not self._started:
            self._started = True
            for machine in list(self._states.values()):
                self._call_all(self._on_enter[machine.current])
        self._run_schedule(Schedule.PRE_UPDATE)
        self._apply_transitions()
        self._run_schedule(Schedule.UPDATE)
        self.keys.clear()
        self._events = [(seq, e) for seq, e in self._events if seq >= self._frame_start]
        self._frame_start = self._next_seq
        self.frame += 1


def core_plugin(app: App) -> None:
    """Register the game's states, shared resources and interface stage order."""
    app.init_state(Scenes)
    app.init_state(UIState)
    app.init_resource(ActiveDevice)
    app.init_resource(InterfaceSetup)
    app.configure_sets(
        Schedule.UPDATE,
        InterfaceFlowSet.ENTRY,
        InterfaceFlowSet.BEFORE_CHANGE,
        InterfaceFlowSet.DO_CHANGE,
        InterfaceFlowSet.AFTER_CHANGE,
    )


def player_exists(app: App) -> bool:
    return any(True for _ in app.world.query(Player))