"""Game states, schedule sets, shared resources and events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from tavern_game.items import DeviceType


class Scenes(Enum):
    TEST_SCENE = "TestScene"


class UIState(Enum):
    HIDDEN = "Hidden"
    EXPLORATION = "Exploration"
    DIALOG = "Dialog"
    INVENTORY = "Inventory"
    DEVICE_STOVE = "DeviceStove"


PLAYER_DEFAULT_UI_STATE = UIState.EXPLORATION

_MENU_STATES = frozenset({UIState.DEVICE_STOVE, UIState.DIALOG, UIState.INVENTORY})


class SceneSystemSet(Enum):
    START = "Start"
    LOAD = "Load"
    READY = "Ready"


class InterfaceFlowSet(Enum):
    """Stages of an interface change, run in declaration order."""

    ENTRY = "Entry"
    BEFORE_CHANGE = "BeforeChange"
    DO_CHANGE = "DoChange"
    AFTER_CHANGE = "AfterChange"


S = TypeVar("S")


class StateMachine(Generic[S]):
    """A current state plus a requested next state applied later."""

    def __init__(self, initial: S) -> None:
        self.current: S = initial
        self.pending: S | None = None

    def set(self, value: S) -> None:
        """Request a transition; the last request before ``apply`` wins."""
        self.pending = value

    def apply(self) -> tuple[S, S] | None:
        """Commit the pending state; return ``(exited, entered)`` if it changed."""
        pending, self.pending = self.pending, None
        if pending is None or pending == self.current:
            return None
        exited, self.current = self.current, pending
        return exited, pending


@dataclass
class ActiveDevice:
    """The device whose interface the player opened last."""

    entity: int | None = None


@dataclass
class InterfaceSetup:
    """Whether the current interface has been built."""

    value: bool = False


@dataclass(frozen=True)
class PlayerMovedEvent:
    pass


@dataclass(frozen=True)
class PlayerOpenedDeviceInterfaceEvent:
    device: int
    device_type: DeviceType


@dataclass(frozen=True)
class PlayerClosedDeviceInterfaceEvent:
    pass


@dataclass(frozen=True)
class PlayerOpenInventoryScreenEvent:
    pass


@dataclass(frozen=True)
class PlayerClosedInventoryScreenEvent:
    pass


@dataclass(frozen=True)
class InventoryWindowPopulationRequestEvent:
    window_entity: int
    inventory_entity: int


@dataclass(frozen=True)
class RecipeWindowPopulationRequestEvent:
    window_entity: int
    inventory_entity: int
    device_type: DeviceType


def in_menu_state(ui_state: UIState) -> bool:
    return ui_state in _MENU_STATES


def interface_not_setup(setup: InterfaceSetup) -> bool:
    return not setup.value


def set_interface_setup(setup: InterfaceSetup) -> None:
    setup.value = True


def clear_interface_setup(setup: InterfaceSetup) -> None:
    setup.value = False