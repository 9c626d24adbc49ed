"""Stove devices, the active-device tracker and device debug logging."""

from __future__ import annotations

from typing import Any

from tavern_game.app import App, Schedule
from tavern_game.components import Device, StoveDevice, StoveSlot
from tavern_game.states import ActiveDevice, InterfaceFlowSet, PlayerOpenedDeviceInterfaceEvent


def stove_device_bundle() -> tuple[Any, ...]:
    return (Device(), StoveDevice())


def stove_slot_bundle() -> tuple[Any, ...]:
    return (Device(), StoveSlot())


def stove_slot_plugin(app: App) -> None:
    """Register stove slots; they need no systems of their own."""


def stove_device_plugin(app: App) -> None:
    app.add_plugin(stove_slot_plugin)


def update_active_device_resource(app: App) -> None:
    """Remember the device whose interface was opened most recently."""
    active = app.resource(ActiveDevice)
    for event in app.read(PlayerOpenedDeviceInterfaceEvent):
        active.entity = event.device


def device_plugin(app: App) -> None:
    app.add_plugin(stove_device_plugin)
    app.add_system(
        Schedule.UPDATE,
        update_active_device_resource,
        in_set=InterfaceFlowSet.BEFORE_CHANGE,
    )


def log_device_opened(app: App) -> None:
    for event in app.read(PlayerOpenedDeviceInterfaceEvent):
        print(f"Player Opened device interface {event.device} {event.device_type.value}")


def debug_plugin(app: App) -> None:
    app.add_system(Schedule.UPDATE, log_device_opened)