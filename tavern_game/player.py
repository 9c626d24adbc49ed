"""The player entity and the systems that turn keyboard input into player actions."""

from __future__ import annotations

from typing import Any

from tavern_game.app import App, KeyCode, Schedule, player_exists
from tavern_game.components import Inventory, Player, StoveDevice
from tavern_game.items import PLAYER_MOVEMENT_SPEED, DeviceType, ItemID
from tavern_game.states import (
    InterfaceFlowSet,
    PlayerClosedDeviceInterfaceEvent,
    PlayerClosedInventoryScreenEvent,
    PlayerMovedEvent,
    PlayerOpenedDeviceInterfaceEvent,
    PlayerOpenInventoryScreenEvent,
    UIState,
)
from tavern_game.transform import Transform, Vec3
from tavern_game.world import SingleEntityError

STOVE_REACH = 10.0

_MOVEMENT_KEYS = (
    (KeyCode.W, Vec3(0.0, 0.0, -1.0)),
    (KeyCode.S, Vec3(0.0, 0.0, 1.0)),
    (KeyCode.A, Vec3(-1.0, 0.0, 0.0)),
    (KeyCode.D, Vec3(1.0, 0.0, 0.0)),
)


class UnhandledStateError(RuntimeError):
    """Raised when a menu is asked to close in a state that has no menu to close."""

    def __init__(self, state: UIState) -> None:
        self.state = state
        super().__init__(f"Unhandled UI State close: {state.value}")


def player_bundle() -> tuple[Any, ...]:
    """Components of a fresh player, carrying a starting supply of fish."""
    inventory = Inventory()
    inventory.add_item(ItemID.FISH, 200)
    return (Player(), inventory)


def _player_transform(app: App) -> Transform | None:
    matches = [
        transform
        for entity, _, transform in app.world.query(Player, Transform)
        if not app.world.has(entity, StoveDevice)
    ]
    return matches[0] if len(matches) == 1 else None


def player_movement(app: App) -> None:
    """Move the single player along the held direction keys."""
    try:
        _, _, transform = app.world.single(Player, Transform)
    except SingleEntityError:
        return

    direction = Vec3.ZERO
    for key, step in _MOVEMENT_KEYS:
        if app.keys.pressed(key):
            direction = direction + step

    app.send(PlayerMovedEvent())

    transform.translation = transform.translation + (
        direction.normalize_or_zero() * (PLAYER_MOVEMENT_SPEED * app.delta)
    )


def player_handle_ui_input(app: App) -> None:
    """Open the inventory screen when its key is pressed."""
    if app.keys.just_pressed(KeyCode.I):
        app.send(PlayerOpenInventoryScreenEvent())


def stove_interaction(app: App) -> None:
    """Open the stove interface when the player is near the only stove."""
    if not app.keys.just_pressed(KeyCode.F):
        return
    player_transform = _player_transform(app)
    if player_transform is None:
        return

    stoves = [
        (entity, transform)
        for entity, _, transform in app.world.query(StoveDevice, Transform)
        if not app.world.has(entity, Player)
    ]
    if len(stoves) != 1:
        return
    stove_entity, stove_transform = stoves[0]

    if stove_transform.translation.distance(player_transform.translation) < STOVE_REACH:
        app.state(UIState).set(UIState.DEVICE_STOVE)
        app.send(PlayerOpenedDeviceInterfaceEvent(device=stove_entity, device_type=DeviceType.STOVE))


def close_menus(app: App) -> None:
    """Close whichever menu is open when Escape is pressed."""
    if not app.keys.just_pressed(KeyCode.ESCAPE):
        return
    current = app.state(UIState).current
    if current is UIState.DEVICE_STOVE:
        app.send(PlayerClosedDeviceInterfaceEvent())
    elif current is UIState.INVENTORY:
        app.send(PlayerClosedInventoryScreenEvent())
    else:
        raise UnhandledStateError(current)


def actor_player_plugin(app: App) -> None:
    app.add_system(Schedule.PRE_UPDATE, stove_interaction, in_set=InterfaceFlowSet.ENTRY)
    for system in (player_movement, player_handle_ui_input, close_menus):
        app.add_system(Schedule.UPDATE, system, run_if=player_exists)


def actor_plugin(app: App) -> None:
    app.add_plugin(actor_player_plugin)