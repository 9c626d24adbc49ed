"""Screens shown for each UI state and the systems that switch between them."""

from __future__ import annotations

from enum import Enum
from functools import partial

from tavern_game.app import App, Schedule, System
from tavern_game.components import Owner, OwnerKind
from tavern_game.population import ui_elements_plugin
from tavern_game.states import (
    PLAYER_DEFAULT_UI_STATE,
    ActiveDevice,
    InterfaceFlowSet,
    InterfaceSetup,
    PlayerClosedDeviceInterfaceEvent,
    PlayerClosedInventoryScreenEvent,
    PlayerOpenInventoryScreenEvent,
    UIState,
    clear_interface_setup,
    set_interface_setup,
)
from tavern_game.ui import (
    BackgroundColor,
    Color,
    Display,
    FlexDirection,
    Node,
    PositionType,
    StateScoped,
    Text,
    Val,
    inventory_window_bundle,
    recipe_list_window_bundle,
)


def clear_state_scoped(app: App, state: Enum) -> None:
    """Despawn every entity scoped to ``state``, with its descendants."""
    world = app.world
    for entity, scoped in list(world.query(StateScoped)):
        if scoped.state == state and entity in world:
            world.despawn(entity)


def _scoped_cleanup(state: Enum) -> System:
    return partial(clear_state_scoped, state=state)


def exploration_setup(app: App) -> None:
    app.world.spawn(
        Node(position_type=PositionType.ABSOLUTE, left=Val.px(0.0), top=Val.px(0.0)),
        Text("Exploration"),
        StateScoped(UIState.EXPLORATION),
    )


def inventory_setup(app: App) -> None:
    root = app.world.spawn(
        Node(
            position_type=PositionType.ABSOLUTE,
            left=Val.px(0.0),
            top=Val.px(0.0),
            width=Val.percent(100.0),
            height=Val.percent(100.0),
        ),
        Text("Inventory"),
        BackgroundColor(Color.srgb_u8(255, 0, 0)),
        StateScoped(UIState.INVENTORY),
    )
    app.world.spawn(inventory_window_bundle(Owner(OwnerKind.PLAYER)), parent=root)


def stove_setup(app: App) -> None:
    """Build the stove screen: a recipe sidebar and a main area."""
    world = app.world
    root = world.spawn(
        Node(
            display=Display.FLEX,
            position_type=PositionType.RELATIVE,
            width=Val.percent(100.0),
            height=Val.percent(100.0),
        ),
        StateScoped(UIState.DEVICE_STOVE),
        BackgroundColor(Color.srgb_u8(255, 0, 0)),
    )
    sidebar = world.spawn(
        Node(width=Val.percent(30.0), height=Val.percent(100.0)), parent=root
    )
    device = app.resource(ActiveDevice).entity
    if device is not None:
        world.spawn(
            Node(
                display=Display.FLEX,
                flex_direction=FlexDirection.COLUMN,
                width=Val.percent(100.0),
                height=Val.percent(100.0),
            ),
            recipe_list_window_bundle(),
            Owner(OwnerKind.DEVICE, device),
            parent=sidebar,
        )
    else:
        world.spawn(recipe_list_window_bundle(), parent=sidebar)
    world.spawn(
        Node(width=Val.percent(70.0), height=Val.percent(100.0)),
        Text("Stove Device"),
        parent=root,
    )


def stove_ui_condition(app: App) -> bool:
    """True while the stove screen is wanted but not yet built."""
    return (
        app.state(UIState).current is UIState.DEVICE_STOVE
        and not app.resource(InterfaceSetup).value
    )


def _build_stove_interface(app: App) -> None:
    set_interface_setup(app.resource(InterfaceSetup))
    stove_setup(app)


def _reset_stove_interface(app: App) -> None:
    clear_interface_setup(app.resource(InterfaceSetup))


def handle_device_closed_event(app: App) -> None:
    for _ in app.read(PlayerClosedDeviceInterfaceEvent):
        app.state(UIState).set(PLAYER_DEFAULT_UI_STATE)


def handle_inventory_opened_event(app: App) -> None:
    for _ in app.read(PlayerOpenInventoryScreenEvent):
        app.state(UIState).set(UIState.INVENTORY)


def handle_inventory_closed_event(app: App) -> None:
    for _ in app.read(PlayerClosedInventoryScreenEvent):
        app.state(UIState).set(PLAYER_DEFAULT_UI_STATE)


def exploration_ui_plugin(app: App) -> None:
    app.on_enter(UIState.EXPLORATION, exploration_setup)
    app.on_exit(UIState.EXPLORATION, _scoped_cleanup(UIState.EXPLORATION))


def inventory_ui_plugin(app: App) -> None:
    app.on_enter(UIState.INVENTORY, inventory_setup)
    app.on_exit(UIState.INVENTORY, _scoped_cleanup(UIState.INVENTORY))


def stove_device_ui_plugin(app: App) -> None:
    app.add_system(
        Schedule.UPDATE,
        _build_stove_interface,
        in_set=InterfaceFlowSet.DO_CHANGE,
        run_if=stove_ui_condition,
    )
    app.on_exit(UIState.DEVICE_STOVE, _scoped_cleanup(UIState.DEVICE_STOVE))
    app.on_exit(UIState.DEVICE_STOVE, _reset_stove_interface)


def ui_plugin(app: App) -> None:
    app.add_plugin(ui_elements_plugin)
    app.add_plugin(exploration_ui_plugin)
    app.add_plugin(stove_device_ui_plugin)
    app.add_plugin(inventory_ui_plugin)
    for system in (
        handle_device_closed_event,
        handle_inventory_opened_event,
        handle_inventory_closed_event,
    ):
        app.add_system(Schedule.UPDATE, system)