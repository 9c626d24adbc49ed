"""Systems that request and fill the inventory and recipe windows."""

from __future__ import annotations

from tavern_game.app import App, Schedule
from tavern_game.components import (
    Inventory,
    InventoryWindow,
    Owner,
    OwnerKind,
    Player,
    RecipeListWindow,
)
from tavern_game.items import ALL_RECIPES
from tavern_game.states import (
    InterfaceFlowSet,
    InventoryWindowPopulationRequestEvent,
    PlayerOpenedDeviceInterfaceEvent,
    PlayerOpenInventoryScreenEvent,
    RecipeWindowPopulationRequestEvent,
)
from tavern_game.ui import (
    GOLD,
    Color,
    Node,
    PositionType,
    Text,
    TextColor,
    Val,
    inventory_item_window_bundle,
)
from tavern_game.world import SingleEntityError, World


class PlayerNotFoundError(LookupError):
    """Raised when a window is requested but there is not exactly one player."""

    def __init__(self) -> None:
        super().__init__("Unable to find player")


def _single_player(app: App) -> int:
    try:
        entity, _ = app.world.single(Player)
    except SingleEntityError:
        raise PlayerNotFoundError() from None
    return entity


def _clear_children(world: World, entity: int) -> None:
    for child in world.children(entity):
        world.despawn(child)


def emit_inventory_window_population_request(app: App) -> None:
    """Ask every player-owned inventory window to show the player's inventory."""
    if not app.peek(PlayerOpenInventoryScreenEvent):
        return
    player = _single_player(app)
    for window, _ in app.world.query(InventoryWindow):
        owner = app.world.get(window, Owner)
        if owner is not None and owner.kind is OwnerKind.PLAYER:
            app.send(
                InventoryWindowPopulationRequestEvent(
                    window_entity=window, inventory_entity=player
                )
            )


def emit_recipe_window_population_request(app: App) -> None:
    """Ask the recipe windows owned by an opened device to fill themselves."""
    for event in app.read(PlayerOpenedDeviceInterfaceEvent):
        player = _single_player(app)
        for window, _ in app.world.query(RecipeListWindow):
            owner = app.world.get(window, Owner)
            if (
                owner is not None
                and owner.kind is OwnerKind.DEVICE
                and owner.entity == event.device
            ):
                app.send(
                    RecipeWindowPopulationRequestEvent(
                        window_entity=window,
                        inventory_entity=player,
                        device_type=event.device_type,
                    )
                )


def populate_inventory_window(app: App) -> None:
    """Replace a window's tiles with one tile per stack of the requested inventory."""
    world = app.world
    for event in app.read(InventoryWindowPopulationRequestEvent):
        inventory = world.get(event.inventory_entity, Inventory)
        if inventory is None or not world.has(event.window_entity, InventoryWindow):
            continue
        _clear_children(world, event.window_entity)
        for stack in inventory:
            tile = world.spawn(inventory_item_window_bundle(stack), parent=event.window_entity)
            world.spawn(
                Node(
                    position_type=PositionType.ABSOLUTE,
                    bottom=Val.px(0.0),
                    right=Val.px(0.0),
                ),
                Text(str(stack.item_count)),
                TextColor(GOLD),
                parent=tile,
            )


def populate_recipe_window(app: App) -> None:
    """Replace a recipe window's entries with one record per known recipe."""
    world = app.world
    for event in app.read(RecipeWindowPopulationRequestEvent):
        if not world.has(event.window_entity, RecipeListWindow):
            continue
        _clear_children(world, event.window_entity)
        for recipe in ALL_RECIPES:
            record = world.spawn(
                Node(width=Val.percent(100.0), height=Val.percent(100.0)),
                parent=event.window_entity,
            )
            world.spawn(
                Text(recipe.name),
                TextColor(Color.srgb_u8(255, 255, 255)),
                parent=record,
            )


def inventory_plugin(app: App) -> None:
    app.add_system(Schedule.UPDATE, emit_inventory_window_population_request)


def recipe_plugin(app: App) -> None:
    app.add_system(
        Schedule.UPDATE,
        emit_recipe_window_population_request,
        in_set=InterfaceFlowSet.AFTER_CHANGE,
    )


def ui_elements_plugin(app: App) -> None:
    app.add_system(Schedule.UPDATE, populate_inventory_window)
    app.add_system(Schedule.UPDATE, populate_recipe_window)