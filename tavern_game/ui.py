"""UI layout components, window bundles and layout helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, TypeVar

from tavern_game.components import InventoryItemWindow, InventoryWindow, Owner, RecipeListWindow
from tavern_game.items import (
    INVENTORY_WINDOW_GRID_SIZE,
    INVENTORY_WINDOW_GRID_TILE_SIZE,
    INVENTORY_WINDOW_GRID_TILE_SPACING,
    ItemStack,
)
from tavern_game.world import World

T = TypeVar("T")


@dataclass(frozen=True)
class Val:
    """A length: automatic, in pixels, or a percentage of the parent."""

    value: float = 0.0
    unit: str = "auto"

    UNITS: ClassVar[frozenset[str]] = frozenset({"auto", "px", "percent"})

    def __post_init__(self) -> None:
        if self.unit not in self.UNITS:
            raise ValueError(f"unknown length unit {self.unit!r}")

    @classmethod
    def px(cls, value: float) -> Val:
        return cls(float(value), "px")

    @classmethod
    def percent(cls, value: float) -> Val:
        return cls(float(value), "percent")

    @classmethod
    def auto(cls) -> Val:
        return cls(0.0, "auto")


_ZERO = Val(0.0, "px")
_AUTO = Val(0.0, "auto")


class Display(Enum):
    FLEX = "flex"
    GRID = "grid"
    BLOCK = "block"
    NONE = "none"


class PositionType(Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class FlexDirection(Enum):
    ROW = "row"
    COLUMN = "column"


class JustifyContent(Enum):
    DEFAULT = "default"
    START = "start"
    CENTER = "center"
    END = "end"


class AlignItems(Enum):
    DEFAULT = "default"
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class UiRect:
    left: Val = _ZERO
    right: Val = _ZERO
    top: Val = _ZERO
    bottom: Val = _ZERO

    @classmethod
    def all(cls, value: Val) -> UiRect:
        return cls(value, value, value, value)


@dataclass
class Node:
    """Layout properties of a UI element."""

    display: Display = Display.FLEX
    position_type: PositionType = PositionType.RELATIVE
    flex_direction: FlexDirection = FlexDirection.ROW
    justify_content: JustifyContent = JustifyContent.DEFAULT
    align_items: AlignItems = AlignItems.DEFAULT
    width: Val = _AUTO
    height: Val = _AUTO
    left: Val = _AUTO
    right: Val = _AUTO
    top: Val = _AUTO
    bottom: Val = _AUTO
    grid_template_columns: tuple[Val, ...] = ()
    grid_template_rows: tuple[Val, ...] = ()
    row_gap: Val = _ZERO
    column_gap: Val = _ZERO
    padding: UiRect = field(default_factory=UiRect)


@dataclass(frozen=True)
class Color:
    """An sRGB colour with components between 0 and 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def srgb(cls, red: float, green: float, blue: float) -> Color:
        return cls(red, green, blue)

    @classmethod
    def srgb_u8(cls, red: int, green: int, blue: int) -> Color:
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel {channel} is outside 0..255")
        return cls(red / 255.0, green / 255.0, blue / 255.0)


WHITE = Color.srgb(1.0, 1.0, 1.0)
GOLD = Color.srgb_u8(255, 215, 0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass
class Text:
    content: str = ""


@dataclass
class TextColor:
    color: Color = WHITE


@dataclass
class BackgroundColor:
    color: Color = TRANSPARENT


@dataclass(frozen=True)
class StateScoped:
    """Marks an entity to be removed when the given state is left."""

    state: Enum


def _full_size(**overrides: Any) -> Node:
    return Node(width=Val.percent(100.0), height=Val.percent(100.0), **overrides)


def inventory_window_bundle(owner: Owner | None = None) -> tuple[Any, ...]:
    """Components of a grid window listing an inventory."""
    tile = Val.px(INVENTORY_WINDOW_GRID_TILE_SIZE)
    spacing = Val.px(INVENTORY_WINDOW_GRID_TILE_SPACING)
    node = _full_size(
        position_type=PositionType.RELATIVE,
        display=Display.GRID,
        grid_template_columns=(tile,) * INVENTORY_WINDOW_GRID_SIZE,
        grid_template_rows=(tile,) * INVENTORY_WINDOW_GRID_SIZE,
        row_gap=spacing,
        column_gap=spacing,
        padding=UiRect.all(Val.px(25.0)),
    )
    return (
        InventoryWindow(),
        owner if owner is not None else Owner(),
        node,
        BackgroundColor(Color.srgb_u8(255, 255, 255)),
    )


def inventory_item_window_bundle(stack: ItemStack | None = None) -> tuple[Any, ...]:
    """Components of one inventory tile, showing ``stack`` when given."""
    tile = Val.px(INVENTORY_WINDOW_GRID_TILE_SIZE)
    node = Node(
        display=Display.FLEX,
        width=tile,
        height=tile,
        justify_content=JustifyContent.CENTER,
        align_items=AlignItems.CENTER,
    )
    if stack is None:
        marker = InventoryItemWindow()
        text = Text("")
    else:
        marker = InventoryItemWindow(item_id=stack.item_id, item_count=stack.item_count)
        text = Text(str(stack.item_id))
    return (marker, node, BackgroundColor(Color.srgb_u8(100, 100, 100)), text)


def recipe_list_window_bundle() -> tuple[Any, ...]:
    return (RecipeListWindow(),)


def layout_wrapper(world: World, content: Callable[[World, int], None]) -> int:
    """Spawn a full-size wrapper with a full-size inner node filled by ``content``."""
    outer = world.spawn(_full_size())
    inner = world.spawn(_full_size(), parent=outer)
    content(world, inner)
    return outer


def list_layout(
    world: World,
    parent: int | None,
    items: Iterable[T],
    item_content: Callable[[World, int, T], None],
) -> int:
    """Spawn a column with one cell per item, each filled by ``item_content``."""
    container = world.spawn(
        _full_size(
            display=Display.FLEX,
            flex_direction=FlexDirection.COLUMN,
            position_type=PositionType.RELATIVE,
        ),
        BackgroundColor(Color.srgb_u8(0, 0, 255)),
        parent=parent,
    )
    for item in items:
        cell = world.spawn(
            Node(width=Val.percent(20.0), height=Val.px(100.0)), parent=container
        )
        item_content(world, cell, item)
    return container


def sidebar_layout(
    world: World,
    parent: int | None,
    sidebar_content: Callable[[World, int], None],
    main_content: Callable[[World, int], None],
) -> int:
    """Spawn a row holding a narrow sidebar and a wide main area."""
    container = world.spawn(
        _full_size(display=Display.FLEX, position_type=PositionType.RELATIVE),
        BackgroundColor(Color.srgb_u8(0, 0, 255)),
        parent=parent,
    )
    sidebar = world.spawn(
        Node(width=Val.percent(20.0), height=Val.px(100.0)), parent=container
    )
    sidebar_content(world, sidebar)
    main = world.spawn(Node(width=Val.percent(80.0), height=Val.px(100.0)), parent=container)
    main_content(world, main)
    return container