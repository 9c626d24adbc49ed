"""Components attached to world entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from tavern_game.items import ItemID, ItemStack, RecipeID


@dataclass
class Player:
    """Marks the player entity."""


@dataclass
class Device:
    """Marks any interactive device."""


@dataclass
class StoveDevice:
    """Marks a stove."""


@dataclass
class StoveSlot:
    """Marks a cooking slot on a stove."""


class OwnerKind(Enum):
    OTHER = "other"
    PLAYER = "player"
    NPC = "npc"
    DEVICE = "device"


_KINDS_WITH_ENTITY = (OwnerKind.NPC, OwnerKind.DEVICE)


@dataclass(frozen=True)
class Owner:
    """Who a window or item belongs to; NPC and device owners name an entity."""

    kind: OwnerKind = OwnerKind.OTHER
    entity: int | None = None

    def __post_init__(self) -> None:
        if self.kind in _KINDS_WITH_ENTITY and self.entity is None:
            raise ValueError(f"owner of kind {self.kind.value} needs an entity")
        if self.kind not in _KINDS_WITH_ENTITY and self.entity is not None:
            raise ValueError(f"owner of kind {self.kind.value} takes no entity")


@dataclass
class Cooking:
    """A recipe being cooked, with its timer."""

    recipe_id: RecipeID
    duration: float
    elapsed: float = 0.0


@dataclass
class InventoryItem:
    """Marks an item that lives in an inventory."""


@dataclass
class InventoryWindow:
    """Marks a UI window that lists an inventory."""


@dataclass
class RecipeListWindow:
    """Marks a UI window that lists recipes."""


@dataclass
class InventoryItemWindow:
    """A UI tile that shows one stack of an inventory."""

    item_id: ItemID = ItemID.NONE
    item_count: int = 0


@dataclass
class Inventory:
    """Stacks of items, one stack per item kind, in the order first added."""

    stacks: list[ItemStack] = field(default_factory=list)
    max_inventory_stack: int = 0

    def add_item(self, item: ItemID, count: int) -> None:
        """Add ``count`` of ``item``, joining an existing stack when there is one."""
        if count < 0:
            raise ValueError("item count cannot be negative")
        existing = next((s for s in self.stacks if s.item_id == item), None)
        if existing is not None:
            existing.item_count += count
        else:
            self.stacks.append(ItemStack(item, count))

    def contains_item(self, item: ItemID) -> bool:
        return any(stack.item_id == item for stack in self.stacks)

    def __iter__(self) -> Iterator[ItemStack]:
        return iter(self.stacks)


@dataclass
class CraftingOptions:
    """Recipes an entity is able to craft."""

    recipes: list[RecipeID] = field(default_factory=list)


@dataclass
class RecipeList:
    """Marks a list of recipes."""