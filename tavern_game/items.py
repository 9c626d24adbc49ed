"""Item, recipe and device identifiers plus the static game data built on them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

PLAYER_MOVEMENT_SPEED = 6.0
INVENTORY_WINDOW_GRID_SIZE = 10
INVENTORY_WINDOW_GRID_TILE_SIZE = 100.0
INVENTORY_WINDOW_GRID_TILE_SPACING = 5.0


class DeviceType(Enum):
    """Kinds of interactive devices placed in the world."""

    STOVE = "Stove"


class ItemID(Enum):
    """Every item the game knows; the value is the name shown to the player."""

    NONE = "None"

    # Raw ingredients
    RAW_MEAT = "Raw Meat"
    FISH = "Fish"
    HERB = "Herb"
    EGG = "Egg"
    MILK = "Milk"
    FLOUR = "Flour"
    SUGAR = "Sugar"
    SALT = "Salt"
    BUTTER = "Butter"
    CHEESE = "Cheese"
    TOMATO = "Tomato"
    ONION = "Onion"
    GARLIC = "Garlic"
    POTATO = "Potato"
    CARROT = "Carrot"
    MUSHROOM = "Mushroom"
    PEPPER = "Pepper"
    CABBAGE = "Cabbage"
    CORN = "Corn"
    WHEAT = "Wheat"
    RICE = "Rice"
    APPLE = "Apple"
    BERRY = "Berry"
    LEMON = "Lemon"
    HONEY = "Honey"
    OIL = "Oil"

    # Prepared or cooked items
    COOKED_MEAT = "Cooked Meat"
    GRILLED_FISH = "Grilled Fish"
    VEGETABLE_SOUP = "Vegetable Soup"
    BREAD = "Bread"
    FRIED_EGG = "Fried Egg"
    OMELETTE = "Omelette"
    CHEESE_TOAST = "Cheese Toast"
    MEAT_STEW = "Meat Stew"
    FISH_STEW = "Fish Stew"
    SALAD = "Salad"
    ROASTED_VEGETABLES = "Roasted Vegetables"
    FRUIT_PIE = "Fruit Pie"
    BERRY_JAM = "Berry Jam"
    PANCAKES = "Pancakes"
    CAKE = "Cake"
    COOKIES = "Cookies"
    GRILLED_CHEESE = "Grilled Cheese"
    RICE_BOWL = "Rice Bowl"
    STIR_FRY = "Stir Fry"
    SMOOTHIE = "Smoothie"
    HERB_TEA = "Herb Tea"

    def __str__(self) -> str:
        return self.value


class RecipeID(Enum):
    """Identifiers of cookable recipes."""

    COOKED_MEAT = "CookedMeat"
    VEGETABLE_SOUP = "VegetableSoup"
    GRILLED_FISH = "GrilledFish"
    FISH_STEW = "FishStew"


@dataclass
class ItemStack:
    """A number of identical items held together."""

    item_id: ItemID
    item_count: int


@dataclass(frozen=True)
class Recipe:
    """What a device needs and how long it takes to produce an item."""

    id: RecipeID
    name: str
    required_items: tuple[ItemStack, ...]
    cook_time: float  # seconds
    output_item: ItemID


ALL_RECIPES: tuple[Recipe, ...] = (
    Recipe(
        id=RecipeID.COOKED_MEAT,
        name="Cooked Meat",
        required_items=(ItemStack(ItemID.RAW_MEAT, 1),),
        cook_time=5.0,
        output_item=ItemID.COOKED_MEAT,
    ),
    Recipe(
        id=RecipeID.FISH_STEW,
        name="Fish Soup",
        required_items=(ItemStack(ItemID.HERB, 1), ItemStack(ItemID.FISH, 1)),
        cook_time=8.0,
        output_item=ItemID.VEGETABLE_SOUP,
    ),
)