import pytest

from tavern_game.items import (
    ALL_RECIPES,
    INVENTORY_WINDOW_GRID_SIZE,
    PLAYER_MOVEMENT_SPEED,
    DeviceType,
    ItemID,
    ItemStack,
    Recipe,
    RecipeID,
)


@pytest.mark.parametrize(
    "item, text",
    [
        (ItemID.NONE, "None"),
        (ItemID.RAW_MEAT, "Raw Meat"),
        (ItemID.VEGETABLE_SOUP, "Vegetable Soup"),
        (ItemID.HERB_TEA, "Herb Tea"),
        (ItemID.STIR_FRY, "Stir Fry"),
    ],
)
def test_item_display_names(item, text):
    assert str(item) == text


def test_display_names_are_unique():
    looked_up = [ItemID(str(item)) for item in ItemID]
    assert len(looked_up) == len(set(looked_up))
    assert ItemID("Fish Stew") is ItemID.FISH_STEW


def test_item_lookup_by_display_name_round_trips():
    for item in ItemID:
        assert ItemID(str(item)) is item


def test_recipes_from_game_data():
    ids = [recipe.id for recipe in ALL_RECIPES]
    assert ids == [RecipeID.COOKED_MEAT, RecipeID.FISH_STEW]
    cooked, stew = ALL_RECIPES
    assert cooked.name == "Cooked Meat"
    assert cooked.cook_time == 5.0
    assert cooked.output_item is ItemID.COOKED_MEAT
    assert cooked.required_items == (ItemStack(ItemID.RAW_MEAT, 1),)
    assert stew.name == "Fish Soup"
    assert stew.cook_time == 8.0
    assert stew.output_item is ItemID.VEGETABLE_SOUP
    assert [s.item_id for s in stew.required_items] == [ItemID.HERB, ItemID.FISH]


def test_recipes_are_immutable():
    recipe = Recipe(
        id=RecipeID.GRILLED_FISH,
        name="Grilled Fish",
        required_items=(ItemStack(ItemID.FISH, 1),),
        cook_time=3.0,
        output_item=ItemID.GRILLED_FISH,
    )
    with pytest.raises(AttributeError):
        recipe.cook_time = 1.0
    assert recipe.cook_time == 3.0
    with pytest.raises(AttributeError):
        ALL_RECIPES[0].cook_time = 1.0
    assert ALL_RECIPES[0].cook_time == 5.0


def test_constants_and_device_type():
    assert PLAYER_MOVEMENT_SPEED == 6.0
    assert INVENTORY_WINDOW_GRID_SIZE == 10
    assert DeviceType("Stove") is DeviceType.STOVE


def test_item_stack_is_mutable():
    stack = ItemStack(ItemID.EGG, 2)
    stack.item_count += 3
    assert stack == ItemStack(ItemID.EGG, 5)