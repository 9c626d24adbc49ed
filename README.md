# tavern_game

A small tavern cooking simulation that runs without a window. The world
is a plain entity-component store, input is simulated key presses, and
every frame runs the game's systems in a fixed order. A player stands in
a test scene with a stove nearby; the player can walk, open the stove
screen to see the recipe list, and open an inventory screen.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
tavern-game
```

With no options this runs one frame and prints a status line, the
current UI state followed by the player's position:

```
Exploration 0.00 1.00 0.00
```

Input is given as commands, either with `-c/--command` (repeatable) or
from a file with `--script FILE`, one command per line:

- `press KEY` – hold a key down
- `release KEY` – let it go
- `tap KEY` – press a key for one frame, then release it
- `wait [N]` – run N frames (default 1), each 1/60 of a second
- `status` – print the UI state and player position

Blank lines and lines beginning with `#` are skipped. Keys are `w`, `a`,
`s`, `d` (move), `f` (use the stove when within reach), `i` (open the
inventory) and `escape` (close the open stove or inventory screen),
case-insensitive.

```
tavern-game -c "wait" -c "press w" -c "wait 30" -c "release w" -c "tap f" -c "status"
```

Opening the stove prints a line such as
`Player Opened device interface 4 Stove`. An unknown command or key, or
a malformed frame count, ends the run with a usage error. Pressing
Escape when no menu is open, or opening a window without exactly one
player, prints the error and exits with status 1.

## Using it as a library

Items, recipes and inventories:

```python
from tavern_game.items import ALL_RECIPES, ItemID
from tavern_game.components import Inventory

inventory = Inventory()
inventory.add_item(ItemID.FISH, 200)
inventory.add_item(ItemID.FISH, 5)

assert inventory.contains_item(ItemID.FISH)
for stack in inventory:
    print(stack.item_id, stack.item_count)   # Fish 205

for recipe in ALL_RECIPES:
    print(recipe.name, recipe.cook_time)
```

Building and stepping the whole game:

```python
from tavern_game.app import KeyCode
from tavern_game.cli import build_app, run_commands
from tavern_game.states import UIState

app = build_app()
app.update()                      # first frame builds the scene
app.keys.press(KeyCode.I)
app.update()
app.update()
assert app.state(UIState).current is UIState.INVENTORY

print(run_commands(app, ["tap escape", "wait", "status"]))
```

The modules:

- `tavern_game.items` – `ItemID`, `RecipeID`, `DeviceType`, `ItemStack`,
  `Recipe`, `ALL_RECIPES` and the game's constants.
- `tavern_game.components` – `Inventory`, `Owner`/`OwnerKind`, `Cooking`,
  `CraftingOptions` and the marker components.
- `tavern_game.states` – `UIState`, `Scenes`, `InterfaceFlowSet`,
  `StateMachine`, the `ActiveDevice` and `InterfaceSetup` resources, and
  the game's events.
- `tavern_game.world` – `World`: `spawn`, `insert`, `despawn`, `get`,
  `has`, `query`, `single`, `children` and an event list;
  `SingleEntityError`.
- `tavern_game.transform` – `Vec3` and `Transform` with `look_at`.
- `tavern_game.app` – `App` (plugins, systems, schedules, states,
  resources, events, `update`), `Schedule`, `KeyCode`, `KeyInput`,
  `core_plugin`.
- `tavern_game.ui` – layout components (`Node`, `Val`, `Color`, `Text`,
  ...), window bundles and the `layout_wrapper`, `list_layout` and
  `sidebar_layout` helpers.
- `tavern_game.player`, `tavern_game.camera`, `tavern_game.devices`,
  `tavern_game.population`, `tavern_game.screens`, `tavern_game.scene` –
  the plugins that make up the game.
- `tavern_game.cli` – `build_app`, `run_commands` and the `tavern-game`
  command.

## What it does not do

- Nothing is drawn: there is no window, rendering or real keyboard. UI
  screens, meshes, lights and the camera exist only as components in
  the world.
- Nothing is cooked. The stove screen lists every recipe in
  `ALL_RECIPES`, and `Cooking`, `StoveSlot` and `CraftingOptions` exist,
  but no system starts, advances or finishes a recipe or consumes items.
- Nothing is saved; each run starts from the test scene.