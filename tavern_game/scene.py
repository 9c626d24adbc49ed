"""The test scene: camera, light, floor, player and a stove."""

from __future__ import annotations

from dataclasses import dataclass

from tavern_game.app import App
from tavern_game.camera import main_camera_bundle
from tavern_game.devices import stove_device_bundle
from tavern_game.player import player_bundle
from tavern_game.screens import clear_state_scoped
from tavern_game.states import Scenes, UIState
from tavern_game.transform import Transform, Vec3
from tavern_game.ui import WHITE, Color

FLOOR_WIDTH = 150.0
FLOOR_LENGTH = 150.0
PLAYER_RADIUS = 0.5
PLAYER_HEIGHT = 2.0


@dataclass
class PointLight:
    shadows_enabled: bool = False


@dataclass(frozen=True)
class Shape:
    """A renderable primitive with its dimensions and base colour."""

    kind: str
    dimensions: tuple[float, ...]
    color: Color = WHITE

    def __post_init__(self) -> None:
        if any(size <= 0 for size in self.dimensions):
            raise ValueError(f"{self.kind} dimensions must be positive")

    @classmethod
    def plane(cls, color: Color = WHITE) -> Shape:
        return cls("plane", (1.0, 1.0), color)

    @classmethod
    def cylinder(cls, radius: float, height: float, color: Color = WHITE) -> Shape:
        return cls("cylinder", (radius, height), color)

    @classmethod
    def cuboid(cls, x: float, y: float, z: float, color: Color = WHITE) -> Shape:
        return cls("cuboid", (x, y, z), color)


def scene_setup(app: App) -> None:
    """Populate the world and switch the UI to exploration."""
    world = app.world
    camera = world.spawn(main_camera_bundle())
    world.insert(camera, Transform.from_xyz(10.0, 10.0, 10.0).looking_at(Vec3.ZERO, Vec3.Y))

    world.spawn(PointLight(shadows_enabled=True), Transform.from_xyz(0.0, 8.0, 0.0))

    world.spawn(
        Shape.plane(),
        Transform.from_xyz(0.0, 0.0, 0.0).with_scale(Vec3(FLOOR_WIDTH, 1.0, FLOOR_LENGTH)),
    )

    player = world.spawn(player_bundle())
    world.insert(
        player,
        Transform.from_xyz(0.0, 1.0, 0.0),
        Shape.cylinder(PLAYER_RADIUS, PLAYER_HEIGHT, Color.srgb(0.8, 0.7, 0.6)),
    )

    stove = world.spawn(stove_device_bundle())
    world.insert(
        stove,
        Transform.from_xyz(-5.0, 1.0, -5.0),
        Shape.cuboid(2.0, 2.0, 2.0, Color.srgb(0.0, 0.0, 0.6)),
    )

    app.state(UIState).set(UIState.EXPLORATION)


def _clear_test_scene(app: App) -> None:
    clear_state_scoped(app, Scenes.TEST_SCENE)


def test_scene_plugin(app: App) -> None:
    app.on_enter(Scenes.TEST_SCENE, scene_setup)
    app.on_exit(Scenes.TEST_SCENE, _clear_test_scene)


def scene_manager_plugin(app: App) -> None:
    app.add_plugin(test_scene_plugin)