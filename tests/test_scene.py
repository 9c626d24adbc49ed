import pytest

from tavern_game import scene
from tavern_game.app import App, core_plugin
from tavern_game.camera import Camera3d
from tavern_game.components import Inventory, Player, StoveDevice
from tavern_game.items import ItemID
from tavern_game.states import UIState
from tavern_game.transform import Transform, Vec3


def make_app():
    app = App()
    app.add_plugin(core_plugin)
    return app


def test_shape_constructors_keep_dimensions():
    assert scene.Shape.cuboid(2.0, 2.0, 2.0).dimensions == (2.0, 2.0, 2.0)
    assert scene.Shape.cylinder(0.5, 2.0).kind == "cylinder"


def test_shape_rejects_non_positive_size():
    with pytest.raises(ValueError):
        scene.Shape.cylinder(0.0, 2.0)


def test_scene_setup_places_entities():
    app = make_app()
    scene.scene_setup(app)
    world = app.world

    (_, _, camera) = world.single(Camera3d, Transform)
    assert camera.translation == Vec3(10.0, 10.0, 10.0)

    (player, _, player_transform) = world.single(Player, Transform)
    assert player_transform.translation == Vec3(0.0, 1.0, 0.0)
    assert world.get(player, Inventory).contains_item(ItemID.FISH)

    (_, _, stove) = world.single(StoveDevice, Transform)
    assert stove.translation == Vec3(-5.0, 1.0, -5.0)

    (_, light, _) = world.single(scene.PointLight, Transform)
    assert light.shadows_enabled is True

    planes = [t for _, s, t in world.query(scene.Shape, Transform) if s.kind == "plane"]
    assert [t.scale for t in planes] == [Vec3(150.0, 1.0, 150.0)]

    assert app.state(UIState).pending is UIState.EXPLORATION


def test_scene_manager_builds_scene_on_first_frame():
    app = make_app()
    app.add_plugin(scene.scene_manager_plugin)
    app.update()
    assert len(list(app.world.query(Player))) == 1
    assert app.state(UIState).current is UIState.EXPLORATION


def test_scene_manager_cannot_be_added_twice():
    app = make_app()
    app.add_plugin(scene.scene_manager_plugin)
    with pytest.raises(ValueError):
        app.add_plugin(scene.scene_manager_plugin)