"""The main camera and the system that keeps it trained on the player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tavern_game.app import App, Schedule, player_exists
from tavern_game.components import Player
from tavern_game.transform import Transform, Vec3

FOLLOW_OFFSET = Vec3(10.0, 12.0, 10.0)


@dataclass
class Camera3d:
    """Marks a 3D camera."""


def main_camera_bundle() -> tuple[Any, ...]:
    """A camera above the origin looking straight down at it."""
    return (
        Camera3d(),
        Transform.from_xyz(0.0, 12.0, 0.0).looking_at(Vec3.ZERO, Vec3.Y),
    )


def player_follow(app: App) -> None:
    """Place the single camera at a fixed offset from the player, facing it."""
    players = [transform for _, _, transform in app.world.query(Player, Transform)]
    if len(players) != 1:
        return
    cameras = [
        transform
        for entity, _, transform in app.world.query(Camera3d, Transform)
        if not app.world.has(entity, Player)
    ]
    if len(cameras) != 1:
        return

    target = players[0].translation
    camera = cameras[0]
    camera.translation = target + FOLLOW_OFFSET
    camera.look_at(target, Vec3.Y)


def main_camera_plugin(app: App) -> None:
    app.add_system(Schedule.UPDATE, player_follow, run_if=player_exists)


def camera_plugin(app: App) -> None:
    app.add_plugin(main_camera_plugin)