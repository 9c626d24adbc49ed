"""Command-line entry point: build the game and drive it with scripted input."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from tavern_game.app import App, KeyCode, core_plugin
from tavern_game.camera import camera_plugin
from tavern_game.components import Player
from tavern_game.devices import debug_plugin, device_plugin
from tavern_game.player import UnhandledStateError, actor_plugin
from tavern_game.population import PlayerNotFoundError, inventory_plugin, recipe_plugin
from tavern_game.scene import scene_manager_plugin
from tavern_game.screens import ui_plugin
from tavern_game.states import UIState
from tavern_game.transform import Transform
from tavern_game.world import SingleEntityError

_KEYS = {key.name.lower(): key for key in KeyCode}


def build_app() -> App:
    """Assemble the game with every plugin."""
    app = App()
    for plugin in (
        core_plugin,
        device_plugin,
        actor_plugin,
        ui_plugin,
        scene_manager_plugin,
        camera_plugin,
        debug_plugin,
        inventory_plugin,
        recipe_plugin,
    ):
        app.add_plugin(plugin)
    return app


def _key(args: list[str]) -> KeyCode:
    if len(args) != 1:
        raise ValueError("expected exactly one key name")
    try:
        return _KEYS[args[0].lower()]
    except KeyError:
        raise ValueError(f"unknown key {args[0]!r}") from None


def _frames(args: list[str]) -> int:
    if not args:
        return 1
    if len(args) != 1:
        raise ValueError("wait takes at most one frame count")
    try:
        count = int(args[0])
    except ValueError:
        raise ValueError(f"invalid frame count {args[0]!r}") from None
    if count < 0:
        raise ValueError("frame count cannot be negative")
    return count


def _status(app: App) -> str:
    state = app.state(UIState).current.value
    try:
        _, _, transform = app.world.single(Player, Transform)
    except SingleEntityError:
        return f"{state} no-player"
    pos = transform.translation
    return f"{state} {pos.x:.2f} {pos.y:.2f} {pos.z:.2f}"


def run_commands(app: App, commands: Iterable[str]) -> list[str]:
    """Run input commands and return the lines produced by ``status``.

    Commands: ``press KEY``, ``release KEY``, ``tap KEY`` (press for one
    frame), ``wait [N]`` (run N frames) and ``status``. Blank lines and lines
    starting with ``#`` are ignored.
    """
    report: list[str] = []
    for line in commands:
        words = line.split()
        if not words or words[0].startswith("#"):
            continue
        name, *args = words
        if name == "press":
            app.keys.press(_key(args))
        elif name == "release":
            app.keys.release(_key(args))
        elif name == "tap":
            key = _key(args)
            app.keys.press(key)
            app.update()
            app.keys.release(key)
        elif name == "wait":
            for _ in range(_frames(args)):
                app.update()
        elif name == "status":
            if args:
                raise ValueError("status takes no arguments")
            report.append(_status(app))
        else:
            raise ValueError(f"unknown command {name!r}")
    return report


def main(argv: Sequence[str] | None = None) -> int:
    logging.basicConfig(format="%(message)s")
    parser = argparse.ArgumentParser(
        prog="tavern-game", description="Run the tavern game with scripted input."
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=[],
        help="an input command; may be repeated",
    )
    parser.add_argument("--script", type=Path, help="file with one command per line")
    args = parser.parse_args(argv)

    commands = list(args.commands)
    if args.script is not None:
        try:
            commands.extend(args.script.read_text(encoding="utf-8").splitlines())
        except OSError as error:
            parser.error(f"cannot read script: {error}")
    if not commands:
        commands = ["wait", "status"]

    app = build_app()
    try:
        report = run_commands(app, commands)
    except ValueError as error:
        parser.error(str(error))
    except (UnhandledStateError, PlayerNotFoundError) as error:
        print(error, file=sys.stderr)
        return 1
    for line in report:
        print(line)
    return 0