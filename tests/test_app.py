import pytest

from tavern_game.app import App, KeyCode, KeyInput, Schedule, core_plugin, player_exists
from tavern_game.components import Player
from tavern_game.states import (
    ActiveDevice,
    InterfaceFlowSet,
    InterfaceSetup,
    PlayerMovedEvent,
    Scenes,
    UIState,
)


def test_key_press_is_held_and_just_pressed_until_clear():
    keys = KeyInput()
    keys.press(KeyCode.F)
    assert keys.pressed(KeyCode.F)
    assert keys.just_pressed(KeyCode.F)
    keys.clear()
    assert keys.pressed(KeyCode.F)
    assert not keys.just_pressed(KeyCode.F)
    keys.press(KeyCode.F)
    assert not keys.just_pressed(KeyCode.F)


def test_key_release():
    keys = KeyInput()
    keys.press(KeyCode.ESCAPE)
    keys.release(KeyCode.ESCAPE)
    assert not keys.pressed(KeyCode.ESCAPE)
    assert keys.just_released(KeyCode.ESCAPE)
    keys.clear()
    assert not keys.just_released(KeyCode.ESCAPE)


def test_update_clears_just_pressed_after_one_frame():
    app = App()
    seen = []
    app.add_system(Schedule.UPDATE, lambda a: seen.append(a.keys.just_pressed(KeyCode.I)))
    app.keys.press(KeyCode.I)
    app.update()
    app.update()
    assert seen == [True, False]
    assert app.keys.pressed(KeyCode.I)


def test_add_plugin_runs_once_and_rejects_duplicates():
    app = App()
    calls = []

    def plugin(a):
        calls.append(a)

    app.add_plugin(plugin)
    assert calls == [app]
    with pytest.raises(ValueError):
        app.add_plugin(plugin)
    assert len(calls) == 1


def test_systems_follow_set_order_then_unset_and_schedules():
    app = App()
    core_plugin(app)
    log = []

    def make(name):
        return lambda a: log.append((name, a.frame))

    app.add_system(Schedule.UPDATE, make("after"), in_set=InterfaceFlowSet.AFTER_CHANGE)
    app.add_system(Schedule.UPDATE, make("free"))
    app.add_system(Schedule.UPDATE, make("entry"), in_set=InterfaceFlowSet.ENTRY)
    app.add_system(Schedule.UPDATE, make("do"), in_set=InterfaceFlowSet.DO_CHANGE)
    app.add_system(Schedule.UPDATE, make("before"), in_set=InterfaceFlowSet.BEFORE_CHANGE)
    app.add_system(Schedule.PRE_UPDATE, make("pre"))
    app.update()
    assert [name for name, _ in log] == ["pre", "entry", "before", "do", "after", "free"]
    assert {frame for _, frame in log} == {0}
    assert app.frame == 1


def test_configure_sets_rejects_repeats():
    app = App()
    with pytest.raises(ValueError):
        app.configure_sets(Schedule.UPDATE, InterfaceFlowSet.ENTRY, InterfaceFlowSet.ENTRY)


def test_run_if_skips_system():
    app = App()
    ran = []
    flag = {"on": False}
    app.add_system(Schedule.UPDATE, lambda a: ran.append(a.frame), run_if=lambda a: flag["on"])
    app.update()
    flag["on"] = True
    app.update()
    assert ran == [1]


def test_state_change_applies_between_schedules():
    app = App()
    core_plugin(app)
    log = []
    app.add_system(
        Schedule.PRE_UPDATE,
        lambda a: a.state(UIState).set(UIState.EXPLORATION),
        run_if=lambda a: a.frame == 0,
    )
    app.on_exit(UIState.HIDDEN, lambda a: log.append("exit"))
    app.on_enter(UIState.EXPLORATION, lambda a: log.append("enter"))
    app.add_system(Schedule.UPDATE, lambda a: log.append(a.state(UIState).current))
    app.update()
    assert log == ["exit", "enter", UIState.EXPLORATION]


def test_initial_states_entered_once_at_first_update():
    app = App()
    core_plugin(app)
    entered = []
    app.on_enter(Scenes.TEST_SCENE, lambda a: entered.append(a.frame))
    app.update()
    app.update()
    assert entered == [0]


def test_event_read_once_per_system_and_kept_one_more_frame():
    app = App()
    early, late = [], []
    app.add_system(Schedule.UPDATE, lambda a: early.append(len(a.read(PlayerMovedEvent))))
    app.add_system(
        Schedule.UPDATE,
        lambda a: a.send(PlayerMovedEvent()),
        run_if=lambda a: a.frame == 0,
    )
    app.add_system(Schedule.UPDATE, lambda a: late.append(len(a.read(PlayerMovedEvent))))
    for _ in range(3):
        app.update()
    assert early == [0, 1, 0]
    assert late == [1, 0, 0]


def test_peek_leaves_events_unread():
    app = App()
    counts = []
    app.add_system(
        Schedule.UPDATE,
        lambda a: a.send(PlayerMovedEvent()),
        run_if=lambda a: a.frame == 0,
    )
    app.add_system(Schedule.UPDATE, lambda a: counts.append(len(a.peek(PlayerMovedEvent))))
    for _ in range(3):
        app.update()
    assert counts == [1, 1, 0]


def test_read_outside_systems_consumes():
    app = App()
    event = PlayerMovedEvent()
    app.send(event)
    assert app.read(PlayerMovedEvent) == [event]
    assert app.read(PlayerMovedEvent) == []


def test_resources_and_states_must_exist():
    app = App()
    with pytest.raises(KeyError):
        app.resource(ActiveDevice)
    with pytest.raises(KeyError):
        app.state(UIState)


def test_init_resource_keeps_existing():
    app = App()
    first = app.init_resource(InterfaceSetup)
    first.value = True
    assert app.init_resource(InterfaceSetup) is first
    assert app.resource(InterfaceSetup).value is True


def test_core_plugin_defaults():
    app = App()
    core_plugin(app)
    assert app.state(Scenes).current is Scenes.TEST_SCENE
    assert app.state(UIState).current is UIState.HIDDEN
    assert app.resource(ActiveDevice).entity is None
    assert app.resource(InterfaceSetup).value is False


def test_player_exists():
    app = App()
    assert player_exists(app) is False
    app.world.spawn(Player())
    assert player_exists(app) is True


def test_update_rejects_negative_delta_and_records_delta():
    app = App()
    with pytest.raises(ValueError):
        app.update(-1.0)
    app.update(0.5)
    assert app.delta == 0.5
    assert app.frame == 1