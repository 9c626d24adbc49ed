import pytest

from tavern_game.app import App, core_plugin
from tavern_game.components import Device, StoveDevice, StoveSlot
from tavern_game.devices import (
    debug_plugin,
    device_plugin,
    log_device_opened,
    stove_device_bundle,
    stove_slot_bundle,
    stove_slot_plugin,
    update_active_device_resource,
)
from tavern_game.items import DeviceType
from tavern_game.states import ActiveDevice, PlayerOpenedDeviceInterfaceEvent


@pytest.fixture
def app():
    application = App()
    core_plugin(application)
    return application


def test_stove_bundle_components(app):
    entity = app.world.spawn(stove_device_bundle())
    assert app.world.has(entity, Device)
    assert app.world.has(entity, StoveDevice)
    assert not app.world.has(entity, StoveSlot)


def test_stove_slot_bundle_components(app):
    entity = app.world.spawn(stove_slot_bundle())
    assert app.world.has(entity, Device)
    assert app.world.has(entity, StoveSlot)
    assert not app.world.has(entity, StoveDevice)


def test_active_device_follows_last_event(app):
    app.send(PlayerOpenedDeviceInterfaceEvent(device=5, device_type=DeviceType.STOVE))
    app.send(PlayerOpenedDeviceInterfaceEvent(device=9, device_type=DeviceType.STOVE))
    update_active_device_resource(app)
    assert app.resource(ActiveDevice).entity == 9


def test_active_device_untouched_without_events(app):
    update_active_device_resource(app)
    assert app.resource(ActiveDevice).entity is None


def test_device_plugin_updates_resource(app):
    app.add_plugin(device_plugin)
    app.send(PlayerOpenedDeviceInterfaceEvent(device=4, device_type=DeviceType.STOVE))
    app.update()
    assert app.resource(ActiveDevice).entity == 4


def test_device_plugin_registers_slot_plugin(app):
    app.add_plugin(device_plugin)
    with pytest.raises(ValueError):
        app.add_plugin(stove_slot_plugin)


def test_log_device_opened(app, capsys):
    app.send(PlayerOpenedDeviceInterfaceEvent(device=3, device_type=DeviceType.STOVE))
    log_device_opened(app)
    assert capsys.readouterr().out == "Player Opened device interface 3 Stove\n"


def test_log_reads_each_event_once(app, capsys):
    app.send(PlayerOpenedDeviceInterfaceEvent(device=3, device_type=DeviceType.STOVE))
    log_device_opened(app)
    log_device_opened(app)
    assert capsys.readouterr().out.count("Player Opened device interface") == 1


def test_debug_plugin_logs_during_update(app, capsys):
    app.add_plugin(debug_plugin)
    app.send(PlayerOpenedDeviceInterfaceEvent(device=7, device_type=DeviceType.STOVE))
    app.update()
    assert capsys.readouterr().out == "Player Opened device interface 7 Stove\n"