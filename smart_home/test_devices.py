"""Device variants, status lines and kind-aware dispatch."""

import pytest

from smart_home.config import ReportConfig
from smart_home.devices import (
    DeviceKind,
    Socket,
    Thermometer,
    active_power,
    device_is_on,
    device_kind,
    device_name,
    device_power_consumption,
    device_status,
    device_temperature,
    supports_power_control,
    turn_off_device,
    turn_on_device,
)
from smart_home.reporting import render_report


def test_thermometer_status_line() -> None:
    thermo = Thermometer("T1", 21.0)
    assert device_status(thermo) == "Device: T1, Temperature: 21.0°C"


def test_socket_status_line_on_and_off() -> None:
    socket = Socket("Lamp", is_on=True, power_consumption=60.0)
    assert device_status(socket) == "Device: Lamp, Status: ON, Power consumption: 60.0W"

    socket.turn_off()
    assert device_status(socket) == "Device: Lamp, Status: OFF, Power consumption: 60.0W"


def test_status_line_uses_config_labels() -> None:
    cfg = ReportConfig(on_label="on", temperature_unit=" C")
    assert device_status(Socket("S", True, 5.0), cfg) == "Device: S, Status: on, Power consumption: 5.0W"
    assert device_status(Thermometer("T", 3.5), cfg) == "Device: T, Temperature: 3.5 C"


def test_turn_off_is_idempotent_and_keeps_stored_power() -> None:
    socket = Socket("Heater", is_on=False, power_consumption=1500.0)

    socket.turn_off()
    socket.turn_off()

    assert socket.is_on is False
    assert socket.power_consumption == 1500.0


def test_turn_on_twice_stays_on() -> None:
    socket = Socket("Kettle", is_on=False, power_consumption=2000.0)
    socket.turn_on()
    socket.turn_on()
    assert socket.is_on is True


def test_set_temperature_accepts_any_value() -> None:
    thermo = Thermometer("Freezer", -18.0)
    thermo.set_temperature(1000.0)
    assert thermo.temperature == 1000.0
    thermo.set_temperature(-300.0)
    assert thermo.temperature == -300.0


def test_device_name_is_read_only() -> None:
    socket = Socket("Lamp", True, 60.0)
    thermo = Thermometer("T1", 21.0)

    with pytest.raises(AttributeError):
        socket.name = "Other"
    with pytest.raises(AttributeError):
        thermo.name = "Other"

    assert device_name(socket) == "Lamp"
    assert device_name(thermo) == "T1"


def test_kind_aware_helpers() -> None:
    thermo = Thermometer("T1", 22.5)
    socket = Socket("S1", is_on=False, power_consumption=100.0)

    assert device_kind(thermo) == DeviceKind.THERMOMETER
    assert device_kind(socket) == DeviceKind.SOCKET

    assert supports_power_control(thermo) is False
    assert supports_power_control(socket) is True

    assert device_is_on(thermo) is None
    assert device_is_on(socket) is False

    assert device_temperature(thermo) == 22.5
    assert device_temperature(socket) is None

    assert device_power_consumption(thermo) is None
    # Stored value is reported even while off
    assert device_power_consumption(socket) == 100.0
    assert active_power(socket) == 0.0


def test_turn_on_off_device_dispatch() -> None:
    thermo = Thermometer("T1", 22.5)
    socket = Socket("S1", is_on=False, power_consumption=100.0)

    assert turn_on_device(thermo) is False
    assert turn_off_device(thermo) is False
    assert thermo == Thermometer("T1", 22.5)

    assert turn_on_device(socket) is True
    assert socket.is_on is True
    assert active_power(socket) == 100.0

    assert turn_off_device(socket) is True
    assert socket.is_on is False


def test_render_report_for_single_devices() -> None:
    assert render_report(Thermometer("Main", 23.5)) == "Device: Main, Temperature: 23.5°C"
    assert render_report(Socket("Main", True, 100.0)) == "Device: Main, Status: ON, Power consumption: 100.0W"


def test_render_report_rejects_unknown_items() -> None:
    with pytest.raises(TypeError, match="Cannot render a report for str"):
        render_report("not a device")  # type: ignore[arg-type]
