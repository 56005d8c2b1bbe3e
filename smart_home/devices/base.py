"""Device union and the kind-aware operations dispatched over it.

Every function here matches on the concrete variant with one case per
variant and no fallback, so a new variant must be handled in each of them.
"""

from enum import StrEnum

from smart_home.config import DEFAULT, ReportConfig
from smart_home.devices.smart_socket import Socket
from smart_home.devices.thermometer import Thermometer

type Device = Thermometer | Socket


class DeviceKind(StrEnum):
    THERMOMETER = "thermometer"
    SOCKET = "socket"


def device_kind(device: Device) -> DeviceKind:
    match device:
        case Thermometer():
            return DeviceKind.THERMOMETER
        case Socket():
            return DeviceKind.SOCKET


def device_name(device: Device) -> str:
    match device:
        case Thermometer(name=name):
            return name
        case Socket(name=name):
            return name


def device_status(device: Device, config: ReportConfig = DEFAULT) -> str:
    """One-line human-readable state summary used by room reports."""
    match device:
        case Thermometer(name=name, temperature=temperature):
            return f"Device: {name}, Temperature: {temperature}{config.temperature_unit}"
        case Socket(name=name, is_on=is_on, power_consumption=power):
            status = config.on_label if is_on else config.off_label
            return f"Device: {name}, Status: {status}, Power consumption: {power}{config.power_unit}"


def supports_power_control(device: Device) -> bool:
    match device:
        case Thermometer():
            return False
        case Socket():
            return True


def device_is_on(device: Device) -> bool | None:
    """Socket state, or ``None`` for devices without power control."""
    match device:
        case Thermometer():
            return None
        case Socket(is_on=is_on):
            return is_on


def device_temperature(device: Device) -> float | None:
    match device:
        case Thermometer(temperature=temperature):
            return temperature
        case Socket():
            return None


def device_power_consumption(device: Device) -> float | None:
    """Stored draw of a socket regardless of its state, ``None`` for thermometers."""
    match device:
        case Thermometer():
            return None
        case Socket(power_consumption=power):
            return power


def active_power(device: Device) -> float:
    """Draw actually being consumed right now (W)."""
    match device:
        case Thermometer():
            return 0.0
        case Socket(is_on=is_on, power_consumption=power):
            return power if is_on else 0.0


def turn_on_device(device: Device) -> bool:
    """Switch the device on. Returns False if it has no power control."""
    match device:
        case Thermometer():
            return False
        case Socket():
            device.turn_on()
            return True


def turn_off_device(device: Device) -> bool:
    """Switch the device off. Returns False if it has no power control."""
    match device:
        case Thermometer():
            return False
        case Socket():
            device.turn_off()
            return True
