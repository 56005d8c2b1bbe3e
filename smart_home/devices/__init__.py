"""Device variants and kind-aware operations."""

from smart_home.devices.base import (
    Device,
    DeviceKind,
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
from smart_home.devices.smart_socket import Socket
from smart_home.devices.thermometer import Thermometer

__all__ = [
    "Device",
    "DeviceKind",
    "Socket",
    "Thermometer",
    "active_power",
    "device_is_on",
    "device_kind",
    "device_name",
    "device_power_consumption",
    "device_status",
    "device_temperature",
    "supports_power_control",
    "turn_off_device",
    "turn_on_device",
]
