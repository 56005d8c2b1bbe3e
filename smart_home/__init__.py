"""Smart-home hierarchy: devices, rooms and houses with text reports."""

from smart_home.config import DEFAULT as DEFAULT_REPORT_CONFIG
from smart_home.config import ReportConfig
from smart_home.devices import Device, DeviceKind, Socket, Thermometer, device_status
from smart_home.errors import AccessError, IndexOutOfBounds
from smart_home.house import House
from smart_home.metrics import Metrics
from smart_home.reporting import Reporter, render_report
from smart_home.room import Room

__all__ = [
    "DEFAULT_REPORT_CONFIG",
    "AccessError",
    "Device",
    "DeviceKind",
    "House",
    "IndexOutOfBounds",
    "Metrics",
    "ReportConfig",
    "Reporter",
    "Room",
    "Socket",
    "Thermometer",
    "device_status",
    "render_report",
]
