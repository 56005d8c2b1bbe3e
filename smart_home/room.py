"""Room - ordered, named collection of devices."""

import logging
from collections.abc import Iterator
from typing import Self, override

from smart_home.config import DEFAULT, ReportConfig
from smart_home.devices import (
    Device,
    device_name,
    device_power_consumption,
    device_status,
    device_temperature,
    turn_off_device,
    turn_on_device,
)
from smart_home.errors import check_index
from smart_home.metrics import Metrics
from smart_home.reporting import Reporter

logger = logging.getLogger(__name__)


class Room(Reporter):
    """Named room owning its devices in insertion order.

    Devices are addressed by position; duplicate names are allowed.
    """

    def __init__(self, name: str, devices: list[Device] | None = None) -> None:
        self._name = name
        self._devices: list[Device] = list(devices) if devices else []

    @classmethod
    def with_devices(cls, name: str, *devices: Device) -> Self:
        return cls(name, list(devices))

    @property
    def name(self) -> str:
        return self._name

    @property
    def devices(self) -> tuple[Device, ...]:
        return tuple(self._devices)

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[Device]:
        return iter(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self._name!r}, devices={self._devices!r})"

    def add_device(self, device: Device) -> None:
        self._devices.append(device)
        logger.debug("Added %s to %s at %d", device_name(device), self._name, len(self._devices) - 1)

    def remove_device(self, index: int) -> Device:
        """Remove and return the device at ``index``; later devices shift down."""
        device = self._devices.pop(check_index("Device", index, len(self._devices)))
        logger.debug("Removed %s from %s", device_name(device), self._name)
        return device

    def device(self, index: int) -> Device:
        return self._devices[check_index("Device", index, len(self._devices))]

    def turn_on_device(self, index: int) -> bool:
        return turn_on_device(self.device(index))

    def turn_off_device(self, index: int) -> bool:
        return turn_off_device(self.device(index))

    def temperature(self, index: int) -> float | None:
        return device_temperature(self.device(index))

    def power_consumption(self, index: int) -> float | None:
        return device_power_consumption(self.device(index))

    def metrics(self) -> Metrics:
        return Metrics.from_devices(self._devices)

    @override
    def report(self, config: ReportConfig = DEFAULT) -> str:
        lines = [config.room_header.format(name=self._name)]
        lines.extend(device_status(d, config) for d in self._devices)
        return "".join(f"{line}\n" for line in lines)
