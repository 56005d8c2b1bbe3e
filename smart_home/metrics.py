"""Aggregated device statistics at any level of the home hierarchy."""

from dataclasses import dataclass
from typing import Self

from smart_home.devices import Device, active_power, device_is_on, device_temperature


@dataclass
class Metrics:
    """Aggregated metrics for a room or a whole house."""

    device_count: int
    thermometers: int
    sockets_on: int
    temperature: float | None  # mean reading, None without thermometers
    power_consumption: float  # W, sockets that are on

    @classmethod
    def from_devices(cls, devices: list[Device]) -> Self:
        temps = [t for t in (device_temperature(d) for d in devices) if t is not None]
        return cls(
            device_count=len(devices),
            thermometers=len(temps),
            sockets_on=sum(1 for d in devices if device_is_on(d)),
            temperature=sum(temps) / len(temps) if temps else None,
            power_consumption=sum(active_power(d) for d in devices),
        )

    @classmethod
    def combine(cls, parts: list[Self]) -> Self:
        """Merge lower-level metrics; temperature is weighted by thermometer count."""
        thermometers = sum(m.thermometers for m in parts)
        weighted = sum(m.temperature * m.thermometers for m in parts if m.temperature is not None)
        return cls(
            device_count=sum(m.device_count for m in parts),
            thermometers=thermometers,
            sockets_on=sum(m.sockets_on for m in parts),
            temperature=weighted / thermometers if thermometers else None,
            power_consumption=sum(m.power_consumption for m in parts),
        )
