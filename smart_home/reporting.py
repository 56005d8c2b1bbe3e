"""Reporter abstract base class."""

from abc import ABC, abstractmethod

from smart_home.config import DEFAULT, ReportConfig
from smart_home.devices import Device, Socket, Thermometer, device_status


class Reporter(ABC):
    """Every container level of the home hierarchy renders itself as text."""

    @abstractmethod
    def report(self, config: ReportConfig = DEFAULT) -> str: ...


def render_report(item: Reporter | Device, config: ReportConfig = DEFAULT) -> str:
    """Text report for a room, a house or a single device."""
    match item:
        case Reporter():
            return item.report(config)
        case Thermometer() | Socket():
            return device_status(item, config)
    raise TypeError(f"Cannot render a report for {type(item).__name__}")
