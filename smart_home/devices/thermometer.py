"""Thermometer device variant."""

from dataclasses import dataclass

from smart_home.devices.named import FixedName


@dataclass
class Thermometer(FixedName):
    """Reports the last known temperature reading in °C.

    No range is enforced: any value, physically plausible or not, is stored
    as given.
    """

    name: str
    temperature: float

    def set_temperature(self, value: float) -> None:
        self.temperature = value
