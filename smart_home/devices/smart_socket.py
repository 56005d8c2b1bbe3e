"""Socket device variant."""

from dataclasses import dataclass

from smart_home.devices.named import FixedName


@dataclass
class Socket(FixedName):
    """Switchable power socket.

    ``power_consumption`` is the stored draw in watts. It is returned as-is
    while the socket is off; callers decide what an off-state reading means.
    """

    name: str
    is_on: bool
    power_consumption: float  # W

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False
