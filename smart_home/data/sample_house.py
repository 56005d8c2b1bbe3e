"""Sample house layout for demos and tests."""

from smart_home.devices import Socket, Thermometer
from smart_home.house import House
from smart_home.room import Room


def create_sample_house() -> House:
    """Create a small two-room family home with a fresh set of devices."""
    return House(
        "Family Home",
        [
            _living_room(),
            _bedroom(),
        ],
    )


def _living_room() -> Room:
    """Living room: TV and lamp sockets plus a wall thermometer."""
    return Room.with_devices(
        "Living Room",
        Socket("TV Socket", is_on=True, power_consumption=50.0),
        Socket("Lamp", is_on=True, power_consumption=60.0),
        Thermometer("Living Room Thermo", temperature=22.5),
    )


def _bedroom() -> Room:
    """Bedroom: a desk lamp left off and a bedside thermometer."""
    return Room.with_devices(
        "Bedroom",
        Socket("Desk Lamp", is_on=False, power_consumption=10.0),
        Thermometer("Bedroom Thermo", temperature=20.0),
    )
