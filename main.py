"""Command-line entry point - thin demo over the domain."""

import logging

from smart_home import AccessError, Room, Socket, Thermometer, render_report
from smart_home.data import create_sample_house

logging.basicConfig(level=logging.WARNING, format="%(name)s | %(message)s")
logging.getLogger("smart_home").setLevel(logging.INFO)

logger = logging.getLogger("smart_home.main")


def demonstrate_dynamic_rooms_and_devices() -> None:
    house = create_sample_house()
    print("Initial house state:")
    print(house.report())

    removed = house.remove_room(1)
    logger.info("Removed room %s", removed.name)

    living_room = house.room(0)
    living_room.add_device(Socket("Ceiling Light", is_on=True, power_consumption=20.0))
    removed_device = living_room.remove_device(0)
    logger.info("Removed device %s", removed_device.name)

    house.add_room(Room("Hallway"))

    print("Final house state:")
    print(house.report())

    metrics = house.metrics()
    print(f"Active draw: {metrics.power_consumption}W across {metrics.sockets_on} socket(s)")


def demonstrate_error_handling() -> None:
    house = create_sample_house()
    try:
        house.device(5, 0)
    except AccessError as e:
        logger.warning("Expected lookup failure: %s", e)


def main() -> None:
    demonstrate_dynamic_rooms_and_devices()
    demonstrate_error_handling()

    print(render_report(Thermometer("Main Thermometer", 23.5)))
    print(render_report(Socket("Main Socket", is_on=True, power_consumption=100.0)))


if __name__ == "__main__":
    main()
