"""House - top-level collection of rooms."""

import logging
from collections.abc import Iterator
from typing import override

from smart_home.config import DEFAULT, ReportConfig
from smart_home.devices import Device
from smart_home.errors import check_index
from smart_home.metrics import Metrics
from smart_home.reporting import Reporter
from smart_home.room import Room

logger = logging.getLogger(__name__)


class House(Reporter):
    """Named house owning its rooms in insertion order."""

    def __init__(self, name: str, rooms: list[Room] | None = None) -> None:
        self._name = name
        self._rooms: list[Room] = list(rooms) if rooms else []

    @property
    def name(self) -> str:
        return self._name

    @property
    def rooms(self) -> tuple[Room, ...]:
        return tuple(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)

    def __repr__(self) -> str:
        return f"House(name={self._name!r}, rooms={self._rooms!r})"

    def add_room(self, room: Room) -> None:
        self._rooms.append(room)
        logger.debug("Added room %s to %s", room.name, self._name)

    def remove_room(self, index: int) -> Room:
        room = self._rooms.pop(check_index("Room", index, len(self._rooms)))
        logger.debug("Removed room %s from %s", room.name, self._name)
        return room

    def room(self, index: int) -> Room:
        return self._rooms[check_index("Room", index, len(self._rooms))]

    def device(self, room_index: int, device_index: int) -> Device:
        """Look up a device through its room; the error names the level that failed."""
        return self.room(room_index).device(device_index)

    def metrics(self) -> Metrics:
        return Metrics.combine([r.metrics() for r in self._rooms])

    @override
    def report(self, config: ReportConfig = DEFAULT) -> str:
        parts = [config.house_header.format(name=self._name) + "\n"]
        for room in self._rooms:
            parts.append(room.report(config))
            parts.append(config.room_separator)
        return "".join(parts)
