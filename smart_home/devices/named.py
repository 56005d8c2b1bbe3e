"""Read-only device naming shared by every device variant."""

from typing import Any


class FixedName:
    """Reject reassignment of ``name`` once a dataclass has set it in ``__init__``."""

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "name" and "name" in self.__dict__:
            raise AttributeError(f"device name is read-only (still {self.__dict__['name']!r})")
        super().__setattr__(key, value)
