"""Centralised report tunables.

Every string fragment that shapes the text reports lives here.
Create a custom ``ReportConfig`` to tweak the output::

    cfg = ReportConfig(room_separator="---\\n")
    print(house.report(cfg))
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportConfig:
    """All report tunables, grouped by level."""

    # --- Headers ---
    house_header: str = "=== Smart House: {name} ==="
    room_header: str = "=== Room: {name} ==="

    # --- Layout ---
    room_separator: str = "\n"  # appended after each room report, yields a blank line

    # --- Device status lines ---
    temperature_unit: str = "°C"
    power_unit: str = "W"
    on_label: str = "ON"
    off_label: str = "OFF"


DEFAULT = ReportConfig()
