"""Shared state of the panel: units, connectivity, paging and selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .units import ACUnit, default_units

UNITS_PER_PAGE = 4


class Screen(Enum):
    """Screens the panel can show."""

    LOADING = "loading"
    MAIN = "main"
    UNIT = "unit"


@dataclass
class ControllerState:
    """Everything the screens read and the controls change."""

    units: list[ACUnit] = field(default_factory=default_units)
    test_mode: bool = False
    wifi_connected: bool = False
    mqtt_connected: bool = False
    current_page: int = 0
    units_per_page: int = UNITS_PER_PAGE
    selected_unit: int | None = None
    screen: Screen = Screen.LOADING

    def total_pages(self) -> int:
        """Number of pages needed to show all units."""
        return -(-len(self.units) // self.units_per_page)

    def page_units(self) -> list[tuple[int, ACUnit]]:
        """``(index, unit)`` pairs shown on the current page."""
        start = self.current_page * self.units_per_page
        return list(enumerate(self.units))[start : start + self.units_per_page]

    def selected(self) -> ACUnit | None:
        """The selected unit, or None when nothing valid is selected."""
        index = self.selected_unit
        if index is None or not 0 <= index < len(self.units):
            return None
        return self.units[index]