"""Main screen: status icons, a page of unit cards and page navigation."""

from __future__ import annotations

from dataclasses import dataclass, field

from .state import ControllerState, Screen
from .texts import TXT_APP_TITLE, format_page_indicator, format_temperature
from .units import ACUnit, Mode

COLOR_CONNECTED = 0x3FC1C9
COLOR_DISCONNECTED = 0xFF5757
COLOR_TEST_MODE = 0xFFAA00
COLOR_OFF_BORDER = 0xAAAAAA
COLOR_BUTTON_ENABLED = 0x3FC1C9
COLOR_BUTTON_DISABLED = 0x777777

MODE_COLORS = {
    Mode.COOL: 0x2B9AF9,
    Mode.HEAT: 0xFF8100,
    Mode.FAN_ONLY: 0x8A8A8A,
    Mode.AUTO: 0x008000,
    Mode.DRY: 0xEFBD07,
}
_DEFAULT_MODE_COLOR = 0x2B9AF9


@dataclass(frozen=True)
class StatusIcon:
    """One letter icon in the header."""

    text: str
    visible: bool
    color: int


@dataclass(frozen=True)
class UnitCard:
    """A card on the main screen showing one unit."""

    index: int
    name: str
    temperature: str
    indicator_fill: int | None
    indicator_border: int

    @property
    def is_on(self) -> bool:
        return self.indicator_fill is not None


@dataclass(frozen=True)
class MainScreenView:
    """Everything the main screen shows for a given state."""

    title: str
    test_mode_icon: StatusIcon
    mqtt_icon: StatusIcon
    wifi_icon: StatusIcon
    page_text: str
    cards: list[UnitCard] = field(default_factory=list)
    prev_enabled: bool = False
    next_enabled: bool = False

    @property
    def prev_color(self) -> int:
        return COLOR_BUTTON_ENABLED if self.prev_enabled else COLOR_BUTTON_DISABLED

    @property
    def next_color(self) -> int:
        return COLOR_BUTTON_ENABLED if self.next_enabled else COLOR_BUTTON_DISABLED


def indicator_colors(unit: ACUnit) -> tuple[int | None, int]:
    """Fill and border colour of a unit's status dot; no fill when the unit is off."""
    if not unit.is_on:
        return None, COLOR_OFF_BORDER
    color = MODE_COLORS.get(unit.mode, _DEFAULT_MODE_COLOR)
    return color, color


def _card(index: int, unit: ACUnit) -> UnitCard:
    fill, border = indicator_colors(unit)
    return UnitCard(
        index=index,
        name=unit.name,
        temperature=format_temperature(unit.current_temp),
        indicator_fill=fill,
        indicator_border=border,
    )


def render_main_screen(state: ControllerState) -> MainScreenView:
    """Build the main screen contents for the current page of ``state``."""
    wifi_ok = state.wifi_connected
    mqtt_ok = wifi_ok and state.mqtt_connected
    total = state.total_pages()
    return MainScreenView(
        title=TXT_APP_TITLE,
        test_mode_icon=StatusIcon("T", state.test_mode, COLOR_TEST_MODE),
        mqtt_icon=StatusIcon(
            "M", True, COLOR_CONNECTED if mqtt_ok else COLOR_DISCONNECTED
        ),
        wifi_icon=StatusIcon(
            "W", True, COLOR_CONNECTED if wifi_ok else COLOR_DISCONNECTED
        ),
        page_text=format_page_indicator(state.current_page + 1, total),
        cards=[_card(index, unit) for index, unit in state.page_units()],
        prev_enabled=state.current_page > 0,
        next_enabled=state.current_page < total - 1,
    )


def open_unit(state: ControllerState, index: int) -> ACUnit:
    """Select unit ``index`` and switch to the unit screen."""
    if not 0 <= index < len(state.units):
        raise IndexError(f"no unit with index {index}")
    state.selected_unit = index
    state.screen = Screen.UNIT
    return state.units[index]


def previous_page(state: ControllerState) -> bool:
    """Go one page back; False when already on the first page."""
    if state.current_page <= 0:
        return False
    state.current_page -= 1
    return True


def next_page(state: ControllerState) -> bool:
    """Go one page forward; False when already on the last page."""
    if state.current_page >= state.total_pages() - 1:
        return False
    state.current_page += 1
    return True