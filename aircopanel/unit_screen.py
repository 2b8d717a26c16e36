"""Unit screen: the detail view of one selected air-conditioning unit."""

from __future__ import annotations

from dataclasses import dataclass

from .main_screen import MODE_COLORS
from .state import ControllerState
from .texts import (
    TXT_OFF,
    TXT_POWER,
    format_temperature,
    format_temperature_set,
)
from .units import FanSpeed, Mode, SwingMode

COLOR_DEFAULT_MODE = 0x2B9AF9
COLOR_OFF_TEXT = 0xAAAAAA
COLOR_OFF_BUTTON = 0x666666
COLOR_POWER_ON = 0xFF0000
COLOR_POWER_OFF = 0x666666

OPACITY_FULL = 255
OPACITY_DISABLED = 128

STATUS_OFF_TEXT = "Off"

MIN_TARGET_TEMPERATURE = 16.0
MAX_TARGET_TEMPERATURE = 30.0


def mode_color(mode: int) -> int:
    """Colour used for a mode; unknown modes get the default blue."""
    try:
        return MODE_COLORS.get(Mode(mode), COLOR_DEFAULT_MODE)
    except ValueError:
        return COLOR_DEFAULT_MODE


# Choices offered in the selection dialogs, in the order they are listed.
MODE_CHOICES: tuple[tuple[Mode, str, int], ...] = tuple(
    (mode, mode.display_name, mode_color(mode)) for mode in Mode
)
FAN_CHOICES: tuple[tuple[FanSpeed, str], ...] = tuple(
    (speed, speed.display_name) for speed in FanSpeed
)
SWING_CHOICES: tuple[tuple[SwingMode, str], ...] = tuple(
    (swing, swing.display_name) for swing in SwingMode
)


@dataclass(frozen=True)
class UnitScreenView:
    """Everything the unit screen shows for one unit."""

    index: int
    title: str
    current_temperature: str
    mode_text: str
    mode_text_color: int
    target_temperature: str
    mode_button_text: str
    mode_button_color: int
    fan_text: str
    swing_text: str
    power_text: str
    power_color: int
    power_enabled: bool
    power_opacity: int

    @property
    def can_lower_temperature(self) -> bool:
        """Shown only for convenience; the controls enforce the limit."""
        return float(self.target_temperature.rstrip("°C")) > MIN_TARGET_TEMPERATURE

    @property
    def can_raise_temperature(self) -> bool:
        return float(self.target_temperature.rstrip("°C")) < MAX_TARGET_TEMPERATURE


def render_unit_screen(state: ControllerState, index: int) -> UnitScreenView | None:
    """Build the unit screen for unit ``index``; None when no such unit exists."""
    if not 0 <= index < len(state.units):
        return None
    unit = state.units[index]

    if unit.is_on:
        color = mode_color(unit.mode)
        mode_text = mode_button_text = unit.mode.display_name
        mode_text_color = mode_button_color = color
        power_color = COLOR_POWER_ON
        power_opacity = OPACITY_FULL
    else:
        mode_text = STATUS_OFF_TEXT
        mode_text_color = COLOR_OFF_TEXT
        mode_button_text = TXT_OFF
        mode_button_color = COLOR_OFF_BUTTON
        power_color = COLOR_POWER_OFF
        power_opacity = OPACITY_DISABLED

    return UnitScreenView(
        index=index,
        title=unit.name,
        current_temperature=format_temperature(unit.current_temp),
        mode_text=mode_text,
        mode_text_color=mode_text_color,
        target_temperature=format_temperature_set(float(unit.target_temp)),
        mode_button_text=mode_button_text,
        mode_button_color=mode_button_color,
        fan_text=unit.fan_speed.display_name,
        swing_text=unit.swing_mode.display_name,
        power_text=TXT_POWER,
        power_color=power_color,
        power_enabled=unit.is_on,
        power_opacity=power_opacity,
    )