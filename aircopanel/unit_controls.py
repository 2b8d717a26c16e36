"""Controls of the unit screen: power, temperature, mode, fan speed and swing."""

from __future__ import annotations

from .main_screen import MainScreenView, render_main_screen
from .mqtt_topics import MqttCommandSender
from .state import ControllerState, Screen
from .units import ACUnit, FanSpeed, Mode, SwingMode

MIN_TARGET_TEMPERATURE = 16.0
MAX_TARGET_TEMPERATURE = 30.0
TEMPERATURE_STEP = 1.0


class UnitController:
    """Applies the unit screen's actions to the selected unit.

    In test mode changes are made to the local state only; otherwise they are
    sent as MQTT commands. Each action returns True when it changed or sent
    something, so the caller knows the unit screen needs redrawing.
    """

    def __init__(self, state: ControllerState, sender: MqttCommandSender) -> None:
        self.state = state
        self.sender = sender

    def _unit(self) -> ACUnit | None:
        return self.state.selected()

    def press_power(self) -> bool:
        """Toggle power; the button is disabled, and does nothing, while the unit is off."""
        unit = self._unit()
        if unit is None or not unit.is_on:
            return False
        new_state = not unit.is_on
        if self.state.test_mode:
            unit.is_on = new_state
        else:
            self.sender.set_power(unit, new_state)
        return True

    def _set_target(self, unit: ACUnit, value: float) -> None:
        if self.state.test_mode:
            unit.target_temp = value
            unit.set_temp = value
        else:
            self.sender.set_temperature(unit, value)

    def decrease_temperature(self) -> bool:
        """Lower the target by one degree, not below the minimum."""
        unit = self._unit()
        if unit is None or not unit.target_temp > MIN_TARGET_TEMPERATURE:
            return False
        self._set_target(unit, unit.target_temp - TEMPERATURE_STEP)
        return True

    def increase_temperature(self) -> bool:
        """Raise the target by one degree, not above the maximum."""
        unit = self._unit()
        if unit is None or not unit.target_temp < MAX_TARGET_TEMPERATURE:
            return False
        self._set_target(unit, unit.target_temp + TEMPERATURE_STEP)
        return True

    def select_mode(self, mode: int) -> bool:
        """Switch the unit on in ``mode``.

        Outside test mode the commands are only sent, and the local state
        updated ahead of the unit's report, while MQTT is connected.
        """
        mode = Mode(mode)
        unit = self._unit()
        if unit is None:
            return False
        if not self.state.test_mode:
            if not self.state.mqtt_connected:
                return False
            self.sender.set_power(unit, True)
            self.sender.set_mode(unit, mode)
        unit.is_on = True
        unit.mode = mode
        return True

    def can_choose_fan_speed(self) -> bool:
        """The fan speed dialog opens only for a selected unit that is on."""
        unit = self._unit()
        return unit is not None and unit.is_on

    def select_fan_speed(self, speed: int) -> bool:
        speed = FanSpeed(speed)
        unit = self._unit()
        if unit is None:
            return False
        if self.state.test_mode:
            unit.fan_speed = speed
        else:
            self.sender.set_fan_speed(unit, speed)
        return True

    def select_swing(self, swing: int) -> bool:
        swing = SwingMode(swing)
        unit = self._unit()
        if unit is None:
            return False
        if self.state.test_mode:
            unit.swing_mode = swing
        else:
            self.sender.set_swing(unit, swing)
        return True

    def back(self) -> MainScreenView:
        """Return to the main screen and give its refreshed contents."""
        self.state.screen = Screen.MAIN
        return render_main_screen(self.state)