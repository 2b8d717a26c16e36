"""Master control: switch every unit on or off after a confirmation."""

from __future__ import annotations

from dataclasses import dataclass

from .mqtt_topics import MqttCommandSender
from .state import ControllerState, Screen
from .texts import (
    TXT_ALL_UNITS_OFF,
    TXT_ALL_UNITS_ON,
    TXT_CANCEL,
    TXT_CONFIRM,
    TXT_CONFIRM_ALL_OFF,
    TXT_CONFIRM_ALL_ON,
    TXT_CONFIRMATION,
)

COLOR_ALL_ON = 0x3FC1C9
COLOR_ALL_OFF = 0xFF5757
NOTIFICATION_DURATION_MS = 1500

CANCEL_BUTTON = 0
CONFIRM_BUTTON = 1


@dataclass(frozen=True)
class Notification:
    """A short message shown on top of the screen, closed after a while."""

    text: str
    color: int
    duration_ms: int = NOTIFICATION_DURATION_MS


@dataclass(frozen=True)
class Confirmation:
    """A dialog asking whether all units should be switched on or off."""

    power_state: bool
    title: str
    text: str
    buttons: tuple[str, ...] = (TXT_CANCEL, TXT_CONFIRM)


class MasterControl:
    """The ALL ON / ALL OFF buttons and their confirmation dialogs."""

    def __init__(self, state: ControllerState, sender: MqttCommandSender) -> None:
        self.state = state
        self.sender = sender

    def request_all(self, state: bool) -> Confirmation:
        """Open the confirmation dialog for switching all units to ``state``."""
        text = TXT_CONFIRM_ALL_ON if state else TXT_CONFIRM_ALL_OFF
        return Confirmation(power_state=bool(state), title=TXT_CONFIRMATION, text=text)

    def _set_all_power(self, power: bool) -> None:
        for unit in self.state.units:
            if self.state.test_mode:
                unit.is_on = power
            else:
                self.sender.set_power(unit, power)

    def answer(
        self, confirmation: Confirmation, button_index: int
    ) -> Notification | None:
        """Handle a press on one of the dialog's buttons.

        Confirming switches every unit, returns to the main screen and gives
        the notification to show; cancelling changes nothing and gives None.
        """
        if not 0 <= button_index < len(confirmation.buttons):
            raise ValueError(f"no dialog button with index {button_index}")
        if button_index != CONFIRM_BUTTON:
            return None
        power = confirmation.power_state
        self._set_all_power(power)
        self.state.screen = Screen.MAIN
        if power:
            return Notification(TXT_ALL_UNITS_ON, COLOR_ALL_ON)
        return Notification(TXT_ALL_UNITS_OFF, COLOR_ALL_OFF)