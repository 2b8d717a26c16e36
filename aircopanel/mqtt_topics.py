"""MQTT topic layout, value mappings and publishing of unit commands."""

from __future__ import annotations

from collections.abc import Callable

from .units import ACUnit, FanSpeed, Mode, SwingMode

MQTT_BASE_TOPIC = "hcy/airco"
MQTT_TOPIC_MAX_LENGTH = 100

MQTT_COMMAND_POWER = "command/power"
MQTT_COMMAND_MODE = "command/mode"
MQTT_COMMAND_FAN_MODE = "command/fan_mode"
MQTT_COMMAND_SWING_MODE = "command/swing_mode"
MQTT_COMMAND_TEMPERATURE = "command/temperature"
MQTT_STATUS = "status"

MQTT_POWER_ON = "on"
MQTT_POWER_OFF = "off"

MQTT_TEMP_MIN = 16.0
MQTT_TEMP_MAX = 30.0

_MODE_VALUES = {
    Mode.COOL: "cool",
    Mode.HEAT: "heat",
    Mode.FAN_ONLY: "fan_only",
    Mode.AUTO: "auto",
    Mode.DRY: "dry",
}
_FAN_VALUES = {
    FanSpeed.LOW: "low",
    FanSpeed.MEDIUM: "medium",
    FanSpeed.HIGH: "high",
    FanSpeed.POWERFUL: "powerful",
}
_SWING_VALUES = {
    SwingMode.SWING: "swing",
    SwingMode.POSITION_1: "position_1",
    SwingMode.POSITION_2: "position_2",
    SwingMode.POSITION_3: "position_3",
    SwingMode.POSITION_4: "position_4",
}

_MODES_BY_VALUE = {value: mode for mode, value in _MODE_VALUES.items()}
_FANS_BY_VALUE = {value: fan for fan, value in _FAN_VALUES.items()}
_SWINGS_BY_VALUE = {value: swing for swing, value in _SWING_VALUES.items()}


def generate_topic(unit_topic: str, topic_type: str) -> str:
    """Full topic ``hcy/airco/<unit>/<type>``."""
    return f"{MQTT_BASE_TOPIC}/{unit_topic}/{topic_type}"


def command_topic(unit_topic: str, command: str) -> str:
    return generate_topic(unit_topic, command)


def status_topic(unit_topic: str) -> str:
    return generate_topic(unit_topic, MQTT_STATUS)


def mode_to_mqtt(mode: int) -> str:
    """MQTT value for a mode index; unknown indices map to cool."""
    try:
        return _MODE_VALUES[Mode(mode)]
    except ValueError:
        return _MODE_VALUES[Mode.COOL]


def fan_to_mqtt(speed: int) -> str:
    """MQTT value for a fan speed index; unknown indices map to low."""
    try:
        return _FAN_VALUES[FanSpeed(speed)]
    except ValueError:
        return _FAN_VALUES[FanSpeed.LOW]


def swing_to_mqtt(swing: int) -> str:
    """MQTT value for a swing index; unknown indices map to swing."""
    try:
        return _SWING_VALUES[SwingMode(swing)]
    except ValueError:
        return _SWING_VALUES[SwingMode.SWING]


def mode_from_mqtt(value: str) -> Mode:
    """Mode for an MQTT value; unknown values give cool."""
    return _MODES_BY_VALUE.get(value, Mode.COOL)


def fan_from_mqtt(value: str) -> FanSpeed:
    """Fan speed for an MQTT value; unknown values give low."""
    return _FANS_BY_VALUE.get(value, FanSpeed.LOW)


def swing_from_mqtt(value: str) -> SwingMode:
    """Swing setting for an MQTT value; unknown values give swing."""
    return _SWINGS_BY_VALUE.get(value, SwingMode.SWING)


class MqttCommandSender:
    """Publishes unit commands through a ``publish(topic, payload)`` callable."""

    def __init__(self, publish: Callable[[str, str], object]) -> None:
        self._publish = publish

    def _send(self, unit: ACUnit, command: str, payload: str) -> None:
        self._publish(command_topic(unit.mqtt_topic, command), payload)

    def set_power(self, unit: ACUnit, state: bool) -> None:
        self._send(unit, MQTT_COMMAND_POWER, MQTT_POWER_ON if state else MQTT_POWER_OFF)

    def set_mode(self, unit: ACUnit, mode: int) -> None:
        self._send(unit, MQTT_COMMAND_MODE, mode_to_mqtt(mode))

    def set_fan_speed(self, unit: ACUnit, speed: int) -> None:
        self._send(unit, MQTT_COMMAND_FAN_MODE, fan_to_mqtt(speed))

    def set_swing(self, unit: ACUnit, swing: int) -> None:
        self._send(unit, MQTT_COMMAND_SWING_MODE, swing_to_mqtt(swing))

    def set_temperature(self, unit: ACUnit, temp: float) -> None:
        """Send a target temperature; values outside 16..30 °C are refused."""
        if not MQTT_TEMP_MIN <= temp <= MQTT_TEMP_MAX:
            raise ValueError(
                f"temperature {temp} outside {MQTT_TEMP_MIN}..{MQTT_TEMP_MAX}"
            )
        self._send(unit, MQTT_COMMAND_TEMPERATURE, f"{temp:.1f}")