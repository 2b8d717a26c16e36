"""User-facing texts of the panel and helpers to format them."""

from __future__ import annotations

from .units import FanSpeed, Mode, SwingMode

TXT_APP_TITLE = "AC Bediening HCY"
TXT_PAGE_INDICATOR = "Pagina"
TXT_CONNECTING = "Connecting..."
TXT_WIFI_FAILED = "WiFi connection failed"
TXT_TEST_MODE_STATUS = "TEST MODE - No MQTT Connection"

TXT_BACK = "Terug"
TXT_POWER = "POWER"
TXT_ALL_ON = "ALL ON"
TXT_ALL_OFF = "ALL OFF"
TXT_CANCEL = "Cancel"
TXT_CONFIRM = "Confirm"
TXT_CLOSE = "X"

TXT_TEMPERATURE_SETTING = "Temperatuur inst."
TXT_MODE = "Modus"
TXT_MODE_LABEL = "Mode:"
TXT_FAN_SPEED = "Fan snelh."
TXT_SWING_MODE = "Lamelle"
TXT_OFF = "OFF"

TXT_CHOOSE_MODE = "Kies Modus"
TXT_CHOOSE_FAN_SPEED = "Kies Fan Snelheid"
TXT_CHOOSE_SWING_MODE = "Kies Lamelle Modus"

TXT_CONFIRM_ALL_ON = "Turn ON all AC units?"
TXT_CONFIRM_ALL_OFF = "Turn OFF all AC units?"
TXT_CONFIRMATION = "Confirmation"

TXT_ALL_UNITS_ON = "All units turned ON"
TXT_ALL_UNITS_OFF = "All units turned OFF"

TXT_MQTT_CONNECTION_OK = "MQTT connection: OK"
TXT_UNIT_DATA_UPDATED = "Unit data updated via callbacks"

TXT_ERROR_JSON_PARSING_FAILED = "JSON parsing failed: "
TXT_ERROR_TOPIC_NO_MATCH = "Topic did not match any unit"
TXT_ERROR_UNIT_INDEX_INVALID = "Invalid unit index"
TXT_ERROR_MQTT_NOT_CONNECTED = "WARNING: MQTT not connected"

TXT_CELSIUS_SYMBOL = "°C"

TXT_STATUS_ON = "on"
TXT_STATUS_OFF = "off"
TXT_STATUS_CONNECTED = "connected"
TXT_STATUS_DISCONNECTED = "disconnected"

TXT_ACC_UNIT_CARD = "AC unit control card"
TXT_ACC_POWER_BUTTON = "Power toggle button"
TXT_ACC_MODE_BUTTON = "Operating mode selection"
TXT_ACC_FAN_BUTTON = "Fan speed selection"
TXT_ACC_SWING_BUTTON = "Air swing control"
TXT_ACC_TEMP_INCREASE = "Increase temperature"
TXT_ACC_TEMP_DECREASE = "Decrease temperature"


def get_text(key: str) -> str:
    """Return the text for ``key``; only one language exists, so the key itself."""
    return key


def mode_display_name(mode: int) -> str:
    """Dutch name of a mode, falling back to the first mode when out of range."""
    try:
        return Mode(mode).display_name
    except ValueError:
        return Mode.COOL.display_name


def fan_display_name(speed: int) -> str:
    """Dutch name of a fan speed, falling back to the lowest speed when out of range."""
    try:
        return FanSpeed(speed).display_name
    except ValueError:
        return FanSpeed.LOW.display_name


def swing_display_name(swing: int) -> str:
    """Dutch name of a swing setting, falling back to swing when out of range."""
    try:
        return SwingMode(swing).display_name
    except ValueError:
        return SwingMode.SWING.display_name


def format_page_indicator(current: int, total: int) -> str:
    """Page indicator text such as ``Pagina 1/3``."""
    return f"{TXT_PAGE_INDICATOR} {current}/{total}"


def format_temperature(temp: float) -> str:
    """Measured temperature with one decimal."""
    return f"{temp:.1f}{TXT_CELSIUS_SYMBOL}"


def format_temperature_set(temp: float) -> str:
    """Target temperature without decimals."""
    return f"{temp:.0f}{TXT_CELSIUS_SYMBOL}"