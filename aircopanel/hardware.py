"""Hardware constants of the touch panel board and value checks."""

from __future__ import annotations

XPT2046_CS = 33
XPT2046_IRQ = 36
XPT2046_MOSI = 32
XPT2046_MISO = 39
XPT2046_CLK = 25

TFT_BL = 21
TFT_WIDTH = 240
TFT_HEIGHT = 320
TFT_ROTATION = 0

TOUCH_RAW_MIN = 300
TOUCH_RAW_MAX = 3800

SERIAL_BAUD_RATE = 115200

LVGL_BUFFER_SIZE = TFT_WIDTH * 3

LVGL_TIMER_INTERVAL = 5
LVGL_TICK_INTERVAL = 1
TOUCH_CHECK_INTERVAL = 10

DATA_UPDATE_INTERVAL = 2000
CONNECTION_CHECK_INTERVAL = 10000
TEST_MODE_TEMP_UPDATE = 30000

INDEV_LONG_PRESS_TIME = 400
INDEV_SCROLL_LIMIT = 5

MQTT_JSON_BUFFER_SIZE = 200

WIFI_CONNECTION_TIMEOUT = 20
WIFI_CHECK_DELAY = 500

MQTT_RECONNECT_DELAY = 5000
MQTT_SUBSCRIPTION_DELAY = 1000

_MAX_MODE = 4
_MAX_FAN_SPEED = 3
_MAX_SWING_MODE = 4
_MAX_PIN = 39


def is_valid_unit_index(index: int, count: int) -> bool:
    """True if ``index`` addresses one of ``count`` units."""
    return 0 <= index < count


def is_valid_mode(mode: int) -> bool:
    return 0 <= mode <= _MAX_MODE


def is_valid_fan_speed(speed: int) -> bool:
    return 0 <= speed <= _MAX_FAN_SPEED


def is_valid_swing_mode(swing: int) -> bool:
    return 0 <= swing <= _MAX_SWING_MODE


def is_valid_pin(pin: int) -> bool:
    """True for a GPIO number the board has."""
    return 0 <= pin <= _MAX_PIN