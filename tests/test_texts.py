import pytest

from aircopanel.texts import (
    TXT_APP_TITLE,
    fan_display_name,
    format_page_indicator,
    format_temperature,
    format_temperature_set,
    get_text,
    mode_display_name,
    swing_display_name,
)
from aircopanel.units import FanSpeed, Mode, SwingMode


def test_get_text_returns_key():
    assert get_text(TXT_APP_TITLE) == "AC Bediening HCY"
    assert get_text("Terug") == "Terug"


def test_page_indicator():
    assert format_page_indicator(1, 3) == "Pagina 1/3"


def test_format_temperature():
    assert format_temperature(22.0) == "22.0°C"


def test_format_temperature_set_has_no_decimals():
    text = format_temperature_set(22.0)
    assert text.endswith("°C")
    assert "." not in text
    assert float(text[:-2]) == 22.0


@pytest.mark.parametrize("mode", list(Mode))
def test_mode_display_name_in_range(mode):
    assert mode_display_name(int(mode)) == mode.display_name


def test_mode_display_name_falls_back():
    assert mode_display_name(9) == "Koelen"
    assert mode_display_name(-1) == mode_display_name(0)


def test_fan_display_name():
    assert fan_display_name(3) == "Krachtig"
    assert fan_display_name(4) == FanSpeed.LOW.display_name


def test_swing_display_name():
    assert swing_display_name(4) == "Positie 4"
    assert swing_display_name(5) == SwingMode.SWING.display_name