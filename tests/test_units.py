import pytest

from aircopanel.units import ACUnit, FanSpeed, Mode, SwingMode, default_units


def test_default_units_first_entry():
    units = default_units()
    assert units[0].name == "Centrale ruimte"
    assert units[0].mqtt_topic == "ac_grote_ruimte_1"


def test_default_units_count_and_last():
    units = default_units()
    assert len(units) == 11
    assert units[-1].mqtt_topic == "ac_materiaalhok_buiten"


def test_default_units_initial_state():
    for unit in default_units():
        assert unit.current_temp == 22.0
        assert unit.target_temp == 22.0
        assert unit.set_temp == 22.0
        assert unit.is_on is False
        assert unit.mode is Mode.COOL
        assert unit.fan_speed is FanSpeed.LOW
        assert unit.swing_mode is SwingMode.SWING


def test_default_units_are_fresh_copies():
    first = default_units()
    first[0].is_on = True
    second = default_units()
    assert second[0].is_on is False


def test_topics_are_unique():
    topics = [unit.mqtt_topic for unit in default_units()]
    assert len(set(topics)) == len(topics)


def test_mode_names():
    assert Mode(2).display_name == "Ventilatie"
    assert Mode(2).english_name == "FAN"
    unit = ACUnit("Test", "ac_test", mode=4)
    assert unit.mode.display_name == "Drogen"


def test_fan_and_swing_names():
    assert FanSpeed(3).display_name == "Krachtig"
    assert FanSpeed(1).english_name == "MEDIUM"
    unit = ACUnit("Test", "ac_test", swing_mode=3)
    assert unit.swing_mode.display_name == "Positie 3"
    assert SwingMode(4).english_name == "position_4"


def test_unit_coerces_integer_settings():
    unit = ACUnit("Test", "ac_test", mode=4, fan_speed=2, swing_mode=1)
    assert unit.mode is Mode.DRY
    assert unit.fan_speed is FanSpeed.HIGH
    assert unit.swing_mode is SwingMode.POSITION_1


@pytest.mark.parametrize("field", ["mode", "fan_speed", "swing_mode"])
def test_unit_rejects_invalid_setting(field):
    with pytest.raises(ValueError):
        ACUnit("Test", "ac_test", **{field: 9})