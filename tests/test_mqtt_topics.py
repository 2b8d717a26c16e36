import pytest

from aircopanel.mqtt_topics import (
    MQTT_TEMP_MAX,
    MQTT_TEMP_MIN,
    MqttCommandSender,
    command_topic,
    fan_from_mqtt,
    fan_to_mqtt,
    generate_topic,
    mode_from_mqtt,
    mode_to_mqtt,
    status_topic,
    swing_from_mqtt,
    swing_to_mqtt,
)
from aircopanel.units import ACUnit, FanSpeed, Mode, SwingMode


@pytest.fixture
def sent():
    return []


@pytest.fixture
def sender(sent):
    return MqttCommandSender(lambda topic, payload: sent.append((topic, payload)))


@pytest.fixture
def unit():
    return ACUnit("EHBO", "ac_ehbo")


def test_topics():
    assert status_topic("ac_ehbo") == "hcy/airco/ac_ehbo/status"
    assert command_topic("ac_ehbo", "command/power") == "hcy/airco/ac_ehbo/command/power"
    assert generate_topic("a", "b") == command_topic("a", "b")


def test_mode_values():
    assert mode_to_mqtt(Mode.FAN_ONLY) == "fan_only"
    assert mode_to_mqtt(9) == "cool"
    assert mode_from_mqtt("bogus") is Mode.COOL


@pytest.mark.parametrize("mode", list(Mode))
def test_mode_round_trip(mode):
    assert mode_from_mqtt(mode_to_mqtt(mode)) is mode


@pytest.mark.parametrize("speed", list(FanSpeed))
def test_fan_round_trip(speed):
    assert fan_from_mqtt(fan_to_mqtt(speed)) is speed


@pytest.mark.parametrize("swing", list(SwingMode))
def test_swing_round_trip(swing):
    assert swing_from_mqtt(swing_to_mqtt(swing)) is swing


def test_fan_and_swing_defaults():
    assert fan_to_mqtt(7) == "low"
    assert fan_from_mqtt("") is FanSpeed.LOW
    assert swing_to_mqtt(7) == "swing"
    assert swing_from_mqtt("position_9") is SwingMode.SWING


def test_set_power(sender, sent, unit):
    sender.set_power(unit, True)
    sender.set_power(unit, False)
    assert [payload for _, payload in sent] == ["on", "off"]
    expected_topic = command_topic(unit.mqtt_topic, "command/power")
    assert expected_topic == "hcy/airco/ac_ehbo/command/power"
    assert [topic for topic, _ in sent] == [expected_topic, expected_topic]


def test_set_mode_fan_swing(sender, sent, unit):
    sender.set_mode(unit, Mode.FAN_ONLY)
    sender.set_fan_speed(unit, FanSpeed.POWERFUL)
    sender.set_swing(unit, SwingMode.POSITION_2)
    assert [topic for topic, _ in sent] == [
        "hcy/airco/ac_ehbo/command/mode",
        "hcy/airco/ac_ehbo/command/fan_mode",
        "hcy/airco/ac_ehbo/command/swing_mode",
    ]
    assert mode_from_mqtt(sent[0][1]) is Mode.FAN_ONLY
    assert fan_from_mqtt(sent[1][1]) is FanSpeed.POWERFUL
    assert swing_from_mqtt(sent[2][1]) is SwingMode.POSITION_2
    assert [payload for _, payload in sent] == ["fan_only", "powerful", "position_2"]


def test_set_temperature_round_trip(sender, sent, unit):
    sender.set_temperature(unit, MQTT_TEMP_MIN)
    sender.set_temperature(unit, MQTT_TEMP_MAX)
    expected_topic = command_topic(unit.mqtt_topic, "command/temperature")
    assert expected_topic == "hcy/airco/ac_ehbo/command/temperature"
    assert [topic for topic, _ in sent] == [expected_topic] * 2
    assert [float(payload) for _, payload in sent] == [16.0, 30.0]


@pytest.mark.parametrize("temp", [MQTT_TEMP_MIN - 1, MQTT_TEMP_MAX + 1])
def test_set_temperature_out_of_range(sender, sent, unit, temp):
    with pytest.raises(ValueError):
        sender.set_temperature(unit, temp)
    assert sent == []