# aircopanel

`aircopanel` holds the state, texts and control logic of a small touch panel
that operates a building's air-conditioning units over MQTT. Screens are
turned into plain, immutable data views that a user interface can draw.
Button presses become method calls that either change the local state (in
test mode) or publish MQTT commands through a callable you supply.

## Modules

- `aircopanel.units`: the `ACUnit` dataclass, the `Mode`, `FanSpeed` and
  `SwingMode` enumerations (each with `display_name` and `english_name`), and
  `default_units()`, which returns a fresh list of the eleven configured
  units.
- `aircopanel.texts`: the panel's interface texts (`TXT_*` constants) and
  helpers: `get_text`, `mode_display_name`, `fan_display_name`,
  `swing_display_name` (out-of-range values fall back to the first entry),
  `format_page_indicator` (`"Pagina 1/3"`), `format_temperature` (one
  decimal, `"22.0°C"`) and `format_temperature_set` (no decimals, `"22°C"`).
- `aircopanel.hardware`: board constants (pins, display size, intervals) and
  range checks `is_valid_unit_index`, `is_valid_mode`, `is_valid_fan_speed`,
  `is_valid_swing_mode` and `is_valid_pin`.
- `aircopanel.mqtt_topics`: topic builders `generate_topic`, `command_topic`
  and `status_topic` (all under `hcy/airco/<unit>/`), conversions between
  indices and MQTT values (`mode_to_mqtt`, `fan_to_mqtt`, `swing_to_mqtt`,
  `mode_from_mqtt`, `fan_from_mqtt`, `swing_from_mqtt`, with defaults for
  unknown input) and `MqttCommandSender`, whose `set_power`, `set_mode`,
  `set_fan_speed`, `set_swing` and `set_temperature` publish commands.
  `set_temperature` raises `ValueError` outside 16–30 °C.
- `aircopanel.state`: `ControllerState` (units, test mode, Wi-Fi and MQTT
  connection flags, current page, selected unit and the current `Screen`),
  with `total_pages()`, `page_units()` and `selected()`.
- `aircopanel.main_screen`: `render_main_screen(state)` gives a
  `MainScreenView` with `StatusIcon`s and a page of `UnitCard`s;
  `indicator_colors(unit)` gives a unit's status-dot colours; `open_unit`,
  `previous_page` and `next_page` handle navigation.
- `aircopanel.unit_screen`: `render_unit_screen(state, index)` gives a
  `UnitScreenView` for one unit, or `None` for an unknown index;
  `mode_color(mode)` gives a mode's colour.
- `aircopanel.unit_controls`: `UnitController` handles the unit screen's
  power button, temperature buttons (1 °C steps within 16–30 °C), mode,
  fan speed and swing selection, and `back()` to the main screen.
- `aircopanel.master_control`: `MasterControl` opens a `Confirmation` for
  "ALL ON" / "ALL OFF" with `request_all(state)`; `answer(confirmation,
  button_index)` switches every unit on confirm and returns a
  `Notification`, or returns `None` on cancel.

Outside test mode the controls only publish commands; the local unit state
is left for the units' own reports to update. The exception is
`select_mode`, which updates the unit at once, and only while MQTT is
connected.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install .[test]
pytest
```

## Example

```python
from aircopanel.main_screen import open_unit, render_main_screen
from aircopanel.mqtt_topics import MqttCommandSender
from aircopanel.state import ControllerState
from aircopanel.unit_controls import UnitController

sent = []
sender = MqttCommandSender(lambda topic, payload: sent.append((topic, payload)))

state = ControllerState()
print(render_main_screen(state).page_text)   # Pagina 1/3

open_unit(state, 0)
UnitController(state, sender).increase_temperature()
print(sent)  # [('hcy/airco/ac_grote_ruimte_1/command/temperature', '23.0')]
```

Pass your MQTT client's publish function as the `publish` callable to send
real commands.

## What it does not do

- It does not connect to an MQTT broker, subscribe to topics, or read the
  units' status messages into `ControllerState`; you set the connection
  flags and unit values yourself.
- It does not draw anything or read touch input; the views are data only.
- It has no command-line program or main loop.