"""Air-conditioning units, their operating modes and the installed set of units."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MODE_NAMES = ("Koelen", "Verwarmen", "Ventilatie", "Auto", "Drogen")
MODE_NAMES_EN = ("COOL", "HEAT", "FAN", "AUTO", "DRY")

FAN_NAMES = ("Laag", "Gemiddeld", "Hoog", "Krachtig")
FAN_NAMES_EN = ("LOW", "MEDIUM", "HIGH", "POWERFUL")

SWING_NAMES = ("Swing", "Positie 1", "Positie 2", "Positie 3", "Positie 4")
SWING_NAMES_EN = ("swing", "position_1", "position_2", "position_3", "position_4")

DEFAULT_TEMPERATURE = 22.0


class Mode(IntEnum):
    """HVAC operating mode; values match the unit's mode register."""

    COOL = 0
    HEAT = 1
    FAN_ONLY = 2
    AUTO = 3
    DRY = 4

    @property
    def display_name(self) -> str:
        return MODE_NAMES[self]

    @property
    def english_name(self) -> str:
        return MODE_NAMES_EN[self]


class FanSpeed(IntEnum):
    """Fan speed; values match the unit's fan mode register."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2
    POWERFUL = 3

    @property
    def display_name(self) -> str:
        return FAN_NAMES[self]

    @property
    def english_name(self) -> str:
        return FAN_NAMES_EN[self]


class SwingMode(IntEnum):
    """Louvre setting: continuous swing or one of four fixed positions."""

    SWING = 0
    POSITION_1 = 1
    POSITION_2 = 2
    POSITION_3 = 3
    POSITION_4 = 4

    @property
    def display_name(self) -> str:
        return SWING_NAMES[self]

    @property
    def english_name(self) -> str:
        return SWING_NAMES_EN[self]


@dataclass
class ACUnit:
    """One air-conditioning unit as known to the panel."""

    name: str
    mqtt_topic: str
    current_temp: float = DEFAULT_TEMPERATURE
    is_on: bool = False
    mode: Mode = Mode.COOL
    fan_speed: FanSpeed = FanSpeed.LOW
    swing_mode: SwingMode = SwingMode.SWING
    target_temp: float = DEFAULT_TEMPERATURE
    set_temp: float = DEFAULT_TEMPERATURE

    def __post_init__(self) -> None:
        self.mode = Mode(self.mode)
        self.fan_speed = FanSpeed(self.fan_speed)
        self.swing_mode = SwingMode(self.swing_mode)


_INSTALLED_UNITS = (
    ("Centrale ruimte", "ac_grote_ruimte_1"),
    ("Bestuurskamer", "ac_bestuurskamer"),
    ("Vergaderzaal boven", "ac_vergaderzaal_boven"),
    ("EHBO", "ac_ehbo"),
    ("Kleedkamer dames", "ac_kleedkamer_dames"),
    ("Kleedkamer dames gasten BSO", "ac_kleedkamer_dames_gasten_bso"),
    ("Kleedkamer heren", "ac_kleedkamer_heren"),
    ("Kleedkamer heren gasten", "ac_kleedkamer_heren_gasten"),
    ("Scheidsrechters", "ac_scheidsrechters"),
    ("Materiaalhok binnen", "ac_materiaalhok_binnen"),
    ("Materiaalhok buiten", "ac_materiaalhok_buiten"),
)


def default_units() -> list[ACUnit]:
    """Return a fresh list of the installed units in their initial state."""
    return [ACUnit(name, topic) for name, topic in _INSTALLED_UNITS]