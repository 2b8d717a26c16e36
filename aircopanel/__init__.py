"""State, texts, screen views and control logic for an MQTT air-conditioning touch panel."""

__version__ = "0.1.0"

__all__ = [
    "units",
    "texts",
    "hardware",
    "mqtt_topics",
    "state",
    "main_screen",
    "unit_screen",
    "unit_controls",
    "master_control",
]