from .UI import UI as StopwatchUI
from .stopwatch import Stopwatch, State, formatDuration
from .shared import StopwatchConfig
from .lid_sensor_interface import LidSensor, LidSensorError
from .lid_sensor_ioreg import IoregLidSensor
from .lid_sensor_dummy import LidSensorDummy

__all__ = [
    "StopwatchUI", "Stopwatch", "State", "formatDuration", "StopwatchConfig",
    "LidSensor", "LidSensorError", "IoregLidSensor", "LidSensorDummy",
]
