import sys
import shutil

from .UI import UI
from .shared import StopwatchConfig
from .stopwatch import Stopwatch
from .lid_sensor_interface import LidSensor
from .lid_sensor_ioreg import IoregLidSensor
from .lid_sensor_dummy import LidSensorDummy

def pickLidSensor(config: StopwatchConfig) -> tuple[LidSensor, str | None]:
    '''
    Returns the sensor and, for the fallback, a warning to show the user.
    '''
    command = config.lid_command[0]
    if shutil.which(command) is None:
        return (
            LidSensorDummy(closed=False),
            f'⚠️ {command} not found - lid auto-pause off',
        )
    return IoregLidSensor(config), None

def main() -> None:
    config = StopwatchConfig()
    sensor, warning = pickLidSensor(config)
    app = UI(
        Stopwatch(), sensor, config=config,
        startup_warnings=() if warning is None else (warning, ),
    )
    app.run()
    sys.exit(app.return_code or 0)

if __name__ == "__main__":
    main()
