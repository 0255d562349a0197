import subprocess

from textual import log

from .shared import StopwatchConfig
from .lid_sensor_interface import LidSensor, LidSensorError

class IoregLidSensor(LidSensor):
    '''
    macOS clamshell state, read from the IO registry.
    '''
    def __init__(self, config: StopwatchConfig | None = None) -> None:
        self.config = config or StopwatchConfig()
    
    def isClosed(self) -> bool:
        return self.config.lid_closed_marker in self.query()
    
    def query(self) -> str:
        command = list(self.config.lid_command)
        try:
            completed = subprocess.run(
                command, capture_output=True, 
                timeout=self.config.lid_timeout, 
            )
        except subprocess.TimeoutExpired as e:
            raise LidSensorError(
                f'{command[0]} timed out after {self.config.lid_timeout} s', 
            ) from e
        except OSError as e:
            raise LidSensorError(f'Cannot run {command[0]}: {e}') from e
        if completed.returncode != 0:
            # the marker test on stdout still decides
            log.warning(f'{command[0]} exited with {completed.returncode}')
        try:
            return completed.stdout.decode('utf-8')
        except UnicodeDecodeError as e:
            raise LidSensorError(f'{command[0]} output is not UTF-8') from e
