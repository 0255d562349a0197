from .lid_sensor_interface import LidSensor

class LidSensorDummy(LidSensor):
    def __init__(
        self, closed: bool = False, error: OSError | None = None, 
    ) -> None:
        '''
        Both attributes may be flipped while the app is running.
        '''
        self.closed = closed
        self.error = error
        self.n_calls = 0
    
    def isClosed(self) -> bool:
        self.n_calls += 1
        if self.error is not None:
            raise self.error
        return self.closed
