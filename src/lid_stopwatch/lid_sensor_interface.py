from abc import ABC, abstractmethod

class LidSensorError(OSError):
    pass

class LidSensor(ABC):
    @abstractmethod
    def isClosed(self) -> bool:
        '''
        Blocking. Raises `LidSensorError` if the lid state cannot be read.
        '''
        raise NotImplementedError
