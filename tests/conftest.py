import pytest

from lid_stopwatch import Stopwatch

class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()

@pytest.fixture
def stopwatch(clock: FakeClock) -> Stopwatch:
    return Stopwatch(clock=clock)

@pytest.fixture
def notices(stopwatch: Stopwatch) -> list[str]:
    received: list[str] = []
    stopwatch.subscribe(received.append)
    return received
