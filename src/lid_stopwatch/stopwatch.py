from __future__ import annotations

import time
import typing as tp
from datetime import timedelta
from enum import Enum

from textual import log

Listener = tp.Callable[[str], None]

class State(Enum):
    Running = 'Running'
    Stopped = 'Stopped'

def formatDuration(duration: timedelta) -> str:
    '''
    `HH:MM:SS.cc`. Minutes wrap at 60, hours do not wrap.
    Centiseconds are truncated.
    '''
    total_seconds = duration // timedelta(seconds=1)
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    centis = duration.microseconds // 10_000
    return f'{hours:02d}:{minutes:02d}:{seconds:02d}.{centis:02d}'

class Stopwatch:
    def __init__(
        self, clock: tp.Callable[[], float] = time.monotonic,
    ) -> None:
        '''
        `clock` must be monotonic and return seconds.
        '''
        self.clock = clock
        self.state = State.Stopped
        self.elapsed = timedelta()
        self.start_time: float | None = None
        self.counter = 0
        self.listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def notify(self, message: str) -> None:
        for listener in self.listeners:
            listener(message)

    def isRunning(self) -> bool:
        return self.state == State.Running

    def sinceStart(self) -> timedelta:
        assert self.start_time is not None
        return timedelta(seconds=max(0.0, self.clock() - self.start_time))

    def currentTime(self) -> timedelta:
        match self.state:
            case State.Running:
                return self.elapsed + self.sinceStart()
            case State.Stopped:
                return self.elapsed

    def toggle(self) -> None:
        match self.state:
            case State.Running:
                self.elapsed += self.sinceStart()
                self.start_time = None
                self.state = State.Stopped
                log.info(f'paused at {self.elapsed}, counter {self.counter}')
                self.notify(f'⏸️  Paused | ⛳️ {self.counter}')
            case State.Stopped:
                self.start_time = self.clock()
                self.state = State.Running
                log.info(f'started from {self.elapsed}')
                self.notify('▶️  Started')
                self.counter += 1

    def reset(self) -> None:
        # an in-flight interval is dropped, not folded into `elapsed`
        self.counter = 0
        self.elapsed = timedelta()
        self.start_time = None
        self.state = State.Stopped
        log.info('reset')
        self.notify('🔄 Reset')

    def formatted(self) -> str:
        return formatDuration(self.currentTime())
