import asyncio
import typing as tp

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Footer, Header, RichLog, Static

from .shared import StopwatchConfig, titled
from .stopwatch import Stopwatch
from .lid_sensor_interface import LidSensor, LidSensorError

EXIT_NOTICE = '🚪 Exit'

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("enter", "toggle", "Start/Stop.", priority=True),
        Binding("r,R", "reset", "Reset.", priority=True),
        Binding("escape", "quit_stopwatch", "Quit.", priority=True),
    ]

    def __init__(
        self,
        stopwatch: Stopwatch,
        lid_sensor: LidSensor,
        config: StopwatchConfig | None = None,
        startup_warnings: tp.Sequence[str] = (),
    ) -> None:
        '''
        `startup_warnings` are shown in the event log once mounted.
        '''
        super().__init__()

        self.stopwatch = stopwatch
        self.lid_sensor = lid_sensor
        self.config = config or StopwatchConfig()
        self.startup_warnings = tuple(startup_warnings)
        self.tickTimer: Timer | None = None

        self.title = "Stopwatch"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield titled(Static("", id="time-display"), 'Elapsed', skip_bottom=False)
        yield titled(RichLog(id="notifications", markup=False), 'Events', skip_bottom=False)
        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.stopwatch.subscribe(self.announce)
        self.announce('🕐 Stopwatch')
        self.announce('[Enter] start/stop  [r] reset  [Esc] quit')
        for warning in self.startup_warnings:
            self.log.warning(warning)
            self.announce(warning)
        self.refreshDisplay()
        self.tickTimer = self.set_interval(self.config.poll_interval, self.tick)

    def announce(self, message: str) -> None:
        self.query_one('#notifications', RichLog).write(message)

    def refreshDisplay(self) -> None:
        display: Static = self.query_one('#time-display', Static)
        display.update(f'⏱️ {self.stopwatch.formatted()}')

    async def tick(self) -> None:
        if not self.stopwatch.isRunning():
            return
        self.refreshDisplay()
        try:
            closed = await asyncio.to_thread(self.lid_sensor.isClosed)
        except LidSensorError as e:
            self.log.error(f'lid sensor failed: {e!r}')
            self.exit(return_code=1, message=f'Lid sensor failed: {e}')
            return
        # a key press may have stopped it while the sensor was running
        if closed and self.stopwatch.isRunning():
            self.log.info('lid closed while running')
            self.announce('💤 Lid closed - paused')
            self.stopwatch.toggle()
            self.refreshDisplay()

    def action_toggle(self) -> None:
        self.stopwatch.toggle()
        self.refreshDisplay()

    def action_reset(self) -> None:
        self.stopwatch.reset()
        self.refreshDisplay()

    def action_quit_stopwatch(self) -> None:
        self.announce(EXIT_NOTICE)
        self.exit(return_code=0, message=EXIT_NOTICE)

    def exit(self, result=None, return_code=None, message=None) -> None:
        if self.tickTimer is not None:
            self.tickTimer.stop()
            self.tickTimer = None
        return super().exit(result, return_code, message)
