from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from textual.widget import Widget

IOREG_COMMAND = ('ioreg', '-r', '-k', 'AppleClamshellState', '-d', '4')
IOREG_CLOSED_MARKER = '"AppleClamshellState" = Yes'

class StopwatchConfig(BaseModel):
    poll_interval: float = Field(default=0.01, gt=0.0)  # seconds
    lid_command: tuple[str, ...] = Field(default=IOREG_COMMAND, min_length=1)
    lid_closed_marker: str = Field(default=IOREG_CLOSED_MARKER, min_length=1)
    # seconds; also bounds how long quitting waits on an in-flight lid query
    lid_timeout: float = Field(default=2.0, gt=0.0)

    model_config = ConfigDict(
        frozen=True,
    )

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w
