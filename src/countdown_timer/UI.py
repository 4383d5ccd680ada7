import typing as tp
from datetime import timedelta

from textual import on
from textual.reactive import reactive
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widget import Widget
from textual.widgets import Button, ContentSwitcher, Footer, Header, Static

from .shared import TimerState, DEFAULT_DURATION
from .store import TimerStore

def titled(
    w: Widget, /, title: str,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    w.border_title = title
    w.styles.padding = padding
    return w

def formatRemaining(state: TimerState) -> str:
    return f'Remaining Time: {state.remainingSeconds()} seconds'

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("s", "toggle_timer", "Start/Stop."),
        Binding("r", "reset_timer", "Reset."),
        Binding("q", "quit", "Quit."),
    ]

    timer_state: reactive[TimerState] = reactive(TimerState.Default, init=False)

    def __init__(
        self,
        store: TimerStore,
        duration: timedelta = DEFAULT_DURATION,
    ) -> None:
        super().__init__()

        self.store = store
        self.duration = duration
        self.unsubscribe: tp.Callable[[], None] | None = None

        self.title = "Timer App"

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with Container(id="timer-pane"):
            yield titled(Static(
                formatRemaining(TimerState.Default()), id="remaining",
            ), 'Countdown')
            with Horizontal(id="controls"):
                with ContentSwitcher(id="start-stop-switcher", initial="start-btn"):
                    yield Button("Start Timer", id="start-btn", variant="success")
                    yield Button("Stop Timer",  id="stop-btn",  variant="error")
                yield Button("Reset Timer", id="reset-btn")

        yield Footer(compact=True)

    def on_mount(self) -> None:
        self.unsubscribe = self.store.subscribe(self.onStateChanged)
        self.timer_state = self.store.restore()
        self.myUpdate()

    def onStateChanged(self, new_state: TimerState) -> None:
        self.timer_state = new_state

    def watch_timer_state(self, _, __) -> None:
        self.myUpdate()

    @on(Button.Pressed, '#start-btn')
    def startTimer(self) -> None:
        self.store.start(self.duration)

    @on(Button.Pressed, '#stop-btn')
    def stopTimer(self) -> None:
        self.store.stop()

    @on(Button.Pressed, '#reset-btn')
    def action_reset_timer(self) -> None:
        self.store.reset()

    def action_toggle_timer(self) -> None:
        if self.timer_state.is_running:
            self.stopTimer()
        else:
            self.startTimer()

    def myUpdate(self) -> None:
        sRemaining: Static = self.query_one('#remaining', Static)
        sRemaining.update(formatRemaining(self.timer_state))
        switcher: ContentSwitcher = self.query_one('#start-stop-switcher', ContentSwitcher)
        switcher.current = (
            'stop-btn' if self.timer_state.is_running else
            'start-btn'
        )

    def exit(self, result=None, return_code=0, message=None) -> None:
        if self.unsubscribe is not None:
            self.unsubscribe()
            self.unsubscribe = None
        self.store.close()
        return super().exit(result, return_code, message)
