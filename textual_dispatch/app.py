"""Counter app - the store driving a Textual display."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.widgets import Button, Static

from .config import StoreSettings, configure_logging
from .counter import CounterState, count_renderer, counter_reducer, increment
from .hooks import use_store
from .state import StateRendered
from .store import Store
from .surface import StaticSurface


class CounterApp(App):
    """Shows the count and increments it on every button press."""

    CSS = """
    Screen {
        align: center middle;
    }

    #count {
        width: 100%;
        height: 3;
        text-align: center;
        text-style: bold;
        background: $primary;
        color: $text;
    }

    Button {
        margin: 1;
    }
    """

    counter: Store[CounterState]

    def __init__(self, settings: StoreSettings | None = None) -> None:
        super().__init__()
        self.store_settings = settings or StoreSettings()

    def compose(self) -> ComposeResult:
        # Empty until the initial dispatch renders into it
        yield Static(id="count")
        yield Button("Increment", id="inc")

    def on_mount(self) -> None:
        surface = StaticSurface(self.query_one("#count", Static))
        self.counter = use_store(
            self,
            counter_reducer,
            render=count_renderer(surface),
            name="counter",
            settings=self.store_settings,
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "inc":
            self.counter.dispatch(increment())

    def on_state_rendered(self, event: StateRendered[CounterState]) -> None:
        self.log(f"Rendered: {event.old_value} -> {event.new_value}")


def main() -> None:
    """Run the counter app."""
    settings = StoreSettings.from_env()
    configure_logging(settings)
    CounterApp(settings).run()


if __name__ == "__main__":
    main()
