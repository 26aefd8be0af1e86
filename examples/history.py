"""
History Example - Demonstrates combine_reducers and the initial dispatch.

Two slices share one store: the counter and a log of every action the store
has seen. Both start from their reducer defaults when the app mounts.
"""

from pydantic import BaseModel, ConfigDict
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from textual_dispatch import (
    Action,
    StateRendered,
    combine_reducers,
    counter_reducer,
    increment,
    use_store,
    with_default,
)


# --- History slice ---


class History(BaseModel):
    """Every action type dispatched so far."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[str, ...] = ()


@with_default(History)
def history_reducer(state: History, action: Action) -> History:
    return state.model_copy(update={"entries": (*state.entries, action.type)})


root_reducer = combine_reducers(counter=counter_reducer, history=history_reducer)


class HistoryApp(App):
    """Counter with an action log."""

    CSS = """
    Screen {
        align: center middle;
    }

    #count {
        width: 100%;
        height: 3;
        text-align: center;
        text-style: bold;
    }

    #history {
        width: 100%;
        height: auto;
        color: $text-muted;
    }

    Button {
        margin: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static(id="count")
        yield Static(id="history")
        with Horizontal():
            yield Button("Increment", id="inc")
            yield Button("Unknown action", id="unknown")

    def on_mount(self) -> None:
        # The first StateRendered arrives from this call
        self.store = use_store(self, root_reducer, name="root")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "inc":
                self.store.dispatch(increment())
            case "unknown":
                self.store.dispatch({"type": "unknown"})

    def on_state_rendered(self, event: StateRendered) -> None:
        state = event.new_value
        self.query_one("#count", Static).update(str(state["counter"].count))
        self.query_one("#history", Static).update("\n".join(state["history"].entries))


if __name__ == "__main__":
    HistoryApp().run()
