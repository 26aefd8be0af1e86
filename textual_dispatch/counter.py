"""The counter: a one-field state, one action, and a text renderer."""

from __future__ import annotations

from typing import Callable

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from .actions import Action
from .reducer import with_default
from .types import Surface

INCREMENT = "increment"


class CounterState(BaseModel):
    """State of the counter."""

    model_config = ConfigDict(frozen=True)

    count: NonNegativeInt = 0


def increment() -> Action:
    """Build the increment action."""
    return Action(type=INCREMENT)


@with_default(CounterState)
def counter_reducer(state: CounterState, action: Action) -> CounterState:
    """Count ``increment`` actions; return any other action's state unchanged."""
    if action.type == INCREMENT:
        return state.model_copy(update={"count": state.count + 1})
    return state


def render_count(state: CounterState, surface: Surface) -> None:
    """Write the count as text."""
    surface.write(str(state.count))


def count_renderer(surface: Surface) -> Callable[[CounterState], None]:
    """Bind ``render_count`` to a surface, for use as a store renderer."""

    def render(state: CounterState) -> None:
        render_count(state, surface)

    return render
