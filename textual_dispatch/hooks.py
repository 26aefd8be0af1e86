"""Bind stores to Textual widgets."""

from __future__ import annotations

from typing import Callable, TypeVar

from textual.widget import Widget

from .actions import Action
from .config import StoreSettings
from .store import Store

T = TypeVar("T")


def use_store(
    widget: Widget,
    reducer: Callable[[T | None, Action], T],
    *,
    render: Callable[[T], None] | None = None,
    name: str | None = None,
    settings: StoreSettings | None = None,
    bootstrap: bool = True,
) -> Store[T]:
    """
    Create a store bound to a widget.

    The widget is subscribed to the store and receives a ``StateRendered``
    message after every dispatch, including the initial one.

    Args:
        widget: The widget that owns this store.
        reducer: Function (state or None, action) -> new_state.
        render: Optional renderer called before the message is posted.
        name: Optional name for debugging.
        settings: Store settings.
        bootstrap: Perform the initial dispatch before returning.

    Returns:
        The Store.

    Example:
        ```python
        class Counter(Widget):
            def on_mount(self):
                self.counter = use_store(self, counter_reducer, name="counter")

            def on_state_rendered(self, event: StateRendered) -> None:
                self.query_one("#display", Static).update(str(event.new_value.count))
        ```
    """
    store = Store(reducer, render, name=name, settings=settings)
    store.cell.subscribe(widget)

    if bootstrap:
        store.bootstrap()

    return store
