"""State cell and the message posted to widgets after a render."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar
from weakref import WeakSet

from textual.message import Message
from textual.widget import Widget

from .errors import StateNotInitializedError

T = TypeVar("T")


class StateRendered(Message, Generic[T]):
    """Message posted to subscribed widgets after every render."""

    def __init__(self, state: State[T], old_value: T | None, new_value: T) -> None:
        super().__init__()
        self.state = state
        self.old_value = old_value
        self.new_value = new_value


class State(Generic[T]):
    """
    Holds the single state value of a store.

    The cell starts empty. It is filled by the first assignment and stays
    filled afterwards; there is no way to clear it.

    Unlike a reactive value, assigning an equal value still counts as a
    transition. Watchers run on every assignment so that a dispatch whose
    action was ignored by the reducer still reaches them.
    """

    __slots__ = ("_value", "_initialized", "_subscribers", "_watchers", "_name")

    def __init__(self, *, name: str | None = None) -> None:
        """
        Initialize an empty state cell.

        Args:
            name: Optional name for debugging purposes.
        """
        self._value: T | None = None
        self._initialized = False
        self._subscribers: WeakSet[Widget] = WeakSet()
        self._watchers: list[Callable[[T | None, T], None]] = []
        self._name = name

    @property
    def name(self) -> str | None:
        """Get the state name."""
        return self._name

    @property
    def initialized(self) -> bool:
        """True once a value has been assigned."""
        return self._initialized

    @property
    def value(self) -> T:
        """
        Get the current value.

        Raises:
            StateNotInitializedError: If nothing has been assigned yet.
        """
        if not self._initialized:
            raise StateNotInitializedError(self._name)
        return self._value  # type: ignore[return-value]

    def peek(self) -> T | None:
        """Get the current value, or None while the cell is empty."""
        return self._value

    def assign(self, new_value: T) -> T | None:
        """
        Store a new value and return the previous one.

        Watchers are not notified here; call ``notify`` once the new value
        has been rendered.
        """
        old_value = self._value
        self._value = new_value
        self._initialized = True
        return old_value

    def notify(self, old_value: T | None) -> None:
        """Run watchers and post ``StateRendered`` to subscribed widgets."""
        new_value = self.value

        for watcher in list(self._watchers):
            watcher(old_value, new_value)

        message = StateRendered(self, old_value, new_value)
        for widget in self._subscribers:
            widget.post_message(message)

    def subscribe(self, widget: Widget) -> None:
        """
        Subscribe a widget to renders.

        The widget will receive a StateRendered message after every dispatch.

        Args:
            widget: The widget to subscribe.
        """
        self._subscribers.add(widget)

    def unsubscribe(self, widget: Widget) -> None:
        """
        Unsubscribe a widget from renders.

        Args:
            widget: The widget to unsubscribe.
        """
        self._subscribers.discard(widget)

    def watch(self, callback: Callable[[T | None, T], None]) -> Callable[[], None]:
        """
        Add a watcher callback.

        Args:
            callback: A function that receives (old_value, new_value).

        Returns:
            A function to remove the watcher.
        """
        self._watchers.append(callback)

        def unwatch() -> None:
            if callback in self._watchers:
                self._watchers.remove(callback)

        return unwatch

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        if not self._initialized:
            return f"State(<empty>{name})"
        return f"State({self._value!r}{name})"
