"""Store - holds state and runs the reducer, render and listeners on dispatch."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, TypeVar

from .actions import Action, init
from .config import StoreSettings
from .errors import AlreadyBootstrappedError, ReentrantDispatchError
from .state import State

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Store(Generic[T]):
    """
    A single state value, the reducer that advances it and a renderer.

    The store starts empty. The first dispatch hands the reducer ``None`` as
    the previous state, so the reducer's default becomes the initial state
    and the same dispatch performs the first render. ``bootstrap()`` sends
    the initialization action for exactly that purpose.

    Usage:
        ```python
        surface = BufferSurface()
        store = Store(counter_reducer, lambda s: render_count(s, surface))
        store.bootstrap()           # surface.text == "0"
        store.dispatch(increment())  # surface.text == "1"
        ```
    """

    __slots__ = ("_reducer", "_renderer", "_state", "_settings", "_dispatching")

    def __init__(
        self,
        reducer: Callable[[T | None, Action], T],
        renderer: Callable[[T], None] | None = None,
        *,
        name: str | None = None,
        settings: StoreSettings | None = None,
    ) -> None:
        """
        Create an empty store.

        Args:
            reducer: Function (state or None, action) -> new_state.
            renderer: Function called with the state after every dispatch.
            name: Optional name for debugging.
            settings: Store settings; defaults to ``StoreSettings()``.
        """
        self._reducer = reducer
        self._renderer = renderer
        self._state: State[T] = State(name=name)
        self._settings = settings or StoreSettings()
        self._dispatching = False

    @property
    def name(self) -> str | None:
        """Get store name."""
        return self._state.name

    @property
    def state(self) -> T:
        """
        Get the current state.

        Raises:
            StateNotInitializedError: If nothing has been dispatched yet.
        """
        return self._state.value

    @property
    def cell(self) -> State[T]:
        """Get the underlying state cell."""
        return self._state

    @property
    def initialized(self) -> bool:
        """True once the first dispatch has run."""
        return self._state.initialized

    @property
    def settings(self) -> StoreSettings:
        """Get the store settings."""
        return self._settings

    def dispatch(self, action: Action | Mapping[str, Any]) -> None:
        """
        Apply the reducer to the current state and render the result.

        Render runs on every dispatch, whether or not the state changed.
        Exceptions from the reducer, the renderer or a listener propagate
        to the caller.

        Args:
            action: An Action, or a mapping with a ``type`` key.

        Raises:
            ReentrantDispatchError: If called from inside another dispatch
                while ``settings.strict`` is on.
        """
        action = Action.coerce(action)

        if self._dispatching and self._settings.strict:
            raise ReentrantDispatchError(self.name, action)

        logger.debug("store %s: dispatch %r", self.name or "unnamed", action.type)

        self._dispatching = True
        try:
            new_value = self._reducer(self._state.peek(), action)
            old_value = self._state.assign(new_value)
            self.render()
            self._state.notify(old_value)
        finally:
            self._dispatching = False

    def render(self) -> None:
        """
        Project the current state through the renderer.

        Only supported after the first dispatch.

        Raises:
            StateNotInitializedError: If nothing has been dispatched yet.
        """
        value = self._state.value
        if self._renderer is not None:
            self._renderer(value)

    def bootstrap(self) -> None:
        """
        Dispatch the initialization action.

        Raises:
            AlreadyBootstrappedError: If the store already holds state.
        """
        if self._state.initialized:
            raise AlreadyBootstrappedError(self.name)

        logger.info(
            "store %s: bootstrapping with %r",
            self.name or "unnamed",
            self._settings.init_type,
        )
        self.dispatch(init(self._settings.init_type))

    def subscribe(self, listener: Callable[[T | None, T], None]) -> Callable[[], None]:
        """
        Call ``listener(old, new)`` after every dispatch.

        Listeners run after the renderer.

        Returns:
            A function that removes the listener.
        """
        return self._state.watch(listener)

    def __repr__(self) -> str:
        return f"Store({self._state!r})"


def create_store(
    reducer: Callable[[T | None, Action], T],
    renderer: Callable[[T], None] | None = None,
    *,
    name: str | None = None,
    settings: StoreSettings | None = None,
    bootstrap: bool = True,
) -> Store[T]:
    """
    Create a new store and, by default, perform the initial dispatch.

    Args:
        reducer: Function (state or None, action) -> new_state.
        renderer: Function called with the state after every dispatch.
        name: Optional name for debugging.
        settings: Store settings.
        bootstrap: Dispatch the initialization action before returning.

    Returns:
        A Store instance.

    Example:
        ```python
        surface = BufferSurface()
        store = create_store(counter_reducer, count_renderer(surface))
        assert surface.text == "0"
        ```
    """
    store = Store(reducer, renderer, name=name, settings=settings)
    if bootstrap:
        store.bootstrap()
    return store
