"""Helpers for writing reducers."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Mapping, TypeVar

T = TypeVar("T")
A = TypeVar("A")


def with_default(
    default: T | Callable[[], T],
) -> Callable[[Callable[[T, A], T]], Callable[[T | None, A], T]]:
    """
    Give a reducer its initial state.

    The wrapped reducer accepts ``None`` as the previous state and replaces
    it with ``default`` before running. This is how a store gets its first
    state: the initialization action reaches the reducer with no state, the
    reducer falls back to the default, and nothing else matches the action.

    Args:
        default: The initial state, or a zero-argument factory for it.
            Classes (for example pydantic models) are treated as factories.

    Example:
        ```python
        @with_default(CounterState)
        def reducer(state: CounterState, action: Action) -> CounterState:
            match action.type:
                case "increment":
                    return state.model_copy(update={"count": state.count + 1})
            return state
        ```
    """

    def decorator(reducer: Callable[[T, A], T]) -> Callable[[T | None, A], T]:
        @wraps(reducer)
        def wrapped(state: T | None, action: A) -> T:
            if state is None:
                state = default() if callable(default) else default
            return reducer(state, action)

        wrapped.default = default  # type: ignore[attr-defined]
        return wrapped

    return decorator


def combine_reducers(
    **reducers: Callable[[Any, A], Any],
) -> Callable[[Mapping[str, Any] | None, A], dict[str, Any]]:
    """
    Combine slice reducers into one reducer over a dict.

    Every slice reducer sees every action. On the first call each slice
    receives ``None``, so every slice supplies its own default.

    Keys of the previous dict without a slice reducer are dropped. Returns
    the previous dict itself only when it has exactly the slice keys and no
    slice produced a new value.

    Example:
        ```python
        root = combine_reducers(counter=counter_reducer, todos=todo_reducer)
        store = create_store(root)
        store.state["counter"].count
        ```
    """
    if not reducers:
        raise ValueError("combine_reducers requires at least one reducer")

    def combined(state: Mapping[str, Any] | None, action: A) -> dict[str, Any]:
        previous = state if state is not None else {}
        changed = state is None or previous.keys() != reducers.keys()
        next_state: dict[str, Any] = {}

        for key, reducer in reducers.items():
            old_slice = previous.get(key)
            new_slice = reducer(old_slice, action)
            next_state[key] = new_slice
            if new_slice is not old_slice:
                changed = True

        if not changed and isinstance(state, dict):
            return state
        return next_state

    return combined
