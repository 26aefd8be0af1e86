"""Type definitions for textual-dispatch."""

from typing import Protocol, TypeVar

# Type variables
T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)
A = TypeVar("A")  # Action type
A_contra = TypeVar("A_contra", contravariant=True)


class Reducer(Protocol[T, A_contra]):
    """Protocol for reducer functions."""

    def __call__(self, state: T | None, action: A_contra) -> T:
        """Process an action and return new state."""
        ...


class Renderer(Protocol[T_contra]):
    """Protocol for render functions."""

    def __call__(self, state: T_contra) -> None:
        """Project the current state onto a display."""
        ...


class Listener(Protocol[T_contra]):
    """Protocol for dispatch listeners."""

    def __call__(self, old_value: T_contra | None, new_value: T_contra) -> None:
        """Called after every dispatch."""
        ...


class DispatchFunc(Protocol[A_contra]):
    """Protocol for dispatch functions."""

    def __call__(self, action: A_contra) -> None:
        """Dispatch an action to the reducer."""
        ...


class Surface(Protocol):
    """Protocol for display surfaces."""

    def write(self, text: str) -> None:
        """Replace the displayed text."""
        ...
