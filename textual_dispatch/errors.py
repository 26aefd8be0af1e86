"""Exceptions raised by stores."""

from __future__ import annotations

from typing import Any


class DispatchError(Exception):
    """Base class for store errors."""


class StateNotInitializedError(DispatchError):
    """Raised when state is read before the first dispatch."""

    def __init__(self, store_name: str | None) -> None:
        self.store_name = store_name
        name = store_name or "unnamed"
        super().__init__(
            f"Store '{name}' has no state yet. "
            f"Dispatch the initialization action (store.bootstrap()) before rendering."
        )


class ReentrantDispatchError(DispatchError):
    """Raised when dispatch is called while another dispatch is running."""

    def __init__(self, store_name: str | None, action: Any) -> None:
        self.store_name = store_name
        self.action = action
        name = store_name or "unnamed"
        super().__init__(
            f"Store '{name}' received {action!r} while a dispatch was in progress. "
            f"Reducers, renderers and listeners must not dispatch."
        )


class AlreadyBootstrappedError(DispatchError):
    """Raised when a store that already holds state is bootstrapped again."""

    def __init__(self, store_name: str | None) -> None:
        self.store_name = store_name
        name = store_name or "unnamed"
        super().__init__(f"Store '{name}' has already been bootstrapped.")
