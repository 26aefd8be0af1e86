"""
Textual Dispatch - a minimal reducer/dispatch/render store for Textual.

One state value, one pure reducer, one dispatch that applies the reducer and
then renders. The store starts empty: the reducer supplies the initial state
when it receives ``None``, and ``bootstrap()`` sends the initialization
action so that creating the state and the first render happen through an
ordinary dispatch.

Key Features:
- Store: dispatch, render, subscribe, bootstrap
- with_default: give a reducer its initial state
- combine_reducers: one reducer over a dict of slices
- use_store: bind a store to a Textual widget
- BufferSurface / StaticSurface: where renderers write

Example:
    ```python
    from textual_dispatch import (
        BufferSurface,
        count_renderer,
        counter_reducer,
        create_store,
        increment,
    )

    surface = BufferSurface()
    store = create_store(counter_reducer, count_renderer(surface))
    # surface.text == "0"

    store.dispatch(increment())
    # surface.text == "1"

    store.dispatch({"type": "unknown"})
    # surface.text == "1", rendered again
    ```
"""

# Actions
from .actions import (
    INIT,
    Action,
    init,
)

# Reducer helpers
from .reducer import (
    combine_reducers,
    with_default,
)

# State cell
from .state import (
    State,
    StateRendered,
)

# Store
from .store import (
    Store,
    create_store,
)

# Surfaces
from .surface import (
    BufferSurface,
    StaticSurface,
)

# Hooks
from .hooks import (
    use_store,
)

# Counter
from .counter import (
    INCREMENT,
    CounterState,
    count_renderer,
    counter_reducer,
    increment,
    render_count,
)

# Config
from .config import (
    StoreSettings,
    configure_logging,
)

# Errors
from .errors import (
    AlreadyBootstrappedError,
    DispatchError,
    ReentrantDispatchError,
    StateNotInitializedError,
)

# Types
from .types import (
    DispatchFunc,
    Listener,
    Reducer,
    Renderer,
    Surface,
)

__version__ = "0.1.0a1"

__all__ = [
    # Actions
    "INIT",
    "Action",
    "init",
    # Reducer helpers
    "combine_reducers",
    "with_default",
    # State
    "State",
    "StateRendered",
    # Store
    "Store",
    "create_store",
    # Surfaces
    "BufferSurface",
    "StaticSurface",
    # Hooks
    "use_store",
    # Counter
    "INCREMENT",
    "CounterState",
    "count_renderer",
    "counter_reducer",
    "increment",
    "render_count",
    # Config
    "StoreSettings",
    "configure_logging",
    # Errors
    "AlreadyBootstrappedError",
    "DispatchError",
    "ReentrantDispatchError",
    "StateNotInitializedError",
    # Types
    "DispatchFunc",
    "Listener",
    "Reducer",
    "Renderer",
    "Surface",
]
