"""Tests for Store and create_store."""

import pytest

from textual_dispatch import (
    INIT,
    Action,
    BufferSurface,
    CounterState,
    StoreSettings,
    count_renderer,
    counter_reducer,
    create_store,
    increment,
)
from textual_dispatch.errors import (
    AlreadyBootstrappedError,
    ReentrantDispatchError,
    StateNotInitializedError,
)
from textual_dispatch.store import Store


class RecordingRenderer:
    """Renderer that records every state it receives."""

    def __init__(self):
        self.calls = []

    def __call__(self, state):
        self.calls.append(state)


class TestInitialDispatch:
    """Tests for the first dispatch."""

    def test_init_materializes_default_state(self):
        renderer = RecordingRenderer()
        store = Store(counter_reducer, renderer)

        store.dispatch(Action(type=INIT))

        assert store.state == CounterState(count=0)
        assert renderer.calls == [CounterState(count=0)]

    def test_bootstrap_dispatches_init(self):
        seen = []

        def reducer(state, action):
            seen.append((state, action.type))
            return counter_reducer(state, action)

        store = Store(reducer)
        store.bootstrap()

        assert seen == [(None, INIT)]
        assert store.initialized

    def test_bootstrap_uses_configured_init_type(self):
        seen = []

        def reducer(state, action):
            seen.append(action.type)
            return counter_reducer(state, action)

        store = Store(reducer, settings=StoreSettings(init_type="app/init"))
        store.bootstrap()

        assert seen == ["app/init"]

    def test_bootstrap_twice_raises(self):
        store = create_store(counter_reducer)

        with pytest.raises(AlreadyBootstrappedError, match="already been bootstrapped"):
            store.bootstrap()

    def test_any_first_action_initializes(self):
        store = Store(counter_reducer)
        store.dispatch(increment())

        assert store.state.count == 1

    def test_create_store_bootstraps_by_default(self):
        surface = BufferSurface()
        store = create_store(counter_reducer, count_renderer(surface))

        assert store.initialized
        assert surface.history == ["0"]

    def test_create_store_without_bootstrap(self):
        surface = BufferSurface()
        store = create_store(counter_reducer, count_renderer(surface), bootstrap=False)

        assert not store.initialized
        assert surface.history == []


class TestDispatch:
    """Tests for dispatch and render."""

    def test_increments_accumulate(self):
        store = create_store(counter_reducer)

        for _ in range(25):
            store.dispatch(increment())

        assert store.state.count == 25

    def test_unknown_action_renders_unchanged_state(self):
        renderer = RecordingRenderer()
        store = create_store(counter_reducer, renderer)
        store.dispatch(increment())

        store.dispatch(Action(type="unknown"))

        assert store.state.count == 1
        assert renderer.calls == [
            CounterState(count=0),
            CounterState(count=1),
            CounterState(count=1),
        ]

    def test_action_without_type_is_ignored(self):
        store = create_store(counter_reducer)
        store.dispatch({"amount": 3})

        assert store.state.count == 0

    @pytest.mark.parametrize("action_type", [None, 7, ["increment"]])
    def test_non_string_type_is_ignored(self, action_type):
        renderer = RecordingRenderer()
        store = create_store(counter_reducer, renderer)
        store.dispatch(increment())

        store.dispatch({"type": action_type})

        assert store.state.count == 1
        assert len(renderer.calls) == 3

    def test_accepts_mapping_actions(self):
        store = create_store(counter_reducer)
        store.dispatch({"type": "increment"})

        assert store.state.count == 1

    def test_scenario(self):
        surface = BufferSurface()
        store = Store(counter_reducer, count_renderer(surface))

        store.dispatch({"type": "init"})
        assert store.state == CounterState(count=0)
        assert surface.text == "0"

        store.dispatch({"type": "increment"})
        assert store.state == CounterState(count=1)
        assert surface.text == "1"

        store.dispatch({"type": "increment"})
        assert store.state == CounterState(count=2)
        assert surface.text == "2"

        store.dispatch({"type": "unknown"})
        assert store.state == CounterState(count=2)
        assert surface.text == "2"

        assert surface.history == ["0", "1", "2", "2"]

    def test_store_without_renderer(self):
        store = create_store(counter_reducer)
        store.dispatch(increment())
        store.render()

        assert store.state.count == 1

    def test_reducer_error_propagates_and_keeps_state(self):
        def reducer(state, action):
            if action.type == "boom":
                raise KeyError("boom")
            return counter_reducer(state, action)

        store = create_store(reducer)
        store.dispatch(increment())

        with pytest.raises(KeyError):
            store.dispatch(Action(type="boom"))

        assert store.state.count == 1
        # Store is usable again after the failure
        store.dispatch(increment())
        assert store.state.count == 2

    def test_renderer_error_propagates_after_assignment(self):
        def renderer(state):
            if state.count == 1:
                raise RuntimeError("display gone")

        store = create_store(counter_reducer, renderer)

        with pytest.raises(RuntimeError, match="display gone"):
            store.dispatch(increment())

        assert store.state.count == 1


class TestRenderBeforeDispatch:
    """Rendering needs at least one dispatch."""

    def test_render_raises(self):
        store = Store(counter_reducer, RecordingRenderer(), name="counter")

        with pytest.raises(StateNotInitializedError, match="'counter' has no state yet"):
            store.render()

    def test_state_raises(self):
        store = Store(counter_reducer)

        with pytest.raises(StateNotInitializedError):
            store.state


class TestReentrancy:
    """Tests for the reentrant dispatch guard."""

    def test_dispatch_from_renderer_raises(self):
        store = Store(counter_reducer, name="counter")
        store._renderer = lambda state: store.dispatch(increment())

        with pytest.raises(ReentrantDispatchError) as excinfo:
            store.bootstrap()

        assert excinfo.value.store_name == "counter"
        assert excinfo.value.action == increment()

    def test_dispatch_from_listener_raises(self):
        store = create_store(counter_reducer)
        store.subscribe(lambda old, new: store.dispatch(increment()))

        with pytest.raises(ReentrantDispatchError):
            store.dispatch(increment())

    def test_guard_resets_after_error(self):
        store = create_store(counter_reducer)
        unsubscribe = store.subscribe(lambda old, new: store.dispatch(increment()))

        with pytest.raises(ReentrantDispatchError):
            store.dispatch(increment())

        unsubscribe()
        store.dispatch(increment())
        assert store.state.count == 2

    def test_non_strict_allows_nested_dispatch(self):
        store = create_store(counter_reducer, settings=StoreSettings(strict=False))
        fired = []

        def listener(old, new):
            if not fired:
                fired.append(new.count)
                store.dispatch(increment())

        store.subscribe(listener)
        store.dispatch(increment())

        assert store.state.count == 2


class TestSubscribe:
    """Tests for dispatch listeners."""

    def test_listener_receives_old_and_new(self):
        store = create_store(counter_reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old.count, new.count)))

        store.dispatch(increment())
        store.dispatch(Action(type="noop"))

        assert changes == [(0, 1), (1, 1)]

    def test_listener_sees_first_dispatch_with_none(self):
        store = Store(counter_reducer)
        changes = []
        store.subscribe(lambda old, new: changes.append((old, new)))

        store.bootstrap()

        assert changes == [(None, CounterState())]

    def test_listener_runs_after_render(self):
        order = []
        store = Store(counter_reducer, lambda state: order.append("render"))
        store.subscribe(lambda old, new: order.append("listener"))

        store.bootstrap()

        assert order == ["render", "listener"]

    def test_unsubscribe(self):
        store = create_store(counter_reducer)
        changes = []
        unsubscribe = store.subscribe(lambda old, new: changes.append(new.count))

        store.dispatch(increment())
        unsubscribe()
        store.dispatch(increment())

        assert changes == [1]


class TestRepr:
    def test_repr(self):
        store = Store(counter_reducer, name="counter")
        assert "empty" in repr(store)

        store.bootstrap()
        assert "count=0" in repr(store)
        assert "counter" in repr(store)
