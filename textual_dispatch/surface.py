"""Display surfaces that renderers write text to."""

from __future__ import annotations

from textual.widgets import Static


class BufferSurface:
    """
    A surface that keeps what was written to it.

    Attributes:
        text: The most recent write (empty before the first one).
        history: Every write, oldest first.
    """

    __slots__ = ("text", "history")

    def __init__(self) -> None:
        self.text = ""
        self.history: list[str] = []

    def write(self, text: str) -> None:
        """Replace the displayed text."""
        self.text = text
        self.history.append(text)

    def __repr__(self) -> str:
        return f"BufferSurface({self.text!r})"


class StaticSurface:
    """
    A surface backed by a Textual ``Static`` widget.

    Example:
        ```python
        def on_mount(self) -> None:
            surface = StaticSurface(self.query_one("#count", Static))
            self.store = create_store(counter_reducer, count_renderer(surface))
        ```
    """

    __slots__ = ("_widget",)

    def __init__(self, widget: Static) -> None:
        self._widget = widget

    @property
    def widget(self) -> Static:
        """Get the wrapped widget."""
        return self._widget

    def write(self, text: str) -> None:
        """Replace the widget's content."""
        self._widget.update(text)
