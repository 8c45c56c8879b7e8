"""Textual integration - a container that renders a store's branches."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from textual.containers import Container
from textual.message import Message
from textual.widget import Widget

from .effects import collect_effects
from .render import RenderDispatcher
from .store import Store
from .types import Unsubscribe

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


class StateChanged(Message, Generic[S]):
    """Message posted by a ``StoreView`` after it renders a new state."""

    def __init__(self, store: Store[S, Any], old_value: Any, new_value: S) -> None:
        super().__init__()
        self.store = store
        self.old_value = old_value
        self.new_value = new_value


class StoreView(Container, Generic[S, A]):
    """
    Widget that renders store branches with its ``@effect`` methods.

    On mount it subscribes to the store and paints every branch once.
    Afterwards only branches that are new objects are rendered.

    Example:
        ```python
        class AppView(StoreView):
            def compose(self):
                yield Static(id="title")

            @effect("title")
            def render_title(self, new: Branch, old):
                self.query_one("#title", Static).update(new.text)

        class MyApp(App):
            def compose(self):
                yield AppView(self.store)
        ```
    """

    DEFAULT_CSS = """
    StoreView {
        width: 100%;
        height: auto;
    }
    """

    def __init__(
        self,
        store: Store[S, A],
        *children: Widget,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._store = store
        self._compose_children = children
        self._dispatcher: RenderDispatcher[S, A] = RenderDispatcher(
            store, collect_effects(self)
        )
        self._unsubscribe: Unsubscribe | None = None

    @property
    def store(self) -> Store[S, A]:
        """Get the store."""
        return self._store

    @property
    def dispatcher(self) -> RenderDispatcher[S, A]:
        """Get the render dispatcher."""
        return self._dispatcher

    @property
    def value(self) -> S:
        """Get current state value."""
        return self._store.get_state()

    def dispatch(self, action: A) -> None:
        """Dispatch an action."""
        self._store.dispatch(action)

    def compose(self):
        """Yield the children passed to the constructor."""
        yield from self._compose_children

    def on_mount(self) -> None:
        """Subscribe and paint the first frame."""
        self._unsubscribe = self._store.subscribe(self._on_store_change)
        self._dispatcher.initial_render()
        logger.debug("%s mounted, rendered %s", self, self._dispatcher.branches)

    def on_unmount(self) -> None:
        """Stop listening to the store."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _on_store_change(self) -> None:
        old_value = self._dispatcher.previous
        self._dispatcher()
        new_value = self._dispatcher.previous
        if new_value is not old_value:
            self.post_message(StateChanged(self._store, old_value, new_value))
