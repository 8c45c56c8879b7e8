"""Change-aware rendering driven by store notifications.

A ``RenderDispatcher`` is a store listener. On every notification it compares
the new state with the state it rendered last, first as a whole and then
branch by branch, using identity. Only the render callbacks of branches that
are new objects are called, so the reducer must keep untouched branches as
the same objects.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import Any, Callable, Generic, TypeVar

from .errors import ReentrantRenderError
from .state import ABSENT, get_branch
from .store import Store
from .types import RenderCallback, Unsubscribe

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


class RenderPhase(enum.Enum):
    """What a dispatcher is doing."""

    IDLE = "idle"
    RENDERING = "rendering"


class RenderDispatcher(Generic[S, A]):
    """
    Calls per-branch render callbacks for the branches that changed.

    Example:
        ```python
        def render_title(new, old):
            print("title:", new.text)

        dispatcher = RenderDispatcher(store, {"title": render_title})
        dispatcher.connect()
        dispatcher.initial_render()

        store.dispatch(UpdateTitleText("Hello"))  # render_title fires
        store.dispatch(Noop())  # nothing fires
        ```
    """

    __slots__ = ("_store", "_renderers", "_on_render", "_previous", "_phase")

    def __init__(
        self,
        store: Store[S, A],
        renderers: Mapping[str, RenderCallback[Any]],
        *,
        on_render: Callable[[list[str]], None] | None = None,
    ) -> None:
        """
        Initialize a dispatcher.

        Args:
            store: The store to read state from.
            renderers: Branch name to render callback, called in this order.
            on_render: Called with the rendered branch names after every
                pass where the root state changed.
        """
        self._store = store
        self._renderers: dict[str, RenderCallback[Any]] = dict(renderers)
        self._on_render = on_render
        self._previous: Any = ABSENT
        self._phase = RenderPhase.IDLE

    @property
    def store(self) -> Store[S, A]:
        """Get the store this dispatcher renders."""
        return self._store

    @property
    def previous(self) -> S | Any:
        """The state rendered last, or ``ABSENT`` before the first paint."""
        return self._previous

    @property
    def phase(self) -> RenderPhase:
        """Get the current phase."""
        return self._phase

    @property
    def branches(self) -> list[str]:
        """Names of the observed branches."""
        return list(self._renderers)

    def __call__(self) -> None:
        """Store listener: render the latest state against the cached one."""
        new_state = self._store.get_state()
        self.render(new_state, self._previous)
        self._previous = new_state

    def initial_render(self) -> list[str]:
        """
        Paint the first frame.

        Every observed branch is rendered once, against ``ABSENT``.

        Returns:
            The names of the branches rendered.
        """
        new_state = self._store.get_state()
        rendered = self.render(new_state, ABSENT)
        self._previous = new_state
        return rendered

    def render(self, new_state: S, old_state: S | Any = ABSENT) -> list[str]:
        """
        Render the branches that differ between two states.

        Args:
            new_state: The state to paint.
            old_state: The state painted last. ``ABSENT`` paints everything.

        Returns:
            The names of the branches rendered, in renderer order.

        Raises:
            ReentrantRenderError: If called from inside a render callback.
        """
        if new_state is old_state:
            return []

        if self._phase is RenderPhase.RENDERING:
            raise ReentrantRenderError(
                "Cannot render while a render pass is in progress",
                store=self._store.name,
            )

        self._phase = RenderPhase.RENDERING
        rendered: list[str] = []
        try:
            for name, render_branch in self._renderers.items():
                new_branch = get_branch(new_state, name)
                old_branch = get_branch(old_state, name)
                if new_branch is old_branch:
                    continue
                logger.debug("render %s...", name)
                render_branch(new_branch, old_branch)
                rendered.append(name)
        finally:
            self._phase = RenderPhase.IDLE

        if self._on_render is not None:
            self._on_render(rendered)
        return rendered

    def connect(self) -> Unsubscribe:
        """
        Subscribe this dispatcher to its store.

        Returns:
            A function that disconnects it.
        """
        return self._store.subscribe(self)


def connect_renderer(
    store: Store[S, A],
    renderers: Mapping[str, RenderCallback[Any]],
    *,
    on_render: Callable[[list[str]], None] | None = None,
    paint: bool = True,
) -> tuple[RenderDispatcher[S, A], Unsubscribe]:
    """
    Create a dispatcher, subscribe it and paint the first frame.

    Args:
        store: The store to render.
        renderers: Branch name to render callback.
        on_render: See ``RenderDispatcher``.
        paint: Whether to paint the first frame immediately.

    Returns:
        The dispatcher and the function that disconnects it.
    """
    dispatcher = RenderDispatcher(store, renderers, on_render=on_render)
    unsubscribe = dispatcher.connect()
    if paint:
        dispatcher.initial_render()
    return dispatcher, unsubscribe
