"""Store - owns the state, runs the reducer, notifies subscribers."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Callable, Generic, TypeVar

from .actions import INIT, action_type
from .checks import ReducerChecker
from .config import StoreOptions
from .errors import ReducerInitError, ReentrantDispatchError, StoreError
from .types import ErrorHandler, Listener, Unsubscribe

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


class _Subscription:
    """One registration of a listener. The same listener may have several."""

    __slots__ = ("listener",)

    def __init__(self, listener: Listener) -> None:
        self.listener = listener


class Store(Generic[S, A]):
    """
    A single authoritative state value changed only through ``dispatch``.

    The store calls the reducer once with ``None`` on construction, so
    ``get_state()`` always returns a state afterwards.

    Usage:
        ```python
        store = create_store(app_reducer)

        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch(UpdateTitleText("Hello"))
        unsubscribe()
        ```
    """

    __slots__ = (
        "_reducer",
        "_options",
        "_on_error",
        "_checker",
        "_state",
        "_subscriptions",
        "_dispatching",
        "_pending",
    )

    def __init__(
        self,
        reducer: Callable[[S | None, A], S],
        *,
        options: StoreOptions | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._reducer = reducer
        self._options = options or StoreOptions()
        self._on_error = on_error
        self._checker: ReducerChecker[S, A] | None = (
            ReducerChecker(reducer, name=self._options.name)
            if self._options.check_reducer
            else None
        )
        self._state: S | None = None
        self._subscriptions: list[_Subscription] = []
        self._dispatching = False
        self._pending: deque[Any] = deque()

        self.dispatch(INIT)  # type: ignore[arg-type]

        if self._state is None:
            raise ReducerInitError(
                "Reducer returned None for the initial state",
                store=self._options.name,
            )

    @property
    def name(self) -> str | None:
        """Get store name."""
        return self._options.name

    @property
    def options(self) -> StoreOptions:
        """Get the options this store was created with."""
        return self._options

    @property
    def state(self) -> S:
        """Get the current state."""
        return self._state  # type: ignore[return-value]

    @property
    def listener_count(self) -> int:
        """Number of active subscriptions."""
        return len(self._subscriptions)

    @property
    def dispatching(self) -> bool:
        """Whether a dispatch is currently running."""
        return self._dispatching

    def get_state(self) -> S:
        """Get the current state."""
        return self._state  # type: ignore[return-value]

    def dispatch(self, action: A) -> None:
        """
        Run an action through the reducer and notify every listener.

        A dispatch issued while another one is running is queued and runs
        after the current transition has notified all its listeners, unless
        the store was created with ``reentrancy="raise"``.

        Args:
            action: The action to dispatch.

        Raises:
            ReentrantDispatchError: On nested dispatch in ``"raise"`` mode.
        """
        if self._dispatching:
            if self._options.reentrancy == "raise":
                raise ReentrantDispatchError(
                    f"Cannot dispatch {self._describe(action)} while a dispatch "
                    "is in progress",
                    store=self._options.name,
                )
            logger.debug("Queueing nested dispatch of %s", self._describe(action))
            self._pending.append(action)
            return

        self._dispatching = True
        try:
            self._apply(action)
            while self._pending:
                self._apply(self._pending.popleft())
        finally:
            self._dispatching = False
            if self._pending:
                logger.warning(
                    "Discarding %d queued action(s) after a failed dispatch",
                    len(self._pending),
                )
                self._pending.clear()

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """
        Register a listener called with no arguments after every dispatch.

        Args:
            listener: The callback.

        Returns:
            A function removing this registration. Calling it again does
            nothing.
        """
        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            try:
                self._subscriptions.remove(subscription)
            except ValueError:
                pass

        return unsubscribe

    def _apply(self, action: A) -> None:
        """Run one transition: reduce, replace, notify."""
        previous = self._state
        if self._checker is not None:
            new_state = self._checker.run(previous, action)
        else:
            new_state = self._reducer(previous, action)
        self._state = new_state

        logger.debug(
            "Dispatched %s (%s)",
            self._describe(action),
            "changed" if new_state is not previous else "unchanged",
        )

        # Registrations made or removed by listeners apply to the next dispatch.
        for subscription in tuple(self._subscriptions):
            self._notify(subscription.listener)

    def _notify(self, listener: Listener) -> None:
        if not self._options.isolate_listeners:
            listener()
            return

        try:
            listener()
        except StoreError:
            raise
        except Exception as e:
            logger.exception("Listener %r failed", listener)
            if self._on_error is not None:
                try:
                    self._on_error(listener, e)
                except Exception:
                    logger.exception("Error handler failed for listener %r", listener)

    @staticmethod
    def _describe(action: Any) -> str:
        return action_type(action) or type(action).__name__

    def __repr__(self) -> str:
        name = f" name={self._options.name!r}" if self._options.name else ""
        return f"Store({self._state!r}{name})"


def create_store(
    reducer: Callable[[S | None, A], S],
    *,
    options: StoreOptions | None = None,
    on_error: ErrorHandler | None = None,
    **overrides: Any,
) -> Store[S, A]:
    """
    Create a new store.

    Args:
        reducer: Function (state, action) -> new_state. Receives None as
            the state on its first call and must return the initial state.
        options: Store options. Defaults to ``StoreOptions()``.
        on_error: Called with (listener, exception) when an isolated
            listener raises.
        **overrides: Option fields applied on top of ``options``.

    Returns:
        A Store instance.

    Example:
        ```python
        from dataclasses import dataclass
        from typing import ClassVar
        from pydantic import BaseModel

        class TodoState(BaseModel):
            items: tuple[str, ...] = ()

        @dataclass(frozen=True)
        class AddItem:
            text: str
            type: ClassVar[str] = "ADD_ITEM"

        def reducer(state: TodoState | None, action) -> TodoState:
            if state is None:
                return TodoState()
            match action:
                case AddItem(text):
                    return state.model_copy(update={
                        "items": (*state.items, text)
                    })
            return state

        store = create_store(reducer, name="todos")
        ```
    """
    if overrides:
        base = options or StoreOptions()
        options = StoreOptions(**{**base.model_dump(), **overrides})
    return Store(reducer, options=options, on_error=on_error)
