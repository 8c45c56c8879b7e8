"""Type definitions for textual-store."""

from typing import Any, Protocol, TypeVar

# Type variables
T = TypeVar("T")
S = TypeVar("S")  # State type
A = TypeVar("A")  # Action type


class Action(Protocol):
    """Protocol for reducer actions."""

    @property
    def type(self) -> str:
        """Action type identifier."""
        ...


class Reducer(Protocol[S, A]):
    """Protocol for reducer functions.

    The state is ``None`` only on the first call made by the store.
    """

    def __call__(self, state: S | None, action: A) -> S:
        """Process an action and return new state."""
        ...


class Listener(Protocol):
    """Protocol for store subscribers."""

    def __call__(self) -> None:
        """Called after every dispatch."""
        ...


class RenderCallback(Protocol[T]):
    """Protocol for per-branch render callbacks."""

    def __call__(self, new_value: T, old_value: Any) -> None:
        """Paint a branch. ``old_value`` is ``ABSENT`` on the first paint."""
        ...


class Unsubscribe(Protocol):
    """Protocol for the handle returned by ``Store.subscribe``."""

    def __call__(self) -> None:
        """Remove the subscription."""
        ...


class ErrorHandler(Protocol):
    """Protocol for listener failure reporting."""

    def __call__(self, listener: Listener, error: Exception) -> None:
        """Receive a listener and the exception it raised."""
        ...
