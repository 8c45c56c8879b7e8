"""Exception hierarchy for textual-store."""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all textual-store errors.

    Attributes:
        message: Human-readable error description.
        store: Name of the store involved, if it has one.
    """

    def __init__(self, message: str, *, store: str | None = None) -> None:
        self.message = message
        self.store = store
        super().__init__(message)

    def __str__(self) -> str:
        if self.store:
            return f"{self.message} (store={self.store})"
        return self.message


class ReducerInitError(StoreError):
    """Raised when a reducer returns None for the initial state."""


class ReentrantDispatchError(StoreError):
    """Raised when dispatch is called during a dispatch and queueing is off."""


class ReentrantRenderError(StoreError):
    """Raised when a render dispatcher is asked to render while rendering."""
