"""Development-mode checks for the reducer contract.

Render skipping relies on reducers that never mutate their input, always
return the same result for the same inputs and keep untouched branches as
the same objects. None of that can be enforced, so in development the store
can run each reducer call through a ``ReducerChecker`` which logs every
violation it finds. Checks never raise.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

from .actions import action_type
from .state import branch_names, get_branch

logger = logging.getLogger(__name__)

S = TypeVar("S")
A = TypeVar("A")


# Returned when a state cannot be snapshotted
_NO_SNAPSHOT = object()


def _snapshot(state: Any) -> Any:
    try:
        if isinstance(state, BaseModel):
            return state.model_dump()
        return copy.deepcopy(state)
    except Exception as e:
        logger.warning("Cannot snapshot state, skipping mutation check: %s", e)
        return _NO_SNAPSHOT


def _equal(left: Any, right: Any) -> bool:
    try:
        return bool(left == right)
    except Exception:
        return False


class ReducerChecker(Generic[S, A]):
    """
    Runs a reducer and reports contract violations.

    Example:
        ```python
        checker = ReducerChecker(reducer, name="app")
        new_state = checker.run(state, action)
        checker.issues  # issues found by the last run
        ```
    """

    __slots__ = ("_reducer", "_name", "issues")

    def __init__(
        self,
        reducer: Callable[[S | None, A], S],
        *,
        name: str | None = None,
    ) -> None:
        self._reducer = reducer
        self._name = name
        self.issues: list[str] = []

    def run(self, state: S | None, action: A) -> S:
        """
        Call the reducer once for real and check the call.

        Args:
            state: The state passed to the reducer.
            action: The action passed to the reducer.

        Returns:
            The result of the first reducer call.
        """
        before = _snapshot(state)
        result = self._reducer(state, action)
        self.issues = self.check(state, action, result, before)
        return result

    def check(
        self,
        state: S | None,
        action: A,
        result: S,
        before: Any,
    ) -> list[str]:
        """
        Check one reducer call.

        Args:
            state: The state the reducer received.
            action: The action the reducer received.
            result: What the reducer returned.
            before: Snapshot of ``state`` taken before the call.

        Returns:
            Descriptions of the violations found.
        """
        kind = action_type(action) or type(action).__name__
        issues: list[str] = []

        after = _snapshot(state) if before is not _NO_SNAPSHOT else _NO_SNAPSHOT
        if after is not _NO_SNAPSHOT and not _equal(after, before):
            issues.append(f"reducer mutated its input state in place for {kind}")

        again = self._reducer(state, action)
        if again is not result and not _equal(again, result):
            issues.append(f"reducer is not deterministic for {kind}")

        if result is not state and state is not None:
            if _equal(result, state):
                issues.append(f"reducer returned a new state for {kind} without changes")
            for name in branch_names(result):
                old = get_branch(state, name)
                new = get_branch(result, name)
                if new is not old and _equal(new, old):
                    issues.append(
                        f"branch {name!r} was rebuilt without changes for {kind}"
                    )

        for issue in issues:
            logger.warning(
                "Reducer contract violation in store %s: %s",
                self._name or "unnamed",
                issue,
            )
        return issues
