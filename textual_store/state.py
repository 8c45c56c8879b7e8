"""Branch access helpers for state values.

A state is a value made of named branches. These helpers read branches the
same way whatever the state is built from: pydantic models, dataclasses,
mappings or plain objects.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel


class _Absent:
    """Placeholder for a state or branch that has not been rendered yet."""

    __slots__ = ()
    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Absent:
        return self


ABSENT: Final = _Absent()


def get_branch(state: Any, name: str) -> Any:
    """
    Read a named branch from a state.

    Args:
        state: The state value, or ``ABSENT``/None.
        name: The branch name.

    Returns:
        The branch value, or ``ABSENT`` if the state has no such branch.
    """
    if state is ABSENT or state is None:
        return ABSENT
    if isinstance(state, Mapping):
        return state.get(name, ABSENT)
    return getattr(state, name, ABSENT)


def branch_names(state: Any) -> list[str]:
    """
    List the branch names of a state, in declaration order.

    Returns an empty list for values that are not composite.
    """
    if state is ABSENT or state is None:
        return []
    if isinstance(state, BaseModel):
        return list(type(state).model_fields)
    if isinstance(state, Mapping):
        return [key for key in state if isinstance(key, str)]
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return [field.name for field in dataclasses.fields(state)]
    if hasattr(state, "__dict__"):
        return [key for key in vars(state) if not key.startswith("_")]
    return []
