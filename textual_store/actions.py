"""Built-in actions and discriminator lookup."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

INIT_TYPE = "@@textual_store/INIT"


@dataclass(frozen=True, slots=True)
class InitAction:
    """Sentinel action dispatched once when a store is created.

    Reducers should not match on it: the ``state is None`` check is what
    identifies the first call.
    """

    type: ClassVar[str] = INIT_TYPE


INIT = InitAction()


def action_type(action: Any) -> str | None:
    """
    Return the discriminator of an action.

    Works with objects exposing ``type`` (dataclasses, pydantic models) and
    with mappings carrying a ``"type"`` key.

    Args:
        action: The action to inspect.

    Returns:
        The discriminator, or None if the action has none.
    """
    if isinstance(action, Mapping):
        value = action.get("type")
    else:
        value = getattr(action, "type", None)
    return value if isinstance(value, str) else None
