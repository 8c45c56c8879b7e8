"""Store configuration for textual-store."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "TEXTUAL_STORE_"


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


class StoreOptions(BaseModel):
    """
    Options controlling how a store dispatches and notifies.

    Attributes:
        name: Optional name used in log lines and error messages.
        reentrancy: What ``dispatch`` does when called while a dispatch is
            already running. ``"queue"`` runs it after the current one
            finishes notifying (FIFO); ``"raise"`` raises
            ``ReentrantDispatchError``.
        isolate_listeners: Log and report listener exceptions instead of
            propagating them, so every listener runs.
        check_reducer: Run development-mode reducer contract checks on
            every dispatch.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    reentrancy: Literal["queue", "raise"] = "queue"
    isolate_listeners: bool = True
    check_reducer: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> StoreOptions:
        """
        Create options from ``TEXTUAL_STORE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            **overrides: Field values that take precedence over env vars.

        Returns:
            Populated options.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        kwargs: dict[str, Any] = {}

        name = env.get(f"{ENV_PREFIX}NAME")
        if name:
            kwargs["name"] = name

        reentrancy = env.get(f"{ENV_PREFIX}REENTRANCY")
        if reentrancy:
            kwargs["reentrancy"] = reentrancy.strip().lower()

        kwargs["isolate_listeners"] = _env_bool(
            env.get(f"{ENV_PREFIX}ISOLATE_LISTENERS"),
            defaults.isolate_listeners,
        )
        kwargs["check_reducer"] = _env_bool(
            env.get(f"{ENV_PREFIX}CHECK_REDUCER"),
            defaults.check_reducer,
        )

        kwargs.update(overrides)
        return cls(**kwargs)
