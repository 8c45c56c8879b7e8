"""
Textual Store - a minimal unidirectional state container with
change-aware rendering.

One store owns the state. A pure reducer computes each next state from an
action. Subscribers are notified after every transition, and a render
dispatcher repaints only the branches of the state that are new objects.

Key Features:
- create_store: Store with get_state / dispatch / subscribe
- RenderDispatcher: Identity-based per-branch render skipping
- @effect: Declare branch render callbacks as methods
- StoreView: Textual container driven by a store
- StoreOptions: Reentrancy, listener isolation and reducer checks

Example:
    ```python
    from dataclasses import dataclass
    from typing import ClassVar
    from pydantic import BaseModel
    from textual_store import connect_renderer, create_store

    class Branch(BaseModel):
        text: str
        color: str

    class AppState(BaseModel):
        title: Branch
        content: Branch

    @dataclass(frozen=True)
    class UpdateTitleText:
        text: str
        type: ClassVar[str] = "UPDATE_TITLE_TEXT"

    def reducer(state: AppState | None, action) -> AppState:
        if state is None:
            return AppState(
                title=Branch(text="Title", color="red"),
                content=Branch(text="Content", color="blue"),
            )
        match action:
            case UpdateTitleText(text):
                title = state.title.model_copy(update={"text": text})
                return state.model_copy(update={"title": title})
        return state

    store = create_store(reducer)
    connect_renderer(store, {
        "title": lambda new, old: print("title:", new.text),
        "content": lambda new, old: print("content:", new.text),
    })
    store.dispatch(UpdateTitleText("Hello"))  # only the title is rendered
    ```
"""

# Store
from .store import (
    Store,
    create_store,
)

# Rendering
from .render import (
    RenderDispatcher,
    RenderPhase,
    connect_renderer,
)

# Effects
from .effects import (
    collect_effects,
    effect,
)

# Textual integration
from .widgets import (
    StateChanged,
    StoreView,
)

# State and actions
from .state import (
    ABSENT,
    branch_names,
    get_branch,
)
from .actions import (
    INIT,
    InitAction,
    action_type,
)

# Configuration, logging and errors
from .config import StoreOptions
from .checks import ReducerChecker
from .logging_config import setup_logging
from .errors import (
    ReducerInitError,
    ReentrantDispatchError,
    ReentrantRenderError,
    StoreError,
)

# Types
from .types import (
    Action,
    ErrorHandler,
    Listener,
    Reducer,
    RenderCallback,
    Unsubscribe,
)

__version__ = "0.1.0a1"

__all__ = [
    # Store
    "Store",
    "create_store",
    # Rendering
    "RenderDispatcher",
    "RenderPhase",
    "connect_renderer",
    # Effects
    "collect_effects",
    "effect",
    # Textual
    "StateChanged",
    "StoreView",
    # State and actions
    "ABSENT",
    "branch_names",
    "get_branch",
    "INIT",
    "InitAction",
    "action_type",
    # Configuration, logging and errors
    "StoreOptions",
    "ReducerChecker",
    "setup_logging",
    "ReducerInitError",
    "ReentrantDispatchError",
    "ReentrantRenderError",
    "StoreError",
    # Types
    "Action",
    "ErrorHandler",
    "Listener",
    "Reducer",
    "RenderCallback",
    "Unsubscribe",
]
