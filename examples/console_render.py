"""
Console Example - Demonstrates change-aware rendering without a UI.

Each render callback prints the branch it paints. Run it and watch which
branches are repainted for each dispatched action.
"""

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel

from textual_store import ABSENT, StoreOptions, connect_renderer, create_store, setup_logging


# --- State Model ---


class Branch(BaseModel):
    """A piece of text and the color it is painted in."""

    text: str
    color: str


class AppState(BaseModel):
    title: Branch
    content: Branch


# --- Actions ---


@dataclass(frozen=True)
class UpdateTitleText:
    text: str
    type: ClassVar[str] = "UPDATE_TITLE_TEXT"


@dataclass(frozen=True)
class UpdateTitleColor:
    color: str
    type: ClassVar[str] = "UPDATE_TITLE_COLOR"


# --- Reducer ---


def app_reducer(state: AppState | None, action) -> AppState:
    """Process actions and return new state."""
    if state is None:
        return AppState(
            title=Branch(text="The Little Book of State", color="red"),
            content=Branch(text="Contents of the little book", color="blue"),
        )

    match action:
        case UpdateTitleText(text):
            title = state.title.model_copy(update={"text": text})
            return state.model_copy(update={"title": title})

        case UpdateTitleColor(color):
            title = state.title.model_copy(update={"color": color})
            return state.model_copy(update={"title": title})

    return state


# --- Renderers ---


def render_branch(label: str):
    def render(new: Branch, old: Branch) -> None:
        before = "(nothing)" if old is ABSENT else f"{old.text} [{old.color}]"
        print(f"render {label}: {before} -> {new.text} [{new.color}]")

    return render


def main() -> None:
    setup_logging(level="DEBUG")

    store = create_store(app_reducer, options=StoreOptions.from_env(check_reducer=True))
    connect_renderer(
        store,
        {"title": render_branch("title"), "content": render_branch("content")},
        on_render=lambda names: print(f"render app... ({', '.join(names) or 'nothing'})"),
    )

    store.dispatch(UpdateTitleText("The Little Book of State!!!"))
    store.dispatch(UpdateTitleColor("pink"))
    store.dispatch({"type": "NOOP"})


if __name__ == "__main__":
    main()
