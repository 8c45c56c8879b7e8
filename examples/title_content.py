"""
Title/Content Example - Demonstrates StoreView and @effect.

The title and content are separate branches of the state. Changing the title
repaints only the title widget.
"""

from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel
from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Input, Static

from textual_store import StateChanged, StoreView, create_store, effect


# --- State Model ---


class Branch(BaseModel):
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


@dataclass(frozen=True)
class UpdateContentText:
    text: str
    type: ClassVar[str] = "UPDATE_CONTENT_TEXT"


# --- Reducer ---


def app_reducer(state: AppState | None, action) -> AppState:
    """Process actions and return new state."""
    if state is None:
        return AppState(
            title=Branch(text="Textual Store", color="red"),
            content=Branch(text="Only changed branches are repainted.", color="blue"),
        )

    match action:
        case UpdateTitleText(text):
            return state.model_copy(
                update={"title": state.title.model_copy(update={"text": text})}
            )

        case UpdateTitleColor(color):
            return state.model_copy(
                update={"title": state.title.model_copy(update={"color": color})}
            )

        case UpdateContentText(text):
            return state.model_copy(
                update={"content": state.content.model_copy(update={"text": text})}
            )

    return state


TITLE_COLORS = ["red", "pink", "green", "yellow"]


class PageView(StoreView[AppState, object]):
    """Paints the title and content branches."""

    def compose(self) -> ComposeResult:
        yield Static(id="title")
        yield Static(id="content")

    @effect("title")
    def render_title(self, new: Branch, old) -> None:
        title = self.query_one("#title", Static)
        title.update(new.text)
        title.styles.color = new.color

    @effect("content")
    def render_content(self, new: Branch, old) -> None:
        content = self.query_one("#content", Static)
        content.update(new.text)
        content.styles.color = new.color


class TitleContentApp(App):
    """Edit the title and content of a page held in a store."""

    CSS = """
    Screen {
        layout: vertical;
        padding: 1 2;
    }

    #title {
        height: 3;
        text-style: bold;
        content-align: center middle;
    }

    #content {
        height: 3;
    }

    #renders {
        height: 1;
        color: $text-muted;
    }

    Horizontal {
        height: auto;
    }

    Input {
        width: 1fr;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.store = create_store(app_reducer, name="page")
        self.renders = 0

    def compose(self) -> ComposeResult:
        yield PageView(self.store, id="page")
        with Horizontal():
            yield Input(placeholder="Title", id="title-input")
            yield Button("Set title", id="set-title")
        with Horizontal():
            yield Input(placeholder="Content", id="content-input")
            yield Button("Set content", id="set-content")
            yield Button("Next color", id="next-color")
        yield Static("", id="renders")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        match event.button.id:
            case "set-title":
                text = self.query_one("#title-input", Input).value
                self.store.dispatch(UpdateTitleText(text))
            case "set-content":
                text = self.query_one("#content-input", Input).value
                self.store.dispatch(UpdateContentText(text))
            case "next-color":
                current = self.store.get_state().title.color
                index = TITLE_COLORS.index(current) if current in TITLE_COLORS else -1
                color = TITLE_COLORS[(index + 1) % len(TITLE_COLORS)]
                self.store.dispatch(UpdateTitleColor(color))

    def on_state_changed(self, event: StateChanged[AppState]) -> None:
        self.renders += 1
        self.query_one("#renders", Static).update(f"State changes: {self.renders}")


if __name__ == "__main__":
    TitleContentApp().run()
