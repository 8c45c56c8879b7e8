"""Tests for @effect and collect_effects."""

import pytest

from textual_store import Store, collect_effects, connect_renderer, effect
from textual_store.effects import get_effect_registration

from sample_state import UpdateContentText, UpdateTitleText, app_reducer


class TestEffect:
    """Tests for @effect decorator."""

    def test_marks_method(self):
        class View:
            @effect("title")
            def render_title(self, new, old):
                pass

        reg = get_effect_registration(View.render_title)
        assert reg is not None
        assert reg.branches == ["title"]

    def test_multiple_branches(self):
        class View:
            @effect("title", "content")
            def render_any(self, new, old):
                pass

        reg = get_effect_registration(View.render_any)
        assert reg.branches == ["title", "content"]

    def test_stacked_decorators_merge(self):
        class View:
            @effect("title")
            @effect("content", "title")
            def render_any(self, new, old):
                pass

        reg = get_effect_registration(View.render_any)
        assert reg.branches == ["content", "title"]

    def test_effect_requires_branch(self):
        with pytest.raises(ValueError, match="requires at least one branch"):

            @effect()
            def no_branch(self, new, old):
                pass


class TestCollectEffects:
    """Tests for collect_effects."""

    def test_collects_bound_methods(self):
        calls = []

        class View:
            @effect("title")
            def render_title(self, new, old):
                calls.append(("title", new, old))

            def not_an_effect(self, new, old):
                pass

        view = View()
        renderers = collect_effects(view)

        assert list(renderers) == ["title"]
        renderers["title"]("new", "old")
        assert calls == [("title", "new", "old")]

    def test_definition_order(self):
        class View:
            @effect("content")
            def render_content(self, new, old):
                pass

            @effect("title")
            def render_title(self, new, old):
                pass

        assert list(collect_effects(View())) == ["content", "title"]

    def test_several_methods_for_one_branch(self):
        calls = []

        class View:
            @effect("title")
            def paint(self, new, old):
                calls.append("paint")

            @effect("title")
            def log(self, new, old):
                calls.append("log")

        collect_effects(View())["title"](1, 0)

        assert calls == ["paint", "log"]

    def test_inherited_and_overridden(self):
        calls = []

        class Base:
            @effect("title")
            def render_title(self, new, old):
                calls.append("base title")

            @effect("content")
            def render_content(self, new, old):
                calls.append("base content")

        class Child(Base):
            @effect("title")
            def render_title(self, new, old):
                calls.append("child title")

            def render_content(self, new, old):
                calls.append("plain override")

        renderers = collect_effects(Child())
        assert list(renderers) == ["title"]

        renderers["title"](1, 0)
        assert calls == ["child title"]

    def test_drives_render_dispatcher(self):
        calls = []

        class View:
            @effect("title")
            def render_title(self, new, old):
                calls.append(("title", new.text))

            @effect("content")
            def render_content(self, new, old):
                calls.append(("content", new.text))

        store = Store(app_reducer)
        connect_renderer(store, collect_effects(View()))
        store.dispatch(UpdateTitleText("X"))
        store.dispatch(UpdateContentText("Y"))

        assert calls == [
            ("title", "T"),
            ("content", "C"),
            ("title", "X"),
            ("content", "Y"),
        ]
