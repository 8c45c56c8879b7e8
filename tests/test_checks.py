"""Tests for the development-mode reducer checks."""

import logging
import random
import threading

from textual_store import ReducerChecker, Store, StoreOptions

from sample_state import (
    Noop,
    UpdateTitleText,
    app_reducer,
    dict_reducer,
    initial_state,
)


class TestReducerContract:
    """Properties every well-behaved reducer has."""

    def test_same_inputs_give_equal_results(self):
        state = initial_state()
        action = UpdateTitleText("X")

        assert app_reducer(state, action) == app_reducer(state, action)

    def test_unknown_action_returns_same_object(self):
        state = initial_state()

        assert app_reducer(state, Noop()) is state

    def test_structural_sharing(self):
        state = initial_state()

        new_state = app_reducer(state, UpdateTitleText("X"))

        assert new_state is not state
        assert new_state.title is not state.title
        assert new_state.content is state.content

    def test_input_not_mutated(self):
        state = initial_state()
        before = state.model_dump()

        app_reducer(state, UpdateTitleText("X"))

        assert state.model_dump() == before


class TestReducerChecker:
    """Tests for ReducerChecker."""

    def test_clean_reducer_has_no_issues(self):
        checker = ReducerChecker(app_reducer)
        state = initial_state()

        result = checker.run(state, UpdateTitleText("X"))

        assert result.title.text == "X"
        assert checker.issues == []

    def test_initial_call_has_no_issues(self):
        checker = ReducerChecker(dict_reducer)

        result = checker.run(None, Noop())

        assert result["title"]["text"] == "T"
        assert checker.issues == []

    def test_detects_in_place_mutation(self):
        def reducer(state, action):
            state["title"]["text"] = action["text"]
            return state

        checker = ReducerChecker(reducer)
        state = {"title": {"text": "T"}}

        result = checker.run(state, {"type": "UPDATE_TITLE_TEXT", "text": "X"})

        assert result is state
        assert checker.issues == [
            "reducer mutated its input state in place for UPDATE_TITLE_TEXT"
        ]

    def test_detects_non_determinism(self):
        rng = random.Random(0)

        def reducer(state, action):
            return {**state, "roll": rng.random()}

        checker = ReducerChecker(reducer)

        checker.run({"roll": 0.0}, {"type": "ROLL"})

        assert checker.issues == ["reducer is not deterministic for ROLL"]

    def test_detects_lost_sharing(self):
        def reducer(state, action):
            return {
                "title": {**state["title"], "text": action["text"]},
                "content": dict(state["content"]),
            }

        checker = ReducerChecker(reducer)
        state = {"title": {"text": "T"}, "content": {"text": "C"}}

        checker.run(state, {"type": "UPDATE_TITLE_TEXT", "text": "X"})

        assert checker.issues == [
            "branch 'content' was rebuilt without changes for UPDATE_TITLE_TEXT"
        ]

    def test_detects_new_state_without_changes(self):
        def reducer(state, action):
            return state.model_copy()

        checker = ReducerChecker(reducer)

        checker.run(initial_state(), Noop())

        assert checker.issues == ["reducer returned a new state for NOOP without changes"]

    def test_issues_logged_not_raised(self, caplog):
        def reducer(state, action):
            return state.model_copy()

        checker = ReducerChecker(reducer, name="page")

        with caplog.at_level(logging.WARNING, logger="textual_store"):
            checker.run(initial_state(), Noop())

        assert "Reducer contract violation in store page" in caplog.text

    def test_state_that_cannot_be_copied(self, caplog):
        lock = threading.Lock()

        def reducer(state, action):
            if state is None:
                return {"title": {"text": "T"}, "lock": lock}
            if action.get("type") == "UPDATE_TITLE_TEXT":
                return {**state, "title": {**state["title"], "text": action["text"]}}
            return state

        store = Store(reducer, options=StoreOptions(check_reducer=True))

        with caplog.at_level(logging.WARNING, logger="textual_store"):
            store.dispatch({"type": "UPDATE_TITLE_TEXT", "text": "X"})

        assert store.get_state()["title"] == {"text": "X"}
        assert store.get_state()["lock"] is lock
        assert "Cannot snapshot state, skipping mutation check" in caplog.text
        assert "Reducer contract violation" not in caplog.text
