"""Tests for StoreOptions and logging setup."""

import io
import logging

import pytest
from pydantic import ValidationError

from textual_store import StoreOptions, setup_logging


class TestStoreOptions:
    """Tests for StoreOptions."""

    def test_defaults(self):
        options = StoreOptions()

        assert options.name is None
        assert options.reentrancy == "queue"
        assert options.isolate_listeners is True
        assert options.check_reducer is False

    def test_frozen(self):
        options = StoreOptions()

        with pytest.raises(ValidationError):
            options.name = "other"

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            StoreOptions(batch=True)

    def test_rejects_unknown_reentrancy(self):
        with pytest.raises(ValidationError):
            StoreOptions(reentrancy="allow")


class TestFromEnv:
    """Tests for StoreOptions.from_env."""

    def test_empty_environment_gives_defaults(self):
        assert StoreOptions.from_env({}) == StoreOptions()

    def test_reads_variables(self):
        options = StoreOptions.from_env(
            {
                "TEXTUAL_STORE_NAME": "page",
                "TEXTUAL_STORE_REENTRANCY": " RAISE ",
                "TEXTUAL_STORE_ISOLATE_LISTENERS": "off",
                "TEXTUAL_STORE_CHECK_REDUCER": "yes",
            }
        )

        assert options == StoreOptions(
            name="page",
            reentrancy="raise",
            isolate_listeners=False,
            check_reducer=True,
        )

    def test_unparseable_bool_falls_back_to_default(self):
        options = StoreOptions.from_env({"TEXTUAL_STORE_CHECK_REDUCER": "maybe"})

        assert options.check_reducer is False

    def test_overrides_win(self):
        options = StoreOptions.from_env(
            {"TEXTUAL_STORE_CHECK_REDUCER": "1", "TEXTUAL_STORE_NAME": "env"},
            check_reducer=False,
            name="explicit",
        )

        assert options.check_reducer is False
        assert options.name == "explicit"

    def test_invalid_reentrancy_rejected(self):
        with pytest.raises(ValidationError):
            StoreOptions.from_env({"TEXTUAL_STORE_REENTRANCY": "later"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TEXTUAL_STORE_NAME", "from-os")

        assert StoreOptions.from_env().name == "from-os"


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("textual_store")
        handlers, level = list(logger.handlers), logger.level
        yield
        logger.handlers[:] = handlers
        logger.setLevel(level)

    def test_writes_formatted_records(self):
        stream = io.StringIO()

        logger = setup_logging(level="DEBUG", stream=stream)
        logging.getLogger("textual_store.render").debug("render title...")

        assert logger.name == "textual_store"
        assert "[DEBUG] textual_store.render: render title..." in stream.getvalue()

    def test_repeated_setup_replaces_handler(self):
        first, second = io.StringIO(), io.StringIO()

        setup_logging(stream=first)
        logger = setup_logging(level=logging.INFO, stream=second)
        logger.info("hello")

        assert len(logger.handlers) == 1
        assert first.getvalue() == ""
        assert "hello" in second.getvalue()

    def test_foreign_handlers_kept(self):
        logger = logging.getLogger("textual_store")
        foreign = logging.NullHandler()
        logger.addHandler(foreign)

        setup_logging(stream=io.StringIO())

        assert foreign in logger.handlers
