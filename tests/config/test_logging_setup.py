"""
Tests for logging configuration and request-scoped log context.
"""

import logging
from unittest.mock import patch

from api.config.logging_setup import DEFAULT_FORMAT, setup_logging
from api.middleware.request_id import (
    RequestIDFilter,
    clear_context,
    set_request_id,
    set_user_id,
)


def make_record() -> logging.LogRecord:
    return logging.LogRecord("api.test", logging.INFO, __file__, 1, "hello", None, None)


class TestRequestIDFilter:
    def test_placeholders_outside_a_request(self):
        clear_context()
        record = make_record()

        assert RequestIDFilter().filter(record) is True
        assert record.request_id == "--------"
        assert record.user_id == "--------"

    def test_ids_from_context(self):
        set_request_id("abcd1234")
        set_user_id("0f8fad5b-d9cb-469f-a165-70867728950e")
        try:
            record = make_record()
            RequestIDFilter().filter(record)
        finally:
            clear_context()

        assert record.request_id == "abcd1234"
        assert record.user_id == "0f8fad5b"


class TestSetupLogging:
    def test_missing_file_falls_back_to_basic_config(self, tmp_path):
        with patch("api.config.logging_setup.logging.basicConfig") as basic_config:
            setup_logging(tmp_path / "missing.yaml")
        basic_config.assert_any_call(level=logging.INFO, format=DEFAULT_FORMAT)

    def test_default_file_installs_request_filter(self):
        with patch("api.config.logging_setup.logging.config.dictConfig") as dict_config:
            setup_logging()

        config = dict_config.call_args.args[0]
        assert "request_id" in config["filters"]
        assert config["handlers"]["console"]["filters"] == ["request_id"]
