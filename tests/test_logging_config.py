# -*- coding: utf-8 -*-
"""
Tests for request-context logging and the command-line entry point.
"""
import json
import logging
from unittest.mock import patch

from genryu_content.__main__ import main, parse_args
from genryu_content.config import settings
from genryu_content.logging_config import ContentJsonFormatter, RequestContextFilter
from genryu_content.middleware import locale_ctx, request_id_ctx


def make_record(message="CMS fetch failed"):
    return logging.LogRecord("genryu_content.test", logging.WARNING, __file__, 1, message, None, None)


class TestRequestContextFilter:
    """Tests for RequestContextFilter."""

    def test_outside_request(self):
        record = make_record()

        assert RequestContextFilter().filter(record) is True
        assert record.request_id == "-"
        assert record.locale == "-"

    def test_inside_request(self):
        id_token = request_id_ctx.set("abc-123")
        locale_token = locale_ctx.set("ja")
        try:
            record = make_record()
            RequestContextFilter().filter(record)
        finally:
            locale_ctx.reset(locale_token)
            request_id_ctx.reset(id_token)

        assert record.request_id == "abc-123"
        assert record.locale == "ja"

    def test_json_output_carries_context(self):
        record = make_record()
        locale_token = locale_ctx.set("fr")
        try:
            RequestContextFilter().filter(record)
        finally:
            locale_ctx.reset(locale_token)

        payload = json.loads(ContentJsonFormatter().format(record))

        assert payload["locale"] == "fr"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "genryu_content.test"
        assert payload["message"] == "CMS fetch failed"


class TestCommandLine:
    """Tests for python -m genryu_content."""

    def test_defaults_from_settings(self):
        args = parse_args([])

        assert args.host == settings.HOST
        assert args.port == settings.PORT
        assert args.reload is False

    def test_overrides(self):
        args = parse_args(["--host", "127.0.0.1", "--port", "9000", "--reload"])

        assert (args.host, args.port, args.reload) == ("127.0.0.1", 9000, True)

    @patch("genryu_content.__main__.uvicorn.run")
    def test_main_starts_uvicorn(self, mock_run):
        main(["--port", "9001"])

        mock_run.assert_called_once()
        assert mock_run.call_args.args == ("genryu_content.api:app",)
        assert mock_run.call_args.kwargs["port"] == 9001
