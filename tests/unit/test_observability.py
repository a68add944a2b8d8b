"""Tests for observability/logger.py and observability/metrics.py"""
import io
import json
import logging
import sys


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, exc_info=None, extra_fields=None):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        return record

    def test_basic_format(self):
        from slackify.observability.logger import StructuredFormatter

        result = json.loads(StructuredFormatter().format(self._get_record("hello")))
        assert result["message"] == "hello"
        assert result["level"] == "INFO"
        assert "ts" in result

    def test_extra_fields_merged(self):
        from slackify.observability.logger import StructuredFormatter

        record = self._get_record("msg", extra_fields={"blocks": 5, "source": "mdast"})
        result = json.loads(StructuredFormatter().format(record))
        assert result["blocks"] == 5
        assert result["source"] == "mdast"

    def test_exception_info_included(self):
        from slackify.observability.logger import StructuredFormatter

        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(self._get_record("e", exc_info=exc_info)))
        assert "ValueError" in result["exception"]


class TestGetLogger:
    def test_idempotent(self):
        from slackify.observability.logger import get_logger

        first = get_logger("slackify.test.idempotent")
        second = get_logger("slackify.test.idempotent")
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_string_level_and_stream(self):
        from slackify.observability.logger import get_logger

        stream = io.StringIO()
        logger = get_logger("slackify.test.stream", level="debug", stream=stream)
        logger.debug("converted", extra={"extra_fields": {"blocks": 2}})
        entry = json.loads(stream.getvalue().strip())
        assert entry["message"] == "converted"
        assert entry["blocks"] == 2
        assert entry["logger"] == "slackify.test.stream"


class TestMetrics:
    def test_noop_satisfies_protocol(self):
        from slackify.observability.metrics import MetricsHook, NoopMetricsHook

        hook = NoopMetricsHook()
        assert isinstance(hook, MetricsHook)
        hook.increment("x")
        hook.timing("x", 1.0)
        hook.gauge("x", 2.0)

    def test_resolve_metrics(self):
        from slackify.observability.metrics import NoopMetricsHook, resolve_metrics

        assert isinstance(resolve_metrics(None), NoopMetricsHook)
        assert isinstance(resolve_metrics(object()), NoopMetricsHook)

        class Backend:
            def increment(self, name, value=1, tags=None): ...
            def timing(self, name, ms, tags=None): ...
            def gauge(self, name, value, tags=None): ...

        backend = Backend()
        assert resolve_metrics(backend) is backend
