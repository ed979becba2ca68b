"""
Tests for PrettyHandler
"""

import io
import logging
import threading
from unittest.mock import MagicMock

from prettylog import PrettyFormatter, PrettyHandler, SeverityLevel, TargetFilter
from prettylog.levels import TRACE_LEVEL


def plain_handler(**kwargs):
    stream = io.StringIO()
    formatter = PrettyFormatter.builder().without_color().build()
    return PrettyHandler(formatter, stream=stream, **kwargs), stream


class TestPrettyHandler:
    def test_enabled(self):
        handler, _ = plain_handler(min_level=SeverityLevel.INFO)
        assert handler.enabled(SeverityLevel.ERROR)
        assert handler.enabled(SeverityLevel.INFO)
        assert not handler.enabled(SeverityLevel.DEBUG)
        assert not handler.enabled(SeverityLevel.TRACE)

    def test_min_level_gate(self, record_factory):
        handler, stream = plain_handler(min_level=SeverityLevel.INFO)
        for levelno in (logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL):
            handler.handle(record_factory("app", levelno, "msg"))
        assert stream.getvalue().splitlines() == [
            "ERROR [app] msg",
            "WARN  [app] msg",
            "INFO  [app] msg",
        ]

    def test_matching_rule_suppresses(self, record_factory):
        handler, stream = plain_handler(filters=TargetFilter(["mod_a=warn"]))
        handler.handle(record_factory("mod_a::sub", logging.DEBUG, "hidden"))
        handler.handle(record_factory("mod_a.sub", logging.WARNING, "hidden too"))
        handler.handle(record_factory("mod_a.sub", logging.ERROR, "shown"))
        handler.handle(record_factory("mod_b", logging.DEBUG, "other"))
        assert stream.getvalue().splitlines() == [
            "ERROR [mod_a.sub] shown",
            "DEBUG [mod_b] other",
        ]

    def test_stdlib_filters_still_apply(self, record_factory):
        handler, stream = plain_handler(filters=TargetFilter(["noisy=debug"]))
        handler.addFilter(lambda record: "secret" not in record.getMessage())

        handler.handle(record_factory("app", logging.INFO, "public"))
        handler.handle(record_factory("app", logging.INFO, "secret token"))
        handler.handle(record_factory("noisy.io", logging.DEBUG, "chatter"))

        assert isinstance(handler.filters, list)
        assert stream.getvalue() == "INFO  [app] public\n"

    def test_handle_without_target_rules(self, record_factory):
        handler, stream = plain_handler()
        assert handler.target_filter is None
        handler.handle(record_factory("app", logging.INFO, "plain"))
        assert stream.getvalue() == "INFO  [app] plain\n"

    def test_string_min_level(self):
        handler, _ = plain_handler(min_level="warn")
        assert handler.min_level is SeverityLevel.WARN

    def test_io_errors_are_swallowed(self, record_factory):
        stream = MagicMock()
        stream.write.side_effect = OSError("broken pipe")
        stream.isatty.return_value = False
        handler = PrettyHandler(PrettyFormatter(), stream=stream)
        handler.handleError = MagicMock()

        handler.handle(record_factory())

        stream.write.assert_called_once()
        handler.handleError.assert_not_called()

    def test_time_failure_drops_record(self, record_factory):
        def broken(sink):
            raise OSError("clock")

        stream = io.StringIO()
        handler = PrettyHandler(PrettyFormatter.builder().with_time(broken).build(), stream=stream)
        handler.handle(record_factory(msg="lost"))
        handler.handle(record_factory(msg="also lost"))
        assert stream.getvalue() == ""

    def test_other_errors_use_handle_error(self, record_factory):
        handler, stream = plain_handler()
        handler.handleError = MagicMock()
        record = record_factory(msg="%d items", args=("many",))

        handler.handle(record)

        handler.handleError.assert_called_once_with(record)
        assert stream.getvalue() == ""

    def test_flush_is_noop(self):
        handler, stream = plain_handler()
        handler.flush()
        assert stream.getvalue() == ""

    def test_concurrent_records_do_not_interleave(self):
        handler, stream = plain_handler()
        logger = logging.getLogger("prettylog.tests.concurrent")
        logger.propagate = False
        logger.setLevel(TRACE_LEVEL)
        logger.addHandler(handler)
        try:
            def work(n):
                for i in range(200):
                    logger.info("worker %d line %d %s", n, i, "x" * 64)

            threads = [threading.Thread(target=work, args=(n,)) for n in range(8)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join()
        finally:
            logger.removeHandler(handler)

        lines = stream.getvalue().splitlines()
        assert len(lines) == 8 * 200
        pattern = "INFO  [prettylog.tests.concurrent] worker {} line {} " + "x" * 64
        expected = {pattern.format(n, i) for n in range(8) for i in range(200)}
        assert set(lines) == expected
