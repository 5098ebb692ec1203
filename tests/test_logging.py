from __future__ import annotations

import io
import logging

import pytest
import structlog
from structlog.testing import capture_logs

from pydiverse.collections import CollectionMap, CollectionSet, setup_logging


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    setup_logging(log_level=logging.INFO)


class TestSetupLogging:
    def test_debug_events_rendered(self, log_stream):
        setup_logging(log_level=logging.DEBUG, stream=log_stream, colors=False)
        CollectionMap({"a": 1}).set_all({"b": 2}, lambda v1, v2: v1 or v2)

        output = log_stream.getvalue()
        assert "combined mappings" in output
        assert "left=1" in output
        assert "result=2" in output
        assert "pydiverse.collections._internal.map" in output

    def test_debug_events_filtered(self, log_stream):
        setup_logging(log_level=logging.INFO, stream=log_stream, colors=False)
        CollectionSet(["a"]).union(["b"])
        CollectionMap({"a": 1}).replace_all(lambda k, v: v)

        assert log_stream.getvalue() == ""

    def test_no_processing_below_level(self, log_stream):
        setup_logging(log_level=logging.INFO, stream=log_stream, colors=False)
        with capture_logs() as logs:
            CollectionSet(["a"]).union(["b"])
            CollectionMap({"a": 1}).replace_all(lambda k, v: v)
            CollectionMap({"a": 1}).set_all({"b": 2}, lambda v1, v2: v1 or v2)

        assert logs == []

    def test_level_filtered_before_processing(self, log_stream):
        setup_logging(log_level=logging.INFO, stream=log_stream, colors=False)
        processors = structlog.get_config()["processors"]
        assert processors[0] is structlog.stdlib.filter_by_level

    def test_stdlib_records_share_handler(self, log_stream):
        setup_logging(log_level=logging.INFO, stream=log_stream, colors=False)
        logging.getLogger("pydiverse.collections.test").warning("plain %s", "record")

        output = log_stream.getvalue()
        assert "plain record" in output
        assert "warning" in output
