"""pytest shared fixtures."""

import io
import json

import pytest

from itinerary_kernel.infrastructure.logging import StructuredLogger


@pytest.fixture
def log_output():
    return io.StringIO()


@pytest.fixture
def kernel_logger(log_output):
    return StructuredLogger(trace_id="test-trace", output=log_output)


@pytest.fixture
def read_log_events(log_output):
    def _read() -> list[dict]:
        return [json.loads(line) for line in log_output.getvalue().splitlines() if line.strip()]

    return _read
