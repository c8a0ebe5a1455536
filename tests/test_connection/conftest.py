import pytest

from fluidnet.connection import Connection
from fluidnet.testing import RecordingListener, make_accumulator

LEVELS = (0.0, 25.0, 50.0, 75.0, 100.0)


@pytest.fixture
def levels() -> tuple[float, ...]:
    return LEVELS


@pytest.fixture
def accumulator() -> Connection:
    return make_accumulator(capacity=100.0)


@pytest.fixture
def half_full() -> Connection:
    return make_accumulator(capacity=100.0, initial_power=50.0)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
