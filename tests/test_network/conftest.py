import pytest

from fluidnet.grid import Endpoint
from fluidnet.network import FluidNetwork
from fluidnet.testing import make_consumer, make_endpoint, make_network, make_producer


@pytest.fixture
def network() -> FluidNetwork:
    return make_network()


@pytest.fixture
def generator() -> Endpoint:
    return make_endpoint("generator", connection=make_producer(output_rate=10.0))


@pytest.fixture
def lamp() -> Endpoint:
    return make_endpoint("lamp", connection=make_consumer(input_rate=5.0))
