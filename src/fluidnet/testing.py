from collections.abc import Callable
from typing import Any

from fluidnet.common import POWER, ResourceKind
from fluidnet.connection import Connection, ConnectionEvent
from fluidnet.grid import Endpoint, Grid, UtilityGrid
from fluidnet.network import FluidNetwork

# --- Listeners ---


class RecordingListener:
    """Collects every event it is called with.

    Keep a reference to the listener for as long as it should receive
    events; connections only hold it weakly.
    """

    def __init__(self) -> None:
        self.received: list[ConnectionEvent] = []

    def __call__(self, event: ConnectionEvent) -> None:
        self.received.append(event)

    def on_event(self, event: ConnectionEvent) -> None:
        self.received.append(event)

    def __len__(self) -> int:
        return len(self.received)


# --- Grids that refuse or misbehave ---


class PickyGrid(Grid):
    """Grid that only takes endpoints whose id passes ``accepts``."""

    def __init__(self, accepts: Callable[[str], bool], resource: ResourceKind | None = None) -> None:
        super().__init__(resource=resource)
        self.accepts = accepts

    def can_plug_in(self, endpoint: Any) -> bool:
        return self.accepts(endpoint.id) and super().can_plug_in(endpoint)


class CountingGrid(Grid):
    """Grid that counts how often it was ticked."""

    def __init__(self, resource: ResourceKind | None = None) -> None:
        super().__init__(resource=resource)
        self.tick_count = 0

    def tick(self) -> None:
        self.tick_count += 1
        super().tick()


__all__ = [
    "RecordingListener",
    "PickyGrid",
    "CountingGrid",
    "make_connection",
    "make_producer",
    "make_consumer",
    "make_accumulator",
    "make_endpoint",
    "make_grid",
    "make_network",
]


# --- Factory Functions ---


def make_connection(**overrides: Any) -> Connection:
    return Connection(**overrides)


def make_producer(output_rate: float = 10.0, **overrides: Any) -> Connection:
    return Connection(output_rate=output_rate, **overrides)


def make_consumer(input_rate: float = 5.0, **overrides: Any) -> Connection:
    return Connection(input_rate=input_rate, **overrides)


def make_accumulator(
    capacity: float = 100.0,
    initial_power: float = 0.0,
    **overrides: Any,
) -> Connection:
    overrides.setdefault("input_rate", 10.0)
    overrides.setdefault("output_rate", 10.0)
    return Connection(capacity=capacity, initial_power=initial_power, **overrides)


def make_endpoint(
    id: str = "endpoint",
    *,
    connection: Connection | None = None,
    resource: ResourceKind = POWER,
) -> Endpoint:
    return Endpoint(id=id, connection=connection if connection is not None else Connection(), resource=resource)


def make_grid(*endpoints: Endpoint, resource: ResourceKind = POWER, **overrides: Any) -> Grid:
    grid = Grid(resource=resource, **overrides)
    for endpoint in endpoints:
        grid.plug_in(endpoint)
    return grid


def make_network(
    *grids: UtilityGrid,
    seconds_to_tick: float = 1.0,
    grid_factory: Callable[[], UtilityGrid] = Grid,
) -> FluidNetwork:
    network = FluidNetwork(seconds_to_tick=seconds_to_tick, grid_factory=grid_factory)
    for grid in grids:
        network.register_grid(grid)
    return network
