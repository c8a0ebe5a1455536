import itertools
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

import networkx as nx

from fluidnet.grid import Grid, Pluggable, UtilityGrid
from fluidnet.time import SECONDS_TO_TICK, TickClock

from .validation import ValidationError, require

logger = logging.getLogger(__name__)


@dataclass
class FluidNetwork:
    """Registry of the grids in one world.

    Routes endpoints to grids, creating a grid when none will take an
    endpoint, and turns frame deltas into fixed grid ticks. Each registered
    grid gets an id when it is registered; ids are never reused.
    """

    seconds_to_tick: float = SECONDS_TO_TICK
    grid_factory: Callable[[], UtilityGrid] = Grid

    _grids: dict[UtilityGrid, int] = field(default_factory=dict, init=False, repr=False)
    _ids: Iterator[int] = field(default_factory=itertools.count, init=False, repr=False)
    _clock: TickClock = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._clock = TickClock(seconds_to_tick=self.seconds_to_tick)

    @property
    def grids(self) -> list[UtilityGrid]:
        return list(self._grids)

    @property
    def is_empty(self) -> bool:
        return not self._grids

    @property
    def seconds_passed(self) -> float:
        return self._clock.seconds_passed

    @property
    def ticks(self) -> int:
        return self._clock.ticks

    def __len__(self) -> int:
        return len(self._grids)

    def __contains__(self, grid: object) -> bool:
        return grid in self._grids

    # --- Plugging ---

    def can_plug_in(self, endpoint: Pluggable) -> bool:
        require(endpoint, "endpoint")
        return self._first_accepting(endpoint) is not None

    def plug_in(self, endpoint: Pluggable) -> bool:
        """Plug an endpoint into the first grid that takes it.

        When no registered grid accepts the endpoint a new grid is created
        and registered, even if the endpoint then refuses it too. An
        endpoint that is already plugged in stays where it is.
        """
        require(endpoint, "endpoint")
        if self.grid_of(endpoint) is not None:
            return True

        grid = self._first_accepting(endpoint)
        if grid is None:
            grid = self.grid_factory()
            self._register(grid)
            logger.warning(f"Adding new grid {self._grids[grid]} for endpoint '{endpoint.id}'")
            if not grid.can_plug_in(endpoint):
                return False

        return self.plug_in_to(endpoint, grid)

    def plug_in_to(self, endpoint: Pluggable, grid: UtilityGrid) -> bool:
        """Plug an endpoint into a specific grid, registering the grid if needed.

        An endpoint plugged in elsewhere is moved, unless the new grid
        refuses it, in which case it stays put and False is returned.
        """
        require(endpoint, "endpoint")
        require(grid, "grid")
        self.register_grid(grid)

        current = self.grid_of(endpoint)
        if current is grid:
            return True
        if current is not None:
            if not grid.can_plug_in(endpoint):
                return False
            current.unplug(endpoint)

        return grid.plug_in(endpoint)

    def is_plugged_in(self, endpoint: Pluggable) -> tuple[bool, UtilityGrid | None]:
        require(endpoint, "endpoint")
        grid = self.grid_of(endpoint)
        return (grid is not None, grid)

    def grid_of(self, endpoint: Pluggable) -> UtilityGrid | None:
        require(endpoint, "endpoint")
        return next((grid for grid in self._grids if grid.is_plugged_in(endpoint)), None)

    def unplug(self, endpoint: Pluggable) -> None:
        require(endpoint, "endpoint")
        grid = self.grid_of(endpoint)
        if grid is None:
            return
        self.unplug_from(endpoint, grid)

    def unplug_from(self, endpoint: Pluggable, grid: UtilityGrid) -> None:
        require(endpoint, "endpoint")
        require(grid, "grid")
        grid.unplug(endpoint)

    def has_power(self, endpoint: Pluggable) -> bool:
        grid = self.grid_of(endpoint)
        return grid is not None and grid.is_operating

    # --- Grid registry ---

    def register_grid(self, grid: UtilityGrid) -> None:
        require(grid, "grid")
        if grid in self._grids:
            return
        self._register(grid)
        logger.info(f"Registered grid {self._grids[grid]}")

    def unregister_grid(self, grid: UtilityGrid) -> None:
        require(grid, "grid")
        if grid not in self._grids:
            return
        grid_id = self._grids.pop(grid)
        logger.info(f"Unregistered grid {grid_id}")

    def remove_grid(self, grid: UtilityGrid) -> None:
        require(grid, "grid")
        grid_id = self._grids.pop(grid, None)
        if grid_id is not None:
            logger.info(f"Removed grid {grid_id}")

    def find_id(self, grid: UtilityGrid | None) -> int:
        """Registration id of ``grid``, or -1 if it is not registered."""
        if grid is None:
            return -1
        return self._grids.get(grid, -1)

    def grid_by_id(self, grid_id: int) -> UtilityGrid | None:
        return next((grid for grid, gid in self._grids.items() if gid == grid_id), None)

    def _register(self, grid: UtilityGrid) -> None:
        self._grids[grid] = next(self._ids)

    def _first_accepting(self, endpoint: Pluggable) -> UtilityGrid | None:
        return next((grid for grid in self._grids if grid.can_plug_in(endpoint)), None)

    # --- Simulation ---

    def update(self, delta_time: float) -> None:
        """Advance simulation time; ticks every grid once per elapsed interval.

        However long ``delta_time`` is, at most one tick happens per call and
        the leftover time is dropped.
        """
        t = self._clock.advance(delta_time)
        if t is None:
            return
        self._tick(t)

    def _tick(self, t: int) -> None:
        if self.is_empty:
            return
        for grid in list(self._grids):
            grid.tick()
        logger.debug(f"Tick {t}: ticked {len(self._grids)} grids")

    # --- Topology ---

    def topology(self, endpoints: Iterable[Pluggable]) -> nx.Graph:
        """Bipartite membership graph of registered grids and the given endpoints.

        Grid nodes are ``("grid", id)``, endpoint nodes ``("endpoint", id)``.
        An edge means the endpoint is plugged into that grid.
        """
        graph = nx.Graph()
        for grid, grid_id in self._grids.items():
            graph.add_node(("grid", grid_id), kind="grid", operating=grid.is_operating)

        for endpoint in endpoints:
            node = ("endpoint", endpoint.id)
            graph.add_node(node, kind="endpoint")
            for grid, grid_id in self._grids.items():
                if grid.is_plugged_in(endpoint):
                    graph.add_edge(node, ("grid", grid_id))

        return graph

    def validate(self, endpoints: Iterable[Pluggable]) -> None:
        errors: list[str] = []
        endpoints = list(endpoints)

        # 1. Endpoint ids must be unique
        seen: set[str] = set()
        for endpoint in endpoints:
            if endpoint.id in seen:
                errors.append(f"Duplicate endpoint id '{endpoint.id}'")
            seen.add(endpoint.id)

        if errors:
            raise ValidationError("\n".join(errors))

        # 2. Each endpoint belongs to at most one grid
        graph = self.topology(endpoints)
        for node, kind in graph.nodes(data="kind"):
            if kind != "endpoint":
                continue
            if graph.degree(node) > 1:
                grid_ids = sorted(gid for _, gid in graph.neighbors(node))
                errors.append(f"Endpoint '{node[1]}' is plugged into {len(grid_ids)} grids: {grid_ids}")

        if errors:
            raise ValidationError("\n".join(errors))
