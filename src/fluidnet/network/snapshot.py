"""Plain-row snapshots of grid membership and connection state.

A snapshot is a list of dicts, one per endpoint, holding the id of the grid
it is plugged into (-1 when unplugged) and the four persisted connection
values. Rows convert to and from a pandas DataFrame for inspection or for
writing with whatever format the caller prefers.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

import pandas as pd

from fluidnet.grid import Pluggable, UtilityGrid

from .fluid_network import FluidNetwork

logger = logging.getLogger(__name__)

SNAPSHOT_COLUMNS = ("endpoint_id", "grid_id", "input_rate", "output_rate", "capacity", "accumulated_power")


def snapshot(network: FluidNetwork, endpoints: Iterable[Pluggable]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for endpoint in endpoints:
        rows.append(
            {
                "endpoint_id": endpoint.id,
                "grid_id": network.find_id(network.grid_of(endpoint)),
                **endpoint.connection.to_dict(),
            }
        )
    return rows


def to_frame(rows: list[dict[str, Any]]) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=list(SNAPSHOT_COLUMNS))


def from_frame(df: pd.DataFrame) -> list[dict[str, Any]]:
    missing = set(SNAPSHOT_COLUMNS) - set(df.columns)
    if missing:
        raise ValueError(f"Snapshot frame is missing columns: {sorted(missing)}")
    return df[list(SNAPSHOT_COLUMNS)].to_dict(orient="records")


def restore(
    network: FluidNetwork,
    rows: Iterable[Mapping[str, Any]],
    endpoints: Mapping[str, Pluggable],
) -> dict[int, UtilityGrid]:
    """Rebuild grids from a snapshot and write the saved values back.

    Connection values are restored silently: no threshold events fire.
    Saved grid ids are not reused; the returned mapping goes from each
    saved id to the freshly registered grid.

    Raises:
        KeyError: If a row names an endpoint missing from ``endpoints``.
        ValueError: If a row holds a negative rate or capacity.
    """
    grids: dict[int, UtilityGrid] = {}
    for row in rows:
        endpoint_id = str(row["endpoint_id"])
        if endpoint_id not in endpoints:
            raise KeyError(f"Snapshot references unknown endpoint '{endpoint_id}'")
        endpoint = endpoints[endpoint_id]

        endpoint.connection.load(row)

        grid_id = int(row.get("grid_id", -1))
        if grid_id < 0:
            network.unplug(endpoint)
            continue
        if grid_id not in grids:
            grids[grid_id] = network.grid_factory()
        if not network.plug_in_to(endpoint, grids[grid_id]):
            logger.warning(f"Grid {grid_id} from snapshot refused endpoint '{endpoint_id}'")

    logger.info(f"Restored {len(grids)} grids from snapshot")
    return grids
