from pathlib import Path

import pandas as pd
import pytest

from fluidnet.grid import Grid
from fluidnet.testing import make_accumulator, make_consumer, make_endpoint, make_grid, make_producer


@pytest.fixture
def tmp_csv(tmp_path: Path):
    def _write_csv(df: pd.DataFrame, filename: str) -> Path:
        csv_path = tmp_path / filename
        df.to_csv(csv_path, index=False)
        return csv_path

    return _write_csv


@pytest.fixture
def power_grid() -> Grid:
    """Generator, lamp and half-full battery on one power grid."""
    return make_grid(
        make_endpoint("generator", connection=make_producer(output_rate=10.0)),
        make_endpoint("lamp", connection=make_consumer(input_rate=5.0)),
        make_endpoint("battery", connection=make_accumulator(capacity=100.0, initial_power=50.0)),
    )
