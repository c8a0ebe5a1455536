"""
fluidnet

This package models discrete-time resource networks: independent grids of
pluggable endpoints that produce, consume or store a scalar resource such as
power or water.

Classes:
    Connection: Per-endpoint rates and stored amount; reports when the stored amount
        crosses a capacity band (0, 25, 50, 75, 100 %).
    Endpoint: A pluggable object carrying a Connection.
    Grid: Reference grid that balances producers, consumers and accumulators every tick.
    FluidNetwork: Registry of grids. Routes endpoints to grids, creates grids on demand
        and ticks them at a fixed interval.
"""

from .common import FLUID, POWER, WATER, ResourceKind
from .connection import AdjacentBand, Connection, CrossedBands, Reconnecting, ThresholdReached
from .grid import Endpoint, Grid, Pluggable, UtilityGrid
from .network import FluidNetwork, InvalidArgumentError, ValidationError
from .time import TickClock

__all__ = [
    "FLUID",
    "POWER",
    "WATER",
    "ResourceKind",
    "AdjacentBand",
    "Connection",
    "CrossedBands",
    "Reconnecting",
    "ThresholdReached",
    "Endpoint",
    "Grid",
    "Pluggable",
    "UtilityGrid",
    "FluidNetwork",
    "InvalidArgumentError",
    "ValidationError",
    "TickClock",
]

__version__ = "0.1.0"
