from .fluid_network import FluidNetwork
from .snapshot import SNAPSHOT_COLUMNS, from_frame, restore, snapshot, to_frame
from .validation import InvalidArgumentError, ValidationError

__all__ = [
    "FluidNetwork",
    "InvalidArgumentError",
    "SNAPSHOT_COLUMNS",
    "ValidationError",
    "from_frame",
    "restore",
    "snapshot",
    "to_frame",
]
