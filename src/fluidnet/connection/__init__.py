from .connection import Connection
from .detection import AdjacentBand, CrossedBands, ThresholdDetector, band_index
from .events import ConnectionEvent, Reconnecting, ThresholdReached
from .listeners import Listener, Listeners

__all__ = [
    # Events
    "ConnectionEvent",
    "Reconnecting",
    "ThresholdReached",
    # Detection
    "AdjacentBand",
    "CrossedBands",
    "ThresholdDetector",
    "band_index",
    # Listeners
    "Listener",
    "Listeners",
    # Connection
    "Connection",
]
