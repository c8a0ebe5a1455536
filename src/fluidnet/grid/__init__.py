from .endpoint import Endpoint
from .events import EndpointPluggedIn, EndpointUnplugged, GridEvent, PowerBalanced, PowerShortage
from .grid import Grid
from .protocols import Pluggable, UtilityGrid

__all__ = [
    # Events
    "EndpointPluggedIn",
    "EndpointUnplugged",
    "GridEvent",
    "PowerBalanced",
    "PowerShortage",
    # Protocols
    "Pluggable",
    "UtilityGrid",
    # Grid
    "Endpoint",
    "Grid",
]
