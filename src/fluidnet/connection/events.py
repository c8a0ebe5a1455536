from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .connection import Connection


@dataclass(frozen=True, slots=True)
class ThresholdReached:
    connection: "Connection" = field(repr=False, compare=False)
    threshold: int  # % of capacity
    index: int  # position in the band table
    accumulated: float


@dataclass(frozen=True, slots=True)
class Reconnecting:
    connection: "Connection" = field(repr=False, compare=False)


ConnectionEvent = ThresholdReached | Reconnecting
