from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fluidnet.common import POWER, ResourceKind
from fluidnet.connection import Connection

if TYPE_CHECKING:
    from .protocols import UtilityGrid


@dataclass(eq=False)
class Endpoint:
    """Something that can be plugged into a grid: a generator, a lamp, a battery."""

    id: str
    connection: Connection = field(default_factory=Connection)
    resource: ResourceKind = field(default=POWER, kw_only=True)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id cannot be empty")

    def can_join(self, grid: "UtilityGrid") -> bool:
        resource = getattr(grid, "resource", None)
        return resource is None or resource == self.resource

    def clone(self, id: str) -> "Endpoint":
        """Stamp out a copy with its own connection, e.g. from a blueprint."""
        return Endpoint(id=id, connection=self.connection.clone(), resource=self.resource)
