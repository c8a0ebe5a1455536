from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fluidnet.connection import Connection


@runtime_checkable
class Pluggable(Protocol):
    @property
    def id(self) -> str: ...

    @property
    def connection(self) -> "Connection": ...

    def can_join(self, grid: "UtilityGrid") -> bool: ...


@runtime_checkable
class UtilityGrid(Protocol):
    """What the network registry needs from a grid.

    Grids are compared and hashed by identity.
    """

    @property
    def is_operating(self) -> bool: ...

    def can_plug_in(self, endpoint: Pluggable) -> bool: ...

    def plug_in(self, endpoint: Pluggable) -> bool: ...

    def is_plugged_in(self, endpoint: Pluggable) -> bool: ...

    def unplug(self, endpoint: Pluggable) -> None: ...

    def tick(self) -> None: ...
