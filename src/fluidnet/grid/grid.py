import logging
from collections import deque
from dataclasses import dataclass, field

from fluidnet.common import EVENT_LOG_SIZE, ResourceKind, is_zero
from fluidnet.connection import Connection

from .events import EndpointPluggedIn, EndpointUnplugged, GridEvent, PowerBalanced, PowerShortage
from .protocols import Pluggable

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Grid:
    """A set of endpoints sharing one resource, balanced once per tick.

    A grid created without a resource takes on the resource of the first
    endpoint plugged into it. Only the latest ``max_events`` events are kept.
    """

    resource: ResourceKind | None = None
    max_events: int = field(default=EVENT_LOG_SIZE, kw_only=True)
    events: deque[GridEvent] = field(default_factory=deque, init=False, repr=False)
    _endpoints: dict[Pluggable, None] = field(default_factory=dict, init=False, repr=False)
    _operating: bool = field(default=False, init=False, repr=False)
    _ticks: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_events <= 0:
            raise ValueError("max_events must be positive")
        self.events = deque(maxlen=self.max_events)

    @property
    def endpoints(self) -> list[Pluggable]:
        return list(self._endpoints)

    @property
    def is_empty(self) -> bool:
        return not self._endpoints

    @property
    def is_operating(self) -> bool:
        return self._operating

    def __len__(self) -> int:
        return len(self._endpoints)

    def record(self, event: GridEvent) -> None:
        self.events.append(event)

    def events_of_type[T: GridEvent](self, event_type: type[T]) -> list[T]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear_events(self) -> None:
        self.events.clear()

    def can_plug_in(self, endpoint: Pluggable) -> bool:
        return endpoint.can_join(self)

    def plug_in(self, endpoint: Pluggable) -> bool:
        if not self.can_plug_in(endpoint):
            return False
        if self.resource is None:
            self.resource = getattr(endpoint, "resource", None)
        if endpoint not in self._endpoints:
            self._endpoints[endpoint] = None
            self.record(EndpointPluggedIn(endpoint_id=endpoint.id, t=self._ticks))
        return True

    def is_plugged_in(self, endpoint: Pluggable) -> bool:
        return endpoint in self._endpoints

    def unplug(self, endpoint: Pluggable) -> None:
        if endpoint not in self._endpoints:
            return
        del self._endpoints[endpoint]
        self.record(EndpointUnplugged(endpoint_id=endpoint.id, t=self._ticks))

    def tick(self) -> None:
        t = self._ticks
        connections = [endpoint.connection for endpoint in self._endpoints]
        accumulators = [c for c in connections if c.is_power_accumulator]
        others = [c for c in connections if not c.is_power_accumulator]

        # 1. Production and demand of plain producers/consumers
        produced = sum((c.output_rate for c in others if c.is_power_producer), 0.0)
        consumed = sum((c.input_rate for c in others if c.is_power_consumer), 0.0)
        balance = produced - consumed

        # 2. Surplus charges accumulators, deficit drains them
        stored = drawn = 0.0
        if balance > 0:
            stored = self._charge(accumulators, balance)
            balance -= stored
        elif balance < 0:
            drawn = self._discharge(accumulators, -balance)
            balance += drawn

        self._operating = balance >= 0 or is_zero(balance)
        self.record(
            PowerBalanced(
                produced=produced,
                consumed=consumed,
                stored=stored,
                drawn=drawn,
                balance=balance,
                t=t,
            )
        )
        if not self._operating:
            self.record(PowerShortage(deficit=-balance, t=t))
            logger.debug(f"{self.resource} grid short by {-balance} at tick {t}")

        self._ticks += 1

    def _charge(self, accumulators: list[Connection], surplus: float) -> float:
        total = 0.0
        for acc in accumulators:
            if is_zero(surplus - total):
                break
            room = acc.capacity - acc.accumulated_power
            amount = min(acc.input_rate, room, surplus - total)
            if amount <= 0:
                continue
            total += _write(acc, acc.accumulated_power + amount)
        return total

    def _discharge(self, accumulators: list[Connection], deficit: float) -> float:
        total = 0.0
        for acc in accumulators:
            if is_zero(deficit - total):
                break
            amount = min(acc.output_rate, acc.accumulated_power, deficit - total)
            if amount <= 0:
                continue
            total -= _write(acc, acc.accumulated_power - amount)
        return total

    def reset(self) -> None:
        """Reset grid bookkeeping for a fresh run.

        Membership and the connections themselves are left alone.
        """
        self.clear_events()
        self._operating = False
        self._ticks = 0


def _write(acc: Connection, value: float) -> float:
    """Store ``value`` and return how far the stored amount actually moved.

    Writes within the connection's tolerance are ignored by the connection
    and move nothing.
    """
    before = acc.accumulated_power
    acc.accumulated_power = value
    return acc.accumulated_power - before
