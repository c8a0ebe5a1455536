from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from fluidnet.common import CAPACITY_THRESHOLDS, EVENT_LOG_SIZE, are_equal, is_zero, read_float

from .detection import AdjacentBand, ThresholdDetector, band_index
from .events import ConnectionEvent, Reconnecting, ThresholdReached
from .listeners import Listener, Listeners


@dataclass(eq=False)
class Connection:
    """Resource state of one endpoint: its rates and, for accumulators, its store.

    Producers and consumers only use the rates. An accumulator also has a
    capacity; every write to ``accumulated_power`` checks whether the stored
    amount moved into a new capacity band and, if so, records a
    ``ThresholdReached`` event and notifies its listeners.

    The stored amount is not clamped to ``[0, capacity]``; keeping it in
    range is up to the grid that charges and drains it. Only the latest
    ``max_events`` events are kept.
    """

    input_rate: float = 0.0  # consumed per tick; accumulator: charge rate
    output_rate: float = 0.0  # produced per tick; accumulator: discharge rate
    capacity: float = 0.0  # 0 means not a storage device
    initial_power: float = 0.0
    detector: ThresholdDetector = field(default_factory=AdjacentBand)
    thresholds: tuple[float, ...] = field(default=CAPACITY_THRESHOLDS, kw_only=True)
    max_events: int = field(default=EVENT_LOG_SIZE, kw_only=True)
    events: deque[ConnectionEvent] = field(default_factory=deque, init=False, repr=False)
    _accumulated_power: float = field(init=False, repr=False)
    _threshold_index: int = field(default=0, init=False, repr=False)
    _listeners: dict[type, Listeners] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        _check_rates(self.input_rate, self.output_rate, self.capacity)
        if self.max_events <= 0:
            raise ValueError("max_events must be positive")
        if not self.thresholds:
            raise ValueError("thresholds cannot be empty")
        if list(self.thresholds) != sorted(self.thresholds):
            raise ValueError("thresholds must be in ascending order")
        self.events = deque(maxlen=self.max_events)
        self._accumulated_power = self.initial_power
        self._threshold_index = band_index(self._levels(), self._accumulated_power)

    @property
    def accumulated_power(self) -> float:
        return self._accumulated_power

    @accumulated_power.setter
    def accumulated_power(self, value: float) -> None:
        self.set_accumulated(value)

    def set_accumulated(self, value: float) -> None:
        if are_equal(self._accumulated_power, value):
            return

        old = self._accumulated_power
        self._accumulated_power = value

        reached = self.detector.detect(self._levels(), self._threshold_index, old, value)
        if reached is None:
            return

        self._threshold_index = reached
        self.record(
            ThresholdReached(
                connection=self,
                threshold=self.current_threshold,
                index=reached,
                accumulated=value,
            )
        )

    @property
    def current_threshold_index(self) -> int:
        return self._threshold_index

    @property
    def current_threshold(self) -> int:
        """Last reached capacity band, in percent."""
        return round(self.thresholds[self._threshold_index] * 100)

    @property
    def is_empty(self) -> bool:
        return is_zero(self._accumulated_power)

    @property
    def is_full(self) -> bool:
        return are_equal(self._accumulated_power, self.capacity)

    @property
    def is_power_producer(self) -> bool:
        return is_zero(self.input_rate) and self.output_rate > 0.0

    @property
    def is_power_consumer(self) -> bool:
        return is_zero(self.output_rate) and self.input_rate > 0.0

    @property
    def is_power_accumulator(self) -> bool:
        return self.capacity > 0.0

    def reconnect(self) -> None:
        """Ask listeners to re-evaluate where this connection belongs."""
        self.record(Reconnecting(connection=self))

    def subscribe(self, event_type: type[ConnectionEvent], callback: Listener) -> Listener:
        if event_type not in (ThresholdReached, Reconnecting):
            raise ValueError(f"Unknown connection event type: {event_type!r}")
        return self._listeners.setdefault(event_type, Listeners()).subscribe(callback)

    def unsubscribe(self, event_type: type[ConnectionEvent], callback: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners is not None:
            listeners.unsubscribe(callback)

    def record(self, event: ConnectionEvent) -> None:
        self.events.append(event)
        listeners = self._listeners.get(type(event))
        if listeners is not None:
            listeners.notify(event)

    def events_of_type[T: ConnectionEvent](self, event_type: type[T]) -> list[T]:
        return [e for e in self.events if isinstance(e, event_type)]

    def clear_events(self) -> None:
        self.events.clear()

    def clone(self) -> Self:
        """Copy rates, capacity and stored amount into a fresh connection.

        Listeners and recorded events stay behind. The band is derived from
        the copied amount rather than carried over.
        """
        return type(self)(
            input_rate=self.input_rate,
            output_rate=self.output_rate,
            capacity=self.capacity,
            initial_power=self._accumulated_power,
            detector=self.detector,
            thresholds=self.thresholds,
            max_events=self.max_events,
        )

    def __copy__(self) -> Self:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self.clone()

    def reset(self) -> None:
        """Restore the initial stored amount without firing events.

        Clears recorded events; subscriptions are kept.
        """
        self.clear_events()
        self._accumulated_power = self.initial_power
        self._threshold_index = band_index(self._levels(), self._accumulated_power)

    def load(self, data: Mapping[str, Any]) -> None:
        """Overwrite rates, capacity and stored amount from saved values.

        Values are checked before anything is assigned, so a bad row leaves
        the connection untouched. Like ``reset``, no events fire.

        Raises:
            ValueError: If a rate or the capacity is negative.
        """
        input_rate = read_float(data.get("input_rate"))
        output_rate = read_float(data.get("output_rate"))
        capacity = read_float(data.get("capacity"))
        _check_rates(input_rate, output_rate, capacity)

        self.input_rate = input_rate
        self.output_rate = output_rate
        self.capacity = capacity
        self.initial_power = read_float(data.get("accumulated_power"))
        self.reset()

    def to_dict(self) -> dict[str, float]:
        return {
            "input_rate": self.input_rate,
            "output_rate": self.output_rate,
            "capacity": self.capacity,
            "accumulated_power": self._accumulated_power,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], **kwargs: Any) -> Self:
        return cls(
            input_rate=read_float(data.get("input_rate")),
            output_rate=read_float(data.get("output_rate")),
            capacity=read_float(data.get("capacity")),
            initial_power=read_float(data.get("accumulated_power")),
            **kwargs,
        )

    def _levels(self) -> tuple[float, ...]:
        return tuple(fraction * self.capacity for fraction in self.thresholds)


def _check_rates(input_rate: float, output_rate: float, capacity: float) -> None:
    if input_rate < 0:
        raise ValueError("input_rate cannot be negative")
    if output_rate < 0:
        raise ValueError("output_rate cannot be negative")
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
