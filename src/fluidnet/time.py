from dataclasses import dataclass, field

SECONDS_TO_TICK = 1.0


@dataclass
class TickClock:
    """Turns variable frame deltas into fixed simulation ticks.

    Elapsed time accumulates until it reaches ``seconds_to_tick``. At that
    point the accumulator drops back to zero (the overflow is discarded) and
    a single tick is reported, however large the delta was. Ticks are
    numbered from 0.
    """

    seconds_to_tick: float = SECONDS_TO_TICK
    seconds_passed: float = field(default=0.0, init=False)
    ticks: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.seconds_to_tick <= 0:
            raise ValueError("seconds_to_tick must be positive")

    def advance(self, delta_time: float) -> int | None:
        self.seconds_passed += delta_time
        if self.seconds_passed < self.seconds_to_tick:
            return None

        self.seconds_passed = 0.0
        t = self.ticks
        self.ticks += 1
        return t

    def reset(self) -> None:
        self.seconds_passed = 0.0
        self.ticks = 0
