import pytest

from fluidnet.time import SECONDS_TO_TICK, TickClock


class TestTickClockInit:
    def test_default_interval(self) -> None:
        assert TickClock().seconds_to_tick == SECONDS_TO_TICK == 1.0

    def test_starts_at_zero(self) -> None:
        clock = TickClock()
        assert clock.seconds_passed == 0.0
        assert clock.ticks == 0

    @pytest.mark.parametrize("interval", [0.0, -1.0])
    def test_interval_must_be_positive(self, interval: float) -> None:
        with pytest.raises(ValueError, match="seconds_to_tick must be positive"):
            TickClock(seconds_to_tick=interval)


class TestTickClockAdvance:
    def test_below_interval_does_not_tick(self) -> None:
        clock = TickClock()
        assert clock.advance(0.5) is None
        assert clock.seconds_passed == pytest.approx(0.5)

    def test_reaching_interval_ticks(self) -> None:
        clock = TickClock()
        assert clock.advance(1.0) == 0

    def test_accumulates_across_calls(self) -> None:
        clock = TickClock()
        results = [clock.advance(0.4) for _ in range(3)]
        assert results[0] is None
        assert results[1] is None
        assert results[2] == 0

    def test_overflow_is_discarded(self) -> None:
        clock = TickClock()
        for _ in range(3):
            clock.advance(0.4)
        assert clock.seconds_passed == 0.0

    def test_large_delta_ticks_once(self) -> None:
        clock = TickClock()
        assert clock.advance(10.0) == 0
        assert clock.ticks == 1
        assert clock.seconds_passed == 0.0

    def test_tick_indices_increase(self) -> None:
        clock = TickClock()
        assert clock.advance(1.0) == 0
        assert clock.advance(1.0) == 1
        assert clock.advance(1.0) == 2

    def test_custom_interval(self) -> None:
        clock = TickClock(seconds_to_tick=0.5)
        assert clock.advance(0.25) is None
        assert clock.advance(0.25) == 0

    def test_reset(self) -> None:
        clock = TickClock()
        clock.advance(1.0)
        clock.advance(0.3)
        clock.reset()
        assert clock.seconds_passed == 0.0
        assert clock.ticks == 0
