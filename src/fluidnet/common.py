import math
import numbers

EPSILON = 1e-5

# Fractions of capacity at which a connection reports a new threshold.
CAPACITY_THRESHOLDS: tuple[float, ...] = (0.0, 0.25, 0.5, 0.75, 1.0)

# Events each connection or grid keeps before the oldest are dropped.
EVENT_LOG_SIZE = 1000


class ResourceKind(str):
    """A typed string naming the resource a grid carries."""

    __slots__ = ()


POWER = ResourceKind("power")
WATER = ResourceKind("water")
FLUID = ResourceKind("fluid")


def are_equal(a: float, b: float, tol: float = EPSILON) -> bool:
    return math.isclose(a, b, rel_tol=0.0, abs_tol=tol)


def is_zero(value: float, tol: float = EPSILON) -> bool:
    return are_equal(value, 0.0, tol)


def clamp[T: (int, float)](value: T, lo: T, hi: T) -> T:
    return max(lo, min(value, hi))


def read_float(value: str | float | None) -> float:
    """Parse external numeric input, treating missing or garbage values as zero."""
    if value is None:
        return 0.0
    if isinstance(value, numbers.Real):
        return float(value) if math.isfinite(value) else 0.0
    value = str(value)
    if not value.strip():
        return 0.0
    try:
        result = float(value)
    except ValueError:
        return 0.0
    return result if math.isfinite(result) else 0.0
