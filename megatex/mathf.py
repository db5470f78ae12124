"""Scalar helpers and a small deterministic pseudo-random generator."""

MAX_RANDOM_VALUE = 0x7FFF
_RANDOM_MULTIPLIER = 22695477
_UINT32_MASK = 0xFFFFFFFF


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Random:
    """Linear congruential generator producing 15-bit values."""

    def __init__(self, seed=1):
        self.seed = seed & _UINT32_MASK

    def random_int(self) -> int:
        """Advance the generator and return a value in [0, 0x7fff]."""
        self.seed = (self.seed * _RANDOM_MULTIPLIER + 1) & _UINT32_MASK
        return (self.seed >> 16) & MAX_RANDOM_VALUE

    def random_in_range(self, minimum: int, max_plus_one: int) -> int:
        """Return an integer in [minimum, max_plus_one)."""
        scaled = self.random_int() * (max_plus_one - minimum)
        return _trunc_div(scaled, MAX_RANDOM_VALUE + 1) + minimum

    def random_in_rangef(self, minimum: float, max_plus_one: float) -> float:
        """Return a float in [minimum, max_plus_one)."""
        return self.random_int() * (max_plus_one - minimum) / (MAX_RANDOM_VALUE + 1) + minimum

    def random_float(self) -> float:
        """Return a float in [0, 1]."""
        return self.random_int() / MAX_RANDOM_VALUE


def lerp(start: float, end: float, t: float) -> float:
    return start * (1.0 - t) + end * t


def inv_lerp(start: float, end: float, value: float) -> float:
    return (value - start) / (end - start)


def move_towards(start: float, end: float, max_move: float) -> float:
    """Step from start towards end by at most max_move."""
    offset = end - start
    if abs(offset) <= max_move:
        return end
    return signf(offset) * max_move + start


def mod(value: float, divisor: float) -> float:
    """Modulo whose result takes the sign of the divisor."""
    return value - floorf(value / divisor) * divisor


def floorf(value: float) -> float:
    as_int = int(value)
    if value >= 0 or value == as_int:
        return float(as_int)
    return float(as_int - 1)


def ceilf(value: float) -> float:
    as_int = int(value)
    if value <= 0 or value == as_int:
        return float(as_int)
    return float(as_int + 1)


def bounce_back_lerp(t: float) -> float:
    return -t + t * t


def clampf(value: float, minimum: float, maximum: float) -> float:
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def signf(value: float) -> float:
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return 0.0


def sign(value: int) -> int:
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def minf(a: float, b: float) -> float:
    return a if a < b else b


def maxf(a: float, b: float) -> float:
    return a if a > b else b


def float_to_s8norm(value: float) -> int:
    """Map a float in [-1, 1] to a signed 8-bit normalised integer."""
    result = int(value * 127.0)
    if result > 127:
        return 127
    if result < -127:
        return -127
    return result


def safe_invert(value: float) -> float:
    """Return 1/value, or 0 when value is zero."""
    if value == 0.0:
        return 0.0
    return 1.0 / value