"""Linear ramp from one value to another over a fixed time."""

import math


class Line:
    """Generates a straight line segment, one sample at a time."""

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._start = 1.0
        self._end = 0.0
        self._duration = 0.5
        self._value = 1.0
        self._increment = 0.0
        self._finished = False

    def start(self, start: float, end: float, duration: float) -> None:
        """Begin a ramp from ``start`` to ``end`` lasting ``duration`` seconds."""
        self._start = start
        self._end = end
        self._duration = duration
        span = end - start
        steps = self.sample_rate * duration
        if steps:
            self._increment = span / steps
        elif span == 0.0 or math.isnan(span):
            self._increment = math.nan
        else:
            self._increment = math.copysign(math.inf, span)
        self._value = start
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once the ramp has reached its end value."""
        return self._finished

    def process(self) -> float:
        """Return the next sample of the ramp."""
        out = self._value
        rising_done = self._end > self._start and out >= self._end
        falling_done = self._end < self._start and out <= self._end
        if rising_done or falling_done:
            self._finished = True
            self._value = self._end
            out = self._end
        else:
            self._value += self._increment
        return out