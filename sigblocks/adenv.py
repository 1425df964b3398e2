"""Triggerable attack/decay envelope with per-segment timing."""

import math
from enum import IntEnum


class AdEnvSegment(IntEnum):
    """Stages an :class:`AdEnv` can be in."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2


def _fast_exp(x: float) -> float:
    """Cheap approximation of exp(x) by repeated squaring."""
    x = 1.0 + x / 1024.0
    for _ in range(10):
        x *= x
    return x


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising on zero."""
    if denominator:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


class AdEnv:
    """Attack/decay envelope with adjustable output range and curve.

    ``curve`` of 0 gives linear segments; other values bend them.
    Output is scaled into ``minimum`` .. ``maximum``.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self.curve = 0.0
        self.minimum = 0.0
        self.maximum = 1.0
        self._segment = AdEnvSegment.IDLE
        self._prev_segment = AdEnvSegment.IDLE
        self._times = [0.05] * len(AdEnvSegment)
        self._output = 0.0001
        self._curve_x = 0.0
        self._retrig_value = 0.0
        self._triggered = False

    def trigger(self) -> None:
        """Start or restart the envelope on the next sample."""
        self._triggered = True

    def set_time(self, segment: int, time: float) -> None:
        """Set the length in seconds of ``segment``."""
        self._times[AdEnvSegment(segment)] = float(time)

    @property
    def segment(self) -> AdEnvSegment:
        """The segment the envelope is currently in."""
        return self._segment

    @property
    def value(self) -> float:
        """Current output without advancing the envelope."""
        return self._output * (self.maximum - self.minimum) + self.minimum

    @property
    def is_running(self) -> bool:
        """True while the envelope is in any segment but idle."""
        return self._segment != AdEnvSegment.IDLE

    def process(self) -> float:
        """Advance one sample and return the envelope value."""
        if self._triggered:
            self._triggered = False
            self._segment = AdEnvSegment.ATTACK
            self._curve_x = 0.0
            self._retrig_value = self._output

        time_samples = int(self._times[self._segment] * self.sample_rate)

        if self._segment == AdEnvSegment.ATTACK:
            begin, end = self._retrig_value, 1.0
        elif self._segment == AdEnvSegment.DECAY:
            begin, end = 1.0, 0.0
        else:
            begin, end = 0.0, 0.0

        if self._prev_segment != self._segment:
            self._curve_x = 0.0

        if self.curve == 0.0:
            increment = _divide(end - begin, time_samples)
        else:
            increment = _divide(end - begin, 1.0 - _fast_exp(self.curve))

        value = self._output
        out = value
        if self.curve == 0.0:
            value += increment
        else:
            self._curve_x += _divide(self.curve, time_samples)
            value = begin + increment * (1.0 - _fast_exp(self._curve_x))
            if math.isnan(value):
                value = 0.0

        self._prev_segment = self._segment
        if self._segment != AdEnvSegment.IDLE:
            attack_done = out >= 1.0 and self._segment == AdEnvSegment.ATTACK
            decay_done = out <= 0.0 and self._segment == AdEnvSegment.DECAY
            if attack_done or decay_done:
                following = self._segment + 1
                if following > AdEnvSegment.DECAY:
                    self._segment = AdEnvSegment.IDLE
                else:
                    self._segment = AdEnvSegment(following)

        if self._segment == AdEnvSegment.IDLE:
            value = out = 0.0
        self._output = value

        return out * (self.maximum - self.minimum) + self.minimum