"""Level matching of one signal to another."""

import math

_CUTOFF_HZ = 10.0


class Balance:
    """Scales a signal so that its level follows a comparator signal.

    Both inputs are tracked by a one-pole power follower whose half-power
    point is 10 Hz. The gain applied to each sample is the one that was
    computed on the previous sample.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        b = 2.0 - math.cos(_CUTOFF_HZ * (2.0 * math.pi / self.sample_rate))
        self._c2 = b - math.sqrt(b * b - 1.0)
        self._c1 = 1.0 - self._c2
        self._sig_power = 0.0
        self._comp_power = 0.0
        self._prev_gain = 0.0

    def process(self, sig: float, comp: float) -> float:
        """Return ``sig`` scaled towards the level of ``comp``."""
        self._sig_power = self._c1 * sig * sig + self._c2 * self._sig_power
        self._comp_power = self._c1 * comp * comp + self._c2 * self._comp_power

        if self._sig_power != 0.0:
            gain = math.sqrt(self._comp_power / self._sig_power)
        else:
            gain = math.sqrt(self._comp_power)

        out = sig * self._prev_gain
        self._prev_gain = gain
        return out