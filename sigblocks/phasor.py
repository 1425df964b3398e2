"""Normalised ramp oscillator moving from 0 to 1."""

import math

TWO_PI = 2.0 * math.pi


class Phasor:
    """Ramp from 0 to 1 at a given frequency; the phase is kept in radians."""

    def __init__(
        self, sample_rate: float, freq: float = 1.0, initial_phase: float = 0.0
    ) -> None:
        self.sample_rate = float(sample_rate)
        self._phase = float(initial_phase)
        self._freq = 0.0
        self._increment = 0.0
        self.freq = freq

    @property
    def freq(self) -> float:
        """Frequency in Hz."""
        return self._freq

    @freq.setter
    def freq(self, freq: float) -> None:
        self._freq = float(freq)
        self._increment = TWO_PI * self._freq / self.sample_rate

    def process(self) -> float:
        """Return the current ramp value and advance one sample."""
        out = self._phase / TWO_PI
        self._phase += self._increment
        if self._phase > TWO_PI:
            self._phase -= TWO_PI
        if self._phase < 0.0:
            self._phase = 0.0
        return out