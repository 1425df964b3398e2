"""Envelope-following wah filter."""

import math


class Autowah:
    """Wah filter whose sweep follows the input level.

    ``wah`` is the effect amount (0..1), ``dry_wet`` the mix (0..100)
    and ``level`` the wah level (0..1).
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self._const1 = 1413.72 / self.sample_rate
        self._const2 = math.exp(-(100.0 / self.sample_rate))
        self._const4 = math.exp(-(10.0 / self.sample_rate))

        self.dry_wet = 100.0
        self.level = 0.1
        self.wah = 0.0

        self._peak = 0.0
        self._envelope = 0.0
        self._coeff1 = 0.0
        self._coeff2 = 0.0
        self._gain = 0.0
        self._y1 = 0.0
        self._y2 = 0.0

    def process(self, value: float) -> float:
        """Filter one sample."""
        wet_gain = 0.01 * (self.dry_wet * self.level)
        dry_gain = (1.0 - 0.01 * self.dry_wet) + (1.0 - self.wah)

        level = abs(value)
        self._peak = max(level, self._const4 * self._peak + (1.0 - self._const4) * level)
        self._envelope = self._const2 * self._envelope + (1.0 - self._const2) * self._peak
        env = min(1.0, self._envelope)
        sweep = 2.0 ** (2.3 * env)
        radius = 1.0 - self._const1 * sweep / 2.0 ** (1.0 + 2.0 * (1.0 - env))

        self._coeff1 = 0.999 * self._coeff1 + 0.001 * (
            -(2.0 * radius * math.cos(self._const1 * 2.0 * sweep))
        )
        self._coeff2 = 0.999 * self._coeff2 + 0.001 * radius * radius
        self._gain = 0.999 * self._gain + 0.0001 * 4.0 ** env

        y0 = -((self._coeff1 * self._y1 + self._coeff2 * self._y2) - wet_gain * (self._gain * value))

        out = self.wah * (y0 - self._y1) + dry_gain * value
        self._y2 = self._y1
        self._y1 = y0
        return out