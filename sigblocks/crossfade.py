"""Crossfading between two signals with selectable curves."""

import math
from enum import IntEnum

_LOG_MIN = math.log(0.000001)
_LOG_MAX = math.log(1.0)


class CrossFadeCurve(IntEnum):
    """Shape of the crossfade law."""

    LIN = 0
    CPOW = 1
    LOG = 2
    EXP = 3


class CrossFade:
    """Mixes two signals according to a position between 0 and 1."""

    def __init__(self, curve: int = CrossFadeCurve.LIN) -> None:
        self.pos = 0.5
        try:
            self._curve = CrossFadeCurve(curve)
        except ValueError:
            self._curve = CrossFadeCurve.LIN

    @property
    def curve(self) -> CrossFadeCurve:
        """The crossfade curve in use."""
        return self._curve

    @curve.setter
    def curve(self, curve: int) -> None:
        self._curve = CrossFadeCurve(curve)

    def process(self, in1: float, in2: float) -> float:
        """Return the mix of ``in1`` and ``in2`` at the current position."""
        pos = self.pos
        if self._curve == CrossFadeCurve.CPOW:
            scalar_1 = math.sin(pos * math.pi / 2.0)
            scalar_2 = math.sin((1.0 - pos) * math.pi / 2.0)
            return in1 * scalar_2 + in2 * scalar_1
        if self._curve == CrossFadeCurve.LOG:
            scalar = math.exp(pos * (_LOG_MAX - _LOG_MIN) + _LOG_MIN)
        elif self._curve == CrossFadeCurve.EXP:
            scalar = pos * pos
        else:
            scalar = pos
        return in1 * (1.0 - scalar) + in2 * scalar