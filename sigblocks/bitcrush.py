"""Bit depth reduction followed by foldover downsampling."""

import math

from sigblocks.fold import Fold


class Bitcrush:
    """Reduces bit depth and sample rate of a signal.

    ``bit_depth`` is the number of bits kept (0 to 16); ``crush_rate``
    is the rate in Hz to downsample to.
    """

    def __init__(self, sample_rate: float) -> None:
        self.sample_rate = float(sample_rate)
        self.bit_depth = 8
        self.crush_rate = 10000.0
        self._fold = Fold()

    def process(self, value: float) -> float:
        """Bit-crush and downsample one sample."""
        bits = 2.0 ** self.bit_depth
        if self.crush_rate:
            fold_amount = self.sample_rate / self.crush_rate
        else:
            fold_amount = math.inf

        out = value * 65536.0 + 32768.0
        out *= bits / 65536.0
        out = math.floor(out)
        out *= (65536.0 / bits) - 32768.0

        self._fold.increment = fold_amount
        out = self._fold.process(out)
        return out / 65536.0