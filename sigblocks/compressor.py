"""Feed-forward dynamics compressor with side-chain support."""

import math
from collections.abc import Iterable, Sequence


def _decay(period: float, time: float) -> float:
    """Return exp(-period / time), treating a zero time as instant."""
    if time == 0.0:
        return 0.0
    return math.exp(-(period / time))


def _to_db(value: float) -> float:
    if value <= 0.0:
        return -math.inf
    return 20.0 * math.log10(value)


class Compressor:
    """Dynamics compressor.

    The gain is computed from a key signal (the input itself unless a
    side-chain is given) and can be applied to any number of channels.
    """

    def __init__(self, sample_rate: float) -> None:
        self._sample_rate = int(min(192000, max(1, sample_rate)))
        self._inv = 1.0 / self._sample_rate
        self._inv2 = 2.0 / self._sample_rate

        self._atk_slo = 0.0
        self._atk_slo2 = 0.0
        self._rel_slo = 0.0
        self._ratio_mul = 0.0
        self._makeup_auto = False
        self._makeup_gain = 0.0
        self._thresh = 0.0
        self._atk = 0.0
        self._rel = 0.0
        self._ratio = 1.0
        self._gain = 1.0

        # The order matters: ratio depends on attack, makeup on ratio.
        self.ratio = 2.0
        self.attack = 0.1
        self.release = 0.1
        self.threshold = -12.0
        self.auto_makeup(True)

        self._gain_rec = 0.1
        self._slope_rec = 0.1

    @property
    def sample_rate(self) -> int:
        """Sample rate in Hz, clamped to 1 .. 192000."""
        return self._sample_rate

    @property
    def ratio(self) -> float:
        """Amount of gain reduction applied above the threshold."""
        return self._ratio

    @ratio.setter
    def ratio(self, ratio: float) -> None:
        self._ratio = float(ratio)
        self._recalculate_ratio()

    @property
    def threshold(self) -> float:
        """Threshold in dB above which compression is applied."""
        return self._thresh

    @threshold.setter
    def threshold(self, threshold: float) -> None:
        self._thresh = float(threshold)
        self._recalculate_makeup()

    @property
    def attack(self) -> float:
        """Attack time in seconds."""
        return self._atk

    @attack.setter
    def attack(self, attack: float) -> None:
        self._atk = float(attack)
        self._atk_slo = _decay(self._inv, self._atk)
        self._atk_slo2 = _decay(self._inv2, self._atk)
        self._recalculate_ratio()

    @property
    def release(self) -> float:
        """Release time in seconds."""
        return self._rel

    @release.setter
    def release(self, release: float) -> None:
        self._rel = float(release)
        self._rel_slo = _decay(self._inv, self._rel)

    @property
    def makeup(self) -> float:
        """Makeup gain in dB."""
        return self._makeup_gain

    @makeup.setter
    def makeup(self, gain: float) -> None:
        self._makeup_gain = float(gain)

    def auto_makeup(self, enable: bool) -> None:
        """Turn automatic makeup gain on or off; off resets makeup to 0 dB."""
        self._makeup_auto = bool(enable)
        self._makeup_gain = 0.0
        self._recalculate_makeup()

    @property
    def gain(self) -> float:
        """The most recently computed gain in dB."""
        return _to_db(self._gain)

    def _recalculate_ratio(self) -> None:
        self._ratio_mul = (1.0 - self._atk_slo2) * ((1.0 / self._ratio) - 1.0)

    def _recalculate_makeup(self) -> None:
        if self._makeup_auto:
            self._makeup_gain = abs(self._thresh - self._thresh / self._ratio) * 0.5

    def _update(self, key: float) -> None:
        level = abs(key)
        slope = self._rel_slo if self._slope_rec > level else self._atk_slo
        self._slope_rec = self._slope_rec * slope + (1.0 - slope) * level
        over = max(_to_db(self._slope_rec) - self._thresh, 0.0)
        self._gain_rec = self._atk_slo2 * self._gain_rec + self._ratio_mul * over
        self._gain = 10.0 ** (0.05 * (self._gain_rec + self._makeup_gain))

    def apply(self, value: float) -> float:
        """Apply the last computed gain to ``value``."""
        return self._gain * value

    def process(self, value: float, key: float | None = None) -> float:
        """Compress one sample, keyed by ``key`` if given, else by itself."""
        self._update(value if key is None else key)
        return self.apply(value)

    def process_block(
        self, samples: Iterable[float], key: Iterable[float] | None = None
    ) -> list[float]:
        """Compress a block of samples, optionally keyed by a side-chain."""
        samples = list(samples)
        keys = samples if key is None else list(key)
        if len(keys) != len(samples):
            raise ValueError("key block must be as long as the sample block")
        return [self.process(value, k) for value, k in zip(samples, keys)]

    def process_channels(
        self, channels: Sequence[Sequence[float]], key: Sequence[float]
    ) -> list[list[float]]:
        """Compress several channels with one gain computed from ``key``."""
        if any(len(channel) != len(key) for channel in channels):
            raise ValueError("every channel must be as long as the key block")
        out: list[list[float]] = [[] for _ in channels]
        for index, k in enumerate(key):
            self._update(k)
            for channel, target in zip(channels, out):
                target.append(self.apply(channel[index]))
        return out