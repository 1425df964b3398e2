"""Stereo feedback delay network reverb with modulated delay lines."""

import math
from dataclasses import dataclass, field

_DEFAULT_SAMPLE_RATE = 48000.0
_DELAYPOS_SHIFT = 28
_DELAYPOS_SCALE = 0x10000000
_DELAYPOS_MASK = 0x0FFFFFFF
_MAX_SIZE = 98936
_FLOAT_BYTES = 4
_OUTPUT_GAIN = 0.35
_JP_SCALE = 0.25

# Per line: delay time (s), random variation of the delay time (s),
# frequency of the random variation (Hz), initial random seed.
_PARAMS = (
    (2473.0 / _DEFAULT_SAMPLE_RATE, 0.0010, 3.100, 1966.0),
    (2767.0 / _DEFAULT_SAMPLE_RATE, 0.0011, 3.500, 29491.0),
    (3217.0 / _DEFAULT_SAMPLE_RATE, 0.0017, 1.110, 22937.0),
    (3557.0 / _DEFAULT_SAMPLE_RATE, 0.0006, 3.973, 9830.0),
    (3907.0 / _DEFAULT_SAMPLE_RATE, 0.0010, 2.341, 20643.0),
    (4127.0 / _DEFAULT_SAMPLE_RATE, 0.0011, 1.897, 22937.0),
    (2143.0 / _DEFAULT_SAMPLE_RATE, 0.0017, 0.891, 29491.0),
    (1933.0 / _DEFAULT_SAMPLE_RATE, 0.0006, 3.221, 14417.0),
)


def _max_samples(sample_rate: float, pitch_mod: float, index: int) -> int:
    delay, variation, _, _ = _PARAMS[index]
    max_delay = delay + variation * pitch_mod * 1.125
    return int(max_delay * sample_rate + 16.5)


@dataclass
class _DelayLine:
    index: int
    buffer: list[float]
    write_pos: int = 0
    read_pos: int = 0
    read_pos_frac: int = 0
    read_pos_frac_inc: int = 0
    seed: int = 0
    segment_left: int = 0
    filter_state: float = field(default=0.0)

    @property
    def size(self) -> int:
        return len(self.buffer)


class ReverbSc:
    """Eight-line stereo reverb.

    ``feedback`` sets the reverb time (1.0 gives an endless tail) and
    ``lp_freq`` the cutoff in Hz of the damping filter inside the loop.
    """

    def __init__(self, sample_rate: float) -> None:
        if not sample_rate > 0:
            raise ValueError("sample rate must be positive")
        self.sample_rate = float(sample_rate)
        self.feedback = 0.97
        self.lp_freq = 10000.0
        self._pitch_mod = 1.0
        self._damp = 1.0
        self._prev_lp_freq = 0.0

        self._lines: list[_DelayLine] = []
        used_bytes = 0
        for index in range(len(_PARAMS)):
            if used_bytes > _MAX_SIZE:
                raise ValueError(
                    "delay lines exceed the maximum size at this sample rate"
                )
            self._lines.append(self._make_line(index))
            used_bytes += _max_samples(self.sample_rate, 1.0, index) * _FLOAT_BYTES

    def _make_line(self, index: int) -> _DelayLine:
        delay, variation, _, seed = _PARAMS[index]
        size = _max_samples(self.sample_rate, 1.0, index)
        line = _DelayLine(index=index, buffer=[0.0] * size)
        line.seed = int(seed + 0.5)
        read_pos = line.seed * variation / 32768.0
        read_pos = delay + read_pos * self._pitch_mod
        read_pos = size - read_pos * self.sample_rate
        line.read_pos = int(read_pos)
        line.read_pos_frac = int((read_pos - line.read_pos) * _DELAYPOS_SCALE + 0.5)
        self._next_segment(line)
        return line

    def _next_segment(self, line: _DelayLine) -> None:
        delay, variation, rate, _ = _PARAMS[line.index]

        seed = line.seed
        if seed < 0:
            seed += 0x10000
        seed = (seed * 15625 + 1) & 0xFFFF
        if seed >= 0x8000:
            seed -= 0x10000
        line.seed = seed

        line.segment_left = int(self.sample_rate / rate + 0.5)
        prev_delay = line.write_pos - (
            line.read_pos + line.read_pos_frac / _DELAYPOS_SCALE
        )
        while prev_delay < 0.0:
            prev_delay += line.size
        prev_delay /= self.sample_rate
        next_delay = delay + (seed * variation / 32768.0) * self._pitch_mod
        increment = (prev_delay - next_delay) / line.segment_left
        increment = increment * self.sample_rate + 1.0
        line.read_pos_frac_inc = int(increment * _DELAYPOS_SCALE + 0.5)

    def _read(self, line: _DelayLine) -> float:
        size = line.size
        if line.read_pos_frac >= _DELAYPOS_SCALE:
            line.read_pos += line.read_pos_frac >> _DELAYPOS_SHIFT
            line.read_pos_frac &= _DELAYPOS_MASK
        if line.read_pos >= size:
            line.read_pos -= size
        pos = line.read_pos
        frac = line.read_pos_frac / _DELAYPOS_SCALE

        a2 = (frac * frac - 1.0) / 6.0
        a1 = (frac + 1.0) * 0.5
        am1 = a1 - 1.0
        a0 = 3.0 * a2
        a1 -= a0
        am1 -= a2
        a0 -= frac

        buf = line.buffer
        if 0 < pos < size - 2:
            vm1, v0, v1, v2 = buf[pos - 1 : pos + 3]
        else:
            vm1, v0, v1, v2 = (buf[(pos + offset) % size] for offset in (-1, 0, 1, 2))

        line.read_pos_frac += line.read_pos_frac_inc
        return (am1 * vm1 + a0 * v0 + a1 * v1 + a2 * v2) * frac + v0

    def process(self, in1: float, in2: float) -> tuple[float, float]:
        """Feed one stereo sample in and return the reverberated pair."""
        if self.lp_freq != self._prev_lp_freq:
            self._prev_lp_freq = self.lp_freq
            b = 2.0 - math.cos(self._prev_lp_freq * 2.0 * math.pi / self.sample_rate)
            self._damp = b - math.sqrt(b * b - 1.0)
        damp = self._damp

        junction = sum(line.filter_state for line in self._lines) * _JP_SCALE
        in_left = junction + in1
        in_right = junction + in2

        out_left = 0.0
        out_right = 0.0
        for line in self._lines:
            odd = line.index & 1
            line.buffer[line.write_pos] = (in_right if odd else in_left) - line.filter_state
            line.write_pos += 1
            if line.write_pos >= line.size:
                line.write_pos -= line.size

            value = self._read(line) * self.feedback
            value = (line.filter_state - value) * damp + value
            line.filter_state = value

            if odd:
                out_right += value
            else:
                out_left += value

            line.segment_left -= 1
            if line.segment_left <= 0:
                self._next_segment(line)

        return out_left * _OUTPUT_GAIN, out_right * _OUTPUT_GAIN