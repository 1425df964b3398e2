"""Attack/decay/sustain/release envelope built from one-pole curves."""

import math
from enum import IntEnum


class AdsrSegment(IntEnum):
    """Stages an :class:`Adsr` can be in."""

    IDLE = 0
    ATTACK = 1
    DECAY = 2
    RELEASE = 4


class Adsr:
    """Gate-driven ADSR envelope with exponential segments."""

    def __init__(self, sample_rate: float, block_size: int = 1) -> None:
        self._sample_rate = int(sample_rate / block_size)
        self._attack_shape = -1.0
        self._attack_target = 0.0
        self._attack_time = -1.0
        self._decay_time = -1.0
        self._release_time = -1.0
        self._attack_d0 = 0.0
        self._decay_d0 = 0.0
        self._release_d0 = 0.0
        self._sustain_level = 0.7
        self._x = 0.0
        self._gate = False
        self._mode = AdsrSegment.IDLE

        self.set_time(AdsrSegment.ATTACK, 0.1)
        self.set_time(AdsrSegment.DECAY, 0.1)
        self.set_time(AdsrSegment.RELEASE, 0.1)

    def retrigger(self, hard: bool) -> None:
        """Force the envelope back to attack; ``hard`` also resets it to zero."""
        self._mode = AdsrSegment.ATTACK
        if hard:
            self._x = 0.0

    def set_time(self, segment: int, time: float) -> None:
        """Set the time of ``segment`` in seconds; other segments are ignored."""
        if segment == AdsrSegment.ATTACK:
            self.set_attack_time(time, 0.0)
        elif segment == AdsrSegment.DECAY:
            self.set_decay_time(time)
        elif segment == AdsrSegment.RELEASE:
            self.set_release_time(time)

    def set_attack_time(self, time: float, shape: float = 0.0) -> None:
        """Set attack time in seconds and the attack curve shape."""
        if time == self._attack_time and shape == self._attack_shape:
            return
        self._attack_time = time
        self._attack_shape = shape
        if time > 0.0:
            target = 9.0 * shape**10.0 + 0.3 * shape + 1.01
            self._attack_target = target
            log_target = math.log(1.0 - 1.0 / target)
            self._attack_d0 = 1.0 - math.exp(log_target / (time * self._sample_rate))
        else:
            self._attack_d0 = 1.0

    def set_decay_time(self, time: float) -> None:
        """Set decay time in seconds."""
        if time != self._decay_time:
            self._decay_time = time
            self._decay_d0 = self._time_constant(time)

    def set_release_time(self, time: float) -> None:
        """Set release time in seconds."""
        if time != self._release_time:
            self._release_time = time
            self._release_d0 = self._time_constant(time)

    def _time_constant(self, time: float) -> float:
        if time > 0.0:
            return 1.0 - math.exp(-1.0 / (time * self._sample_rate))
        return 1.0

    @property
    def sustain_level(self) -> float:
        """Sustain level; values at or below zero force the envelope idle."""
        return self._sustain_level

    @sustain_level.setter
    def sustain_level(self, level: float) -> None:
        if level <= 0.0:
            level = -0.01
        elif level > 1.0:
            level = 1.0
        self._sustain_level = level

    @property
    def segment(self) -> AdsrSegment:
        """The segment the envelope is currently in."""
        return self._mode

    @property
    def is_running(self) -> bool:
        """True while the envelope is in any segment but idle."""
        return self._mode != AdsrSegment.IDLE

    def process(self, gate: bool) -> float:
        """Advance one sample with the given gate state and return the level."""
        if gate and not self._gate:
            self._mode = AdsrSegment.ATTACK
        elif not gate and self._gate:
            self._mode = AdsrSegment.RELEASE
        self._gate = bool(gate)

        if self._mode == AdsrSegment.DECAY:
            d0 = self._decay_d0
        elif self._mode == AdsrSegment.RELEASE:
            d0 = self._release_d0
        else:
            d0 = self._attack_d0

        target = self._sustain_level if self._mode == AdsrSegment.DECAY else -0.01
        out = 0.0
        if self._mode == AdsrSegment.ATTACK:
            self._x += d0 * (self._attack_target - self._x)
            out = self._x
            if out > 1.0:
                self._x = out = 1.0
                self._mode = AdsrSegment.DECAY
        elif self._mode in (AdsrSegment.DECAY, AdsrSegment.RELEASE):
            self._x += d0 * (target - self._x)
            out = self._x
            if out < 0.0:
                self._x = out = 0.0
                self._mode = AdsrSegment.IDLE
        return out