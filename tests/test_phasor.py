import math

import pytest

from sigblocks.phasor import Phasor


def test_defaults_start_at_zero():
    phasor = Phasor(48000)
    assert phasor.freq == 1.0
    assert phasor.process() == 0.0


def test_quarter_rate_steps():
    phasor = Phasor(1000, 250)
    values = [phasor.process() for _ in range(4)]
    assert values == pytest.approx([0.0, 0.25, 0.5, 0.75])


def test_initial_phase_in_radians():
    phasor = Phasor(1000, 10, math.pi)
    assert phasor.process() == pytest.approx(0.5)


def test_outputs_stay_in_unit_range():
    phasor = Phasor(1000, 37)
    values = [phasor.process() for _ in range(5000)]
    assert min(values) >= 0.0
    assert max(values) <= 1.0


def test_wraps_once_per_period():
    phasor = Phasor(1000, 100)
    values = [phasor.process() for _ in range(1000)]
    wraps = sum(1 for a, b in zip(values, values[1:]) if b < a)
    assert wraps in (99, 100)


def test_changing_frequency_changes_step():
    phasor = Phasor(1000, 10)
    phasor.freq = 100
    assert phasor.freq == 100
    phasor.process()
    assert phasor.process() == pytest.approx(0.1)


def test_negative_frequency_clamps_phase_to_zero():
    phasor = Phasor(1000, -50)
    values = [phasor.process() for _ in range(10)]
    assert values == [0.0] * 10