import math

import pytest

from sigblocks.crossfade import CrossFade, CrossFadeCurve


def test_default_is_linear_centre():
    fade = CrossFade()
    assert fade.curve is CrossFadeCurve.LIN
    assert fade.pos == 0.5
    assert fade.process(2.0, 4.0) == pytest.approx(3.0)


@pytest.mark.parametrize("curve", list(CrossFadeCurve))
def test_end_positions_select_inputs(curve):
    fade = CrossFade(curve)
    fade.pos = 1.0
    assert fade.process(3.0, 7.0) == pytest.approx(7.0)
    if curve is not CrossFadeCurve.LOG:
        fade.pos = 0.0
        assert fade.process(3.0, 7.0) == pytest.approx(3.0)


def test_log_curve_floor():
    fade = CrossFade(CrossFadeCurve.LOG)
    fade.pos = 0.0
    assert fade.process(0.0, 1.0) == pytest.approx(0.000001)


@pytest.mark.parametrize(
    "curve", [CrossFadeCurve.LIN, CrossFadeCurve.LOG, CrossFadeCurve.EXP]
)
@pytest.mark.parametrize("pos", [0.0, 0.2, 0.5, 0.9, 1.0])
def test_amplitude_weights_sum_to_one(curve, pos):
    fade = CrossFade(curve)
    fade.pos = pos
    assert fade.process(1.0, 0.0) + fade.process(0.0, 1.0) == pytest.approx(1.0)


@pytest.mark.parametrize("pos", [0.0, 0.3, 0.5, 0.8, 1.0])
def test_constant_power(pos):
    fade = CrossFade(CrossFadeCurve.CPOW)
    fade.pos = pos
    power = fade.process(1.0, 0.0) ** 2 + fade.process(0.0, 1.0) ** 2
    assert power == pytest.approx(1.0)


def test_constant_power_centre_is_equal():
    fade = CrossFade(CrossFadeCurve.CPOW)
    assert fade.process(1.0, 0.0) == pytest.approx(fade.process(0.0, 1.0))
    assert fade.process(1.0, 0.0) == pytest.approx(math.sqrt(0.5))


def test_exp_lags_linear():
    lin = CrossFade(CrossFadeCurve.LIN)
    exp = CrossFade(CrossFadeCurve.EXP)
    lin.pos = exp.pos = 0.4
    assert exp.process(0.0, 1.0) < lin.process(0.0, 1.0)


def test_invalid_curve_falls_back_to_linear():
    fade = CrossFade(9)
    assert fade.curve is CrossFadeCurve.LIN


def test_curve_setter_rejects_unknown():
    fade = CrossFade(CrossFadeCurve.EXP)
    with pytest.raises(ValueError):
        fade.curve = 7
    assert fade.curve is CrossFadeCurve.EXP
    assert fade.process(0.0, 1.0) == pytest.approx(0.25)


def test_curve_setter():
    fade = CrossFade()
    fade.curve = 3
    assert fade.curve is CrossFadeCurve.EXP