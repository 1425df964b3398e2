import pytest

from sigblocks.balance import Balance


def test_first_sample_is_silent():
    balance = Balance(48000)
    assert balance.process(0.7, 0.3) == 0.0


def test_output_follows_comparator_level():
    balance = Balance(48000)
    out = 0.0
    for _ in range(20000):
        out = balance.process(0.5, 2.0)
    assert out == pytest.approx(2.0, rel=1e-4)


def test_quieting_a_loud_signal():
    balance = Balance(48000)
    out = 0.0
    for _ in range(20000):
        out = balance.process(4.0, 0.25)
    assert out == pytest.approx(0.25, rel=1e-4)


def test_silent_signal_stays_silent():
    balance = Balance(48000)
    outputs = [balance.process(0.0, 1.0) for _ in range(100)]
    assert all(value == 0.0 for value in outputs)


def test_gain_lags_one_sample():
    balance = Balance(44100)
    for _ in range(20000):
        balance.process(1.0, 1.0)
    assert balance.process(0.0, 1.0) == 0.0
    assert balance.process(1.0, 1.0) > 1.0