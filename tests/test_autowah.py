import math

from sigblocks.autowah import Autowah


def _sine(count, step=0.05, amp=0.8):
    return [amp * math.sin(i * step) for i in range(count)]


def test_zero_wah_full_wet_is_dry_passthrough():
    wah = Autowah(48000)
    signal = _sine(200)
    assert [wah.process(x) for x in signal] == signal


def test_silence_stays_silent():
    wah = Autowah(48000)
    wah.wah = 1.0
    wah.level = 1.0
    assert all(wah.process(0.0) == 0.0 for _ in range(100))


def test_full_wah_changes_signal_and_stays_finite():
    wah = Autowah(48000)
    wah.wah = 1.0
    wah.level = 1.0
    signal = _sine(2000)
    outputs = [wah.process(x) for x in signal]
    assert len(outputs) == len(signal)
    assert all(math.isfinite(value) for value in outputs)
    largest_change = max(abs(out - dry) for out, dry in zip(outputs, signal))
    assert largest_change > 1e-3


def test_same_settings_are_deterministic():
    a = Autowah(44100)
    b = Autowah(44100)
    for effect in (a, b):
        effect.wah = 0.7
        effect.dry_wet = 60.0
        effect.level = 0.5
    signal = _sine(500, step=0.3)
    assert [a.process(x) for x in signal] == [b.process(x) for x in signal]


def test_output_is_linear_in_dry_path():
    wah = Autowah(48000)
    wah.dry_wet = 0.0
    assert wah.process(0.25) == 0.5