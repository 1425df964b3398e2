import math

import pytest

from sigblocks.adenv import AdEnv, AdEnvSegment


def _run_until_idle(env, limit=10000):
    outputs = [env.process()]
    while env.is_running and len(outputs) < limit:
        outputs.append(env.process())
    return outputs


def _make_env(attack=0.01, decay=0.05, sample_rate=1000):
    env = AdEnv(sample_rate)
    env.set_time(AdEnvSegment.ATTACK, attack)
    env.set_time(AdEnvSegment.DECAY, decay)
    return env


def test_untriggered_envelope_outputs_minimum():
    env = AdEnv(1000)
    assert env.process() == 0.0
    assert env.is_running is False
    assert env.segment == AdEnvSegment.IDLE


def test_initial_value_is_source_default():
    env = AdEnv(48000)
    assert env.value == pytest.approx(0.0001)


def test_trigger_starts_attack():
    env = _make_env()
    env.trigger()
    env.process()
    assert env.is_running
    assert env.segment == AdEnvSegment.ATTACK


def test_full_cycle_rises_then_falls_to_idle():
    env = _make_env()
    env.trigger()
    outputs = _run_until_idle(env)
    assert not env.is_running
    assert outputs[-1] == 0.0
    peak = outputs.index(max(outputs))
    assert max(outputs) >= 1.0
    assert outputs[: peak + 1] == sorted(outputs[: peak + 1])
    tail = outputs[peak:]
    assert tail == sorted(tail, reverse=True)


def test_outputs_are_scaled_into_range():
    env = _make_env()
    env.minimum = -1.0
    env.maximum = 1.0
    assert env.process() == -1.0
    env.trigger()
    outputs = _run_until_idle(env)
    assert min(outputs) >= -1.0
    assert max(outputs) >= 1.0
    assert outputs[-1] == -1.0


def test_longer_attack_takes_longer():
    short = _make_env(attack=0.01)
    long = _make_env(attack=0.1)
    short.trigger()
    long.trigger()
    assert len(_run_until_idle(long)) > len(_run_until_idle(short))


def test_curved_envelope_completes_with_finite_values():
    for curve in (-5.0, 5.0):
        env = _make_env()
        env.curve = curve
        env.trigger()
        outputs = _run_until_idle(env, limit=5000)
        assert not env.is_running
        assert all(math.isfinite(x) for x in outputs)
        assert max(outputs) >= 1.0


def test_set_time_rejects_unknown_segment():
    env = AdEnv(1000)
    with pytest.raises(ValueError):
        env.set_time(7, 0.1)