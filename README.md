# sigblocks

Small audio processing blocks with no dependencies. Each block works on one
sample at a time. A block keeps its own state, and you drive it by calling
`process` once per sample.

## Contents

### Control signals

- **`sigblocks.adenv.AdEnv(sample_rate)`** is an attack/decay envelope.
  - Call `trigger()` to start or restart it. Call `process()` to get the next value.
  - Set the length of each segment in seconds with `set_time(segment, time)`. Segments are the `AdEnvSegment` values `IDLE`, `ATTACK` and `DECAY`, and each one defaults to 0.05 s.
  - `curve` set to 0 gives straight-line segments. Any other value bends them.
  - Output is scaled into the range from `minimum` to `maximum`.
  - `value` reads the output without advancing the envelope. `segment` and `is_running` report its state.
- **`sigblocks.adsr.Adsr(sample_rate, block_size=1)`** is an attack/decay/sustain/release envelope driven by a gate.
  - `process(gate)` starts the attack when the gate rises and the release when it falls.
  - Set segment times in seconds with `set_attack_time(time, shape=0.0)`, `set_decay_time`, `set_release_time`, or `set_time(segment, time)`. Segments are the `AdsrSegment` values. Each time defaults to 0.1 s.
  - `sustain_level` defaults to 0.7 and is clamped to at most 1. A value of 0 or below makes the envelope fall to idle instead of sustaining.
  - `retrigger(hard)` forces the attack. With `hard` set, the envelope also restarts from zero.
- **`sigblocks.line.Line(sample_rate)`** is a linear ramp.
  - `start(start, end, duration)` begins the ramp, with `duration` in seconds.
  - `process()` returns successive values and holds at `end` once it gets there. At that point `finished` becomes true.
- **`sigblocks.phasor.Phasor(sample_rate, freq=1.0, initial_phase=0.0)`** is a ramp from 0 to 1.
  - `initial_phase` is in radians.
  - `freq` can be read and set.

### Dynamics

- **`sigblocks.balance.Balance(sample_rate)`** scales a signal to follow the level of a comparison signal.
  - `process(sig, comp)` returns `sig` scaled toward the level of `comp`.
  - Both levels are tracked with a 10 Hz power follower.
  - The gain applied to each sample is the one computed on the previous sample, so the first output is 0.
- **`sigblocks.compressor.Compressor(sample_rate)`** is a feed-forward compressor.
  - Its settings are the properties `ratio` (default 2), `threshold` (dB, default -12), `attack` and `release` (seconds, default 0.1), and `makeup` (dB).
  - `auto_makeup(enable)` turns automatic makeup gain on or off. It is on by default. Turning it off resets makeup to 0 dB.
  - `process(value, key=None)` compresses one sample. If `key` is given, it is used as the sidechain.
  - `apply(value)` reuses the last computed gain.
  - `process_block(samples, key=None)` and `process_channels(channels, key)` handle whole blocks. They raise `ValueError` when the lengths do not match.
  - `gain` is the last gain, in dB.
- **`sigblocks.crossfade.CrossFade(curve=CrossFadeCurve.LIN)`** blends two signals.
  - `process(in1, in2)` mixes the two inputs at position `pos`, which runs from 0 to 1 and defaults to 0.5.
  - The curves are `CrossFadeCurve.LIN`, `CPOW` (constant power), `LOG` and `EXP`.
  - An unknown curve given to the constructor falls back to `LIN`. Setting an unknown curve through `curve` raises `ValueError`.

### Effects

- **`sigblocks.fold.Fold()`** is a foldover sample-and-hold.
  - The input is taken once every `increment` samples and held in between. `increment` defaults to 1000.
- **`sigblocks.bitcrush.Bitcrush(sample_rate)`** reduces bit depth and sample rate.
  - `bit_depth` defaults to 8.
  - `crush_rate` is in Hz and defaults to 10000.
- **`sigblocks.decimator.Decimator()`** is a downsampling sample-and-hold followed by truncation of the low bits.
  - `downsample_factor` defaults to 1.0.
  - `bits_to_crush` runs from 0 to 16. Negative values raise `ValueError`.
  - `set_bitcrush_factor(factor)` maps a factor from 0 to 1 onto 0 to 16 bits.
- **`sigblocks.autowah.Autowah(sample_rate)`** is a wah filter that follows the envelope of its input.
  - `wah` sets the amount (0 to 1), `dry_wet` sets the mix (0 to 100), and `level` sets the wah level (0 to 1).
- **`sigblocks.reverbsc.ReverbSc(sample_rate)`** is an eight-line stereo reverb.
  - `process(in1, in2)` returns a `(left, right)` tuple.
  - `feedback` defaults to 0.97. A value of 1.0 gives an endless tail.
  - `lp_freq` is the cutoff in Hz of the damping filter and defaults to 10000.
  - A sample rate that is not positive raises `ValueError`. So does one so high that the delay lines would exceed their fixed maximum size.

## Installation

```
pip install .
```

## Usage

```python
from sigblocks.adsr import Adsr
from sigblocks.reverbsc import ReverbSc

sample_rate = 48000.0
env = Adsr(sample_rate)
reverb = ReverbSc(sample_rate)

out = []
for n in range(4800):
    gate = n < 2400
    level = env.process(gate)
    left, right = reverb.process(level, level)
    out.append((left, right))
```

Use one block instance per voice or per channel. Call each block at the
sample rate it was created with.

## What it does not do

The package only computes samples. It does not:

- play or record audio,
- read or write sound files,
- provide a command-line program.

You need to supply the input samples and handle the output yourself.

## Running the tests

```
pip install .[test]
pytest
```