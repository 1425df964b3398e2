"""Sample-by-sample audio building blocks: envelopes, ramps, dynamics and effects."""

__version__ = "0.1.0"
__all__ = [
    "adenv",
    "adsr",
    "line",
    "phasor",
    "balance",
    "compressor",
    "crossfade",
    "fold",
    "bitcrush",
    "decimator",
    "autowah",
    "reverbsc",
]