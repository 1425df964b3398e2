"""Downsampling and bit-crushing effect."""

_MAX_BITS_TO_CRUSH = 16


class Decimator:
    """Sample-and-hold downsampler followed by low-bit truncation.

    ``downsample_factor`` controls the hold length: the input is sampled
    once every ``int(factor ** 2 * 96) + 1`` calls.
    """

    def __init__(self) -> None:
        self.downsample_factor = 1.0
        self._bits_to_crush = 0
        self._downsampled = 0.0
        self._count = 0

    @property
    def bits_to_crush(self) -> int:
        """Number of low bits (of 16 fractional bits) that are cleared."""
        return self._bits_to_crush

    @bits_to_crush.setter
    def bits_to_crush(self, bits: int) -> None:
        bits = int(bits)
        if bits < 0:
            raise ValueError("bits to crush must not be negative")
        self._bits_to_crush = min(bits, _MAX_BITS_TO_CRUSH)

    def set_bitcrush_factor(self, factor: float) -> None:
        """Set the bits to crush from a 0..1 factor scaled to 16 bits."""
        self._bits_to_crush = max(0, int(factor * _MAX_BITS_TO_CRUSH))

    def process(self, value: float) -> float:
        """Downsample and bit-crush one sample."""
        threshold = int(self.downsample_factor * self.downsample_factor * 96.0)
        self._count += 1
        if self._count > threshold:
            self._count = 0
            self._downsampled = value

        bits = self._bits_to_crush
        fixed = int(self._downsampled * 65536.0)
        fixed = (fixed >> bits) << bits
        return fixed / 65536.0