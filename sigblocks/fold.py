"""Foldover distortion: sample-and-hold driven by a fractional increment."""


class Fold:
    """Holds the input for ``increment`` samples at a time.

    The first sample after construction returns 0.0. After that the
    output takes the input whenever the running index falls behind the
    sample count, and holds that value in between.
    """

    def __init__(self) -> None:
        self.increment = 1000.0
        self._sample_index = 0
        self._index = 0.0
        self._value = 0.0

    def process(self, value: float) -> float:
        """Return the next held sample."""
        if self._index < self._sample_index:
            self._index += self.increment
            self._value = value
        self._sample_index += 1
        return self._value