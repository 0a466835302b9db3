"""Single-producer, single-consumer FIFO of audio samples."""

from __future__ import annotations

import numpy as np

_INITIAL_SIZE = 1024


class SampleFifo:
    """Ring buffer that carries a single channel of samples out of the audio thread.

    One slot of the ring is always kept free, so a FIFO of total size ``n``
    holds at most ``n - 1`` samples. Samples pushed into a full FIFO are
    dropped.
    """

    def __init__(self) -> None:
        self._configure(_INITIAL_SIZE)

    def _configure(self, total_size: int) -> None:
        self._buffer = np.zeros(total_size, dtype=np.float32)
        self._read_index = 0
        self._write_index = 0

    @property
    def capacity(self) -> int:
        """Maximum number of samples the FIFO can hold at once."""
        return len(self._buffer) - 1

    @property
    def num_ready(self) -> int:
        return (self._write_index - self._read_index) % len(self._buffer)

    def prepare(self, sample_rate: float) -> None:
        """Size the FIFO to hold about one second of samples and clear it."""
        total_size = int(1.0 * sample_rate)
        if total_size <= 0:
            raise ValueError("sample rate must give a positive FIFO size")
        self._configure(total_size)

    def push(self, sample: float) -> bool:
        """Append one sample; return False if the FIFO was full and it was dropped."""
        if self.num_ready >= self.capacity:
            return False
        self._buffer[self._write_index] = sample
        self._write_index = (self._write_index + 1) % len(self._buffer)
        return True

    def pop_all(self) -> np.ndarray:
        """Remove and return every sample currently in the FIFO, oldest first."""
        count = self.num_ready
        indices = (self._read_index + np.arange(count)) % len(self._buffer)
        samples = self._buffer[indices].copy()
        self._read_index = (self._read_index + count) % len(self._buffer)
        return samples

    def reset(self) -> None:
        self._read_index = 0
        self._write_index = 0
        self._buffer.fill(0.0)