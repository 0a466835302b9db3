"""A fixed-size queue that keeps only every n-th pushed element."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class StridedQueue:
    """Fixed-size queue that stores every ``stride``-th element pushed into it.

    The queue always holds ``size`` elements, initially zeros. Pushing new
    samples shifts older elements towards the front and places the newly
    decimated samples at the back. The decimation phase is preserved across
    consecutive pushes.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("queue size must be at least 1")
        self._elements: list[float] = [0.0] * size
        self._element_index = 0
        self._stride = 1

    @property
    def stride(self) -> int:
        return self._stride

    def set_stride(self, stride: int) -> None:
        """Set the decimation stride; values below 1 are raised to 1."""
        self._stride = max(1, int(stride))

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        return self._elements[index]

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._elements))

    def front(self) -> float:
        return self._elements[0]

    def at(self, index: int) -> float:
        """Return the element at ``index``, raising IndexError when out of range."""
        if not 0 <= index < len(self._elements):
            raise IndexError(f"index {index} out of range for queue of size {len(self)}")
        return self._elements[index]

    def push_back(self, samples: Sequence[float]) -> None:
        """Append every ``stride``-th sample of ``samples``, continuing the previous phase."""
        sample_count = len(samples)
        size = len(self._elements)
        available = self._new_elements_count(sample_count)

        if available < size:
            self._rotate_left(available)

        buffer_end_index = self._element_index + (available - 1) * self._stride
        for i in range(min(available, size)):
            self._elements[size - 1 - i] = samples[buffer_end_index - i * self._stride]

        self._element_index = (
            self._element_index
            + (sample_count // self._stride + 1) * self._stride
            - sample_count
        ) % self._stride

    def push_back_zeros(self, count: int) -> None:
        """Append the decimated equivalent of ``count`` zero samples."""
        self._element_index = 0

        size = len(self._elements)
        available = self._new_elements_count(count)
        if available < size:
            self._rotate_left(available)

        begin = max(0, size - available)
        for i in range(begin, size):
            self._elements[i] = 0.0

    def _rotate_left(self, count: int) -> None:
        self._elements[:] = self._elements[count:] + self._elements[:count]

    def _new_elements_count(self, sample_count: int) -> int:
        lower_bound = sample_count // self._stride
        if lower_bound * self._stride + self._element_index < sample_count:
            return lower_bound + 1
        return lower_bound