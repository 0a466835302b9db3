"""Linear ramping of a value towards a target over a number of samples."""

from __future__ import annotations

import math

import numpy as np


class LinearSmoothedValue:
    """A single-precision value that ramps linearly to its target.

    The arithmetic is carried out in 32-bit floats so that ramp lengths and
    intermediate values match a single-precision audio engine.
    """

    def __init__(self, initial_value: float = 0.0) -> None:
        self._current = np.float32(initial_value)
        self._target = np.float32(initial_value)
        self._step = np.float32(0.0)
        self._countdown = 0
        self._steps_to_target = 0

    @property
    def current_value(self) -> float:
        return float(self._current)

    @property
    def target_value(self) -> float:
        return float(self._target)

    def reset(self, sample_rate: float, ramp_length_seconds: float) -> None:
        """Set the ramp length and jump to the current target."""
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if ramp_length_seconds < 0:
            raise ValueError("ramp length must not be negative")
        self._steps_to_target = int(math.floor(ramp_length_seconds * sample_rate))
        self.set_current_and_target_value(self._target)

    def set_current_and_target_value(self, value: float) -> None:
        self._current = self._target = np.float32(value)
        self._countdown = 0

    def set_target_value(self, value: float) -> None:
        """Start ramping from the current value to ``value``."""
        value = np.float32(value)
        if value == self._target:
            return
        if self._steps_to_target <= 0:
            self.set_current_and_target_value(value)
            return
        self._target = value
        self._countdown = self._steps_to_target
        self._step = np.float32(
            (self._target - self._current) / np.float32(self._countdown)
        )

    def is_smoothing(self) -> bool:
        return self._countdown > 0

    def get_next_value(self) -> float:
        """Advance the ramp by one sample and return the new value."""
        if not self.is_smoothing():
            return float(self._target)
        self._countdown -= 1
        if self.is_smoothing():
            self._current = np.float32(self._current + self._step)
        else:
            self._current = self._target
        return float(self._current)

    def apply_gain(self, buffer: np.ndarray, num_samples: int) -> None:
        """Multiply the first ``num_samples`` frames of ``buffer`` in place by the ramp.

        ``buffer`` is shaped (channels, samples) or is a single channel.
        """
        view = np.atleast_2d(buffer)
        if num_samples > view.shape[1]:
            raise ValueError("num_samples exceeds the buffer length")
        if num_samples <= 0:
            return
        if self.is_smoothing():
            gains = np.fromiter(
                (self.get_next_value() for _ in range(num_samples)),
                dtype=np.float32,
                count=num_samples,
            )
            view[:, :num_samples] *= gains
        else:
            view[:, :num_samples] *= self._target