"""Crossfading between processed and unprocessed audio on bypass changes."""

from __future__ import annotations

import numpy as np

from tremolo.smoothing import LinearSmoothedValue


class BypassTransitionSmoother:
    """Crossfades dry (unprocessed) and wet (processed) audio when bypass toggles.

    Typical use inside a block callback::

        smoother.set_bypass(bypassed)
        if bypassed and not smoother.is_transitioning():
            return
        smoother.set_dry_buffer(buffer)
        effect.process(buffer)
        smoother.mix_to_wet_buffer(buffer)

    Buffers are numpy arrays shaped (channels, samples) and are modified in place.
    """

    def __init__(self, crossfade_length_seconds: float = 0.01) -> None:
        if not crossfade_length_seconds > 0.0:
            raise ValueError("crossfade length must be positive")
        self._crossfade_length_seconds = float(crossfade_length_seconds)
        self._sample_rate = 0.0
        self._dry_gain = LinearSmoothedValue(0.0)
        self._wet_gain = LinearSmoothedValue(1.0)
        self._dry_buffer = np.zeros((0, 0), dtype=np.float32)
        self.reset()

    def prepare(self, sample_rate: float, maximum_block_size: int, num_channels: int) -> None:
        self._sample_rate = float(sample_rate)
        self._dry_buffer = np.zeros(
            (int(num_channels), int(maximum_block_size)), dtype=np.float32
        )
        self._dry_gain.reset(sample_rate, self._crossfade_length_seconds)
        self._wet_gain.reset(sample_rate, self._crossfade_length_seconds)
        self.reset()

    @property
    def bypassed(self) -> bool:
        """Whether the bypass is engaged or being engaged."""
        return self._dry_gain.target_value == 1.0

    def set_bypass(self, bypass: bool) -> None:
        """Start a crossfade towards the given bypass state."""
        if bool(bypass) == self.bypassed:
            return

        one = np.float32(1.0)
        current = np.float32(self._dry_gain.current_value)
        target = one if bypass else np.float32(0.0)
        duration = self._crossfade_length_seconds * float(abs(target - current))

        self._dry_gain.reset(self._sample_rate, duration)
        self._wet_gain.reset(self._sample_rate, duration)

        self._dry_gain.set_current_and_target_value(current)
        self._dry_gain.set_target_value(target)

        self._wet_gain.set_current_and_target_value(one - current)
        self._wet_gain.set_target_value(one - target)

    def set_bypass_forced(self, bypass: bool) -> None:
        """Switch the bypass state immediately, without a crossfade."""
        self._dry_gain.set_current_and_target_value(1.0 if bypass else 0.0)
        self._wet_gain.set_current_and_target_value(
            np.float32(1.0) - np.float32(self._dry_gain.target_value)
        )

    def is_transitioning(self) -> bool:
        return self._dry_gain.is_smoothing() or self._wet_gain.is_smoothing()

    def set_dry_buffer(self, buffer: np.ndarray) -> None:
        """Store the unprocessed block, scaled by the dry gain ramp."""
        if self._should_avoid_processing():
            return

        source = np.atleast_2d(buffer)
        channels, samples = source.shape
        self._check_fits(channels, samples)

        self._dry_buffer[:channels, :samples] = source
        self._dry_gain.apply_gain(self._dry_buffer, samples)

    def mix_to_wet_buffer(self, buffer: np.ndarray) -> None:
        """Scale the processed block by the wet gain and add the stored dry block."""
        if self._should_avoid_processing():
            return

        target = np.atleast_2d(buffer)
        channels, samples = target.shape
        self._check_fits(channels, samples)

        self._wet_gain.apply_gain(target, samples)
        target += self._dry_buffer[:channels, :samples]

    def reset(self) -> None:
        self.set_bypass_forced(False)
        self._dry_buffer.fill(0.0)

    def _should_avoid_processing(self) -> bool:
        return not self.is_transitioning() and not self.bypassed

    def _check_fits(self, channels: int, samples: int) -> None:
        max_channels, max_samples = self._dry_buffer.shape
        if samples > max_samples:
            raise ValueError("block is longer than the prepared maximum block size")
        if channels > max_channels:
            raise ValueError("block has more channels than prepared")