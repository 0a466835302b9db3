"""Tremolo effect: amplitude modulation of audio by a low-frequency oscillator."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable

import numpy as np

from tremolo.sample_fifo import SampleFifo
from tremolo.smoothing import LinearSmoothedValue

MODULATION_DEPTH = 0.4
DEFAULT_MODULATION_RATE_HZ = 5.0

_TWO_PI = 2.0 * math.pi
_HALF_PI = 0.5 * math.pi


class ApplySmoothing(enum.Enum):
    """Whether a parameter change ramps in or takes effect at once."""

    NO = 0
    YES = 1


class LfoWaveform(enum.IntEnum):
    """Shapes available for the modulating oscillator."""

    SINE = 0
    TRIANGLE = 1


def _sine(phase: float) -> float:
    # The oscillator feeds phases starting at -pi; shift so the wave starts at 0.
    return math.sin(phase + math.pi)


def _triangle(phase: float) -> float:
    # Offset by pi/2 so the wave starts at 0 like the sine.
    ft = (phase - _HALF_PI) / _TWO_PI
    return 4.0 * abs(ft - math.floor(ft + 0.5)) - 1.0


class Oscillator:
    """Periodic function generator driven by a phase accumulator.

    The function receives phases in the range [-pi, pi). Frequency changes
    ramp linearly over 50 ms unless forced.
    """

    def __init__(self, function: Callable[[float], float]) -> None:
        self._function = function
        self._sample_rate = 48000.0
        self._phase = 0.0
        self._frequency = LinearSmoothedValue(440.0)

    @property
    def frequency(self) -> float:
        """Target frequency in hertz."""
        return self._frequency.target_value

    def prepare(self, sample_rate: float) -> None:
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self._sample_rate = float(sample_rate)
        self.reset()

    def set_frequency(self, frequency: float, force: bool = False) -> None:
        if force:
            self._frequency.set_current_and_target_value(frequency)
        else:
            self._frequency.set_target_value(frequency)

    def process_sample(self, value: float) -> float:
        """Advance by one sample and return ``value`` plus the generated sample."""
        increment = _TWO_PI * self._frequency.get_next_value() / self._sample_rate
        last = self._phase
        following = last + increment
        while following >= _TWO_PI:
            following -= _TWO_PI
        self._phase = following
        return value + self._function(last - math.pi)

    def reset(self) -> None:
        self._phase = 0.0
        if self._sample_rate > 0:
            self._frequency.reset(self._sample_rate, 0.05)


class Tremolo:
    """Modulates the amplitude of every channel by ``1 + 0.4 * lfo``.

    Buffers are numpy float arrays shaped (channels, samples), processed in place.
    Every generated LFO sample is also queued for visualisation.
    """

    def __init__(self) -> None:
        self._lfos = {
            LfoWaveform.SINE: Oscillator(_sine),
            LfoWaveform.TRIANGLE: Oscillator(_triangle),
        }
        self._current_lfo = LfoWaveform.SINE
        self._lfo_to_set = self._current_lfo
        self._lfo_transition_smoother = LinearSmoothedValue(0.0)
        self._lfo_samples = np.zeros(0, dtype=np.float32)
        self._lfo_sample_fifo = SampleFifo()
        self.set_modulation_rate_hz(DEFAULT_MODULATION_RATE_HZ, ApplySmoothing.NO)

    @property
    def lfo_waveform(self) -> LfoWaveform:
        """The waveform requested most recently."""
        return self._lfo_to_set

    def prepare(self, sample_rate: float, expected_max_frames_per_block: int) -> None:
        for lfo in self._lfos.values():
            lfo.prepare(sample_rate)
        self._lfo_sample_fifo.prepare(sample_rate)
        self._lfo_transition_smoother.reset(sample_rate, 0.025)
        # allocate defensively
        self._lfo_samples = np.zeros(
            4 * int(expected_max_frames_per_block), dtype=np.float32
        )

    def set_modulation_rate_hz(
        self, rate_hz: float, apply_smoothing: ApplySmoothing = ApplySmoothing.YES
    ) -> None:
        force = apply_smoothing is ApplySmoothing.NO
        for lfo in self._lfos.values():
            lfo.set_frequency(rate_hz, force)

    def set_lfo_waveform(
        self, waveform: LfoWaveform, apply_smoothing: ApplySmoothing = ApplySmoothing.YES
    ) -> None:
        """Select the LFO shape; the switch itself happens on the next process call."""
        waveform = LfoWaveform(waveform)
        self._lfo_to_set = waveform
        if apply_smoothing is ApplySmoothing.NO:
            self._current_lfo = waveform

    def process(self, buffer: np.ndarray) -> None:
        """Apply the tremolo to every frame of ``buffer`` in place."""
        self._update_lfo_waveform()
        frames = np.atleast_2d(buffer)
        lfo_values = self._generate_lfo(frames.shape[1])
        frames *= np.float32(MODULATION_DEPTH) * lfo_values + np.float32(1.0)

    def process_channelwise(self, buffer: np.ndarray) -> None:
        """Apply the tremolo channel by channel, limited to the prepared capacity."""
        self._update_lfo_waveform()
        frames = np.atleast_2d(buffer)
        count = min(len(self._lfo_samples), frames.shape[1])
        modulation = self._lfo_samples[:count]
        modulation[:] = self._generate_lfo(count)
        modulation *= np.float32(MODULATION_DEPTH)
        modulation += np.float32(1.0)
        frames[:, :count] *= modulation

    def reset(self) -> None:
        for lfo in self._lfos.values():
            lfo.reset()
        self._lfo_sample_fifo.reset()

    def read_all_lfo_samples(self) -> np.ndarray:
        """Return every LFO sample generated since the previous call."""
        return self._lfo_sample_fifo.pop_all()

    def _generate_lfo(self, count: int) -> np.ndarray:
        values = np.fromiter(
            (self._next_lfo_value() for _ in range(count)),
            dtype=np.float32,
            count=count,
        )
        for value in values:
            self._lfo_sample_fifo.push(float(value))
        return values

    def _update_lfo_waveform(self) -> None:
        if self._lfo_to_set != self._current_lfo:
            self._lfo_transition_smoother.set_current_and_target_value(
                self._next_lfo_value()
            )
            self._current_lfo = self._lfo_to_set
            self._lfo_transition_smoother.set_target_value(self._next_lfo_value())

    def _next_lfo_value(self) -> float:
        if self._lfo_transition_smoother.is_smoothing():
            return self._lfo_transition_smoother.get_next_value()
        return self._lfos[self._current_lfo].process_sample(0.0)