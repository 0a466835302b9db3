"""The tremolo audio processor: parameters, effect and bypass crossfading together."""

from __future__ import annotations

import logging

import numpy as np

from tremolo.bypass import BypassTransitionSmoother
from tremolo.effect import ApplySmoothing, LfoWaveform, Tremolo
from tremolo.json_serializer import PLUGIN_NAME, DeserializationError, deserialize, serialize
from tremolo.parameters import BoolParameter, Parameters

logger = logging.getLogger(__name__)

_STEREO = 2
_SUPPORTED_CHANNEL_COUNTS = (1, 2)


class PluginProcessor:
    """Processes blocks of audio shaped (channels, samples) in place.

    The main input and output buses are stereo by default.
    """

    name = PLUGIN_NAME
    accepts_midi = False
    produces_midi = False
    is_midi_effect = False
    tail_length_seconds = 0.0
    num_programs = 1
    current_program = 0

    def __init__(self) -> None:
        self.parameters = Parameters()
        self.num_input_channels = _STEREO
        self.num_output_channels = _STEREO
        self._tremolo = Tremolo()
        self._bypass_transition_smoother = BypassTransitionSmoother()
        self._current_sample_rate = 0.0

    @property
    def sample_rate(self) -> float:
        """The most recent sample rate given to prepare_to_play()."""
        return self._current_sample_rate

    @property
    def bypass_parameter(self) -> BoolParameter:
        return self.parameters.bypassed

    def prepare_to_play(self, sample_rate: float, expected_max_frames_per_block: int) -> None:
        self._current_sample_rate = float(sample_rate)
        self._tremolo.prepare(sample_rate, expected_max_frames_per_block)
        self._bypass_transition_smoother.prepare(
            sample_rate,
            int(expected_max_frames_per_block),
            max(self.num_input_channels, self.num_output_channels),
        )

    def release_resources(self) -> None:
        self._tremolo.reset()
        self._bypass_transition_smoother.reset()

    def is_buses_layout_supported(self, input_channels: int, output_channels: int) -> bool:
        """Only mono or stereo, with matching input and output, is supported."""
        if output_channels not in _SUPPORTED_CHANNEL_COUNTS:
            return False
        return output_channels == input_channels

    def process_block(self, buffer: np.ndarray) -> None:
        """Apply the tremolo to ``buffer`` in place, crossfading on bypass changes."""
        frames = np.atleast_2d(buffer)

        # Output channels without input data may hold garbage.
        for channel in range(self.num_input_channels, min(self.num_output_channels, frames.shape[0])):
            frames[channel, :] = 0.0

        bypassed = self.parameters.bypassed.value
        smoother = self._bypass_transition_smoother
        bypassed_and_not_transitioning = bypassed and not smoother.is_transitioning()
        # Skip smoothing while fully bypassed so the LFO does not morph
        # visibly when bypass is switched off again.
        apply_smoothing = (
            ApplySmoothing.NO if bypassed_and_not_transitioning else ApplySmoothing.YES
        )

        self._tremolo.set_modulation_rate_hz(self.parameters.rate.value, apply_smoothing)
        self._tremolo.set_lfo_waveform(
            LfoWaveform(self.parameters.waveform.index), apply_smoothing
        )

        smoother.set_bypass(bypassed)

        if bypassed_and_not_transitioning:
            return

        smoother.set_dry_buffer(frames)
        self._tremolo.process(frames)
        smoother.mix_to_wet_buffer(frames)

    def get_state_information(self) -> bytes:
        """Return the parameters as UTF-8 encoded JSON."""
        return serialize(self.parameters).encode("utf-8")

    def set_state_information(self, data: bytes | str) -> None:
        """Restore parameters from saved state; a failure is logged and leaves them unchanged."""
        try:
            deserialize(data, self.parameters)
        except DeserializationError as error:
            logger.warning("could not restore parameters: %s", error)

        # Loading a project or preset must not morph the LFO or crossfade.
        self._bypass_transition_smoother.set_bypass_forced(self.parameters.bypassed.value)
        self._tremolo.set_lfo_waveform(
            LfoWaveform(self.parameters.waveform.index), ApplySmoothing.NO
        )
        self._tremolo.set_modulation_rate_hz(self.parameters.rate.value, ApplySmoothing.NO)

    def read_all_lfo_samples(self) -> np.ndarray:
        """Return every LFO sample generated since the previous call."""
        return self._tremolo.read_all_lfo_samples()