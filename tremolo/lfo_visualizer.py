"""Collects recent LFO samples into a curve suitable for plotting."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from tremolo.strided_queue import StridedQueue

POINTS_ON_PATH = 22050
PERIODS_TO_PLOT_OF_1HZ_WAVEFORM = 4
Y_LIMIT = 1.1


@dataclass(frozen=True)
class AffineTransform:
    """2-D affine map: x' = a*x + b*y + c, y' = d*x + e*y + f."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)


class LfoVisualizer:
    """Keeps the last few seconds of LFO output, decimated to a fixed number of points.

    While bypassed, elapsed time is filled with zeros so the curve keeps moving.
    """

    def __init__(
        self,
        read_all_lfo_samples: Callable[[], Sequence[float]],
        get_current_sample_rate: Callable[[], float],
        is_bypassed: Callable[[], bool],
    ) -> None:
        self._read_all_lfo_samples = read_all_lfo_samples
        self._get_current_sample_rate = get_current_sample_rate
        self._is_bypassed = is_bypassed
        self._samples_to_plot = StridedQueue(POINTS_ON_PATH)
        self._last_timestamp_seconds: float | None = None
        self.curve_width = 4.0
        self.curve_color = (0, 0, 0, 255)
        self.background_color = (255, 255, 255, 255)

    @property
    def stride(self) -> int:
        return max(
            1,
            int(self._get_current_sample_rate() * PERIODS_TO_PLOT_OF_1HZ_WAVEFORM / POINTS_ON_PATH),
        )

    def update(self, timestamp_seconds: float) -> None:
        """Pull new LFO samples; called once per displayed frame."""
        if self._last_timestamp_seconds is None:
            self._last_timestamp_seconds = timestamp_seconds
            return

        samples = self._read_all_lfo_samples()
        self._samples_to_plot.set_stride(self.stride)

        if self._is_bypassed():
            seconds_passed = timestamp_seconds - self._last_timestamp_seconds
            samples_passed = max(0, int(self._get_current_sample_rate() * seconds_passed))
            self._samples_to_plot.push_back_zeros(samples_passed)
        elif len(samples) > 0:
            self._samples_to_plot.push_back(list(samples))

        self._last_timestamp_seconds = timestamp_seconds

    def curve_points(self) -> np.ndarray:
        """Return the curve as an array of (x, y) rows, x being the point index."""
        values = np.fromiter(self._samples_to_plot, dtype=float, count=len(self._samples_to_plot))
        return np.column_stack((np.arange(len(values), dtype=float), values))

    def curve_transform(self, width: float, height: float) -> AffineTransform:
        """Map the curve onto a ``width`` x ``height`` area, y = +/-1.1 to top/bottom."""
        curve_end_x = float(len(self._samples_to_plot) - 1)
        if curve_end_x <= 0:
            raise ValueError("the curve needs at least two points to be transformed")
        return AffineTransform(
            a=width / curve_end_x,
            b=0.0,
            c=0.0,
            d=0.0,
            e=-height / (2.0 * Y_LIMIT),
            f=height / 2.0,
        )