"""The automatable parameters of the tremolo effect."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class FloatParameter:
    """A continuous parameter clamped to a range and snapped to an interval."""

    id: str
    name: str
    minimum: float
    maximum: float
    interval: float
    default: float
    label: str = ""
    version_hint: int = 1
    _value: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.minimum < self.maximum:
            raise ValueError("parameter minimum must be below its maximum")
        self._value = self._legalise(self.default)

    @property
    def value(self) -> float:
        return self._value

    def set(self, value: float) -> None:
        self._value = self._legalise(value)

    def __float__(self) -> float:
        return self._value

    def _legalise(self, value: float) -> float:
        value = min(max(float(value), self.minimum), self.maximum)
        if self.interval > 0:
            steps = math.floor((value - self.minimum) / self.interval + 0.5)
            value = round(self.minimum + self.interval * steps, 10)
        return min(max(value, self.minimum), self.maximum)


@dataclass
class BoolParameter:
    """An on/off parameter."""

    id: str
    name: str
    default: bool = False
    version_hint: int = 1
    _value: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._value = bool(self.default)

    @property
    def value(self) -> bool:
        return self._value

    def set(self, value: bool) -> None:
        self._value = bool(value)

    def __bool__(self) -> bool:
        return self._value


@dataclass
class ChoiceParameter:
    """A parameter selecting one of a fixed list of named choices."""

    id: str
    name: str
    choices: tuple[str, ...]
    default: int = 0
    version_hint: int = 1
    _index: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.choices:
            raise ValueError("a choice parameter needs at least one choice")
        self.choices = tuple(self.choices)
        self._index = self._clamp(self.default)

    @property
    def index(self) -> int:
        return self._index

    def set(self, index: int) -> None:
        """Select a choice by index; out-of-range indices are clamped."""
        self._index = self._clamp(index)

    def current_choice_name(self) -> str:
        return self.choices[self._index]

    def _clamp(self, index: int) -> int:
        return min(max(int(index), 0), len(self.choices) - 1)


class Parameters:
    """The tremolo's modulation rate, bypass switch and LFO waveform."""

    def __init__(self) -> None:
        self.rate = FloatParameter(
            id="modulation.rate",
            name="Modulation rate",
            minimum=0.1,
            maximum=20.0,
            interval=0.01,
            default=5.0,
            label="Hz",
        )
        self.bypassed = BoolParameter(id="bypassed", name="Bypass", default=False)
        self.waveform = ChoiceParameter(
            id="modulation.waveform",
            name="Modulation waveform",
            choices=("Sine", "Triangle"),
            default=0,
        )

    def __iter__(self):
        return iter((self.rate, self.bypassed, self.waveform))