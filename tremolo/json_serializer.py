"""Saving and restoring the tremolo parameters as JSON."""

from __future__ import annotations

import json

from tremolo.parameters import Parameters

PLUGIN_NAME = "Tremolo"
MARSHALLING_VERSION = 1


class DeserializationError(ValueError):
    """Raised when saved parameters cannot be restored."""


def serialize(parameters: Parameters) -> str:
    """Return the parameters as an indented JSON document."""
    document = {
        "__version__": MARSHALLING_VERSION,
        "pluginName": PLUGIN_NAME,
        "modulationRateHz": round(float(parameters.rate.value), 2),
        "bypassed": bool(parameters.bypassed.value),
        "modulationWaveform": parameters.waveform.current_choice_name(),
    }
    return json.dumps(document, indent=2)


def deserialize(text: str | bytes, parameters: Parameters) -> None:
    """Update ``parameters`` from a JSON document.

    Raises DeserializationError on failure, in which case no parameter is changed.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as error:
            raise DeserializationError(f"saved state is not valid UTF-8: {error}") from error

    try:
        document = json.loads(text)
    except json.JSONDecodeError as error:
        raise DeserializationError(f"invalid JSON: {error}") from error

    if not isinstance(document, dict):
        raise DeserializationError("failed to parse parameters from JSON representation")

    if document.get("__version__") != MARSHALLING_VERSION:
        raise DeserializationError("unsupported parameters format version")

    if document.get("pluginName") != PLUGIN_NAME:
        raise DeserializationError("saved parameters belong to a different plugin")

    rate = document.get("modulationRateHz")
    bypassed = document.get("bypassed")
    waveform_name = document.get("modulationWaveform")
    if (
        isinstance(rate, bool)
        or not isinstance(rate, (int, float))
        or not isinstance(bypassed, bool)
        or not isinstance(waveform_name, str)
    ):
        raise DeserializationError("failed to parse parameters from JSON representation")

    choices = parameters.waveform.choices
    if waveform_name not in choices:
        raise DeserializationError(
            "invalid modulation waveform name; supported values are: " + ", ".join(choices)
        )

    parameters.waveform.set(choices.index(waveform_name))
    parameters.rate.set(rate)
    parameters.bypassed.set(bypassed)