# tremolo

A tremolo audio effect that works on NumPy sample buffers. Buffers are float
arrays shaped `(channels, samples)`. All processing changes them in place.

## What is included

- `tremolo.effect.Tremolo` multiplies every channel by `1 + 0.4 * lfo`. The LFO
  shape is chosen with `LfoWaveform.SINE` or `LfoWaveform.TRIANGLE`, and the
  default rate is 5 Hz.
  - `set_modulation_rate_hz(rate_hz, apply_smoothing)` and
    `set_lfo_waveform(waveform, apply_smoothing)` take an `ApplySmoothing`
    value. With `ApplySmoothing.YES`, a change of waveform ramps over 25 ms and
    a change of rate ramps over 50 ms.
  - `process(buffer)` and `process_channelwise(buffer)` apply the effect.
    `process_channelwise` handles no more frames than four times the block
    size given to `prepare`.
  - `read_all_lfo_samples()` returns the LFO samples generated since the last
    call. It holds at most about one second of them.
- `tremolo.effect.Oscillator` is the phase-accumulating generator behind the
  LFO.
- `tremolo.bypass.BypassTransitionSmoother` crossfades between the dry and wet
  signal when bypass changes. A full crossfade takes 10 ms by default.
  `set_bypass_forced` switches bypass at once, with no crossfade.
- `tremolo.smoothing.LinearSmoothedValue` is a single-precision linear ramp.
  Its `apply_gain` method multiplies a buffer by the ramp.
- `tremolo.parameters.Parameters` holds three parameters:
  - `rate`, a `FloatParameter` from 0.1 to 20 Hz in steps of 0.01, default 5.
  - `bypassed`, a `BoolParameter`.
  - `waveform`, a `ChoiceParameter` with the choices `"Sine"` and `"Triangle"`.
- `tremolo.json_serializer.serialize(parameters)` returns indented JSON text.
  `deserialize(text, parameters)` updates the parameters from that text. On bad
  input it raises `DeserializationError` and leaves every parameter unchanged.
- `tremolo.processor.PluginProcessor` combines the parameters, the effect and
  the bypass crossfade, and processes one block at a time.
  - `get_state_information()` returns UTF-8 JSON bytes.
  - `set_state_information(data)` restores them. If the state cannot be read,
    it logs a warning and leaves the parameters unchanged.
  - `is_buses_layout_supported(input_channels, output_channels)` accepts mono
    or stereo, with the same channel count for input and output.
- `tremolo.lfo_visualizer.LfoVisualizer` collects recent LFO output into a
  curve for plotting. It keeps about four seconds of output, decimated to 22050
  points by `tremolo.strided_queue.StridedQueue`.
  - `curve_points()` returns the points as `(x, y)` rows.
  - `curve_transform(width, height)` returns an `AffineTransform` that maps the
    curve onto an area of that size.

## Installation

```
pip install .
```

To run the tests, install the test extra and run `pytest`:

```
pip install .[test]
pytest
```

## Usage

```python
import numpy as np
from tremolo.processor import PluginProcessor

processor = PluginProcessor()
processor.prepare_to_play(48000.0, 512)

block = np.ones((2, 512), dtype=np.float32)
processor.process_block(block)

processor.parameters.bypassed.set(True)
processor.process_block(block)                # crossfades to the dry signal

state = processor.get_state_information()
processor.set_state_information(state)
```

To plot the LFO:

```python
from tremolo.lfo_visualizer import LfoVisualizer

visualizer = LfoVisualizer(
    processor.read_all_lfo_samples,
    lambda: processor.sample_rate,
    lambda: processor.parameters.bypassed.value,
)
visualizer.update(0.0)        # the first call only records the timestamp
processor.process_block(block)
visualizer.update(0.016)
points = visualizer.curve_points()
```

## What it does not do

This is a library only. It does not open audio devices, load into a host
application, or draw a user interface. The visualizer produces points and a
transform, and leaves the drawing to you. There is no command-line tool.