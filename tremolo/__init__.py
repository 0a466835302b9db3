"""Tremolo effect for NumPy buffers with bypass crossfading, LFO curve collection and JSON state."""

__version__ = "1.0.0"