import numpy as np
import pytest

from tremolo.bypass import BypassTransitionSmoother

DRY_VALUE = 0
WET_VALUE = 10
SAMPLE_RATE = 10
BLOCK_SIZE = SAMPLE_RATE
CHANNEL_COUNT = 1


@pytest.fixture
def smoother():
    prepared = BypassTransitionSmoother(1.0)
    prepared.prepare(SAMPLE_RATE, BLOCK_SIZE, CHANNEL_COUNT)
    prepared.set_bypass_forced(False)
    return prepared


def make_buffer(length=BLOCK_SIZE):
    return np.zeros((CHANNEL_COUNT, length), dtype=np.float32)


def process_transition_block(smoother, buffer):
    buffer.fill(DRY_VALUE)
    smoother.set_dry_buffer(buffer)
    buffer.fill(WET_VALUE)
    smoother.mix_to_wet_buffer(buffer)


def test_off_on_transition_is_smooth(smoother):
    buffer = make_buffer()
    smoother.set_bypass(True)
    assert smoother.is_transitioning()

    process_transition_block(smoother, buffer)

    assert not smoother.is_transitioning()
    expected = [WET_VALUE - i - 1 for i in range(DRY_VALUE, WET_VALUE)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)


def test_on_off_transition_is_smooth(smoother):
    buffer = make_buffer()
    smoother.set_bypass_forced(True)
    assert not smoother.is_transitioning()

    smoother.set_bypass(False)
    assert smoother.is_transitioning()

    process_transition_block(smoother, buffer)

    assert not smoother.is_transitioning()
    expected = [i + 1 for i in range(DRY_VALUE, WET_VALUE)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)


def test_off_on_transition_is_continued_throughout_blocks(smoother):
    smoother.set_bypass(True)
    assert smoother.is_transitioning()

    buffer = make_buffer(BLOCK_SIZE // 2)

    process_transition_block(smoother, buffer)
    assert smoother.is_transitioning()
    expected = [WET_VALUE - i - 1 for i in range(DRY_VALUE, WET_VALUE // 2)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)

    process_transition_block(smoother, buffer)
    assert not smoother.is_transitioning()
    expected = [WET_VALUE - i - 1 for i in range(WET_VALUE // 2, WET_VALUE)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)


def test_toggling_bypass_mid_off_on_transition_is_smooth(smoother):
    smoother.set_bypass(True)
    assert smoother.is_transitioning()

    buffer = make_buffer(BLOCK_SIZE // 2)

    process_transition_block(smoother, buffer)
    assert smoother.is_transitioning()
    expected = [WET_VALUE - i - 1 for i in range(DRY_VALUE, WET_VALUE // 2)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)

    smoother.set_bypass(False)
    assert smoother.is_transitioning()

    process_transition_block(smoother, buffer)
    assert not smoother.is_transitioning()
    expected = [i + 1 for i in range(WET_VALUE // 2, WET_VALUE)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)


def test_toggling_bypass_mid_on_off_transition_is_smooth(smoother):
    smoother.set_bypass_forced(True)
    assert not smoother.is_transitioning()

    smoother.set_bypass(False)
    buffer = make_buffer(BLOCK_SIZE // 2)
    process_transition_block(smoother, buffer)

    assert smoother.is_transitioning()
    expected = [i + 1 for i in range(DRY_VALUE, WET_VALUE // 2)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)

    smoother.set_bypass(True)
    assert smoother.is_transitioning()

    process_transition_block(smoother, buffer)
    assert not smoother.is_transitioning()
    expected = [WET_VALUE // 2 - i - 1 for i in range(DRY_VALUE, WET_VALUE // 2)]
    assert buffer[0].tolist() == pytest.approx(expected, abs=1e-4)


def test_forcing_bypass_on_skips_transition(smoother):
    buffer = make_buffer()
    smoother.set_bypass_forced(True)
    assert not smoother.is_transitioning()
    process_transition_block(smoother, buffer)
    assert not smoother.is_transitioning()
    assert buffer[0].tolist() == [float(DRY_VALUE)] * BLOCK_SIZE


def test_forcing_bypass_off_skips_transition(smoother):
    buffer = make_buffer()
    smoother.set_bypass(True)
    process_transition_block(smoother, buffer)
    assert not smoother.is_transitioning()

    smoother.set_bypass_forced(False)
    assert not smoother.is_transitioning()
    process_transition_block(smoother, buffer)
    assert not smoother.is_transitioning()
    assert buffer[0].tolist() == [float(WET_VALUE)] * BLOCK_SIZE


def test_setting_same_bypass_state_does_not_transition(smoother):
    smoother.set_bypass(False)
    assert not smoother.is_transitioning()
    assert not smoother.bypassed


def test_reset_returns_to_unbypassed(smoother):
    smoother.set_bypass(True)
    smoother.reset()
    assert not smoother.is_transitioning()
    assert not smoother.bypassed


def test_block_longer_than_prepared_raises(smoother):
    smoother.set_bypass(True)
    with pytest.raises(ValueError):
        smoother.set_dry_buffer(make_buffer(BLOCK_SIZE + 1))


def test_invalid_crossfade_length_raises():
    with pytest.raises(ValueError):
        BypassTransitionSmoother(0.0)


def test_set_bypass_before_prepare_raises():
    with pytest.raises(ValueError):
        BypassTransitionSmoother().set_bypass(True)