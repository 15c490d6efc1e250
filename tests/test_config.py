import pytest

from cat_swipe.config import tweak, validate_tweak


def test_defaults_are_valid():
    validate_tweak(tweak)


@pytest.mark.parametrize("batch_size", [10, 15, 20])
def test_batch_size_in_range(batch_size):
    validate_tweak({**tweak, "batch_size": batch_size})


@pytest.mark.parametrize("batch_size", [0, 9, 21])
def test_batch_size_out_of_range(batch_size):
    with pytest.raises(ValueError, match="batch_size"):
        validate_tweak({**tweak, "batch_size": batch_size})


@pytest.mark.parametrize("override", [
    {"like_threshold": 0},
    {"commit_threshold": -5},
    {"like_threshold": 80, "commit_threshold": 80},
    {"rotation_divisor": 0},
    {"animation_ms": -1},
])
def test_bad_gesture_settings(override):
    with pytest.raises(ValueError):
        validate_tweak({**tweak, **override})
