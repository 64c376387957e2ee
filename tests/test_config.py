"""Test the configuration module functionality."""

import dataclasses

import pytest

from railgraph.config import ENUMERATION_CONFIG, EnumerationConfig


def test_enumeration_config_defaults():
    config = EnumerationConfig()

    assert config.pattern_window == 3
    assert config.max_pattern_repeats == 3
    assert config.max_stops is None


def test_global_config_instance():
    assert isinstance(ENUMERATION_CONFIG, EnumerationConfig)
    assert ENUMERATION_CONFIG == EnumerationConfig()


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ENUMERATION_CONFIG.max_pattern_repeats = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs, match",
    [
        ({"pattern_window": 1}, "pattern_window"),
        ({"max_pattern_repeats": 0}, "max_pattern_repeats"),
        ({"max_stops": 0}, "max_stops"),
    ],
)
def test_config_validation(kwargs, match):
    with pytest.raises(ValueError, match=match):
        EnumerationConfig(**kwargs)
