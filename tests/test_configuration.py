"""
Tests for the camera configuration model and its mutators.
"""
import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from vsaas_calculator.engine import Bitrate, CameraConfiguration, RecordingMode, Resolution
from vsaas_calculator.engine.models import coerce_count


@pytest.fixture
def config():
    return CameraConfiguration()


def test_initial_state(config):
    for resolution in Resolution:
        assert config.count('continuous', resolution) == 0
        assert config.count('motion', resolution) == 0
        assert config.bitrate(resolution) is Bitrate.KBPS_2048
    assert config.total_cameras == 0


def test_set_count_clamps_negative(config):
    config.set_count(RecordingMode.CONTINUOUS, '720p', -5)

    assert config.count('continuous', '720p') == 0


def test_set_count_has_no_upper_bound(config):
    config.set_count('motion', '4K', 1_000_000)

    assert config.count('motion', '4K') == 1_000_000


def test_set_count_replaces_only_its_pair(config):
    config.set_count('continuous', '2MP', 4)
    config.set_count('motion', '2MP', 9)

    assert config['2MP'].continuous_count == 4
    assert config['2MP'].motion_count == 9
    assert config.total_cameras == 13


@pytest.mark.parametrize("raw, expected", [
    ("7", 7),
    (" 12 ", 12),
    ("12abc", 12),
    ("3.9", 3),
    ("", 0),
    ("abc", 0),
    (None, 0),
    (4.7, 4),
    (float('nan'), 0),
    (float('inf'), 0),
    ("-3", 0),
])
def test_set_count_coerces_raw_input(config, raw, expected):
    assert config.set_count('continuous', '5MP', raw) == expected
    assert config.count('continuous', '5MP') == expected


def test_coerce_count_keeps_sign_before_clamp():
    assert coerce_count("-3") == -3
    assert coerce_count(True) == 0


def test_increment_and_decrement(config):
    config.increment('motion', '720p')
    config.increment('motion', '720p')
    assert config.count('motion', '720p') == 2

    config.decrement('motion', '720p')
    config.decrement('motion', '720p')
    config.decrement('motion', '720p')
    assert config.count('motion', '720p') == 0


@pytest.mark.parametrize("value", [Bitrate.KBPS_4096, 4096, "4096", "4096kbps", " 4096 KBPS "])
def test_set_bitrate_accepts_enum_and_text(config, value):
    assert config.set_bitrate('5MP', value) is Bitrate.KBPS_4096
    assert config.bitrate('5MP') is Bitrate.KBPS_4096


def test_set_bitrate_only_touches_one_tier(config):
    config.set_bitrate('720p', 1024)

    assert config.bitrate('720p') is Bitrate.KBPS_1024
    for resolution in (Resolution.MP2, Resolution.MP5, Resolution.UHD_4K):
        assert config.bitrate(resolution) is Bitrate.KBPS_2048


@pytest.mark.parametrize("value", [3000, "fast", 0])
def test_set_bitrate_rejects_unlisted_values(config, value):
    with pytest.raises(ValueError):
        config.set_bitrate('720p', value)
    assert config.bitrate('720p') is Bitrate.KBPS_2048


def test_unknown_resolution_or_mode(config):
    with pytest.raises(ValueError):
        config.set_count('continuous', '8K', 1)
    with pytest.raises(ValueError):
        config.set_count('timelapse', '720p', 1)


def test_resolution_lookup_is_case_insensitive(config):
    config.set_count('Continuous', '4k', 2)

    assert config.count(RecordingMode.CONTINUOUS, Resolution.UHD_4K) == 2


def test_reset(config):
    config.set_count('continuous', '720p', 3)
    config.set_bitrate('720p', 8192)

    config.reset()

    assert config == CameraConfiguration()


def test_partial_tiers_are_filled():
    config = CameraConfiguration(tiers={})

    assert set(config.tiers) == set(Resolution)


def test_bitrate_labels():
    assert [b.label for b in Bitrate] == ["1024kbps", "2048kbps", "4096kbps", "8192kbps"]
    assert [r.value for r in Resolution] == ["720p", "2MP", "5MP", "4K"]


def test_reset_to_given_bitrate(config):
    config.set_count('motion', '2MP', 5)

    config.reset("8192")

    assert config.total_cameras == 0
    assert all(config.bitrate(r) is Bitrate.KBPS_8192 for r in Resolution)
