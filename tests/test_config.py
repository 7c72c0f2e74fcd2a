"""Tests for analysis configuration."""

from sound_profile.config import AnalysisConfig


def test_defaults():
    config = AnalysisConfig()
    assert config.frame_size == 4096
    assert config.hop_size == 2048
    assert config.window == "blackmanharris62"


def test_dict_round_trip_ignores_unknown_keys():
    config = AnalysisConfig(hop_size=1024, silence_threshold=0.01)
    restored = AnalysisConfig.from_dict({**config.to_dict(), "bogus": 1})
    assert restored == config


def test_from_dict_keeps_defaults_for_missing_keys():
    config = AnalysisConfig.from_dict({"frame_size": 2048})
    assert config.frame_size == 2048
    assert config.hop_size == AnalysisConfig().hop_size


def test_to_dict_covers_every_field():
    assert set(AnalysisConfig().to_dict()) == set(vars(AnalysisConfig()))
