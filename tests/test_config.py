"""Tests for config.py - persisted preferences"""

import json
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from shanten_trainer.engine.config import (
    TrainerConfig, load_config, reset_config, save_config,
)


class TestTrainerConfig:
    def test_defaults(self):
        config = TrainerConfig()
        assert config.show_numbers
        assert config.show_timer
        assert config.language == "zh"
        assert config.hand_size == 13

    def test_invalid_language(self):
        with pytest.raises(ValueError):
            TrainerConfig(language="fr")

    def test_invalid_hand_size(self):
        with pytest.raises(ValueError):
            TrainerConfig(hand_size=12)

    def test_from_dict_merges_defaults(self):
        config = TrainerConfig.from_dict({"show_timer": False, "theme": "dark"})
        assert not config.show_timer
        assert config.show_numbers
        assert not hasattr(config, "theme")


class TestPersistence:
    def test_missing_file(self, tmp_path):
        assert load_config(str(tmp_path / "none.json")) == TrainerConfig()

    def test_round_trip(self, tmp_path):
        path = str(tmp_path / "sub" / "config.json")
        config = TrainerConfig(show_numbers=False, language="en", hand_size=14)
        assert save_config(config, path) == path
        assert load_config(path) == config

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"language": "ja"}), encoding="utf-8")
        config = load_config(str(path))
        assert config.language == "ja"
        assert config.show_timer

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.warns(UserWarning, match="Failed to load config"):
            config = load_config(str(path))
        assert config == TrainerConfig()

    def test_bad_value(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"language": "xx"}), encoding="utf-8")
        with pytest.warns(UserWarning):
            assert load_config(str(path)) == TrainerConfig()

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.warns(UserWarning):
            assert load_config(str(path)) == TrainerConfig()

    def test_reset(self, tmp_path):
        path = str(tmp_path / "config.json")
        save_config(TrainerConfig(show_timer=False), path)
        assert reset_config(path) == TrainerConfig()
        assert load_config(path) == TrainerConfig()
