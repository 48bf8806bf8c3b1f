"""Trainer preferences, persisted as JSON in the user's home directory."""

import json
import os
import warnings
from typing import Optional

CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".shanten_trainer")
CONFIG_PATH = os.path.join(CONFIG_DIR, "config.json")

LANGUAGES = ("zh", "ja", "en")


class TrainerConfig:
    """User-facing trainer options."""

    def __init__(
        self,
        show_numbers: bool = True,   # position numbers under the hand
        show_timer: bool = True,     # report answer time
        language: str = "zh",
        hand_size: int = 13,
    ):
        if language not in LANGUAGES:
            raise ValueError(f"language must be one of {LANGUAGES}, got {language!r}")
        if hand_size not in (13, 14):
            raise ValueError(f"hand_size must be 13 or 14, got {hand_size}")
        self.show_numbers = show_numbers
        self.show_timer = show_timer
        self.language = language
        self.hand_size = hand_size

    def to_dict(self) -> dict:
        return {
            "show_numbers": self.show_numbers,
            "show_timer": self.show_timer,
            "language": self.language,
            "hand_size": self.hand_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TrainerConfig':
        """Overlay stored values on the defaults; unknown keys are dropped."""
        merged = cls().to_dict()
        merged.update({k: v for k, v in data.items() if k in merged})
        return cls(**merged)

    def __eq__(self, other):
        if isinstance(other, TrainerConfig):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self):
        return f"TrainerConfig({self.to_dict()})"


def load_config(path: Optional[str] = None) -> TrainerConfig:
    """Load preferences, falling back to defaults if the file is unusable."""
    path = path or CONFIG_PATH
    if not os.path.exists(path):
        return TrainerConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        return TrainerConfig.from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        warnings.warn(f"Failed to load config from {path}: {e}")
        return TrainerConfig()


def save_config(config: TrainerConfig, path: Optional[str] = None) -> str:
    """Write preferences to disk and return the file path."""
    path = path or CONFIG_PATH
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, ensure_ascii=False, indent=2)

    return path


def reset_config(path: Optional[str] = None) -> TrainerConfig:
    """Store and return the default preferences."""
    config = TrainerConfig()
    save_config(config, path)
    return config
