"""Session logger - records every practice question for later review."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from shanten_trainer.engine.event import EventBus, EventType, TrainerEvent

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


class SessionLogger:
    """Records a practice session to a JSON log file."""

    def __init__(self, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.questions: List[dict] = []
        self.summary: Optional[dict] = None
        self._current: Optional[dict] = None

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to session events for automatic logging."""
        event_bus.subscribe(EventType.HAND_DEALT, self._on_hand_dealt)
        event_bus.subscribe(EventType.ANSWERED, self._on_result)
        event_bus.subscribe(EventType.REVEALED, self._on_result)
        event_bus.subscribe(EventType.SESSION_END, self._on_session_end)

    def save(self) -> str:
        """Save the session log and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "summary": self.summary,
            "questions": self.questions,
        }

        os.makedirs(self.log_dir, exist_ok=True)
        filepath = os.path.join(self.log_dir, f"session_{self.session_id}.json")

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath

    # --- Event handlers ---

    def _on_hand_dealt(self, event: TrainerEvent):
        self._current = {
            "question_id": uuid.uuid4().hex[:8],
            "hand": event.data["notation"],
            "shanten": event.data["shanten"],
            "guess": None,
            "correct": None,
            "elapsed": None,
        }
        self.questions.append(self._current)

    def _on_result(self, event: TrainerEvent):
        if self._current is None:
            return
        result = event.data["result"]
        self._current["guess"] = result.guess
        self._current["correct"] = result.is_correct if result.guess is not None else None
        self._current["elapsed"] = round(result.elapsed, 3)
        self._current = None

    def _on_session_end(self, event: TrainerEvent):
        self.summary = dict(event.data)
