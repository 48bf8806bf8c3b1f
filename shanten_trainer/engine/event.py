"""Session events, so the UI and the session log never poll the session."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class EventType(Enum):
    HAND_DEALT = "hand_dealt"        # new question generated
    QUESTION_START = "question_start"
    ANSWERED = "answered"            # player submitted a guess
    REVEALED = "revealed"            # answer shown without a guess
    SESSION_END = "session_end"


@dataclass
class TrainerEvent:
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


Listener = Callable[[TrainerEvent], None]


class EventBus:
    """Publish/subscribe hub shared by the session and its observers."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Listener]] = {}

    def subscribe(self, event_type: EventType, callback: Listener):
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: EventType, callback: Listener):
        callbacks = self._listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: TrainerEvent):
        # Copy so a listener may unsubscribe itself while handling
        for callback in list(self._listeners.get(event.event_type, [])):
            callback(event)
