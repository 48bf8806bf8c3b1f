"""Tests for session.py and session_logger.py"""

import json
import random
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from shanten_trainer.core.notation import counts_from_tenhou, parse_tenhou
from shanten_trainer.engine.event import EventBus, EventType, TrainerEvent
from shanten_trainer.engine.session import (
    PracticeSession, SessionError, SessionStatus,
)
from shanten_trainer.engine.session_logger import SessionLogger


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def make_session(event_bus=None):
    clock = FakeClock()
    session = PracticeSession(event_bus, rng=random.Random(9), clock=clock)
    return session, clock


class TestEventBus:
    def test_emit_and_unsubscribe(self):
        bus = EventBus()
        seen = []
        bus.subscribe(EventType.ANSWERED, seen.append)
        bus.emit(TrainerEvent(EventType.ANSWERED, {"x": 1}))
        bus.emit(TrainerEvent(EventType.REVEALED))
        assert len(seen) == 1
        bus.unsubscribe(EventType.ANSWERED, seen.append)
        bus.emit(TrainerEvent(EventType.ANSWERED))
        assert len(seen) == 1


class TestPracticeSession:
    def test_initial_state(self):
        session, _ = make_session()
        assert session.status == SessionStatus.IDLE
        assert session.hand is None

    def test_random_hand(self):
        session, _ = make_session()
        hand = session.generate_hand()
        assert len(hand) == 13
        assert session.shanten is not None
        assert 0 <= session.shanten <= 6

    def test_correct_answer(self):
        session, clock = make_session()
        session.generate_hand(parse_tenhou("1112345678999m"))
        assert session.shanten == 0
        session.start()
        assert session.status == SessionStatus.ONGOING
        clock.now += 4.5
        result = session.answer(0)
        assert result.is_correct
        assert result.elapsed == pytest.approx(4.5)
        assert result.notation == "1112345678999m"
        assert session.status == SessionStatus.ANSWERED

    def test_wrong_answer(self):
        session, _ = make_session()
        session.generate_hand(parse_tenhou("111m3333456666p"))
        session.start()
        result = session.answer(0)
        assert not result.is_correct
        assert result.shanten == 1

    def test_stop_reveals(self):
        session, _ = make_session()
        session.generate_hand(parse_tenhou("1112345678999m"))
        session.start()
        result = session.stop()
        assert result.guess is None
        assert not result.is_correct
        assert session.answered_count == 0

    def test_start_without_hand(self):
        session, _ = make_session()
        with pytest.raises(SessionError):
            session.start()

    def test_answer_twice(self):
        session, _ = make_session()
        session.generate_hand(parse_tenhou("1112345678999m"))
        session.start()
        session.answer(0)
        with pytest.raises(SessionError):
            session.answer(0)

    def test_answer_before_start(self):
        session, _ = make_session()
        session.generate_hand(parse_tenhou("1112345678999m"))
        with pytest.raises(SessionError):
            session.answer(0)

    def test_statistics(self):
        session, clock = make_session()
        for guess, seconds in ((0, 2.0), (3, 4.0)):
            session.generate_hand(parse_tenhou("1112345678999m"))
            session.start()
            clock.now += seconds
            session.answer(guess)
        assert session.answered_count == 2
        assert session.correct_count == 1
        assert session.accuracy == pytest.approx(0.5)
        assert session.average_time == pytest.approx(3.0)

    def test_empty_statistics(self):
        session, _ = make_session()
        assert session.accuracy == 0.0
        assert session.average_time == 0.0

    def test_reset(self):
        session, _ = make_session()
        session.generate_hand(parse_tenhou("1112345678999m"))
        session.start()
        session.answer(0)
        session.reset()
        assert session.results == []
        assert session.status == SessionStatus.IDLE
        assert session.hand is not None

    def test_reset_drops_search_cache(self):
        session, _ = make_session()
        session.generate_hand(parse_tenhou("1112345678999m"))
        root = (counts_from_tenhou("1112345678999m").key, 0, False)
        assert root in session._cache
        session.reset()
        assert root not in session._cache
        assert session.shanten is not None


class TestSessionLogger:
    def test_records_questions(self, tmp_path):
        bus = EventBus()
        logger = SessionLogger({"hand_size": 13}, log_dir=str(tmp_path))
        logger.subscribe_events(bus)
        session, clock = make_session(bus)

        session.generate_hand(parse_tenhou("1112345678999m"))
        session.start()
        clock.now += 1.25
        session.answer(0)

        session.generate_hand(parse_tenhou("111m3333456666p"))
        session.start()
        session.stop()
        session.end()

        path = logger.save()
        assert os.path.dirname(path) == str(tmp_path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert data["session_id"] == logger.session_id
        assert data["config"] == {"hand_size": 13}
        assert len(data["questions"]) == 2
        first, second = data["questions"]
        assert first["hand"] == "1112345678999m"
        assert first["guess"] == 0
        assert first["correct"] is True
        assert first["elapsed"] == 1.25
        assert second["shanten"] == 1
        assert second["guess"] is None
        assert second["correct"] is None
        assert data["summary"]["answered"] == 1
        assert data["summary"]["correct"] == 1

    def test_unanswered_question(self, tmp_path):
        bus = EventBus()
        logger = SessionLogger({}, log_dir=str(tmp_path))
        logger.subscribe_events(bus)
        session, _ = make_session(bus)
        session.generate_hand(parse_tenhou("19m19p19s1234567z"))
        assert logger.questions[0]["shanten"] == 0
        assert logger.questions[0]["elapsed"] is None
