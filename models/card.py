"""Flash card with its SM-2 scheduling state."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from utils.clock import Clock, system_clock
from utils.errors import IntervalOverflowError, MalformedRecordError
from utils.sm2 import SM2

from .record import CardRecord

logger = logging.getLogger(__name__)

DEFAULT_FACTOR = 2.0
SECONDS_PER_DAY = 24 * 60 * 60


@dataclass
class Card:
    """A question/answer pair plus the state SM-2 needs to schedule it.

    ``next_due`` is a unix timestamp; a card created without one is due
    immediately. Scheduling state changes only through :meth:`repeat` or the
    setters used when loading stored cards. A single card must not be
    repeated from two threads at once.
    """

    question: Optional[str] = None
    answer: Optional[str] = None
    repeat_count: int = 0
    ease_factor: float = DEFAULT_FACTOR
    next_due: Optional[int] = None
    clock: Clock = field(default=system_clock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.next_due is None:
            self.next_due = self.clock()

    def set_question(self, question: str) -> "Card":
        self.question = question
        return self

    def set_answer(self, answer: str) -> "Card":
        self.answer = answer
        return self

    def set_repeat_count(self, repeat_count: int) -> "Card":
        self.repeat_count = repeat_count
        return self

    def set_ease_factor(self, ease_factor: float) -> "Card":
        self.ease_factor = ease_factor
        return self

    def set_next_due(self, next_due: int) -> "Card":
        self.next_due = next_due
        return self

    def repeat(self, sm2: SM2, quality: int, clock: Optional[Clock] = None) -> float:
        """Apply a review graded ``quality`` (0-5) and reschedule the card.

        A pass (quality >= 2) increments the repetition count, a lapse restarts
        it at 1. The interval is computed from the updated count and factor and
        ``next_due`` becomes now + interval days, with the seconds offset
        truncated by ``int()``. Nothing is written if the scheduler rejects the
        input. Returns the interval in days.
        """
        ease_factor = sm2.calc_new_factor(self.ease_factor, quality)
        passed = sm2.is_pass(quality)
        if passed:
            repeat_count = self.repeat_count + 1
        else:
            repeat_count = 1
        interval = sm2.calc_interval(repeat_count, ease_factor)
        now = (clock or self.clock)()
        try:
            next_due = now + int(interval * SECONDS_PER_DAY)
        except OverflowError as exc:
            raise IntervalOverflowError(
                f"Interval of {interval} days cannot be scheduled"
            ) from exc

        if not passed:
            logger.debug("Card %r lapsed after %d repetitions", self.question, self.repeat_count)
        self.repeat_count = repeat_count
        self.ease_factor = ease_factor
        self.next_due = next_due
        logger.debug(
            "Card %r scheduled: quality=%d repeats=%d factor=%.3f interval=%.2f days",
            self.question, quality, repeat_count, ease_factor, interval,
        )
        return interval

    def is_due(self, clock: Optional[Clock] = None) -> bool:
        """Whether the card may be reviewed now (at or after ``next_due``)."""
        return (clock or self.clock)() >= self.next_due

    def to_record(self) -> Dict[str, Any]:
        return {
            "question": self.question,
            "answer": self.answer,
            "numberOfRepeats": self.repeat_count,
            "factor": self.ease_factor,
            "nextTime": self.next_due,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_record())

    @classmethod
    def _from_validated(cls, record: CardRecord) -> "Card":
        return cls(
            question=record.question,
            answer=record.answer,
            repeat_count=record.repeat_count,
            ease_factor=record.ease_factor,
            next_due=record.next_due,
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Card":
        """Rebuild a card from its stored record; every key must be present."""
        try:
            validated = CardRecord.model_validate(record)
        except ValidationError as exc:
            logger.warning("Rejected card record: %s", exc)
            raise MalformedRecordError(f"Malformed card record: {exc}") from exc
        return cls._from_validated(validated)

    @classmethod
    def from_json(cls, text: str) -> "Card":
        try:
            validated = CardRecord.model_validate_json(text)
        except ValidationError as exc:
            logger.warning("Rejected card JSON: %s", exc)
            raise MalformedRecordError(f"Malformed card JSON: {exc}") from exc
        return cls._from_validated(validated)
