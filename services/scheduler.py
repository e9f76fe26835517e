"""SM-2 spaced repetition scheduling.

Quality scale:
    0 - complete blackout
    1 - wrong, but the answer was recognised
    2 - wrong, but the answer seemed easy once shown
    3 - correct with serious difficulty
    4 - correct after hesitation
    5 - perfect recall
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol

MIN_EASE_FACTOR = 1.3
PASSING_QUALITY = 3
FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


@dataclass(frozen=True)
class ScheduleResult:
    ease_factor: float
    interval: int
    repetitions: int
    next_review: datetime


class Scheduler(Protocol):
    def __call__(
        self,
        ease_factor: float,
        interval: int,
        repetitions: int,
        quality: int,
        now: datetime,
    ) -> ScheduleResult: ...


def schedule(ease_factor: float, interval: int, repetitions: int, quality: int, now: datetime) -> ScheduleResult:
    if isinstance(quality, bool) or not isinstance(quality, int) or not 0 <= quality <= 5:
        raise ValueError(f"quality must be an integer between 0 and 5, got {quality!r}")

    penalty = 5 - quality
    new_ease = max(MIN_EASE_FACTOR, ease_factor + (0.1 - penalty * (0.08 + penalty * 0.02)))

    if quality < PASSING_QUALITY:
        new_repetitions = 0
        new_interval = FIRST_INTERVAL
    else:
        if repetitions == 0:
            new_interval = FIRST_INTERVAL
        elif repetitions == 1:
            new_interval = SECOND_INTERVAL
        else:
            new_interval = max(1, round(interval * ease_factor))
        new_repetitions = repetitions + 1

    return ScheduleResult(
        ease_factor=round(new_ease, 2),
        interval=new_interval,
        repetitions=new_repetitions,
        next_review=now + timedelta(days=new_interval),
    )
