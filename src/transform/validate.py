"""Range checks applied before records reach the aggregator.

The aggregator trusts its input; these checks mirror the limits the tracker
enforces when rows are written (period 1-3, rink coordinates 0-1000,
faceoff counts non-negative with won <= taken).
"""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from src.models.events import FaceoffRecord, GoalRecord, ShotRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_PERIOD = 1
MAX_PERIOD = 3
MIN_COORD = 0.0
MAX_COORD = 1000.0


class ValidationError(ValueError):
    """A tracker record is outside the range the aggregator accepts."""


def _check_period(period_number: int, record_id: str) -> None:
    if not MIN_PERIOD <= period_number <= MAX_PERIOD:
        raise ValidationError(
            f"{record_id}: period_number must be between {MIN_PERIOD} and {MAX_PERIOD}, "
            f"got {period_number}"
        )


def validate_shot(shot: ShotRecord) -> ShotRecord:
    """Return the shot unchanged, or raise ValidationError."""
    _check_period(shot.period_number, shot.id)
    for name, coord in (("x_coord", shot.x_coord), ("y_coord", shot.y_coord)):
        if coord is not None and not MIN_COORD <= coord <= MAX_COORD:
            raise ValidationError(f"{shot.id}: invalid {name} {coord}")
    return shot


def validate_goal(goal: GoalRecord) -> GoalRecord:
    """Return the goal unchanged, or raise ValidationError."""
    _check_period(goal.period_number, goal.id)
    return goal


def validate_faceoff(faceoff: FaceoffRecord) -> FaceoffRecord:
    """Return the faceoff row unchanged, or raise ValidationError."""
    if faceoff.taken < 0 or faceoff.won < 0:
        raise ValidationError(
            f"faceoffs for {faceoff.player_id}: counts must be non-negative "
            f"(taken={faceoff.taken}, won={faceoff.won})"
        )
    if faceoff.won > faceoff.taken:
        raise ValidationError(
            f"faceoffs for {faceoff.player_id}: won ({faceoff.won}) exceeds "
            f"taken ({faceoff.taken})"
        )
    return faceoff


def filter_valid(records: Iterable[T], validator: Callable[[T], T]) -> list[T]:
    """Keep the records that pass ``validator``, logging the ones that don't."""
    valid: list[T] = []
    rejected = 0
    for record in records:
        try:
            valid.append(validator(record))
        except ValidationError as e:
            rejected += 1
            logger.warning("Dropping invalid record: %s", e)

    if rejected:
        logger.info("Kept %d records, dropped %d invalid", len(valid), rejected)
    return valid
