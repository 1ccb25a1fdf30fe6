import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from boundline.bound_point import BoundPoint, BoundProximity, Finite

_LOGGER = logging.getLogger(__name__)


class IntervalType(str, Enum):
    """Which finite endpoints of an interval are inclusive."""

    OPEN = "open"
    START_OPEN = "start_open"
    END_OPEN = "end_open"
    CLOSE = "close"

    @property
    def start_inclusive(self) -> bool:
        return self in (IntervalType.END_OPEN, IntervalType.CLOSE)

    @property
    def end_inclusive(self) -> bool:
        return self in (IntervalType.START_OPEN, IntervalType.CLOSE)


class IntervalError(ValueError):
    """Raised when an interval cannot be built from its endpoints."""


class StartMustBeMinorThanEndError(IntervalError):
    """Raised when the start endpoint is strictly greater than the end."""

    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(
            f"interval start must not be greater than end: {start!r} > {end!r}"
        )
        self.start = start
        self.end = end


def _start_text(point: BoundPoint) -> str:
    if not isinstance(point.value, Finite):
        return f"({point}"
    bracket = "[" if point.value.proximity == BoundProximity.AT else "("
    return f"{bracket}{point.value.value}"


def _end_text(point: BoundPoint) -> str:
    if not isinstance(point.value, Finite):
        return f"{point})"
    bracket = "]" if point.value.proximity == BoundProximity.AT else ")"
    return f"{point.value.value}{bracket}"


class Interval(BaseModel):
    """A range on an ordered axis, stored as two bound points.

    Build intervals through ``from_to`` or one of the ``since_*`` /
    ``until_*`` factories. The interval kind is folded into the proximity
    of each endpoint, so queries never branch on it.
    """

    model_config = ConfigDict(frozen=True)

    start: BoundPoint = Field(description="Lower endpoint")
    end: BoundPoint = Field(description="Upper endpoint")

    @classmethod
    def from_to(cls, start: Any, end: Any, kind: IntervalType) -> "Interval":
        """Build a bounded interval from raw endpoint values.

        Raises:
            StartMustBeMinorThanEndError: if ``start > end``. Equal endpoints
                are accepted for every kind; an open one is empty.
        """
        kind = IntervalType(kind)
        if start > end:
            _LOGGER.debug(
                "Rejecting %s interval with start %r > end %r",
                kind.value,
                start,
                end,
            )
            raise StartMustBeMinorThanEndError(start, end)

        lower = (
            BoundPoint.at(start)
            if kind.start_inclusive
            else BoundPoint.after(start)
        )
        upper = (
            BoundPoint.at(end) if kind.end_inclusive else BoundPoint.before(end)
        )
        return cls(start=lower, end=upper)

    @classmethod
    def new(cls, start: Any, end: Any, kind: IntervalType) -> "Interval":
        return cls.from_to(start, end, kind)

    @classmethod
    def since_exclusive(cls, value: Any) -> "Interval":
        return cls(start=BoundPoint.after(value), end=BoundPoint.pos_infinity())

    @classmethod
    def since_inclusive(cls, value: Any) -> "Interval":
        return cls(start=BoundPoint.at(value), end=BoundPoint.pos_infinity())

    @classmethod
    def until_exclusive(cls, value: Any) -> "Interval":
        return cls(start=BoundPoint.neg_infinity(), end=BoundPoint.before(value))

    @classmethod
    def until_inclusive(cls, value: Any) -> "Interval":
        return cls(start=BoundPoint.neg_infinity(), end=BoundPoint.at(value))

    def contains(self, value: Any) -> bool:
        point = BoundPoint.at(value)
        return self.start <= point and self.end >= point

    def overlaps(self, other: "Interval") -> bool:
        # Compared on bound points so shared open endpoints do not count.
        return self.start <= other.end and self.end >= other.start

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __str__(self) -> str:
        return f"{_start_text(self.start)}, {_end_text(self.end)}"
