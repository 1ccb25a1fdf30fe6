"""Points and intervals on any totally ordered axis."""

from boundline.bound_point import (
    BoundPoint,
    BoundProximity,
    BoundValue,
    Finite,
    NegInfinity,
    PosInfinity,
)
from boundline.config import IntervalConfig
from boundline.interval import (
    Interval,
    IntervalError,
    IntervalType,
    StartMustBeMinorThanEndError,
)

__all__ = [
    "BoundPoint",
    "BoundProximity",
    "BoundValue",
    "Finite",
    "Interval",
    "IntervalConfig",
    "IntervalError",
    "IntervalType",
    "NegInfinity",
    "PosInfinity",
    "StartMustBeMinorThanEndError",
]
