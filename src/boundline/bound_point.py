from enum import IntEnum
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field


class BoundProximity(IntEnum):
    """Where a finite bound sits relative to its value.

    Ordered ``BEFORE < AT < AFTER``. ``BEFORE`` is used for an exclusive
    upper bound, ``AT`` for an inclusive bound and ``AFTER`` for an
    exclusive lower bound.
    """

    BEFORE = 0
    AT = 1
    AFTER = 2


class _BoundValueBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: ClassVar[int]

    def sort_key(self) -> tuple[Any, ...]:
        return (self.rank,)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _BoundValueBase):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, _BoundValueBase):
            return NotImplemented
        return self.sort_key() <= other.sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, _BoundValueBase):
            return NotImplemented
        return self.sort_key() > other.sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, _BoundValueBase):
            return NotImplemented
        return self.sort_key() >= other.sort_key()


class NegInfinity(_BoundValueBase):
    """Lower unbounded limit, below every other bound value."""

    kind: Literal["neg_infinity"] = "neg_infinity"
    rank: ClassVar[int] = 0

    def __str__(self) -> str:
        return "-inf"


class Finite(_BoundValueBase):
    """A value on the axis together with its proximity marker."""

    kind: Literal["finite"] = "finite"
    rank: ClassVar[int] = 1
    value: Any
    proximity: BoundProximity

    def sort_key(self) -> tuple[Any, ...]:
        # Proximity only breaks ties between equal axis values.
        return (self.rank, self.value, self.proximity)

    def __str__(self) -> str:
        suffix = {
            BoundProximity.BEFORE: "-",
            BoundProximity.AT: "",
            BoundProximity.AFTER: "+",
        }[self.proximity]
        return f"{self.value}{suffix}"


class PosInfinity(_BoundValueBase):
    """Upper unbounded limit, above every other bound value."""

    kind: Literal["pos_infinity"] = "pos_infinity"
    rank: ClassVar[int] = 2

    def __str__(self) -> str:
        return "+inf"


BoundValue = Annotated[
    NegInfinity | Finite | PosInfinity,
    Field(discriminator="kind"),
]


class BoundPoint(BaseModel):
    """An interval endpoint on an ordered axis.

    Bound points are totally ordered through their wrapped ``BoundValue``,
    so exclusive and inclusive endpoints compare uniformly:
    ``before(x) < at(x) < after(x)`` and, for ``x < y``, every bound at
    ``x`` sorts below every bound at ``y``.
    """

    model_config = ConfigDict(frozen=True)

    value: BoundValue

    @classmethod
    def before(cls, value: Any) -> "BoundPoint":
        return cls(value=Finite(value=value, proximity=BoundProximity.BEFORE))

    @classmethod
    def at(cls, value: Any) -> "BoundPoint":
        return cls(value=Finite(value=value, proximity=BoundProximity.AT))

    @classmethod
    def after(cls, value: Any) -> "BoundPoint":
        return cls(value=Finite(value=value, proximity=BoundProximity.AFTER))

    @classmethod
    def neg_infinity(cls) -> "BoundPoint":
        return cls(value=NegInfinity())

    @classmethod
    def pos_infinity(cls) -> "BoundPoint":
        return cls(value=PosInfinity())

    @property
    def is_finite(self) -> bool:
        return isinstance(self.value, Finite)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BoundPoint):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BoundPoint):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BoundPoint):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BoundPoint):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return str(self.value)
