from typing import Any

from pydantic import BaseModel, Field, model_validator

from boundline.interval import Interval, IntervalType


class IntervalConfig(BaseModel):
    """Declarative description of an interval, e.g. loaded from JSON.

    A missing endpoint makes that side unbounded; ``kind`` still decides
    whether the remaining finite endpoint is inclusive.
    """

    start: Any | None = Field(default=None, description="Lower endpoint value")
    end: Any | None = Field(default=None, description="Upper endpoint value")
    kind: IntervalType = Field(
        default=IntervalType.CLOSE,
        description="Which finite endpoints are inclusive",
    )

    @model_validator(mode="after")
    def validate_endpoints(self) -> "IntervalConfig":
        if self.start is None and self.end is None:
            raise ValueError("at least one of start or end must be set")
        return self

    def to_interval(self) -> Interval:
        if self.start is not None and self.end is not None:
            return Interval.from_to(self.start, self.end, self.kind)
        if self.start is not None:
            if self.kind.start_inclusive:
                return Interval.since_inclusive(self.start)
            return Interval.since_exclusive(self.start)
        if self.kind.end_inclusive:
            return Interval.until_inclusive(self.end)
        return Interval.until_exclusive(self.end)
