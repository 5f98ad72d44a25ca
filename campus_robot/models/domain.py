from datetime import datetime, timezone
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Command(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FORWARD = "FORWARD"
    BACK = "BACK"


class Mode(str, Enum):
    MANUAL = "manual"
    AUTO = "auto"


class Activity(str, Enum):
    READY = "ready"
    MOVING = "moving"
    EXECUTING_PATH = "executing-path"
    ERROR = "error"


class OrderStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    FAILED = "failed"


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., description="Grid column (signed).")
    y: int = Field(..., description="Grid row (signed).")


class RobotState(BaseModel):
    """Pose, mode and activity of the single simulated robot."""

    x: float = Field(default=0.0, description="Position along x in grid units.")
    y: float = Field(default=0.0, description="Position along y in grid units.")
    heading: int = Field(default=0, description="Heading in degrees, [0, 360).")
    mode: Mode = Field(default=Mode.MANUAL, description="Who is driving: manual operator or path runner.")
    activity: Activity = Field(default=Activity.READY, description="What the robot is doing right now.")

    @field_validator("heading")
    @classmethod
    def normalize_heading(cls, value):
        return value % 360


class PlanStep(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    command: Command
    description: str = Field(..., description="Human readable step, e.g. 'Forward 3/15'.")
    duration_ms: int = Field(..., alias="durationMs", description="Travel time hint in milliseconds.")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Order(BaseModel):
    """A delivery between two named locations and the plan computed for it."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Monotonically assigned order id.")
    from_: str = Field(..., alias="from", description="Pickup location name.")
    to: str = Field(..., description="Drop-off location name.")
    status: OrderStatus = Field(default=OrderStatus.QUEUED)
    plan: List[PlanStep] = Field(default_factory=list, description="Commands planned at creation time.")
    distance: int = Field(default=0, description="Number of FORWARD steps in the plan.")
    estimated_time: int = Field(default=0, alias="estimatedTime", description="Sum of step durations (ms).")
    created_at: datetime = Field(default_factory=_utcnow, alias="createdAt")
