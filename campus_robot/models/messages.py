from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campus_robot.models.domain import Coordinate, Order, OrderStatus, RobotState


class CreateOrderRequest(BaseModel):
    """Body of POST /orders."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    from_: Optional[str] = Field(default=None, alias="from", description="Pickup location name.")
    to: Optional[str] = Field(default=None, description="Drop-off location name.")


class OrderStatusRequest(BaseModel):
    """Body of POST /orders/{id}/status. A missing status keeps the current one."""

    status: Optional[OrderStatus] = None


class CommandRequest(BaseModel):
    """Body of POST /tx."""

    cmd: Optional[str] = Field(default=None, description="LEFT, RIGHT, FORWARD or BACK.")


class ModeRequest(BaseModel):
    mode: Optional[str] = Field(default=None, description="manual or auto.")


class ResetRequest(BaseModel):
    x: float = 0.0
    y: float = 0.0
    heading: int = 0


class StateSnapshot(BaseModel):
    robot: RobotState
    orders: List[Order] = Field(default_factory=list)
    locations: Dict[str, Coordinate] = Field(default_factory=dict)


class StateMessage(StateSnapshot):
    """Outbound push message: full snapshot on subscribe and after every mutation."""

    type: Literal["state:init", "state:update"] = "state:update"


class ClientCommandMessage(BaseModel):
    """Inbound manual control from a socket client."""

    type: Literal["tx"] = "tx"
    cmd: Optional[str] = None


class ExecuteOrderMessage(BaseModel):
    """Inbound request to execute a queued order's plan."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["execute"] = "execute"
    order_id: str = Field(..., alias="orderId")

    @field_validator("order_id", mode="before")
    @classmethod
    def stringify_order_id(cls, value):
        return str(value) if isinstance(value, int) else value


class ExecuteAcceptedMessage(BaseModel):
    type: Literal["execute:accepted"] = "execute:accepted"
    order_id: str


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    error: str
    message: str


class SchemaDocument(BaseModel):
    """Documentation payload served at /docs for quick reference."""

    rest_endpoints: Dict[str, str]
    websocket_endpoints: Dict[str, str]
    request_bodies: Dict[str, Dict[str, Any]]
    inbound_messages: Dict[str, Dict[str, Any]]
    outbound_messages: Dict[str, Dict[str, Any]]
    examples: Dict[str, Any] = Field(default_factory=dict)
    notes: List[str] = []
