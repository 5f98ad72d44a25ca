"""Pydantic models for robot state, orders and the REST/WebSocket message schemas."""

from .domain import (
    Activity,
    Command,
    Coordinate,
    Mode,
    Order,
    OrderStatus,
    PlanStep,
    RobotState,
)
from .messages import (
    ClientCommandMessage,
    CommandRequest,
    CreateOrderRequest,
    ErrorMessage,
    ExecuteAcceptedMessage,
    ExecuteOrderMessage,
    ModeRequest,
    OrderStatusRequest,
    ResetRequest,
    SchemaDocument,
    StateMessage,
    StateSnapshot,
)

__all__ = [
    "Activity",
    "Command",
    "Coordinate",
    "Mode",
    "Order",
    "OrderStatus",
    "PlanStep",
    "RobotState",
    "ClientCommandMessage",
    "CommandRequest",
    "CreateOrderRequest",
    "ErrorMessage",
    "ExecuteAcceptedMessage",
    "ExecuteOrderMessage",
    "ModeRequest",
    "OrderStatusRequest",
    "ResetRequest",
    "SchemaDocument",
    "StateMessage",
    "StateSnapshot",
]
