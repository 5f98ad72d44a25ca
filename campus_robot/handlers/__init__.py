from .health_handler import HealthHandler
from .docs_handler import DocsHandler
from .order_handlers import (
    LocationsHandler,
    OrderExecuteHandler,
    OrderHandler,
    OrdersHandler,
    OrderStatusHandler,
)
from .robot_handlers import CommandHandler, ModeHandler, RobotHandler, RobotResetHandler
from .state_ws_handler import StateWebSocketHandler

__all__ = [
    "HealthHandler",
    "DocsHandler",
    "LocationsHandler",
    "OrdersHandler",
    "OrderHandler",
    "OrderStatusHandler",
    "OrderExecuteHandler",
    "CommandHandler",
    "ModeHandler",
    "RobotHandler",
    "RobotResetHandler",
    "StateWebSocketHandler",
]
