import tornado.web

from campus_robot.models import (
    ClientCommandMessage,
    CommandRequest,
    CreateOrderRequest,
    ErrorMessage,
    ExecuteAcceptedMessage,
    ExecuteOrderMessage,
    ModeRequest,
    Order,
    OrderStatusRequest,
    ResetRequest,
    RobotState,
    SchemaDocument,
    StateMessage,
)


class DocsHandler(tornado.web.RequestHandler):
    def get(self):
        order_example = {
            "id": "1",
            "from": "Library",
            "to": "Student Center",
            "status": "queued",
            "plan": [
                {"command": "LEFT", "description": "Turn left to travel along x", "durationMs": 500},
                {"command": "FORWARD", "description": "Forward 1/15 along x", "durationMs": 800},
            ],
            "distance": 20,
            "estimatedTime": 17000,
            "createdAt": "2026-01-01T12:00:00Z",
        }
        robot_example = {"x": 5.0, "y": 5.0, "heading": 90, "mode": "manual", "activity": "ready"}

        schema = SchemaDocument(
            rest_endpoints={
                "GET /health": "Liveness probe.",
                "GET /locations": "Campus location table.",
                "GET /orders": "Orders in creation order.",
                "GET /orders/{id}": "One order.",
                "POST /orders": "Create an order (CreateOrderRequest).",
                "POST /orders/{id}/status": "Override an order status (OrderStatusRequest).",
                "POST /orders/{id}/execute": "Start executing a queued order; returns 202.",
                "POST /tx": "Manual command (CommandRequest); returns RobotState after it settles.",
                "POST /mode": "Switch manual/auto (ModeRequest).",
                "GET /robot": "Current RobotState.",
                "POST /robot/reset": "Force the pose (ResetRequest).",
            },
            websocket_endpoints={"state": "/ws"},
            request_bodies={
                "CreateOrderRequest": CreateOrderRequest.model_json_schema(by_alias=True),
                "OrderStatusRequest": OrderStatusRequest.model_json_schema(),
                "CommandRequest": CommandRequest.model_json_schema(),
                "ModeRequest": ModeRequest.model_json_schema(),
                "ResetRequest": ResetRequest.model_json_schema(),
            },
            inbound_messages={
                "ClientCommandMessage": ClientCommandMessage.model_json_schema(),
                "ExecuteOrderMessage": ExecuteOrderMessage.model_json_schema(by_alias=False),
            },
            outbound_messages={
                "StateMessage": StateMessage.model_json_schema(by_alias=True),
                "ExecuteAcceptedMessage": ExecuteAcceptedMessage.model_json_schema(),
                "ErrorMessage": ErrorMessage.model_json_schema(),
                "Order": Order.model_json_schema(by_alias=True),
                "RobotState": RobotState.model_json_schema(),
            },
            examples={
                "order": order_example,
                "robot": robot_example,
                "tx": {"type": "tx", "cmd": "FORWARD"},
                "execute": {"type": "execute", "order_id": "1"},
            },
            notes=[
                "All REST bodies and WebSocket messages are JSON.",
                "Errors are returned as {error, message} with a 4xx status.",
                "state:update is sent to every socket client after each mutation.",
                "Only one order executes at a time; executing another while one is in progress is refused.",
            ],
        )
        self.set_header("Content-Type", "application/json")
        self.write(schema.model_dump(mode="json"))
