import asyncio
import json
import logging
from typing import Optional

import tornado.websocket
from pydantic import ValidationError

from campus_robot.errors import DeliveryError, InvalidRequest
from campus_robot.models import ClientCommandMessage, ErrorMessage, ExecuteAcceptedMessage, ExecuteOrderMessage
from campus_robot.services.broadcaster import Subscription
from campus_robot.services.delivery_service import DeliveryService

logger = logging.getLogger(__name__)


class StateWebSocketHandler(tornado.websocket.WebSocketHandler):
    """
    Push channel for consoles and maps.

    Sends state:init on connect and state:update after every mutation. Accepts
    {"type": "tx"} and {"type": "execute"} messages mapped to the REST
    operations; replies and errors share the subscription queue so they stay
    ordered with the state updates.
    """

    def initialize(self, service: DeliveryService):
        self.service = service
        self.subscription: Optional[Subscription] = None
        self._pump: Optional[asyncio.Task] = None

    def check_origin(self, origin: str) -> bool:
        # Allow cross-origin WebSocket connections (lock down in production).
        return True

    def open(self):
        self.subscription = self.service.broadcaster.subscribe()
        self._pump = asyncio.ensure_future(self._pump_messages(self.subscription))
        logger.info("Socket client connected from %s", self.request.remote_ip)

    async def _pump_messages(self, subscription: Subscription):
        async for message in subscription:
            try:
                await self.write_message(message)
            except tornado.websocket.WebSocketClosedError:
                break

    async def on_message(self, message: str):
        try:
            parsed = self._parse_client_message(message)
            if isinstance(parsed, ClientCommandMessage):
                await self.service.send_command(parsed.cmd)
            elif isinstance(parsed, ExecuteOrderMessage):
                order = await self.service.execute_order(parsed.order_id)
                self._reply(ExecuteAcceptedMessage(order_id=order.id).model_dump_json())
        except DeliveryError as exc:
            self._reply(ErrorMessage(error=exc.name, message=exc.message).model_dump_json())

    def _parse_client_message(self, message: str):
        try:
            payload = json.loads(message)
        except json.JSONDecodeError:
            raise InvalidRequest("message must be JSON") from None
        if not isinstance(payload, dict):
            raise InvalidRequest("message must be a JSON object")

        msg_type = payload.get("type")
        try:
            if msg_type == "tx":
                return ClientCommandMessage.model_validate(payload)
            if msg_type == "execute":
                return ExecuteOrderMessage.model_validate(payload)
        except ValidationError as exc:
            raise InvalidRequest(f"invalid {msg_type} message: {exc.errors()[0]['msg']}") from None
        raise InvalidRequest(f"unsupported message type: {msg_type}")

    def _reply(self, message: str):
        if self.subscription is not None:
            self.subscription.push(message)

    def on_close(self):
        if self.subscription is not None:
            self.service.broadcaster.unsubscribe(self.subscription)
        if self._pump is not None:
            self._pump.cancel()
        logger.info("Socket client disconnected")
