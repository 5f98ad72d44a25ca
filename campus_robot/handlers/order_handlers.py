from campus_robot.handlers.base_handler import BaseHandler
from campus_robot.models import CreateOrderRequest, OrderStatusRequest


class LocationsHandler(BaseHandler):
    def get(self):
        self.write_json(self.service.list_locations())


class OrdersHandler(BaseHandler):
    def get(self):
        self.write_json(self.service.list_orders())

    async def post(self):
        body = self.parse_body(CreateOrderRequest)
        order = await self.service.create_order(body.from_, body.to)
        self.write_json(order, status=201)


class OrderHandler(BaseHandler):
    def get(self, order_id: str):
        self.write_json(self.service.get_order(order_id))


class OrderStatusHandler(BaseHandler):
    async def post(self, order_id: str):
        body = self.parse_body(OrderStatusRequest)
        order = await self.service.set_order_status(order_id, body.status)
        self.write_json(order)


class OrderExecuteHandler(BaseHandler):
    async def post(self, order_id: str):
        # Execution continues in the background; progress arrives over /ws.
        order = await self.service.execute_order(order_id)
        self.write_json({"ok": True, "order": order}, status=202)
