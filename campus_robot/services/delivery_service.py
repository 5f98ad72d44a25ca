from typing import Dict, List, Optional

from campus_robot.errors import InvalidOrderState, InvalidRequest, RobotBusy
from campus_robot.models import Coordinate, Order, OrderStatus, RobotState, StateSnapshot
from campus_robot.repositories import LocationRepository, OrderRepository
from campus_robot.services.broadcaster import StateBroadcaster
from campus_robot.services.command_executor import CommandExecutor
from campus_robot.services.path_planner import PathPlanner
from campus_robot.services.path_runner import PathRunner


class DeliveryService:
    """
    Single owner of the robot state and the order store.

    Handlers and socket clients go through this object; it wires every
    mutation to the broadcaster so observers get a snapshot after each one.
    """

    def __init__(
        self,
        locations: Optional[LocationRepository] = None,
        planner: Optional[PathPlanner] = None,
        settle_ms: Optional[float] = None,
        travel_scale: Optional[float] = None,
    ):
        self.locations = locations or LocationRepository()
        self.broadcaster = StateBroadcaster(self.snapshot)
        self.orders = OrderRepository(self.locations, planner, on_change=self.broadcaster.publish)
        self.executor = CommandExecutor(settle_ms=settle_ms, on_change=self.broadcaster.publish)
        self.runner = PathRunner(self.orders, self.executor, travel_scale=travel_scale)

    def snapshot(self) -> StateSnapshot:
        return StateSnapshot(
            robot=self.executor.snapshot(),
            orders=self.orders.list(),
            locations=self.locations.all(),
        )

    def list_locations(self) -> Dict[str, Coordinate]:
        return self.locations.all()

    def list_orders(self) -> List[Order]:
        return self.orders.list()

    def get_order(self, order_id: str) -> Order:
        return self.orders.get(order_id)

    async def create_order(self, from_location: Optional[str], to_location: Optional[str]) -> Order:
        return await self.orders.create(from_location, to_location)

    async def set_order_status(self, order_id: str, status) -> Order:
        order = self.orders.get(order_id)
        if status is None:
            return order
        try:
            new_status = OrderStatus(status)
        except ValueError:
            raise InvalidRequest("status must be queued|in-progress|completed|failed") from None
        if order.id == self.runner.active_order_id:
            raise InvalidOrderState(f"order {order.id} is being executed")
        # in-progress is entered only by executing; a started order never returns to queued.
        if new_status == OrderStatus.IN_PROGRESS:
            raise InvalidOrderState("in-progress is set by executing the order")
        if new_status == OrderStatus.QUEUED and order.status != OrderStatus.QUEUED:
            raise InvalidOrderState(f"order {order.id} is {order.status.value} and cannot be queued again")
        return await self.orders.set_status(order.id, new_status)

    async def execute_order(self, order_id: str) -> Order:
        return await self.runner.start(order_id)

    async def send_command(self, command) -> RobotState:
        return await self.executor.execute(command)

    async def set_mode(self, mode) -> RobotState:
        return await self.executor.set_mode(mode)

    def robot(self) -> RobotState:
        return self.executor.snapshot()

    async def reset_robot(self, x: float = 0.0, y: float = 0.0, heading: int = 0) -> RobotState:
        if self.runner.active_order_id is not None:
            raise RobotBusy(f"order {self.runner.active_order_id} is in progress")
        return await self.executor.reset(x, y, heading)
