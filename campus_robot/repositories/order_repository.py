import asyncio
import logging
from typing import Callable, Dict, List, Optional

from campus_robot.errors import MissingEndpoint, OrderNotFound, PlanUnresolved
from campus_robot.models import Coordinate, Order, OrderStatus
from campus_robot.repositories.location_repository import LocationRepository
from campus_robot.services.path_planner import PathPlanner

logger = logging.getLogger(__name__)


class OrderRepository:
    """In-memory store of delivery orders, keyed by id in creation order."""

    def __init__(
        self,
        locations: LocationRepository,
        planner: Optional[PathPlanner] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.locations = locations
        self.planner = planner or PathPlanner()
        self.on_change = on_change
        self._orders: Dict[str, Order] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, from_location: Optional[str], to_location: Optional[str]) -> Order:
        if not from_location or not to_location:
            raise MissingEndpoint("from and to required")

        plan = self.planner.plan(self._lookup(from_location), self._lookup(to_location))
        distance, estimated_time = self.planner.metrics(plan)

        async with self._lock:
            order = Order(
                id=str(self._next_id),
                from_=from_location,
                to=to_location,
                status=OrderStatus.QUEUED,
                plan=plan,
                distance=distance,
                estimated_time=estimated_time,
            )
            self._next_id += 1
            self._orders[order.id] = order
            self._notify()
        logger.info(
            "Order %s created: %s -> %s (%d steps, distance %d)",
            order.id, from_location, to_location, len(plan), distance,
        )
        return order.model_copy(deep=True)

    async def set_status(self, order_id: str, status: OrderStatus) -> Order:
        async with self._lock:
            order = self._require(order_id)
            order.status = status
            self._notify()
            return order.model_copy(deep=True)

    def get(self, order_id: str) -> Order:
        return self._require(order_id).model_copy(deep=True)

    def list(self) -> List[Order]:
        return [order.model_copy(deep=True) for order in self._orders.values()]

    def _require(self, order_id: str) -> Order:
        order = self._orders.get(str(order_id))
        if order is None:
            raise OrderNotFound(f"order {order_id} not found")
        return order

    def _lookup(self, name: str) -> Optional[Coordinate]:
        try:
            return self.locations.resolve(name)
        except PlanUnresolved as exc:
            logger.warning("%s; order will have an empty plan", exc.message)
            return None

    def _notify(self):
        if self.on_change is not None:
            self.on_change()
