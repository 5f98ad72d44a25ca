import asyncio
import logging
import os
from typing import Optional

from campus_robot.errors import InvalidCommand, InvalidOrderState
from campus_robot.models import Activity, Order, OrderStatus
from campus_robot.repositories import OrderRepository
from campus_robot.services.command_executor import CommandExecutor

logger = logging.getLogger(__name__)


class PathRunner:
    """
    Drives one order's plan through the CommandExecutor in a background task.

    Only one order runs at a time; starting another while a run is active is
    refused with InvalidOrderState rather than queued.
    """

    def __init__(
        self,
        orders: OrderRepository,
        executor: CommandExecutor,
        travel_scale: Optional[float] = None,
    ):
        self.orders = orders
        self.executor = executor
        self.travel_scale = (
            travel_scale if travel_scale is not None else float(os.getenv("ROBOT_TRAVEL_SCALE", "1.0"))
        )
        self.active_order_id: Optional[str] = None
        self._task: Optional[asyncio.Task] = None

    async def start(self, order_id: str) -> Order:
        """Mark the order in-progress and spawn its run. Returns without waiting for it."""
        order = self.orders.get(order_id)
        if order.status != OrderStatus.QUEUED:
            raise InvalidOrderState(f"order {order.id} is {order.status.value}, only queued orders can be executed")
        if self.active_order_id is not None:
            raise InvalidOrderState(f"order {self.active_order_id} is already in progress")

        self.active_order_id = order.id
        order = await self.orders.set_status(order.id, OrderStatus.IN_PROGRESS)
        self._task = asyncio.create_task(self._run(order))
        return order

    async def wait(self):
        """Wait for the current run, if any, to finish."""
        if self._task is not None:
            await asyncio.shield(self._task)

    async def _run(self, order: Order):
        logger.info("Executing order %s: %s -> %s (%d steps)", order.id, order.from_, order.to, len(order.plan))
        try:
            await self.executor.enter_path()
            for index, step in enumerate(order.plan, start=1):
                await self.executor.execute(step.command)
                logger.debug("Order %s step %d/%d: %s", order.id, index, len(order.plan), step.description)
                delay = step.duration_ms / 1000.0 * self.travel_scale
                if delay > 0:
                    await asyncio.sleep(delay)
        except InvalidCommand as exc:
            logger.warning("Order %s failed: %s", order.id, exc.message)
            await self._finish(order, OrderStatus.FAILED, Activity.ERROR)
        except Exception:
            logger.exception("Order %s failed with an unexpected error", order.id)
            await self._finish(order, OrderStatus.FAILED, Activity.ERROR)
        else:
            logger.info("Order %s completed", order.id)
            await self._finish(order, OrderStatus.COMPLETED, Activity.READY)

    async def _finish(self, order: Order, status: OrderStatus, activity: Activity):
        try:
            await self.orders.set_status(order.id, status)
            await self.executor.leave_path(activity)
        finally:
            self.active_order_id = None
