import asyncio
import logging
from typing import Callable, Set

from campus_robot.models import StateMessage, StateSnapshot

logger = logging.getLogger(__name__)

MAX_PENDING = 256


class Subscription:
    """
    FIFO stream of serialized push messages for one observer.

    Bounded: when a stalled reader lets it fill up, the oldest message is
    dropped so the newest snapshot always gets through.
    """

    def __init__(self, maxsize: int = MAX_PENDING):
        self._queue: "asyncio.Queue[str]" = asyncio.Queue(maxsize=maxsize)
        self.dropped = 0

    def push(self, message: str):
        if self._queue.full():
            self._queue.get_nowait()
            self.dropped += 1
        self._queue.put_nowait(message)

    async def get(self) -> str:
        return await self._queue.get()

    def get_nowait(self) -> str:
        return self._queue.get_nowait()

    def pending(self) -> int:
        return self._queue.qsize()

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        return await self.get()


class StateBroadcaster:
    """
    Publish/subscribe fan-out of full state snapshots.

    Snapshots are taken and enqueued synchronously inside publish(), so each
    subscriber sees them in the same order the mutations happened. Delivery to
    the transport is left to whoever drains the subscription.
    """

    def __init__(self, snapshot_factory: Callable[[], StateSnapshot], max_pending: int = MAX_PENDING):
        self.snapshot_factory = snapshot_factory
        self.max_pending = max_pending
        self.subscriptions: Set[Subscription] = set()

    def snapshot(self) -> StateSnapshot:
        return self.snapshot_factory()

    def subscribe(self) -> Subscription:
        subscription = Subscription(maxsize=self.max_pending)
        subscription.push(self._render("state:init"))
        self.subscriptions.add(subscription)
        logger.debug("Subscriber added (%d total)", len(self.subscriptions))
        return subscription

    def unsubscribe(self, subscription: Subscription):
        self.subscriptions.discard(subscription)

    def publish(self):
        if not self.subscriptions:
            return
        message = self._render("state:update")
        for subscription in list(self.subscriptions):
            subscription.push(message)

    def _render(self, message_type: str) -> str:
        snapshot = self.snapshot()
        message = StateMessage(
            type=message_type,
            robot=snapshot.robot,
            orders=snapshot.orders,
            locations=snapshot.locations,
        )
        return message.model_dump_json(by_alias=True)
