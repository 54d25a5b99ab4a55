import asyncio
import logging
import threading
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from sqlmodel import SQLModel

from famfin.models.enums import ChangeType, TransactionKind
from famfin.services.activity import ChangeEvent

logger = logging.getLogger(__name__)


class Subscription:
    """Receiving end for one listener. Events land on an asyncio queue owned by the listener's loop."""

    def __init__(self, user_id: UUID, loop: asyncio.AbstractEventLoop):
        self.user_id = user_id
        self.queue: "asyncio.Queue[ChangeEvent]" = asyncio.Queue()
        self._loop = loop

    def deliver(self, event: ChangeEvent) -> None:
        # publishers run in the threadpool, so hop onto the listener's loop
        self._loop.call_soon_threadsafe(self.queue.put_nowait, event)

    async def get(self) -> ChangeEvent:
        return await self.queue.get()


class ChangeHub:
    def __init__(self):
        self._subscribers: Dict[UUID, List[Subscription]] = {}
        self._lock = threading.Lock()

    def subscribe(self, user_id: UUID) -> Subscription:
        """Must be called from the coroutine that will consume the events."""
        subscription = Subscription(user_id, asyncio.get_running_loop())
        with self._lock:
            self._subscribers.setdefault(user_id, []).append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            listeners = self._subscribers.get(subscription.user_id, [])
            if subscription in listeners:
                listeners.remove(subscription)
            if not listeners:
                self._subscribers.pop(subscription.user_id, None)

    def subscriber_count(self, user_id: UUID) -> int:
        with self._lock:
            return len(self._subscribers.get(user_id, []))

    def publish(self, user_id: UUID, event: ChangeEvent) -> int:
        with self._lock:
            targets = list(self._subscribers.get(user_id, []))

        delivered = 0
        for subscription in targets:
            try:
                subscription.deliver(event)
                delivered += 1
            except RuntimeError:
                logger.warning("Dropping change event %s for a closed listener", event.event_id)
                self.unsubscribe(subscription)
        return delivered


def _row(record: Union[SQLModel, Dict[str, Any], None]) -> Optional[Dict[str, Any]]:
    if record is None or isinstance(record, dict):
        return record
    return record.model_dump(mode="json")


def publish_change(
    user_id: UUID,
    event_type: ChangeType,
    kind: TransactionKind,
    before: Union[SQLModel, Dict[str, Any], None] = None,
    after: Union[SQLModel, Dict[str, Any], None] = None,
) -> ChangeEvent:
    event = ChangeEvent(event_type=event_type, kind=kind, before=_row(before), after=_row(after))
    hub.publish(user_id, event)
    return event


hub = ChangeHub()
