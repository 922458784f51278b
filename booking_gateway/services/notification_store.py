"""
Notification Store
In-memory, newest-first queue of short-lived UI notifications.

One store lives for the whole running UI session and is passed by reference
to whatever needs to enqueue notifications. Each notification owns a
cancellable expiry timer obtained from an injectable scheduler, so tests can
drive expiry with a virtual clock.
"""

import asyncio
import itertools
from typing import Callable, Dict, List, Optional, Protocol, Union

from booking_gateway.models.notification import Notification, NotificationType
from booking_gateway.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TTL_MS = 3000

Subscriber = Callable[[List[Notification]], None]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay and cancel it"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class LoopScheduler:
    """Scheduler backed by the running asyncio event loop"""

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return asyncio.get_running_loop().call_later(delay, callback)


class NotificationStore:
    """
    Holds live notifications, newest first.

    Every mutation (push, expiry, dismiss) is applied to the current list in
    place, so an expiry firing after other pushes only ever removes its own
    entry.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None, default_ttl_ms: int = DEFAULT_TTL_MS):
        if default_ttl_ms <= 0:
            raise ValueError("default_ttl_ms must be positive")
        self._scheduler = scheduler or LoopScheduler()
        self.default_ttl_ms = default_ttl_ms
        self._ids = itertools.count(1)
        self._items: List[Notification] = []
        self._timers: Dict[int, TimerHandle] = {}
        self._subscribers: List[Subscriber] = []

    @property
    def notifications(self) -> List[Notification]:
        """Snapshot of live notifications, newest first"""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def push(
        self,
        message: str,
        type: Union[NotificationType, str] = NotificationType.SUCCESS,
        ttl_ms: Optional[int] = None,
    ) -> Notification:
        """Add a notification at the front and schedule its expiry"""
        if ttl_ms is None:
            ttl_ms = self.default_ttl_ms
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be positive")

        notification = Notification(
            id=next(self._ids),
            message=message,
            type=NotificationType(type),
            ttl_ms=ttl_ms,
        )
        self._items.insert(0, notification)
        self._timers[notification.id] = self._scheduler.call_later(
            ttl_ms / 1000, lambda: self._expire(notification.id)
        )
        self._publish()
        return notification

    def dismiss(self, notification_id: int) -> bool:
        """Remove a notification before its time-to-live elapses"""
        timer = self._timers.pop(notification_id, None)
        if timer is None:
            return False
        timer.cancel()
        self._remove(notification_id)
        return True

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback that receives the newest-first list immediately
        and after every change. Returns a function that unsubscribes it.
        """
        self._subscribers.append(callback)
        callback(self.notifications)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def clear(self) -> None:
        """Cancel every pending timer and drop all notifications"""
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        if self._items:
            self._items.clear()
            self._publish()

    def _expire(self, notification_id: int) -> None:
        # Already dismissed: the timer was cancelled but may still fire on some schedulers
        if self._timers.pop(notification_id, None) is None:
            return
        self._remove(notification_id)

    def _remove(self, notification_id: int) -> None:
        self._items[:] = [n for n in self._items if n.id != notification_id]
        self._publish()

    def _publish(self) -> None:
        snapshot = self.notifications
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception as e:
                logger.error("Notification subscriber failed", error=str(e), exc_info=True)
