"""
Unit tests for the notification store
"""

import asyncio

import pytest

from booking_gateway.models.notification import NotificationType
from booking_gateway.services.notification_store import DEFAULT_TTL_MS, NotificationStore


def ids(store):
    return [n.id for n in store.notifications]


class TestNotificationStore:
    """Push, expiry and dismissal"""

    def test_newest_first(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        for message in ("one", "two", "three"):
            store.push(message)

        assert ids(store) == [3, 2, 1]
        assert [n.message for n in store.notifications] == ["three", "two", "one"]

    def test_expiry_removes_only_its_own_entry(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("one", ttl_ms=5000)
        store.push("two", ttl_ms=1000)
        store.push("three", ttl_ms=5000)

        scheduler.advance(1.0)

        assert ids(store) == [3, 1]

    def test_default_ttl(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        notification = store.push("saved")

        assert notification.ttl_ms == DEFAULT_TTL_MS == 3000
        scheduler.advance(2.5)
        assert ids(store) == [1]
        scheduler.advance(0.5)
        assert ids(store) == []

    def test_expiry_after_later_pushes_keeps_them(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("first")
        scheduler.advance(2.0)
        store.push("second")
        store.push("third")

        scheduler.advance(1.0)

        assert ids(store) == [3, 2]
        scheduler.advance(2.0)
        assert ids(store) == []

    def test_dismiss_cancels_timer(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("one")
        store.push("two")

        assert store.dismiss(1) is True
        assert ids(store) == [2]
        assert scheduler.pending == 1

        scheduler.advance(3.0)
        assert ids(store) == []

    def test_dismiss_unknown_or_expired(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("one")
        scheduler.advance(3.0)

        assert store.dismiss(1) is False
        assert store.dismiss(42) is False

    def test_severity(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        error = store.push("Falha ao salvar", type="error")
        info = store.push("Carregando", type=NotificationType.INFO)

        assert error.type is NotificationType.ERROR
        assert info.type is NotificationType.INFO
        assert store.push("ok").type is NotificationType.SUCCESS

    def test_invalid_severity(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        with pytest.raises(ValueError):
            store.push("?", type="warning")
        assert len(store) == 0

    @pytest.mark.parametrize("ttl_ms", [0, -100])
    def test_non_positive_ttl_rejected(self, scheduler, ttl_ms):
        store = NotificationStore(scheduler=scheduler)
        with pytest.raises(ValueError):
            store.push("x", ttl_ms=ttl_ms)

    def test_custom_default_ttl(self, scheduler):
        store = NotificationStore(scheduler=scheduler, default_ttl_ms=500)
        store.push("quick")
        scheduler.advance(0.5)
        assert len(store) == 0

    def test_ids_unique_over_rapid_pushes(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        pushed = [store.push(f"msg {i}").id for i in range(10_000)]

        assert len(set(pushed)) == 10_000
        assert pushed == sorted(pushed)

    def test_snapshot_is_a_copy(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("one")
        snapshot = store.notifications
        snapshot.clear()
        assert len(store) == 1

    def test_clear(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("one")
        store.push("two")

        store.clear()

        assert len(store) == 0
        assert scheduler.pending == 0


class TestSubscriptions:
    """Subscribers see every change"""

    def test_subscriber_gets_current_value_then_changes(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        store.push("existing")
        seen = []

        store.subscribe(lambda items: seen.append([n.id for n in items]))
        store.push("new")
        scheduler.advance(3.0)

        assert seen == [[1], [2, 1], [2], []]

    def test_unsubscribe(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        seen = []
        unsubscribe = store.subscribe(lambda items: seen.append(len(items)))

        unsubscribe()
        store.push("ignored")

        assert seen == [0]

    def test_failing_subscriber_does_not_block_others(self, scheduler):
        store = NotificationStore(scheduler=scheduler)
        seen = []

        def broken(items):
            if items:
                raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(lambda items: seen.append(len(items)))
        store.push("one")

        assert seen == [0, 1]
        assert len(store) == 1


@pytest.mark.asyncio
async def test_loop_scheduler_expires_notifications():
    """Default scheduler uses the running event loop"""
    store = NotificationStore(default_ttl_ms=20)
    store.push("short lived")
    store.push("dismissed", ttl_ms=10_000)
    assert store.dismiss(2) is True

    await asyncio.sleep(0.1)

    assert len(store) == 0


def test_default_ttl_must_be_positive():
    with pytest.raises(ValueError):
        NotificationStore(default_ttl_ms=0)
