from zencafe.notifications.notification.events import NotificationCreated, NotificationRead
from zencafe.notifications.notification.notification import Notification


def _broadcast(**overrides):
    fields = {
        "notification_type": "order_placed",
        "title": "New Order Placed",
        "message": "New order #abcd1234 placed by Nimali for LKR 25.98",
        "entity_id": "abcd1234-0000",
        "context": {"order_id": "abcd1234-0000"},
    }
    fields.update(overrides)
    return Notification.create(**fields)


class TestCreate:
    def test_broadcast_without_user(self):
        notification = _broadcast()

        assert notification.is_broadcast
        assert notification.recipient_type == "Admins"
        assert notification.is_read is False

    def test_user_notification(self):
        notification = _broadcast(notification_type="order_status_changed", user_id="user-1")

        assert not notification.is_broadcast
        assert notification.recipient_type == "User"

    def test_context_round_trips_as_json(self):
        assert _broadcast().context == {"order_id": "abcd1234-0000"}

    def test_created_event(self):
        notification = _broadcast()

        [event] = notification._events
        assert isinstance(event, NotificationCreated)
        assert event.user_id is None
        assert event.notification_type == "order_placed"


class TestMarkRead:
    def test_mark_read(self):
        notification = _broadcast()
        notification._events.clear()

        notification.mark_read()

        assert notification.is_read is True
        assert isinstance(notification._events[-1], NotificationRead)

    def test_second_mark_is_a_no_op(self):
        notification = _broadcast()
        notification.mark_read()
        notification._events.clear()

        notification.mark_read()

        assert notification._events == []
