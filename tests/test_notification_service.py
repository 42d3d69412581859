"""Tests for notification access operations."""

from uuid import uuid4

import pytest

from therapy_scheduler.domain.errors import NotFoundError
from therapy_scheduler.domain.notifications import NotificationType


def _create(service, user_id, title="Reminder"):
    return service.create_notification(
        user_id=user_id,
        title=title,
        message="Your session starts in one hour.",
        notification_type=NotificationType.SESSION_REMINDER,
    )


def test_create_notification_defaults(notification_service, user) -> None:
    notification = _create(notification_service, user.id)

    assert notification.read is False
    assert notification.session_id is None
    assert notification.type == NotificationType.SESSION_REMINDER
    assert notification_service.get_notification(notification.id) == notification


def test_list_by_user_newest_first(notification_service, user) -> None:
    first = _create(notification_service, user.id, title="first")
    second = _create(notification_service, user.id, title="second")
    _create(notification_service, uuid4(), title="someone else")

    listed = notification_service.list_by_user(user.id)

    assert [n.id for n in listed] == [second.id, first.id]


def test_list_unread_filters_read(notification_service, user) -> None:
    first = _create(notification_service, user.id, title="first")
    second = _create(notification_service, user.id, title="second")

    notification_service.mark_as_read(second.id)

    assert [n.id for n in notification_service.list_unread_by_user(user.id)] == [
        first.id
    ]


def test_mark_as_read_is_idempotent(
    notification_service, notification_repository, user
) -> None:
    notification = _create(notification_service, user.id)

    first = notification_service.mark_as_read(notification.id)
    second = notification_service.mark_as_read(notification.id)

    assert first.read is True
    assert second.read is True
    assert second.created_at == notification.created_at
    assert notification_repository.notifications[notification.id].read is True


def test_mark_as_read_missing_raises(notification_service) -> None:
    missing = uuid4()

    with pytest.raises(NotFoundError) as excinfo:
        notification_service.mark_as_read(missing)

    assert excinfo.value.entity == "notification"
    assert excinfo.value.entity_id == missing


def test_delete_notification(notification_service, user) -> None:
    notification = _create(notification_service, user.id)

    notification_service.delete_notification(notification.id)
    notification_service.delete_notification(notification.id)

    assert notification_service.get_notification(notification.id) is None
