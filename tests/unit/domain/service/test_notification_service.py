"""Unit tests for NotificationService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from folio.domain.error import NotAuthorizedError, NotFoundError
from folio.domain.model.notification import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.service import NotificationService
from folio.domain.value import NotificationId, NotificationType, UserId
from tests.conftest import NOW
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_notification(
    user_id: UserId, title: str = "New comment", minutes_ago: int = 0, **overrides
) -> Notification:
    fields = {
        "id": NotificationId(uuid4()),
        "user_id": user_id,
        "type": NotificationType.COMMENT,
        "title": title,
        "created_at": NOW - timedelta(minutes=minutes_ago),
    }
    fields.update(overrides)
    return Notification(**fields)


class TestListNotifications:
    """Tests for list_notifications."""

    @pytest.mark.asyncio
    async def test_newest_first_with_unread_count(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_id = UserId(uuid4())
        await notification_repo.save(make_notification(user_id, "old", minutes_ago=10))
        await notification_repo.save(
            make_notification(user_id, "read", minutes_ago=5, is_read=True)
        )
        await notification_repo.save(make_notification(user_id, "new"))
        await notification_repo.save(make_notification(UserId(uuid4()), "not mine"))

        # Act
        inbox = await notification_service.list_notifications(user_id)

        # Assert
        assert [n.title for n in inbox.notifications] == ["new", "read", "old"]
        assert inbox.unread_count == 2

    @pytest.mark.asyncio
    async def test_limit(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_id = UserId(uuid4())
        for i in range(5):
            await notification_repo.save(make_notification(user_id, minutes_ago=i))

        inbox = await notification_service.list_notifications(user_id, limit=2)

        assert len(inbox.notifications) == 2
        assert inbox.unread_count == 5


class TestMarkRead:
    """Tests for marking notifications read."""

    @pytest.mark.asyncio
    async def test_mark_read(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_id = UserId(uuid4())
        notification = await notification_repo.save(make_notification(user_id))

        # Act
        await notification_service.mark_read(notification.id, user_id)

        # Assert
        assert (await notification_repo.find_by_id(notification.id)).is_read

    @pytest.mark.asyncio
    async def test_mark_read_of_someone_elses_notification_forbidden(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        notification = await notification_repo.save(make_notification(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await notification_service.mark_read(notification.id, UserId(uuid4()))
        assert not (await notification_repo.find_by_id(notification.id)).is_read

    @pytest.mark.asyncio
    async def test_mark_read_of_missing_notification(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        with pytest.raises(NotFoundError):
            await notification_service.mark_read(
                NotificationId(uuid4()), UserId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_mark_all_read_only_touches_own_unread(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_id = UserId(uuid4())
        other_id = UserId(uuid4())
        await notification_repo.save(make_notification(user_id))
        await notification_repo.save(make_notification(user_id))
        await notification_repo.save(make_notification(user_id, is_read=True))
        await notification_repo.save(make_notification(other_id))

        # Act
        updated = await notification_service.mark_all_read(user_id)

        # Assert
        assert updated == 2
        assert await notification_repo.count_unread(user_id) == 0
        assert await notification_repo.count_unread(other_id) == 1


class TestDelete:
    """Tests for deleting notifications."""

    @pytest.mark.asyncio
    async def test_delete_own_notification(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_id = UserId(uuid4())
        notification = await notification_repo.save(make_notification(user_id))

        assert await notification_service.delete(notification.id, user_id) is True
        assert await notification_repo.find_by_id(notification.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_notification_is_noop(self, unit_env):
        notification_service = await unit_env.get(NotificationService)

        deleted = await notification_service.delete(
            NotificationId(uuid4()), UserId(uuid4())
        )

        assert deleted is False

    @pytest.mark.asyncio
    async def test_delete_someone_elses_notification_forbidden(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        notification = await notification_repo.save(make_notification(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await notification_service.delete(notification.id, UserId(uuid4()))
        assert await notification_repo.find_by_id(notification.id) is not None
