"""API tests for the HTTP surface, backed by in-memory persistence."""

from uuid import uuid4

import httpx
import pytest
import pytest_asyncio

from folio.config import AuthSettings
from folio.domain.model.notification import Notification
from folio.domain.repository import NotificationRepository, PostRepository
from folio.domain.value import NotificationId, NotificationType, UserId, UserRole
from folio.interface.api.app import create_app
from folio.util.jwt import create_token
from tests.conftest import make_post
from tests.di import build_test_container


@pytest_asyncio.fixture
async def container():
    test_container = build_test_container()
    yield test_container
    await test_container.close()


@pytest_asyncio.fixture
async def client(container):
    app_instance = create_app(container)
    transport = httpx.ASGITransport(app=app_instance)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def auth_cookies(user_id: str, role: UserRole = UserRole.USER) -> dict[str, str]:
    return {"auth_token": create_token(user_id, AuthSettings(), role)}


async def seed_post(container, **kwargs):
    post_repo = await container.get(PostRepository)
    return await post_repo.save(make_post(**kwargs))


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPostRoutes:
    """Tests for reading and discovery endpoints."""

    @pytest.mark.asyncio
    async def test_list_posts_filters_by_tags(self, client, container):
        # Arrange
        await seed_post(container, title="Both", tags=["rust", "go"])
        await seed_post(container, title="One", tags=["rust"])

        # Act
        response = await client.get("/posts", params={"tags": ["rust", "go"]})

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert [p["title"] for p in body["posts"]] == ["Both"]
        assert body["total"] == 1
        assert body["degraded"] is False

    @pytest.mark.asyncio
    async def test_get_post(self, client, container):
        post = await seed_post(container, title="Hello", content="word " * 300)

        response = await client.get(f"/posts/{post.id}")

        assert response.status_code == 200
        assert response.json()["post"]["reading_time"] == 2

    @pytest.mark.asyncio
    async def test_get_unpublished_post_is_404(self, client, container):
        draft = await seed_post(container, published=False)

        response = await client.get(f"/posts/{draft.id}")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_malformed_post_id_is_422(self, client):
        response = await client.get("/posts/not-a-uuid")

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_related_posts(self, client, container):
        reference = await seed_post(container, title="ref", tags=["rust"])
        for i in range(4):
            await seed_post(container, title=f"p{i}", tags=["rust"])

        response = await client.get(f"/posts/{reference.id}/related")

        assert response.status_code == 200
        assert len(response.json()["posts"]) == 3


class TestEngagementRoutes:
    """Tests for views, likes and bookmarks."""

    @pytest.mark.asyncio
    async def test_view_counted_once_per_visit(self, client, container):
        # Arrange
        post = await seed_post(container)

        # Act
        first = await client.post(f"/posts/{post.id}/views", json={"visit_id": "v1"})
        second = await client.post(f"/posts/{post.id}/views", json={"visit_id": "v1"})
        engagement = await client.get(f"/posts/{post.id}/engagement")

        # Assert
        assert first.json() == {"counted": True}
        assert second.json() == {"counted": False}
        assert engagement.json()["views"] == 1

    @pytest.mark.asyncio
    async def test_view_of_missing_post_not_counted(self, client):
        response = await client.post(f"/posts/{uuid4()}/views", json={"visit_id": "v1"})

        assert response.status_code == 200
        assert response.json() == {"counted": False}

    @pytest.mark.asyncio
    async def test_like_requires_authentication(self, client, container):
        post = await seed_post(container)

        response = await client.post(f"/posts/{post.id}/like")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_like_toggle(self, client, container):
        # Arrange
        post = await seed_post(container)
        cookies = auth_cookies(str(uuid4()))

        # Act
        client.cookies.update(cookies)
        liked = await client.post(f"/posts/{post.id}/like")
        unliked = await client.post(f"/posts/{post.id}/like")

        # Assert
        assert liked.json() == {"liked": True, "like_count": 1}
        assert unliked.json() == {"liked": False, "like_count": 0}

    @pytest.mark.asyncio
    async def test_like_missing_post_is_404(self, client):
        client.cookies.update(auth_cookies(str(uuid4())))

        response = await client.post(f"/posts/{uuid4()}/like")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_bookmark_and_list(self, client, container):
        # Arrange
        post = await seed_post(container, title="Keep")
        client.cookies.update(auth_cookies(str(uuid4())))

        # Act
        toggled = await client.post(f"/posts/{post.id}/bookmark")
        listed = await client.get("/bookmarks")

        # Assert
        assert toggled.json() == {"bookmarked": True}
        assert [p["title"] for p in listed.json()["posts"]] == ["Keep"]

    @pytest.mark.asyncio
    async def test_bookmarks_require_authentication(self, client):
        response = await client.get("/bookmarks")

        assert response.status_code == 401


class TestFacetRoutes:
    @pytest.mark.asyncio
    async def test_facets(self, client, container):
        await seed_post(container, tags=["rust"], author_name="Ada")

        response = await client.get("/facets")

        assert response.status_code == 200
        body = response.json()
        assert body["tags"] == ["rust"]
        assert body["date_ranges"] == ["week", "month", "year"]


class TestReadingListRoutes:
    """Tests for the reading list endpoints."""

    @pytest.mark.asyncio
    async def test_owner_flow(self, client, container):
        # Arrange
        post = await seed_post(container, title="Saved")
        client.cookies.update(auth_cookies(str(uuid4())))

        # Act & Assert
        created = await client.post(
            "/reading-lists", json={"name": "Weekend", "is_public": True}
        )
        assert created.status_code == 201
        list_id = created.json()["list_id"]

        added = await client.put(f"/reading-lists/{list_id}/posts/{post.id}")
        assert added.json()["post_ids"] == [str(post.id)]

        listed = await client.get("/reading-lists")
        [reading_list] = listed.json()["reading_lists"]
        assert reading_list["name"] == "Weekend"
        assert [p["title"] for p in reading_list["posts"]] == ["Saved"]

        removed = await client.delete(f"/reading-lists/{list_id}/posts/{post.id}")
        assert removed.json() == {"removed": True}

        deleted = await client.delete(f"/reading-lists/{list_id}")
        assert deleted.json() == {"deleted": True}

    @pytest.mark.asyncio
    async def test_blank_name_is_400(self, client):
        client.cookies.update(auth_cookies(str(uuid4())))

        response = await client.post("/reading-lists", json={"name": "  "})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client):
        response = await client.get("/reading-lists")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_other_users_list_is_403(self, client, container):
        # Arrange
        post = await seed_post(container)
        client.cookies.update(auth_cookies(str(uuid4())))
        created = await client.post("/reading-lists", json={"name": "Mine"})
        list_id = created.json()["list_id"]

        # Act
        client.cookies.update(auth_cookies(str(uuid4())))
        response = await client.put(f"/reading-lists/{list_id}/posts/{post.id}")

        # Assert
        assert response.status_code == 403


class TestNotificationRoutes:
    """Tests for the notification center endpoints."""

    @pytest.mark.asyncio
    async def test_owner_flow(self, client, container):
        # Arrange
        user_id = UserId(uuid4())
        notification_repo = await container.get(NotificationRepository)
        notification = await notification_repo.save(
            Notification(
                id=NotificationId(uuid4()),
                user_id=user_id,
                type=NotificationType.COMMENT,
                title="New comment",
            )
        )
        client.cookies.update(auth_cookies(str(user_id)))

        # Act & Assert
        listed = await client.get("/notifications")
        assert listed.json()["unread_count"] == 1

        read = await client.post(f"/notifications/{notification.id}/read")
        assert read.status_code == 204

        read_all = await client.post("/notifications/read-all")
        assert read_all.json() == {"updated": 0}

        deleted = await client.delete(f"/notifications/{notification.id}")
        assert deleted.json() == {"deleted": True}

    @pytest.mark.asyncio
    async def test_other_users_notification_is_403(self, client, container):
        notification_repo = await container.get(NotificationRepository)
        notification = await notification_repo.save(
            Notification(
                id=NotificationId(uuid4()),
                user_id=UserId(uuid4()),
                type=NotificationType.FOLLOW,
                title="New follower",
            )
        )
        client.cookies.update(auth_cookies(str(uuid4())))

        response = await client.delete(f"/notifications/{notification.id}")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_requires_authentication(self, client):
        response = await client.get("/notifications")

        assert response.status_code == 401


class TestAdminRoutes:
    """Tests for admin endpoints."""

    @pytest.mark.asyncio
    async def test_non_admin_forbidden(self, client):
        client.cookies.update(auth_cookies(str(uuid4())))

        response = await client.get("/admin/analytics")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_unpublishes_posts(self, client, container):
        # Arrange
        post = await seed_post(container)
        client.cookies.update(auth_cookies(str(uuid4()), UserRole.ADMIN))

        # Act
        response = await client.post(
            "/admin/posts/publication",
            json={"post_ids": [str(post.id)], "published": False},
        )
        listing = await client.get("/posts")

        # Assert
        assert response.json() == {"updated": 1}
        assert listing.json()["posts"] == []

    @pytest.mark.asyncio
    async def test_admin_analytics(self, client, container):
        await seed_post(container, view_count=5)
        client.cookies.update(auth_cookies(str(uuid4()), UserRole.ADMIN))

        response = await client.get("/admin/analytics")

        assert response.status_code == 200
        assert response.json()["total_views"] == 5
