"""Unit tests for reading list use cases."""

from uuid import uuid4

import pytest

from folio.application.usecase.reading_list import (
    AddPostToReadingListUseCase,
    CreateReadingListRequest,
    CreateReadingListUseCase,
    DeleteReadingListUseCase,
    ListReadingListsRequest,
    ListReadingListsUseCase,
    ReadingListActionRequest,
    ReadingListEntryRequest,
    RemovePostFromReadingListUseCase,
)
from folio.domain.error import NotAuthenticatedError
from folio.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestReadingListUseCases:
    """Tests for the reading list flow."""

    @pytest.mark.asyncio
    async def test_create_fill_and_list(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateReadingListUseCase)
        add = await unit_env.get(AddPostToReadingListUseCase)
        list_use_case = await unit_env.get(ListReadingListsUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Deep dive", content="word " * 450))
        user_id = str(uuid4())

        # Act
        created = await create.execute(
            CreateReadingListRequest(user_id=user_id, name="Later")
        )
        await add.execute(
            ReadingListEntryRequest(
                list_id=created.list_id, post_id=str(post.id), user_id=user_id
            )
        )
        response = await list_use_case.execute(ListReadingListsRequest(user_id=user_id))

        # Assert
        [item] = response.reading_lists
        assert item.name == "Later"
        assert item.post_ids == [str(post.id)]
        assert item.posts[0].title == "Deep dive"
        assert item.posts[0].reading_time == 2

    @pytest.mark.asyncio
    async def test_remove_then_delete(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateReadingListUseCase)
        add = await unit_env.get(AddPostToReadingListUseCase)
        remove = await unit_env.get(RemovePostFromReadingListUseCase)
        delete = await unit_env.get(DeleteReadingListUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())
        user_id = str(uuid4())
        created = await create.execute(
            CreateReadingListRequest(user_id=user_id, name="Later")
        )
        entry = ReadingListEntryRequest(
            list_id=created.list_id, post_id=str(post.id), user_id=user_id
        )
        await add.execute(entry)

        # Act
        removed = await remove.execute(entry)
        deleted = await delete.execute(
            ReadingListActionRequest(list_id=created.list_id, user_id=user_id)
        )

        # Assert
        assert removed.removed is True
        assert deleted.deleted is True

    @pytest.mark.asyncio
    async def test_signed_out_listing_rejected(self, unit_env):
        list_use_case = await unit_env.get(ListReadingListsUseCase)

        with pytest.raises(NotAuthenticatedError):
            await list_use_case.execute(ListReadingListsRequest())
