"""Bulk publish/unpublish use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from folio.domain.service import PostService
from folio.domain.value import PostId


class SetPublicationRequest(BaseModel):
    """Set publication request."""

    post_ids: list[str] = Field(min_length=1)  # UUID strings
    published: bool


class SetPublicationResponse(BaseModel):
    """Set publication response."""

    updated: int


class SetPublicationUseCase:
    """Use case for publishing or unpublishing posts in bulk.

    The caller must have checked that the requester is an admin.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: SetPublicationRequest) -> SetPublicationResponse:
        """Execute bulk publication flow."""
        post_ids = [PostId(UUID(pid)) for pid in dict.fromkeys(request.post_ids)]
        updated = await self.post_service.set_published(post_ids, request.published)
        return SetPublicationResponse(updated=updated)
