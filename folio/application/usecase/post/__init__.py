"""Post use cases."""

from .common import PostDetail, PostSummary
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase

__all__ = [
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "PostDetail",
    "PostSummary",
]
