"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
