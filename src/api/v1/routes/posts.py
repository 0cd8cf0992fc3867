"""Posts API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_post_service, parse_id
from api.v1.schemas.common import SuccessResponse
from api.v1.schemas.post import CommentResponse, LikeResponse, PostRequest, PostResponse
from core.exceptions import CommentNotFoundError, PostNotFoundError
from core.rate_limit import limiter
from domain.entities.post import Post
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List all posts",
    responses={200: {"description": "Posts, newest first"}},
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    posts = await service.get_all()
    return [_post_response(post) for post in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get a post",
    responses={
        200: {"description": "Post with its likes and comments"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: str,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.get_by_id(
        parse_id(post_id, PostNotFoundError("No post found with that ID"))
    )
    return _post_response(post)


@router.post(
    "",
    response_model=PostResponse,
    summary="Create a post",
    responses={
        200: {"description": "Post created"},
        400: {"description": "Validation error"},
        401: {"description": "Not authenticated"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostRequest,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Publish a post. `name` and `avatar` default to the author's account."""
    post = await service.create(user.id, body.model_dump(exclude_none=True))
    return _post_response(post)


@router.delete(
    "/{post_id}",
    response_model=SuccessResponse,
    summary="Delete a post",
    responses={
        200: {"description": "Post deleted"},
        401: {"description": "Not the post's author"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> SuccessResponse:
    """Delete a post. Only its author may do so."""
    await service.delete(parse_id(post_id, PostNotFoundError()), user.id)
    return SuccessResponse()


@router.post(
    "/like/{post_id}",
    response_model=PostResponse,
    summary="Like a post",
    responses={
        200: {"description": "Like recorded"},
        400: {"description": "Already liked"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.like(parse_id(post_id, PostNotFoundError()), user.id)
    return _post_response(post)


@router.delete(
    "/unlike/{post_id}",
    response_model=PostResponse,
    summary="Remove a like",
    responses={
        200: {"description": "Like removed"},
        400: {"description": "Post was not liked"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.unlike(parse_id(post_id, PostNotFoundError()), user.id)
    return _post_response(post)


@router.post(
    "/comment/{post_id}",
    response_model=PostResponse,
    summary="Comment on a post",
    responses={
        200: {"description": "Comment appended"},
        400: {"description": "Validation error"},
        404: {"description": "Post not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: str,
    body: PostRequest,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await service.add_comment(
        parse_id(post_id, PostNotFoundError()),
        user.id,
        body.model_dump(exclude_none=True),
    )
    return _post_response(post)


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=PostResponse,
    summary="Remove a comment",
    responses={
        200: {"description": "Comment removed"},
        401: {"description": "Neither the comment's nor the post's author"},
        404: {"description": "Post or comment not found"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def remove_comment(
    request: Request,
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Remove a comment. Allowed for the comment's author and the post's author."""
    post = await service.remove_comment(
        parse_id(post_id, PostNotFoundError()),
        parse_id(comment_id, CommentNotFoundError()),
        user.id,
    )
    return _post_response(post)


def _post_response(post: Post) -> PostResponse:
    """Convert domain entity to response schema."""
    return PostResponse(
        id=post.id,
        user_id=post.user_id,
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=[LikeResponse(id=like.id, user_id=like.user_id) for like in post.likes],
        comments=[
            CommentResponse(
                id=c.id,
                user_id=c.user_id,
                text=c.text,
                name=c.name,
                avatar=c.avatar,
                created_at=c.created_at,
            )
            for c in post.comments
        ],
        created_at=post.created_at,
    )
