# 📄 File: devconnect/modules/community/presentation/api/v1/posts.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the community feed: writing, reading and deleting posts,
# liking and unliking them, and commenting.
#
# 🧪 Purpose (Technical Summary):
# FastAPI post endpoints delegating to PostService; every route requires an access token
# and list-mutating routes return the resulting like or comment list.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - devconnect.shared.core.dependencies (PostService factory, get_current_user)
# - post_schemas (request/response schemas)
#
# 🔄 Connected Modules / Calls From:
# - devconnect.api.v1.router (mounted under /posts)

"""
Community Posts API Endpoints

Endpoints:
- POST /: Create post
- GET /: All posts, newest first
- GET /{post_id}: One post
- DELETE /{post_id}: Delete own post
- PUT /like/{post_id}, PUT /unlike/{post_id}: Like or unlike a post
- PUT /comment/{post_id}: Comment on a post
- DELETE /comment/{post_id}/{comment_id}: Delete own comment
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from devconnect.modules.community.domain.services.post_service import PostService
from devconnect.modules.community.presentation.api.schemas.post_schemas import (
    CommentCreateRequest,
    CommentResponse,
    LikeResponse,
    MessageResponse,
    PostCreateRequest,
    PostResponse,
)
from devconnect.shared.core.dependencies import CurrentUser, get_current_user, get_post_service

logger = logging.getLogger(__name__)

posts_router = APIRouter()

_AUTH_RESPONSES = {401: {"description": "Missing, invalid or expired token"}}
_POST_RESPONSES = {404: {"description": "Post not found"}, **_AUTH_RESPONSES}


# =========================================================================
# POSTS
# =========================================================================

@posts_router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
    description="Publish a post with the author's current name and avatar",
    responses={400: {"description": "Text is required"}, **_AUTH_RESPONSES},
)
async def create_post(
    post_data: PostCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await post_service.create_post(current_user.user_id, post_data.text)
    return PostResponse.from_domain(post)


@posts_router.get(
    "",
    response_model=List[PostResponse],
    summary="List posts",
    description="Get all posts, newest first",
    responses=_AUTH_RESPONSES,
)
async def list_posts(
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> List[PostResponse]:
    posts = await post_service.list_posts()
    return [PostResponse.from_domain(p) for p in posts]


@posts_router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post",
    description="Get one post with its likes and comments",
    responses=_POST_RESPONSES,
)
async def get_post(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> PostResponse:
    post = await post_service.get_post(post_id)
    return PostResponse.from_domain(post)


@posts_router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete post",
    description="Delete a post written by the authenticated user",
    responses={403: {"description": "This is not your post"}, **_POST_RESPONSES},
)
async def delete_post(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> MessageResponse:
    msg = await post_service.delete_post(current_user.user_id, post_id)
    return MessageResponse(msg=msg)


# =========================================================================
# LIKES
# =========================================================================

@posts_router.put(
    "/like/{post_id}",
    response_model=List[LikeResponse],
    summary="Like post",
    description="Like a post once; returns the post's likes, newest first",
    responses={409: {"description": "Post already liked"}, **_POST_RESPONSES},
)
async def like_post(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> List[LikeResponse]:
    likes = await post_service.like_post(current_user.user_id, post_id)
    return [LikeResponse.from_domain(like) for like in likes]


@posts_router.put(
    "/unlike/{post_id}",
    response_model=List[LikeResponse],
    summary="Unlike post",
    description="Remove the authenticated user's like; returns the remaining likes",
    responses={409: {"description": "Post wasn't liked"}, **_POST_RESPONSES},
)
async def unlike_post(
    post_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> List[LikeResponse]:
    likes = await post_service.unlike_post(current_user.user_id, post_id)
    return [LikeResponse.from_domain(like) for like in likes]


# =========================================================================
# COMMENTS
# =========================================================================

@posts_router.put(
    "/comment/{post_id}",
    response_model=List[CommentResponse],
    summary="Add comment",
    description="Comment on a post; returns the post's comments, newest first",
    responses={400: {"description": "Text is required"}, **_POST_RESPONSES},
)
async def add_comment(
    post_id: str,
    comment_data: CommentCreateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> List[CommentResponse]:
    comments = await post_service.add_comment(current_user.user_id, post_id, comment_data.text)
    return [CommentResponse.from_domain(c) for c in comments]


@posts_router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=List[CommentResponse],
    summary="Delete comment",
    description="Delete a comment written by the authenticated user; returns the remaining comments",
    responses={403: {"description": "This is not your comment"}, **_POST_RESPONSES},
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    post_service: PostService = Depends(get_post_service),
) -> List[CommentResponse]:
    comments = await post_service.delete_comment(current_user.user_id, post_id, comment_id)
    return [CommentResponse.from_domain(c) for c in comments]
