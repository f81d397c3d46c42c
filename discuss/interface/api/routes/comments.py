"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from discuss.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetMyCommentsRequest,
    GetMyCommentsResponse,
    GetMyCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.interface.api.auth import request_token, require_user
from discuss.interface.error import to_http_exception, unexpected_error

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    # Optional at the schema level so a missing field gets the domain message
    solution_id: str | None = None
    content: str | None = None
    parent_comment_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str | None = None


class VoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    vote_type: str | None = None  # "up" or "down"


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> CreateCommentResponse:
    """Comment on a solution or reply to a top-level comment.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 on invalid input or a
            reply to a reply, 404 if the solution or parent doesn't exist
    """
    user_id = require_user(jwt_service, token, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                solution_id=request.solution_id,
                content=request.content,
                author_id=str(user_id),
                parent_id=request.parent_comment_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("create comment", e) from e


@router.get("/solution/{solution_id}", response_model=GetCommentsResponse)
async def get_solution_comments(
    solution_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    token: str | None = Depends(request_token),
) -> GetCommentsResponse:
    """Get a page of a solution's top-level comments with their replies.

    Public. If authenticated, includes the caller's vote on each comment.
    """
    viewer_id = jwt_service.get_user_id_from_token(token)

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                solution_id=solution_id,
                page=page,
                limit=limit,
                viewer_id=str(viewer_id) if viewer_id else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("get solution comments", e) from e


@router.get("/user/me", response_model=GetMyCommentsResponse)
async def get_my_comments(
    get_my_comments_use_case: FromDishka[GetMyCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    token: str | None = Depends(request_token),
) -> GetMyCommentsResponse:
    """Get the caller's own comments across all solutions, newest first.

    Requires authentication.
    """
    user_id = require_user(jwt_service, token, "view your comments")

    try:
        return await get_my_comments_use_case.execute(
            GetMyCommentsRequest(user_id=str(user_id), page=page, limit=limit)
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("get my comments", e) from e


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> CommentItem:
    """Get one comment with its replies (direct-link view).

    Public. Deleted comments answer 404.
    """
    viewer_id = jwt_service.get_user_id_from_token(token)

    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(
                comment_id=comment_id,
                viewer_id=str(viewer_id) if viewer_id else None,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("get comment", e) from e


@router.put("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the comment author can edit, deleted comments can't be edited.
    """
    user_id = require_user(jwt_service, token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id,
                user_id=str(user_id),
                content=request.content,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("update comment", e) from e


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> DeleteCommentResponse:
    """Soft-delete a comment.

    Only the comment author can delete. Replies stay visible.
    """
    user_id = require_user(jwt_service, token, "delete comments")

    try:
        result = await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=str(user_id))
        )
        logfire.info("Comment delete request completed", comment_id=comment_id)
        return result
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("delete comment", e) from e


@router.post("/{comment_id}/vote", response_model=VoteCommentResponse)
async def vote_comment(
    comment_id: str,
    request: VoteAPIRequest,
    vote_comment_use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(request_token),
) -> VoteCommentResponse:
    """Vote on a comment.

    Voting the same way twice retracts the vote, voting the other way
    switches it.
    """
    user_id = require_user(jwt_service, token, "vote")

    try:
        return await vote_comment_use_case.execute(
            VoteCommentRequest(
                comment_id=comment_id,
                user_id=str(user_id),
                vote_type=request.vote_type,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e
    except Exception as e:
        raise unexpected_error("vote on comment", e) from e
