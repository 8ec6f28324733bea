"""Comment endpoints — anyone may post, only an authenticated admin may delete."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog_backend.application.schemas import (
    AcknowledgementResponse,
    CommentCreate,
    CommentEnvelope,
    CommentListResponse,
    CommentResponse,
)
from blog_backend.application.services import CommentService
from blog_backend.domain.entities import CallerIdentity
from blog_backend.domain.exceptions import EntityNotFoundError, ValidationFailedError
from blog_backend.infrastructure.dependencies import get_comment_service, require_caller_identity

router = APIRouter(prefix="/comments", tags=["Comments"])


@router.get("/{article_id}", response_model=CommentListResponse)
async def list_comments(
    article_id: str,
    service: CommentService = Depends(get_comment_service),
) -> CommentListResponse:
    """Retrieve the comments of an article, oldest first."""
    comments = await service.list_comments(article_id)
    return CommentListResponse(
        comments=[CommentResponse.model_validate(c, from_attributes=True) for c in comments]
    )


@router.post("/{article_id}", response_model=CommentEnvelope, status_code=status.HTTP_201_CREATED)
async def create_comment(
    article_id: str,
    data: CommentCreate,
    service: CommentService = Depends(get_comment_service),
) -> CommentEnvelope:
    try:
        comment = await service.create_comment(article_id, data)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return CommentEnvelope(comment=CommentResponse.model_validate(comment, from_attributes=True))


@router.delete("/{article_id}/{comment_id}", response_model=AcknowledgementResponse)
async def delete_comment(
    article_id: str,
    comment_id: str,
    identity: CallerIdentity = Depends(require_caller_identity),
    service: CommentService = Depends(get_comment_service),
) -> AcknowledgementResponse:
    """Moderate: remove a single comment."""
    try:
        await service.delete_comment(article_id, comment_id, identity)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AcknowledgementResponse()
