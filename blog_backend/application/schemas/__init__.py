from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleEnvelope,
    ArticleListResponse,
    ArticleDetailResponse,
)
from .comment import CommentCreate, CommentResponse, CommentEnvelope, CommentListResponse
from .common import AcknowledgementResponse, SignupRequest, SignupResponse

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleEnvelope",
    "ArticleListResponse",
    "ArticleDetailResponse",
    "CommentCreate",
    "CommentResponse",
    "CommentEnvelope",
    "CommentListResponse",
    "AcknowledgementResponse",
    "SignupRequest",
    "SignupResponse",
]
