"""Article CRUD endpoints. Reads are public; writes need a bearer token."""

from fastapi import APIRouter, Depends, HTTPException, status

from blog_backend.application.schemas import (
    AcknowledgementResponse,
    ArticleCreate,
    ArticleDetailResponse,
    ArticleEnvelope,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)
from blog_backend.application.services import ArticleService
from blog_backend.domain.entities import Article, CallerIdentity
from blog_backend.domain.exceptions import EntityNotFoundError, ValidationFailedError
from blog_backend.infrastructure.dependencies import get_article_service, require_caller_identity

router = APIRouter(prefix="/articles", tags=["Articles"])


def _to_response(article: Article) -> ArticleResponse:
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """Retrieve all articles, newest first."""
    articles = await service.list_articles()
    return ArticleListResponse(articles=[_to_response(a) for a in articles])


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleDetailResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleDetailResponse(article=_to_response(article))


@router.post("", response_model=ArticleEnvelope, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    identity: CallerIdentity = Depends(require_caller_identity),
    service: ArticleService = Depends(get_article_service),
) -> ArticleEnvelope:
    """Create a new article. The caller becomes its author."""
    try:
        article = await service.create_article(data, identity)
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ArticleEnvelope(article=_to_response(article))


@router.put("/{article_id}", response_model=ArticleEnvelope)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    identity: CallerIdentity = Depends(require_caller_identity),
    service: ArticleService = Depends(get_article_service),
) -> ArticleEnvelope:
    """Partially update an existing article."""
    try:
        article = await service.update_article(article_id, data, identity)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailedError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    return ArticleEnvelope(article=_to_response(article))


@router.delete("/{article_id}", response_model=AcknowledgementResponse)
async def delete_article(
    article_id: str,
    identity: CallerIdentity = Depends(require_caller_identity),
    service: ArticleService = Depends(get_article_service),
) -> AcknowledgementResponse:
    """Delete an article together with all of its comments."""
    try:
        await service.delete_article(article_id, identity)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AcknowledgementResponse()
