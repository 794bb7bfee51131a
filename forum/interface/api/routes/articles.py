"""Article routes."""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Request, status
from pydantic import BaseModel, Field

from forum.application.usecase.article import (
    ArticleItem,
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleResponse,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from forum.domain.service import IdentityService
from forum.domain.value import ArticleCategory
from forum.interface.api.identity import require_user_id, resolve_identity
from forum.interface.api.transaction import TransactionalRoute

router = APIRouter(
    prefix="/articles", tags=["articles"], route_class=TransactionalRoute
)


class CreateArticleAPIRequest(BaseModel):
    """API request for writing an article."""

    title: str = Field(min_length=3, max_length=200)
    content: str = Field(min_length=10)
    excerpt: str = Field(min_length=1, max_length=300)
    category: ArticleCategory
    read_time: int = Field(default=5, ge=1)
    is_published: bool = False


class UpdateArticleAPIRequest(BaseModel):
    """API request for a merge-patch update. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=3, max_length=200)
    content: str | None = Field(default=None, min_length=10)
    excerpt: str | None = Field(default=None, min_length=1, max_length=300)
    category: ArticleCategory | None = None
    read_time: int | None = Field(default=None, ge=1)
    is_published: bool | None = None


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
) -> ListArticlesResponse:
    """List published articles, most recently published first."""
    return await list_articles_use_case.execute(ListArticlesRequest())


@router.get("/admin/all", response_model=ListArticlesResponse)
async def list_all_articles(
    request: Request,
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    identity_service: FromDishka[IdentityService],
) -> ListArticlesResponse:
    """List every article including drafts.

    Requires an admin.
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "list draft articles")

    return await list_articles_use_case.execute(
        ListArticlesRequest(include_drafts=True, user_id=user_id)
    )


@router.get("/{article_id}", response_model=ArticleItem)
async def get_article(
    article_id: UUID,
    get_article_use_case: FromDishka[GetArticleUseCase],
) -> ArticleItem:
    """Get a published article. Drafts are not found."""
    return await get_article_use_case.execute(GetArticleRequest(article_id=article_id))


@router.post("", response_model=ArticleItem, status_code=status.HTTP_201_CREATED)
async def create_article(
    body: CreateArticleAPIRequest,
    request: Request,
    create_article_use_case: FromDishka[CreateArticleUseCase],
    identity_service: FromDishka[IdentityService],
) -> ArticleItem:
    """Write an article, published right away or kept as a draft.

    Requires an admin.

    Args:
        body: Article data
        request: Incoming request
        create_article_use_case: Create article use case from DI
        identity_service: Identity service from DI

    Returns:
        The created article
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "create articles")

    return await create_article_use_case.execute(
        CreateArticleRequest(**body.model_dump(), user_id=user_id)
    )


@router.put("/{article_id}", response_model=ArticleItem)
async def update_article(
    article_id: UUID,
    body: UpdateArticleAPIRequest,
    request: Request,
    update_article_use_case: FromDishka[UpdateArticleUseCase],
    identity_service: FromDishka[IdentityService],
) -> ArticleItem:
    """Edit, publish or unpublish an article.

    Requires an admin. Only the fields present in the body change.
    """
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "edit articles")

    return await update_article_use_case.execute(
        UpdateArticleRequest(
            article_id=article_id,
            changes=body.model_dump(exclude_unset=True),
            user_id=user_id,
        )
    )


@router.delete("/{article_id}", response_model=DeleteArticleResponse)
async def delete_article(
    article_id: UUID,
    request: Request,
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
    identity_service: FromDishka[IdentityService],
) -> DeleteArticleResponse:
    """Delete an article. Requires an admin."""
    identity = resolve_identity(request, identity_service)
    user_id = require_user_id(identity, "delete articles")

    return await delete_article_use_case.execute(
        DeleteArticleRequest(article_id=article_id, user_id=user_id)
    )
