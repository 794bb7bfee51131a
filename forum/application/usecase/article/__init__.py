"""Article use cases."""

from .create_article import CreateArticleRequest, CreateArticleUseCase
from .delete_article import (
    DeleteArticleRequest,
    DeleteArticleResponse,
    DeleteArticleUseCase,
)
from .get_article import ArticleItem, GetArticleRequest, GetArticleUseCase
from .list_articles import (
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from .update_article import UpdateArticleRequest, UpdateArticleUseCase

__all__ = [
    "ArticleItem",
    "CreateArticleRequest",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleResponse",
    "DeleteArticleUseCase",
    "GetArticleRequest",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
    "UpdateArticleRequest",
    "UpdateArticleUseCase",
]
