"""Portfolio use cases."""

from .create_portfolio import CreatePortfolioRequest, CreatePortfolioUseCase
from .delete_portfolio import (
    DeletePortfolioRequest,
    DeletePortfolioResponse,
    DeletePortfolioUseCase,
)
from .get_portfolio import GetPortfolioRequest, GetPortfolioUseCase, PortfolioItem
from .list_portfolios import (
    ListPortfoliosRequest,
    ListPortfoliosResponse,
    ListPortfoliosUseCase,
)

__all__ = [
    "CreatePortfolioRequest",
    "CreatePortfolioUseCase",
    "DeletePortfolioRequest",
    "DeletePortfolioResponse",
    "DeletePortfolioUseCase",
    "GetPortfolioRequest",
    "GetPortfolioUseCase",
    "ListPortfoliosRequest",
    "ListPortfoliosResponse",
    "ListPortfoliosUseCase",
    "PortfolioItem",
]
