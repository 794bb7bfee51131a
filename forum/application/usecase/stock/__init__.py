"""Stock use cases."""

from .create_stock import CreateStockRequest, CreateStockUseCase
from .delete_stock import DeleteStockRequest, DeleteStockResponse, DeleteStockUseCase
from .get_stock import GetStockRequest, GetStockUseCase, StockItem
from .list_stocks import ListStocksRequest, ListStocksResponse, ListStocksUseCase
from .update_stock import UpdateStockRequest, UpdateStockUseCase

__all__ = [
    "CreateStockRequest",
    "CreateStockUseCase",
    "DeleteStockRequest",
    "DeleteStockResponse",
    "DeleteStockUseCase",
    "GetStockRequest",
    "GetStockUseCase",
    "ListStocksRequest",
    "ListStocksResponse",
    "ListStocksUseCase",
    "StockItem",
    "UpdateStockRequest",
    "UpdateStockUseCase",
]
