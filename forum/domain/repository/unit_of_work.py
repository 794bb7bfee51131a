"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """The transaction shared by every repository of one request.

    Repositories only flush; nothing is durable until ``commit`` returns.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the request's changes durable.

        Raises:
            StorageFailureError: If the store refuses the commit
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard the request's changes."""
        pass
