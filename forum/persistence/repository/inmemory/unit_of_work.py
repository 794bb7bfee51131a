"""In-memory unit of work for testing."""

from forum.domain.error import StorageFailureError
from forum.domain.repository.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """Records commits and rollbacks; in-memory writes apply immediately.

    Set ``fail_commits`` to make every commit fail the way a refused
    database commit does.
    """

    def __init__(self) -> None:
        self.events: list[str] = []
        self.fail_commits = False

    async def commit(self) -> None:
        """Record a commit, or fail it."""
        if self.fail_commits:
            self.events.append("failed commit")
            raise StorageFailureError("Failed to save changes")
        self.events.append("commit")

    async def rollback(self) -> None:
        """Record a rollback."""
        self.events.append("rollback")
