"""Route class that ends each request's transaction before responding."""

from typing import Any, Callable, Coroutine

from dishka.integrations.fastapi import DishkaRoute
from fastapi import Request, Response

from forum.domain.repository import UnitOfWork


class TransactionalRoute(DishkaRoute):
    """DishkaRoute that commits after the endpoint returns.

    The commit happens before the response leaves the server, so a failed
    commit reaches the client as a server error. Any exception raised by
    the endpoint, including ones later turned into 4xx responses, rolls the
    transaction back first.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def transactional_handler(request: Request) -> Response:
            unit_of_work = await request.state.dishka_container.get(UnitOfWork)
            try:
                response = await handler(request)
            except Exception:
                await unit_of_work.rollback()
                raise
            await unit_of_work.commit()
            return response

        return transactional_handler
