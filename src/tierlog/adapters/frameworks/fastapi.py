"""FastAPI adapter exposing the tiered logs over HTTP."""

from fastapi import APIRouter, HTTPException, Query, Response

from tierlog.adapters.frameworks.query_params import (
    _parse_priority_param,
    _parse_since_param,
    _parse_sort_param,
)
from tierlog.core.aggregate import LogAggregate
from tierlog.core.errors import ParseError
from tierlog.core.ports import LogExportPort

# Leaves headroom under a 2 MB response limit for headers
DEFAULT_MAX_BODY_SIZE = 1_900_000


def create_logs_router(
    store: LogExportPort,
    max_body_size: int = DEFAULT_MAX_BODY_SIZE,
) -> APIRouter:
    """Create a FastAPI router with a /logs endpoint.

    Args:
        store: Source of tiered log entries.
        max_body_size: Byte budget for the response body.

    Returns:
        APIRouter with /logs configured.
    """
    router = APIRouter()

    @router.get("/logs")
    async def get_logs(
        priority: str | None = Query(default=None),
        sort: str | None = Query(default=None),
        since: str | None = Query(default=None),
    ) -> Response:
        """Return logs as a JSON document no larger than max_body_size.

        Args:
            priority: Only this tier ("info", "debug" or "error").
            sort: "asc" or "desc" by timestamp. Export order if omitted.
            since: Nanosecond timestamp. Returns entries with timestamp > since.
        """
        try:
            tier = _parse_priority_param(priority)
            order = _parse_sort_param(sort)
        except ParseError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        aggregate = LogAggregate()
        if tier is None:
            aggregate.push_all(store)
        else:
            aggregate.push_tier(store, tier)
        aggregate.filter_since(_parse_since_param(since))
        if order is not None:
            aggregate.sort(order)

        return Response(
            content=aggregate.serialize(max_body_size),
            media_type="application/json",
        )

    return router
