"""Example FastAPI application serving tiered logs.

Run with:
    uvicorn examples.fastapi_example:app --reload

Endpoints:
    /logs                     - JSON logs from all tiers, grouped by tier
    /logs?priority=<tier>     - One tier only (info, debug, error)
    /logs?sort=<asc|desc>     - Sorted by timestamp across tiers
    /logs?since=<ns>          - Entries newer than a nanosecond timestamp

Logging:
    Application code logs through the standard logging module. The
    TieredLogHandler files each record under a tier and ConsoleMirror
    echoes it to stdout.
"""

import logging

from fastapi import FastAPI

from tierlog import (
    ConsoleMirror,
    Priority,
    PriorityBufferStore,
    TieredLogHandler,
    tier_sinks,
)
from tierlog.adapters.frameworks.fastapi import create_logs_router

store = PriorityBufferStore()
store.subscribe(ConsoleMirror())
sinks = tier_sinks(store)

logger = logging.getLogger("example")
logger.setLevel(logging.DEBUG)
logger.addHandler(TieredLogHandler(store))

app = FastAPI(title="Tiered Logs Example")
app.include_router(create_logs_router(store, max_body_size=64_000))


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint that writes one entry per tier."""
    logger.debug("root requested")
    logger.info("serving greeting")
    sinks[Priority.ERROR].log("nothing went wrong, this is a demo error")
    return {"message": "Hello! Check the /logs endpoint."}


@app.get("/work/{n}")
async def work(n: int) -> dict[str, int]:
    """Log n info entries to show truncation under a small body budget."""
    for i in range(n):
        logger.info("work item %d done", i)
    return {"logged": n}
