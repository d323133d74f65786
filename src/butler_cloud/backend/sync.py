from __future__ import annotations

import logging

from butler_cloud.backend import ipc
from butler_cloud.backend.ipc import Invoker

LOGGER = logging.getLogger(__name__)

FLUSH_AND_PUSH_COMMAND = "project_flush_and_push"


async def sync_to_cloud(project_id: str | None, *, invoke: Invoker | None = None) -> None:
    """Ask the local backend to flush and push ``project_id``. Never raises."""

    call = invoke or ipc.invoke
    try:
        if project_id:
            await call(FLUSH_AND_PUSH_COMMAND, {"id": project_id})
    except Exception:
        LOGGER.exception("Cloud sync failed for project %s", project_id)


__all__ = ["FLUSH_AND_PUSH_COMMAND", "sync_to_cloud"]
