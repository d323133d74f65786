from __future__ import annotations

import asyncio
import logging

from butler_cloud.backend import ipc
from butler_cloud.backend.sync import FLUSH_AND_PUSH_COMMAND, sync_to_cloud


class RecordingInvoker:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, dict]] = []
        self.error = error

    async def __call__(self, command, params):
        self.calls.append((command, dict(params)))
        if self.error is not None:
            raise self.error
        return None


def test_sync_without_project_makes_no_call() -> None:
    invoker = RecordingInvoker()
    assert asyncio.run(sync_to_cloud(None, invoke=invoker)) is None
    assert asyncio.run(sync_to_cloud('', invoke=invoker)) is None
    assert invoker.calls == []


def test_sync_flushes_and_pushes_project() -> None:
    invoker = RecordingInvoker()
    asyncio.run(sync_to_cloud('project-1', invoke=invoker))
    assert invoker.calls == [(FLUSH_AND_PUSH_COMMAND, {'id': 'project-1'})]


def test_sync_logs_and_swallows_failures(caplog) -> None:
    invoker = RecordingInvoker(error=RuntimeError('backend offline'))

    with caplog.at_level(logging.ERROR, logger='butler_cloud.backend.sync'):
        result = asyncio.run(sync_to_cloud('project-1', invoke=invoker))

    assert result is None
    assert invoker.calls == [(FLUSH_AND_PUSH_COMMAND, {'id': 'project-1'})]
    assert any('project-1' in record.getMessage() for record in caplog.records)
    assert any(record.exc_info and isinstance(record.exc_info[1], RuntimeError) for record in caplog.records)


def test_sync_defaults_to_ipc_invoke(monkeypatch) -> None:
    invoker = RecordingInvoker()
    monkeypatch.setattr(ipc, 'invoke', invoker)

    asyncio.run(sync_to_cloud('project-2'))

    assert invoker.calls == [(FLUSH_AND_PUSH_COMMAND, {'id': 'project-2'})]
