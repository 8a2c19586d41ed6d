"""Waits for a submitted query job to reach a terminal state."""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from src.domain.exceptions import DeadlineExceededError, TerminalFailureError
from src.domain.value_objects.query_job import QueryJobHandle, QueryJobStatus
from src.ports.output.query_engine_repository import QueryEngineRepository

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 25.0
DEFAULT_INTERVAL_SECONDS = 1.0


class QueryPoller:
  """Checks job status at a fixed interval until success, failure or deadline.

  Elapsed time is counted in intervals, not wall clock: a job that never
  finishes gets `timeout / interval` checks. A failing status call is not
  retried.
  """

  def __init__(
    self,
    engine: QueryEngineRepository,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    cancel_on_timeout: bool = True,
  ) -> None:
    self._engine = engine
    self._sleep = sleep
    self._cancel_on_timeout = cancel_on_timeout

  async def await_completion(
    self,
    handle: QueryJobHandle,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    interval: float = DEFAULT_INTERVAL_SECONDS,
  ) -> QueryJobStatus:
    if interval <= 0:
      raise ValueError('interval must be positive')

    checks = 0
    while checks * interval < timeout:
      if checks:
        await self._sleep(interval)

      state = await asyncio.to_thread(self._engine.get_state, handle)
      checks += 1
      logger.debug('Query %s status %s (check %d)', handle, state.status.value, checks)

      if state.status == QueryJobStatus.SUCCEEDED:
        logger.info('Query %s succeeded after %d checks', handle, checks)
        return state.status
      if state.status.is_failure:
        logger.warning('Query %s finished with status %s: %s', handle, state.status.value, state.reason)
        raise TerminalFailureError(state.status, state.reason)

    logger.warning('Query %s not finished after %d checks (%gs)', handle, checks, timeout)
    if self._cancel_on_timeout:
      await self._cancel(handle)
    raise DeadlineExceededError(handle, timeout, checks)

  async def _cancel(self, handle: QueryJobHandle) -> None:
    try:
      await asyncio.to_thread(self._engine.cancel, handle)
    except Exception as exc:  # noqa: BLE001
      logger.warning('Cancelling query %s failed: %s', handle, exc)
