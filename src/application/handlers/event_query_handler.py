"""Application handler that orchestrates event queries."""
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import List, Optional

from src.application.commands.event_query_command import EventQueryCommand
from src.application.queries.query_result import QueryResult, QueryStatus
from src.application.services.query_poller import (
  DEFAULT_INTERVAL_SECONDS,
  DEFAULT_TIMEOUT_SECONDS,
  QueryPoller,
)
from src.domain.entities.event_record import EventRecord
from src.domain.exceptions import EventQueryError
from src.domain.services.result_row_parser import ResultRowParser
from src.domain.value_objects.query_job import QueryJobHandle
from src.domain.value_objects.query_statement import QueryStatement
from src.ports.output.query_engine_repository import QueryEngineRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventQueryOptions:
  """Where and how long to run event queries."""

  table: str
  output_location: str
  database: Optional[str] = None
  workgroup: Optional[str] = None
  timeout: float = DEFAULT_TIMEOUT_SECONDS
  interval: float = DEFAULT_INTERVAL_SECONDS

  def __post_init__(self) -> None:
    if not self.output_location:
      raise ValueError('output_location is required')
    if self.timeout <= 0 or self.interval <= 0:
      raise ValueError('timeout and interval must be positive')


class EventQueryHandler:
  """Submits the event query, waits for it, then fetches and parses the rows."""

  def __init__(
    self,
    engine: QueryEngineRepository,
    poller: QueryPoller,
    parser: ResultRowParser,
    options: EventQueryOptions,
  ):
    self._engine = engine
    self._poller = poller
    self._parser = parser
    self._options = options

  async def execute(self, command: EventQueryCommand) -> List[EventRecord]:
    """Run the query for one event id; raises an `EventQueryError` on failure."""
    handle = await self.submit(command)
    return await self.collect(handle)

  async def submit(self, command: EventQueryCommand) -> QueryJobHandle:
    statement = QueryStatement.select_by_id(self._options.table, command.event_id)
    handle = await asyncio.to_thread(
      self._engine.submit,
      statement,
      self._options.output_location,
      self._options.database,
      self._options.workgroup,
    )
    logger.info('Submitted query %s for id %r', handle, command.event_id)
    return handle

  async def collect(self, handle: QueryJobHandle) -> List[EventRecord]:
    """Wait for the job, fetch its first result page and parse the data rows."""
    await self._poller.await_completion(handle, self._options.timeout, self._options.interval)

    rows = await asyncio.to_thread(self._engine.get_result_rows, handle)
    events = self._parser.parse_all(rows)
    logger.info('Query %s returned %d events', handle, len(events))
    return events

  async def handle(self, command: EventQueryCommand) -> QueryResult:
    start = time.perf_counter()
    handle: Optional[QueryJobHandle] = None
    metadata = {'event_id': command.event_id, 'table': self._options.table}
    try:
      handle = await self.submit(command)
      events = await self.collect(handle)
      return QueryResult(
        status=QueryStatus.SUCCESS,
        events=events,
        execution_id=str(handle),
        metadata=metadata,
        execution_time=time.perf_counter() - start,
      )
    except EventQueryError as exc:
      logger.error('Event query for id %r failed: %s', command.event_id, exc)
      return QueryResult(
        status=QueryStatus.ERROR,
        execution_id=str(handle) if handle else None,
        metadata=metadata,
        execution_time=time.perf_counter() - start,
        error=str(exc),
        error_kind=type(exc).__name__,
      )
