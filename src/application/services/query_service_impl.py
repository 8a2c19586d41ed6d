"""Implementation of the query service port."""
from __future__ import annotations

from src.application.commands.event_query_command import EventQueryCommand
from src.application.handlers.event_query_handler import EventQueryHandler
from src.application.queries.query_result import QueryResult
from src.ports.input.query_service import EventQueryService


class QueryServiceImpl(EventQueryService):
  """Concrete implementation that delegates to the event query handler."""

  def __init__(self, event_handler: EventQueryHandler) -> None:
    self._event_handler = event_handler

  async def find_events(self, command: EventQueryCommand) -> QueryResult:
    return await self._event_handler.handle(command)
