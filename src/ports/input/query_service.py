"""Input port defining the query service contract."""
from __future__ import annotations

from typing import Protocol

from src.application.commands.event_query_command import EventQueryCommand
from src.application.queries.query_result import QueryResult


class EventQueryService(Protocol):
  async def find_events(self, command: EventQueryCommand) -> QueryResult:
    ...
