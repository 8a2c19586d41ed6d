"""Input port for formatting query results."""
from __future__ import annotations

from typing import Protocol

from src.application.queries.query_result import QueryResult


class ResultPresenter(Protocol):
  media_type: str

  def present(self, result: QueryResult) -> str:
    ...
