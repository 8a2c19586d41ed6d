"""JSON presenter implementation."""
from __future__ import annotations

import json

from src.application.queries.query_result import QueryResult
from src.ports.input.result_presenter import ResultPresenter


class JsonPresenter(ResultPresenter):
  """Renders the events of a successful result as a compact JSON array."""

  media_type = 'application/json'

  def present(self, result: QueryResult) -> str:
    payload = [event.as_dict() for event in result.events]
    return json.dumps(payload, ensure_ascii=False, separators=(',', ':'))
