"""Turns raw result rows into event records."""
from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic import ValidationError as PydanticValidationError

from src.domain.entities.event_record import ErrorDetail, EventRecord
from src.domain.exceptions import MalformedPayloadError
from src.domain.value_objects.query_job import RawResultRow

COLUMN_COUNT = 4


class _ErrorEntry(BaseModel):
  model_config = ConfigDict(extra='ignore')

  descricao: StrictStr


class _ErrorPayload(BaseModel):
  model_config = ConfigDict(extra='ignore')

  erros: Optional[List[Any]] = None


class ResultRowParser:
  """Parses the four positional columns of a result row.

  The error payload column is JSON text. Its `erros` list is read with
  typed optional-field models: a shape mismatch leaves the detail unset,
  while text that is not JSON at all fails the row.
  """

  def parse(self, row: RawResultRow) -> EventRecord:
    if len(row) < COLUMN_COUNT:
      raise MalformedPayloadError(f'expected {COLUMN_COUNT} columns, got {len(row)}')

    name, occurred_at, status, payload_text = row[:COLUMN_COUNT]
    missing = [
      label
      for label, value in (('name', name), ('timestamp', occurred_at), ('status', status), ('error payload', payload_text))
      if value is None
    ]
    if missing:
      raise MalformedPayloadError(f'missing column value: {", ".join(missing)}')

    return EventRecord(
      name=name,
      occurred_at=occurred_at,
      status=status,
      error_detail=self.extract_error_detail(payload_text),
    )

  def parse_all(self, rows: List[RawResultRow]) -> List[EventRecord]:
    """Parse data rows in order, skipping the header row."""
    return [self.parse(row) for row in rows[1:]]

  @staticmethod
  def extract_error_detail(payload_text: str) -> Optional[ErrorDetail]:
    try:
      document = json.loads(payload_text)
    except ValueError as exc:
      raise MalformedPayloadError(f'error payload is not valid JSON: {exc}') from exc

    if document is None:
      return None
    if not isinstance(document, dict):
      raise MalformedPayloadError(f'error payload must be a JSON object, got {type(document).__name__}')

    try:
      payload = _ErrorPayload.model_validate(document)
    except PydanticValidationError:
      return None

    for entry in payload.erros or []:
      try:
        return ErrorDetail(description=_ErrorEntry.model_validate(entry).descricao)
      except PydanticValidationError:
        continue
    return None
