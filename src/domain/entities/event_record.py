"""Domain entities returned by an event query."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ErrorDetail:
  """First error description found in a row's error payload."""

  description: str

  def as_dict(self) -> dict:
    return {'descricao': self.description}


@dataclass(frozen=True)
class EventRecord:
  """One parsed result row."""

  name: str
  occurred_at: str
  status: str
  error_detail: Optional[ErrorDetail] = None

  def as_dict(self) -> dict:
    """Serialize using the public wire field names."""
    return {
      'name': self.name,
      'data': self.occurred_at,
      'status': self.status,
      'erro': self.error_detail.as_dict() if self.error_detail else None,
    }
