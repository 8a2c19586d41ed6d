"""Command object representing an event lookup request."""
from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions import ValidationError


@dataclass(frozen=True)
class EventQueryCommand:
  event_id: str

  def __post_init__(self) -> None:
    if not self.event_id or not self.event_id.strip():
      raise ValidationError('id obrigatorio')
