"""Application-level query result representation."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from src.domain.entities.event_record import EventRecord


class QueryStatus(str, Enum):
  SUCCESS = 'success'
  ERROR = 'error'


@dataclass
class QueryResult:
  status: QueryStatus
  events: List[EventRecord] = field(default_factory=list)
  execution_id: Optional[str] = None
  metadata: Dict[str, Any] = field(default_factory=dict)
  execution_time: float = 0.0
  timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
  error: Optional[str] = None
  error_kind: Optional[str] = None

  @property
  def succeeded(self) -> bool:
    return self.status == QueryStatus.SUCCESS
