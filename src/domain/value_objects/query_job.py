"""Value objects describing a remote query job."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

# Positional columns: event name, timestamp, status, error payload.
RawResultRow = Sequence[Optional[str]]


class QueryJobStatus(str, Enum):
  QUEUED = 'QUEUED'
  RUNNING = 'RUNNING'
  SUCCEEDED = 'SUCCEEDED'
  FAILED = 'FAILED'
  CANCELLED = 'CANCELLED'

  @property
  def is_terminal(self) -> bool:
    return self in (QueryJobStatus.SUCCEEDED, QueryJobStatus.FAILED, QueryJobStatus.CANCELLED)

  @property
  def is_failure(self) -> bool:
    return self in (QueryJobStatus.FAILED, QueryJobStatus.CANCELLED)

  @staticmethod
  def from_engine(state: Optional[str]) -> 'QueryJobStatus':
    """Map an engine state name, treating unknown states as still running."""
    if state and state.upper() in QueryJobStatus._value2member_map_:
      return QueryJobStatus(state.upper())
    return QueryJobStatus.RUNNING


@dataclass(frozen=True)
class QueryJobHandle:
  """Opaque identifier of a submitted query job."""

  execution_id: str

  def __post_init__(self) -> None:
    if not self.execution_id:
      raise ValueError('execution_id is required')

  def __str__(self) -> str:
    return self.execution_id


@dataclass(frozen=True)
class QueryJobState:
  """Status observed on one check, with the engine's reason when it gives one."""

  status: QueryJobStatus
  reason: Optional[str] = None
