"""Shared test doubles for the event query service."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
  sys.path.insert(0, str(ROOT))

from src.domain.exceptions import RemoteCallError  # noqa: E402
from src.domain.value_objects.query_job import (  # noqa: E402
  QueryJobHandle,
  QueryJobState,
  QueryJobStatus,
)

HEADER_ROW = ['name', 'data', 'status', 'erro']


class FakeQueryEngine:
  """In-memory engine that replays a scripted sequence of statuses."""

  def __init__(
    self,
    statuses: Optional[List[QueryJobStatus]] = None,
    rows: Optional[list] = None,
    execution_id: str = 'mock-query-id',
  ):
    self.statuses = list(statuses or [QueryJobStatus.SUCCEEDED])
    self.rows = rows if rows is not None else [HEADER_ROW]
    self.execution_id = execution_id
    self.submitted: list = []
    self.status_checks = 0
    self.fetches = 0
    self.cancelled: List[QueryJobHandle] = []
    self.fail_on: Optional[str] = None
    self.reason: Optional[str] = None

  def submit(self, statement, output_location, database=None, workgroup=None):
    if self.fail_on == 'submit':
      raise RemoteCallError('StartQueryExecution', 'access denied')
    self.submitted.append((statement, output_location, database, workgroup))
    return QueryJobHandle(self.execution_id)

  def get_state(self, handle):
    if self.fail_on == 'status':
      raise RemoteCallError('GetQueryExecution', 'throttled')
    index = min(self.status_checks, len(self.statuses) - 1)
    self.status_checks += 1
    return QueryJobState(self.statuses[index], self.reason)

  def get_result_rows(self, handle):
    if self.fail_on == 'fetch':
      raise RemoteCallError('GetQueryResults', 'expired')
    self.fetches += 1
    return self.rows

  def cancel(self, handle):
    if self.fail_on == 'cancel':
      raise RemoteCallError('StopQueryExecution', 'not allowed')
    self.cancelled.append(handle)


class RecordingSleep:
  def __init__(self):
    self.calls: List[float] = []

  async def __call__(self, seconds: float) -> None:
    self.calls.append(seconds)


@pytest.fixture
def fake_sleep() -> RecordingSleep:
  return RecordingSleep()
