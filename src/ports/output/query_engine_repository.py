"""Output port for the remote SQL query engine."""
from __future__ import annotations

from typing import List, Optional, Protocol

from src.domain.value_objects.query_job import QueryJobHandle, QueryJobState, RawResultRow
from src.domain.value_objects.query_statement import QueryStatement


class QueryEngineRepository(Protocol):
  """Defines how the application drives asynchronous query jobs.

  Implementations raise `RemoteCallError` when the engine call fails.
  """

  def submit(
    self,
    statement: QueryStatement,
    output_location: str,
    database: Optional[str] = None,
    workgroup: Optional[str] = None,
  ) -> QueryJobHandle:
    """Start a query job and return its handle."""
    ...

  def get_state(self, handle: QueryJobHandle) -> QueryJobState:
    """Return the current status of a job."""
    ...

  def get_result_rows(self, handle: QueryJobHandle) -> List[RawResultRow]:
    """Return the first page of results, header row included."""
    ...

  def cancel(self, handle: QueryJobHandle) -> None:
    """Ask the engine to stop a running job."""
    ...
