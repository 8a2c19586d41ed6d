"""boto3-powered Athena query engine repository."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.domain.exceptions import RemoteCallError
from src.domain.value_objects.query_job import (
  QueryJobHandle,
  QueryJobState,
  QueryJobStatus,
  RawResultRow,
)
from src.domain.value_objects.query_statement import QueryStatement
from src.ports.output.query_engine_repository import QueryEngineRepository

logger = logging.getLogger(__name__)


def build_athena_client(region: str):
  return boto3.client('athena', region_name=region)


class Boto3AthenaRepository(QueryEngineRepository):
  """Runs query jobs through an Athena client.

  The client is injected so one can be shared across requests; boto3
  clients are safe to use from several threads.
  """

  def __init__(self, client: Any) -> None:
    self._client = client

  def submit(
    self,
    statement: QueryStatement,
    output_location: str,
    database: Optional[str] = None,
    workgroup: Optional[str] = None,
  ) -> QueryJobHandle:
    request: Dict[str, Any] = {
      'QueryString': statement.sql,
      'ResultConfiguration': {'OutputLocation': output_location},
    }
    if statement.parameters:
      request['ExecutionParameters'] = list(statement.parameters)
    if database:
      request['QueryExecutionContext'] = {'Database': database}
    if workgroup:
      request['WorkGroup'] = workgroup

    response = self._call('StartQueryExecution', self._client.start_query_execution, **request)
    try:
      return QueryJobHandle(response['QueryExecutionId'])
    except (KeyError, TypeError, ValueError) as exc:
      raise RemoteCallError('StartQueryExecution', f'response without QueryExecutionId: {exc}') from exc

  def get_state(self, handle: QueryJobHandle) -> QueryJobState:
    response = self._call(
      'GetQueryExecution', self._client.get_query_execution, QueryExecutionId=handle.execution_id
    )
    try:
      status = response['QueryExecution']['Status']
    except (KeyError, TypeError) as exc:
      raise RemoteCallError('GetQueryExecution', f'response without status: {exc}') from exc
    return QueryJobState(
      status=QueryJobStatus.from_engine(status.get('State')),
      reason=status.get('StateChangeReason'),
    )

  def get_result_rows(self, handle: QueryJobHandle) -> List[RawResultRow]:
    # Only the first page is read; NextToken is ignored.
    response = self._call(
      'GetQueryResults', self._client.get_query_results, QueryExecutionId=handle.execution_id
    )
    try:
      rows = response['ResultSet']['Rows']
    except (KeyError, TypeError) as exc:
      raise RemoteCallError('GetQueryResults', f'response without rows: {exc}') from exc
    if response.get('NextToken'):
      logger.debug('Query %s has more result pages; only the first is used', handle)
    return [[datum.get('VarCharValue') for datum in row.get('Data', [])] for row in rows]

  def cancel(self, handle: QueryJobHandle) -> None:
    self._call('StopQueryExecution', self._client.stop_query_execution, QueryExecutionId=handle.execution_id)
    logger.info('Requested cancellation of query %s', handle)

  @staticmethod
  def _call(operation: str, method, **kwargs) -> Dict[str, Any]:
    try:
      return method(**kwargs)
    except (BotoCoreError, ClientError) as exc:
      raise RemoteCallError(operation, str(exc)) from exc
