"""Tests for the boto3 Athena repository."""
from __future__ import annotations

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from src.adapters.output.athena.boto3_repository import Boto3AthenaRepository
from src.domain.exceptions import RemoteCallError
from src.domain.value_objects.query_job import QueryJobHandle, QueryJobStatus
from src.domain.value_objects.query_statement import QueryStatement


class FakeAthenaClient:
  def __init__(self, state='SUCCEEDED', rows=None, reason=None):
    self.state = state
    self.reason = reason
    self.rows = rows or []
    self.calls = []

  def start_query_execution(self, **kwargs):
    self.calls.append(('start_query_execution', kwargs))
    return {'QueryExecutionId': 'mock-query-id'}

  def get_query_execution(self, QueryExecutionId):
    self.calls.append(('get_query_execution', QueryExecutionId))
    status = {'State': self.state}
    if self.reason:
      status['StateChangeReason'] = self.reason
    return {'QueryExecution': {'QueryExecutionId': QueryExecutionId, 'Status': status}}

  def get_query_results(self, QueryExecutionId):
    self.calls.append(('get_query_results', QueryExecutionId))
    return {
      'ResultSet': {'Rows': [{'Data': [{'VarCharValue': value} if value is not None else {} for value in row]}
                             for row in self.rows]},
      'NextToken': 'page-2',
    }

  def stop_query_execution(self, QueryExecutionId):
    self.calls.append(('stop_query_execution', QueryExecutionId))
    return {}


class FailingAthenaClient:
  def start_query_execution(self, **kwargs):
    raise ClientError(
      {'Error': {'Code': 'InvalidRequestException', 'Message': 'bad output location'}},
      'StartQueryExecution',
    )

  def get_query_execution(self, QueryExecutionId):
    raise EndpointConnectionError(endpoint_url='https://athena.us-west-2.amazonaws.com')

  def get_query_results(self, QueryExecutionId):
    return {'unexpected': True}


HANDLE = QueryJobHandle('mock-query-id')


def test_submit_sends_bound_statement():
  client = FakeAthenaClient()
  repository = Boto3AthenaRepository(client)

  handle = repository.submit(
    QueryStatement.select_by_id('tb_teste', 'test-id'),
    's3://bucket-teste/query-results/',
    database='eventos',
    workgroup='primary',
  )

  assert handle == HANDLE
  name, request = client.calls[0]
  assert name == 'start_query_execution'
  assert request == {
    'QueryString': 'SELECT * FROM tb_teste WHERE id = ?',
    'ExecutionParameters': ["'test-id'"],
    'ResultConfiguration': {'OutputLocation': 's3://bucket-teste/query-results/'},
    'QueryExecutionContext': {'Database': 'eventos'},
    'WorkGroup': 'primary',
  }


def test_submit_omits_optional_context():
  client = FakeAthenaClient()
  Boto3AthenaRepository(client).submit(QueryStatement('SELECT 1'), 's3://bucket/out/')

  _, request = client.calls[0]
  assert 'ExecutionParameters' not in request
  assert 'QueryExecutionContext' not in request
  assert 'WorkGroup' not in request


@pytest.mark.parametrize(
  'state, expected',
  [
    ('QUEUED', QueryJobStatus.QUEUED),
    ('RUNNING', QueryJobStatus.RUNNING),
    ('SUCCEEDED', QueryJobStatus.SUCCEEDED),
    ('FAILED', QueryJobStatus.FAILED),
    ('CANCELLED', QueryJobStatus.CANCELLED),
    ('SOMETHING_NEW', QueryJobStatus.RUNNING),
  ],
)
def test_get_state_maps_engine_states(state, expected):
  state_seen = Boto3AthenaRepository(FakeAthenaClient(state=state)).get_state(HANDLE)
  assert state_seen.status == expected


def test_get_state_keeps_reason():
  client = FakeAthenaClient(state='FAILED', reason='TABLE_NOT_FOUND')
  assert Boto3AthenaRepository(client).get_state(HANDLE).reason == 'TABLE_NOT_FOUND'


def test_get_result_rows_reads_first_page_only():
  client = FakeAthenaClient(rows=[['name', 'data'], ['event1', None]])

  rows = Boto3AthenaRepository(client).get_result_rows(HANDLE)

  assert rows == [['name', 'data'], ['event1', None]]
  assert [name for name, _ in client.calls] == ['get_query_results']


def test_cancel_stops_execution():
  client = FakeAthenaClient()
  Boto3AthenaRepository(client).cancel(HANDLE)
  assert client.calls == [('stop_query_execution', 'mock-query-id')]


def test_client_errors_become_remote_call_errors():
  repository = Boto3AthenaRepository(FailingAthenaClient())

  with pytest.raises(RemoteCallError, match='StartQueryExecution'):
    repository.submit(QueryStatement('SELECT 1'), 's3://bucket/out/')
  with pytest.raises(RemoteCallError, match='GetQueryExecution'):
    repository.get_state(HANDLE)
  with pytest.raises(RemoteCallError, match='GetQueryResults'):
    repository.get_result_rows(HANDLE)
