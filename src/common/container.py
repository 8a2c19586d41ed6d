"""Simple dependency wiring helpers."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from src.adapters.output.athena.boto3_repository import Boto3AthenaRepository, build_athena_client
from src.application.handlers.event_query_handler import EventQueryHandler, EventQueryOptions
from src.application.services.query_poller import QueryPoller
from src.application.services.query_service_impl import QueryServiceImpl
from src.common.config import Settings, get_settings
from src.domain.services.result_row_parser import ResultRowParser


def build_query_service(settings: Settings, athena_client: Optional[Any] = None) -> QueryServiceImpl:
  client = athena_client if athena_client is not None else build_athena_client(settings.aws_region)
  engine = Boto3AthenaRepository(client)
  poller = QueryPoller(engine, cancel_on_timeout=settings.cancel_on_timeout)
  options = EventQueryOptions(
    table=settings.events_table,
    output_location=settings.output_location,
    database=settings.database,
    workgroup=settings.workgroup,
    timeout=settings.query_timeout_seconds,
    interval=settings.poll_interval_seconds,
  )
  handler = EventQueryHandler(engine=engine, poller=poller, parser=ResultRowParser(), options=options)
  return QueryServiceImpl(handler)


@lru_cache(maxsize=1)
def create_query_service() -> QueryServiceImpl:
  return build_query_service(get_settings())
