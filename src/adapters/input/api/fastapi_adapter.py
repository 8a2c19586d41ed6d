"""FastAPI adapter exposing HTTP endpoints."""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response

from src.application.commands.event_query_command import EventQueryCommand
from src.domain.exceptions import ValidationError
from src.ports.input.query_service import EventQueryService
from src.ports.input.result_presenter import ResultPresenter

logger = logging.getLogger(__name__)

MISSING_ID_MESSAGE = 'id obrigatorio'
QUERY_FAILED_MESSAGE = 'Erro ao consultar Athena'
SERIALIZATION_FAILED_MESSAGE = 'Erro ao serializar resultado'


class FastAPIAdapter:
  def __init__(self, query_service: EventQueryService, presenter: ResultPresenter):
    self._query_service = query_service
    self._presenter = presenter
    self.app = FastAPI(
      title='Event Query API',
      version='0.1.0',
      description='Looks up events by id through an asynchronous Athena query.',
    )
    self._configure_routes()

  def _configure_routes(self) -> None:
    @self.app.get('/', tags=['Events'], response_class=PlainTextResponse)
    async def missing_id():
      return PlainTextResponse(MISSING_ID_MESSAGE, status_code=400)

    @self.app.get('/{event_id}', tags=['Events'])
    async def get_events(event_id: str):
      """Return the events recorded for `event_id` as a JSON array."""
      try:
        command = EventQueryCommand(event_id=event_id)
      except ValidationError as exc:
        return PlainTextResponse(str(exc), status_code=400)

      try:
        result = await self._query_service.find_events(command)
      except Exception:  # noqa: BLE001
        logger.exception('Unexpected failure querying id %r', event_id)
        return PlainTextResponse(QUERY_FAILED_MESSAGE, status_code=500)

      if not result.succeeded:
        logger.error(
          'Query for id %r failed (%s, execution %s): %s',
          event_id, result.error_kind, result.execution_id, result.error,
        )
        return PlainTextResponse(QUERY_FAILED_MESSAGE, status_code=500)

      try:
        body = self._presenter.present(result)
      except (TypeError, ValueError) as exc:
        logger.error('Serializing result for id %r failed: %s', event_id, exc)
        return PlainTextResponse(SERIALIZATION_FAILED_MESSAGE, status_code=500)
      return Response(content=body, media_type=self._presenter.media_type, status_code=200)
