"""Exception taxonomy for event queries."""
from __future__ import annotations

from typing import Optional


class EventQueryError(Exception):
  """Base exception for every failure of an event query."""


class ValidationError(EventQueryError, ValueError):
  """Required input is missing or invalid."""


class RemoteCallError(EventQueryError):
  """A call to the remote query engine failed."""

  def __init__(self, operation: str, message: str):
    super().__init__(f'{operation} failed: {message}')
    self.operation = operation


class TerminalFailureError(EventQueryError):
  """The remote job ended in FAILED or CANCELLED."""

  def __init__(self, status, reason: Optional[str] = None):
    message = f'query finished with status {status.value}'
    if reason:
      message = f'{message}: {reason}'
    super().__init__(message)
    self.status = status
    self.reason = reason


class DeadlineExceededError(EventQueryError):
  """The job did not reach a terminal state within the polling window."""

  def __init__(self, handle, timeout: float, checks: int):
    super().__init__(f'query {handle} not finished within {timeout:g}s ({checks} checks)')
    self.handle = handle
    self.timeout = timeout
    self.checks = checks


class MalformedPayloadError(EventQueryError):
  """A result row could not be turned into an event record."""
