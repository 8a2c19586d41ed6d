"""Value object for a parameterized SQL statement."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from src.domain.exceptions import ValidationError

IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$')


def quote_literal(value: str) -> str:
  """Render a value as a SQL string literal for engine-side parameter binding."""
  return "'" + value.replace("'", "''") + "'"


@dataclass(frozen=True)
class QueryStatement:
  """SQL text with `?` placeholders and the ordered values bound to them."""

  sql: str
  parameters: Tuple[str, ...] = ()

  def __post_init__(self) -> None:
    if self.sql.count('?') != len(self.parameters):
      raise ValueError(
        f'statement has {self.sql.count("?")} placeholders but {len(self.parameters)} parameters'
      )

  @staticmethod
  def select_by_id(table: str, event_id: str) -> 'QueryStatement':
    if not IDENTIFIER_PATTERN.match(table or ''):
      raise ValidationError(f'invalid table name: {table!r}')
    return QueryStatement(
      sql=f'SELECT * FROM {table} WHERE id = ?',
      parameters=(quote_literal(event_id),),
    )
