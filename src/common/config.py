"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
  """Immutable application settings loaded from environment variables."""

  output_location: str
  aws_region: str = 'us-west-2'
  database: Optional[str] = None
  workgroup: Optional[str] = None
  events_table: str = 'tb_teste'
  query_timeout_seconds: float = 25.0
  poll_interval_seconds: float = 1.0
  cancel_on_timeout: bool = True
  log_level: str = 'INFO'

  def __post_init__(self) -> None:
    if self.query_timeout_seconds <= 0:
      raise ValueError('QUERY_TIMEOUT_SECONDS must be positive')
    if self.poll_interval_seconds <= 0:
      raise ValueError('QUERY_POLL_INTERVAL_SECONDS must be positive')


def _parse_float(name: str, raw: Optional[str], default: float) -> float:
  if raw is None or raw == '':
    return default
  try:
    return float(raw)
  except ValueError as exc:
    raise ValueError(f'{name} must be a number, got {raw!r}') from exc


def _parse_bool(raw: Optional[str], default: bool) -> bool:
  if raw is None or raw == '':
    return default
  return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def load_settings() -> Settings:
  """Build settings from the current environment."""
  from os import getenv

  output_location = getenv('ATHENA_OUTPUT_LOCATION')
  if not output_location:
    raise ValueError('ATHENA_OUTPUT_LOCATION must be set in environment or .env file')

  return Settings(
    output_location=output_location,
    aws_region=getenv('AWS_REGION') or 'us-west-2',
    database=getenv('ATHENA_DATABASE') or None,
    workgroup=getenv('ATHENA_WORKGROUP') or None,
    events_table=getenv('EVENTS_TABLE') or 'tb_teste',
    query_timeout_seconds=_parse_float('QUERY_TIMEOUT_SECONDS', getenv('QUERY_TIMEOUT_SECONDS'), 25.0),
    poll_interval_seconds=_parse_float('QUERY_POLL_INTERVAL_SECONDS', getenv('QUERY_POLL_INTERVAL_SECONDS'), 1.0),
    cancel_on_timeout=_parse_bool(getenv('CANCEL_ON_TIMEOUT'), True),
    log_level=(getenv('LOG_LEVEL') or 'INFO').upper(),
  )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path(__file__).resolve().parents[2] / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()
  return load_settings()
