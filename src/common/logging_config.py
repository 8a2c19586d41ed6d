"""Process-wide logging setup."""
from __future__ import annotations

import logging

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def configure_logging(level: str = 'INFO') -> None:
  logging.basicConfig(level=level, format=LOG_FORMAT)
  logging.getLogger().setLevel(level)
  logging.getLogger('botocore').setLevel(logging.WARNING)
  logging.getLogger('urllib3').setLevel(logging.WARNING)
