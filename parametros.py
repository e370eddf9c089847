"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

APP_NAME = "SorTech"
DEFAULT_SORT_CRITERION = "ID"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)
