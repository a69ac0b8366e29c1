from __future__ import annotations
import logging
import os

from skim.errors import SkimConfigError

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000
_MIN_RECURSION_LIMIT = 100
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_DOUBLE_FORMAT = "%f"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise SkimConfigError(f"{var} must be an integer, got {raw!r}") from None


def get_recursion_limit() -> int:
    # evaluation recurses on the host stack, one or more frames per nested form
    limit = int_from_env('SKIM_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
    if limit < _MIN_RECURSION_LIMIT:
        logger.warning("SKIM_RECURSION_LIMIT=%d is below the minimum, using %d", limit, _MIN_RECURSION_LIMIT)
        return _MIN_RECURSION_LIMIT
    return limit


def get_log_level() -> str:
    return os.environ.get('SKIM_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL


def get_double_format() -> str:
    return os.environ.get('SKIM_DOUBLE_FORMAT') or _DEFAULT_DOUBLE_FORMAT
