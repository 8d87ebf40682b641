"""Config module exports."""

from perlscope.config.loader import load_config
from perlscope.config.models import (
    IndexConfig,
    LoggingConfig,
    LogOutputConfig,
    PerlScopeConfig,
)

__all__ = [
    "load_config",
    "PerlScopeConfig",
    "IndexConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
