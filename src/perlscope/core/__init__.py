"""Core module exports."""

from perlscope.core.errors import (
    ConfigError,
    DocumentNotIndexedError,
    ErrorCode,
    PerlScopeError,
)
from perlscope.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "PerlScopeError",
    "ConfigError",
    "DocumentNotIndexedError",
    "ErrorCode",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
