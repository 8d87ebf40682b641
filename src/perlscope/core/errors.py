"""perlscope error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Index

Request handlers never let these reach the editor. They are raised at the
seams (config loading, index waits) and absorbed into "no result" by the
feature modules.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Index (3xxx)
    INDEX_DOCUMENT_TIMEOUT = 3001


@dataclass(frozen=True, slots=True)
class PerlScopeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PerlScopeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DocumentNotIndexedError(PerlScopeError):
    """The indexer never published a document model for a URI in time."""

    @classmethod
    def timeout(cls, uri: str, attempts: int, waited_sec: float) -> "DocumentNotIndexedError":
        return cls(
            code=ErrorCode.INDEX_DOCUMENT_TIMEOUT,
            message=f"Found no document for {uri} after {waited_sec:.1f}s",
            retryable=True,
            details={"uri": uri, "attempts": attempts, "waited_sec": waited_sec},
        )
