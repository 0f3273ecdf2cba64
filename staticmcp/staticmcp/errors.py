"""Error codes and exceptions for staticmcp.

Provides:
- ErrorCode enum shared by the generator, the bridge checker and the CLI
- StaticMCPError and subclasses for failures the caller must handle

Parsers and path encoders never raise for supported input; malformed
metadata degrades to "no metadata". Only the generator and configuration
layers raise, and the bridge checker reports bundle defects instead of
raising them.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standardized error codes."""

    # Input errors
    SOURCE_NOT_FOUND = "SOURCE_NOT_FOUND"
    CONFIG_ERROR = "CONFIG_ERROR"

    # Bundle errors (bridge compatibility)
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    MALFORMED_FILE = "MALFORMED_FILE"
    MISSING_FIELDS = "MISSING_FIELDS"

    # Generation errors
    PATH_COLLISION = "PATH_COLLISION"

    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class StaticMCPError(Exception):
    """Base exception for staticmcp failures.

    Attributes:
        message: Error description.
        code: ErrorCode classifying the failure.
        details: Optional extra context for JSON output.
    """

    code = ErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "status": "error",
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            },
        }


class SourceDirectoryError(StaticMCPError):
    """Input path is not a usable documentation source."""

    code = ErrorCode.SOURCE_NOT_FOUND


class ConfigError(StaticMCPError):
    """Configuration file or override is invalid."""

    code = ErrorCode.CONFIG_ERROR
