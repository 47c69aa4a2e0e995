"""Base exception classes for envlayers.

Every envlayers exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery
"""

from typing import Any, Dict, Optional


class EnvLayersError(Exception):
    """Base exception for all envlayers errors.

    Attributes:
        code: Machine-readable error code (e.g., "VARIABLE_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for debugging/recovery
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class VariableNotFoundError(EnvLayersError, LookupError):
    """A required environment variable is not set in the process table.

    Raised by ``envlayers.variables.var`` for required-at-startup variables.
    Also a ``LookupError`` so callers can treat it like a missing key.
    """

    def __init__(
        self,
        name: str,
        message: Optional[str] = None,
        code: str = "VARIABLE_NOT_FOUND",
    ):
        self.name = name
        super().__init__(
            code=code,
            message=message or f"Failed to get environment variable: {name}",
            details={"name": name},
        )


class EnvironmentNotSetError(VariableNotFoundError):
    """The environment marker variable has not been written yet."""

    def __init__(self, name: str):
        super().__init__(
            name,
            message=(
                f"{name} is not set, initialize it with "
                "envlayers.configure().resolve() or set it manually"
            ),
            code="ENVIRONMENT_NOT_SET",
        )
