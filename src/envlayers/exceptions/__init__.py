"""Exceptions raised by envlayers.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging/recovery

Usage:
    from envlayers.exceptions import (
        EnvLayersError,
        VariableNotFoundError,
        EnvironmentNotSetError,
    )

Candidate env files that are missing or unreadable never raise; only
variable lookups through the fatal accessors do.
"""

from envlayers.exceptions.base import (
    EnvironmentNotSetError,
    EnvLayersError,
    VariableNotFoundError,
)

__all__ = [
    "EnvLayersError",
    "VariableNotFoundError",
    "EnvironmentNotSetError",
]
