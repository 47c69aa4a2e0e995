"""Predicates on the active environment.

All helpers read the ``APP_ENV`` marker on every call; nothing is cached.
The marker must have been written first, by ``configure().resolve()`` or
``set_var("APP_ENV", ...)``.
"""

from envlayers.env import MARKER_VARIABLE, Environment
from envlayers.exceptions import EnvironmentNotSetError, VariableNotFoundError
from envlayers.variables import var


def get_current_environment_code() -> str:
    """Get the current environment code from ``APP_ENV``.

    Raises:
        EnvironmentNotSetError: If the marker variable is not set.
    """
    try:
        return var(MARKER_VARIABLE)
    except VariableNotFoundError as exc:
        raise EnvironmentNotSetError(MARKER_VARIABLE) from exc


def get_current_environment() -> Environment:
    """Get the current environment from ``APP_ENV`` as an Environment.

    Raises:
        EnvironmentNotSetError: If the marker variable is not set.
    """
    return Environment(get_current_environment_code())


def is_development() -> bool:
    """Whether the current environment is ``development``."""
    return get_current_environment_code() == Environment.DEVELOPMENT.code


def is_test() -> bool:
    """Whether the current environment is ``test``."""
    return get_current_environment_code() == Environment.TEST.code


def is_production() -> bool:
    """Whether the current environment is ``production``."""
    return get_current_environment_code() == Environment.PRODUCTION.code


# Short aliases
is_dev = is_development
is_test_environment = is_test
is_prd = is_production


__all__ = [
    "get_current_environment",
    "get_current_environment_code",
    "is_dev",
    "is_development",
    "is_prd",
    "is_production",
    "is_test",
    "is_test_environment",
]
