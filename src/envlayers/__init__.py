"""envlayers - layered .env loading into the process environment.

This package provides:
- env: resolve .env, .env.local, .env.<environment> and
  .env.<environment>.local into os.environ, recording the profile in APP_ENV
- variables: read and write process environment variables
- common: predicates on the active environment (is_development, ...)
- exceptions: structured error types
- logger: structured logging configured from ENVLAYERS_LOG_* variables

Example:
    from envlayers import configure, var, is_production

    configure().environment("production").resolve()
    database_url = var("DATABASE_URL")
"""

__version__ = "1.0.0"

from envlayers.common import (
    get_current_environment,
    get_current_environment_code,
    is_dev,
    is_development,
    is_prd,
    is_production,
    is_test,
    is_test_environment,
)
from envlayers.env import (
    DEFAULT_ENVIRONMENT,
    MARKER_VARIABLE,
    Environment,
    ResolutionConfig,
    configure,
    read_env_file,
)
from envlayers.exceptions import (
    EnvironmentNotSetError,
    EnvLayersError,
    VariableNotFoundError,
)
from envlayers.variables import get_var, get_vars, set_var, set_vars, var

__all__ = [
    "__version__",
    # Loader
    "configure",
    "ResolutionConfig",
    "Environment",
    "DEFAULT_ENVIRONMENT",
    "MARKER_VARIABLE",
    "read_env_file",
    # Variables
    "get_var",
    "get_vars",
    "set_var",
    "set_vars",
    "var",
    # Environment predicates
    "get_current_environment",
    "get_current_environment_code",
    "is_development",
    "is_dev",
    "is_test",
    "is_test_environment",
    "is_production",
    "is_prd",
    # Exceptions
    "EnvLayersError",
    "VariableNotFoundError",
    "EnvironmentNotSetError",
]
