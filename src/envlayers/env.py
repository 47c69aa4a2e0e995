"""Layered .env loader.

Loads up to four dotenv files from a base directory into ``os.environ``,
in deterministic order (low -> high precedence):

1) .env                      committed defaults
2) .env.local                machine-local overrides
3) .env.<environment>        profile defaults
4) .env.<environment>.local  machine-local profile overrides

Every loaded value overrides whatever the process table already holds,
including values from the ambient environment and from earlier files in the
same pass. Files that are missing, unreadable, undecodable or malformed
are skipped whole.
Once all four candidates have been tried, the marker variable ``APP_ENV``
is set to the environment code.

Example:
    from envlayers import configure

    configure().resolve()                                  # development, cwd
    configure().directory("/srv/app").environment("production").resolve()

Call ``resolve()`` during single-threaded startup, before other threads read
configuration. Concurrent ``resolve()`` calls are serialized against each
other and against ``set_vars()``, but plain ``os.environ`` readers may still
observe a partially applied merge.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import ClassVar, Dict, List, Optional, Union

from dotenv import dotenv_values
from dotenv.parser import parse_stream

from envlayers.logger import get_logger
from envlayers.variables import environ_lock, get_var, set_var, set_vars

MARKER_VARIABLE = "APP_ENV"

logger = get_logger()


@dataclass(frozen=True)
class Environment:
    """Named configuration profile, identified solely by its code.

    The well-known profiles are ``Environment.DEVELOPMENT``, ``Environment.TEST``
    and ``Environment.PRODUCTION``; any other code is a custom profile.
    """

    code: str

    DEVELOPMENT: ClassVar[Environment]
    TEST: ClassVar[Environment]
    PRODUCTION: ClassVar[Environment]

    def __str__(self) -> str:
        return self.code

    def as_str(self) -> str:
        return self.code

    @property
    def is_well_known(self) -> bool:
        return self in _WELL_KNOWN

    @classmethod
    def of(cls, value: Union[str, Environment]) -> Environment:
        """Coerce a code string or an existing Environment."""
        if isinstance(value, Environment):
            return value
        return cls(value)

    @classmethod
    def from_environ(cls) -> Environment:
        """Environment recorded by the marker variable, else development."""
        code = get_var(MARKER_VARIABLE)
        if code is None:
            return DEFAULT_ENVIRONMENT
        return cls(code)


Environment.DEVELOPMENT = Environment("development")
Environment.TEST = Environment("test")
Environment.PRODUCTION = Environment("production")

_WELL_KNOWN = frozenset({Environment.DEVELOPMENT, Environment.TEST, Environment.PRODUCTION})

DEFAULT_ENVIRONMENT = Environment.DEVELOPMENT


def _default_directory() -> Path:
    try:
        return Path.cwd()
    except OSError:
        # cwd was removed or is not accessible
        return Path(".")


def read_env_file(path: Union[str, os.PathLike]) -> Optional[Dict[str, str]]:
    """Parse one dotenv file without touching ``os.environ``.

    Returns:
        The parsed values, or None if the file is missing, not a regular
        file, unreadable, not valid UTF-8 or contains any line that does not
        parse. Keys declared without a value are dropped.
    """
    env_path = Path(path)
    try:
        if not env_path.is_file():
            return None
        # dotenv_values skips bad lines; a file with any of them counts as absent
        with env_path.open(encoding="utf-8") as stream:
            if any(binding.error for binding in parse_stream(stream)):
                return None
        file_values = dotenv_values(env_path)
    except (OSError, ValueError):
        return None
    return {k: v for k, v in file_values.items() if v is not None}


@dataclass(frozen=True)
class ResolutionConfig:
    """Where to look for env files and which profile to load.

    Instances are immutable; ``directory()`` and ``environment()`` return
    updated copies so a base configuration can be shared and specialised.
    """

    base_dir: Path = field(default_factory=_default_directory)
    env: Environment = field(default_factory=Environment.from_environ)

    def directory(self, path: Union[str, os.PathLike]) -> ResolutionConfig:
        """Return a copy that reads env files from ``path``."""
        return replace(self, base_dir=Path(path))

    def environment(self, value: Union[str, Environment]) -> ResolutionConfig:
        """Return a copy that loads the ``value`` profile."""
        return replace(self, env=Environment.of(value))

    def candidates(self) -> List[Path]:
        """Candidate files in load order; later entries take precedence."""
        code = self.env.code
        return [
            self.base_dir / ".env",
            self.base_dir / ".env.local",
            self.base_dir / f".env.{code}",
            self.base_dir / f".env.{code}.local",
        ]

    def resolve(self) -> None:
        """Load every available candidate into ``os.environ`` and set the marker."""
        loaded = 0
        with environ_lock:
            for path in self.candidates():
                file_values = read_env_file(path)
                if file_values is None:
                    continue
                set_vars(file_values)
                loaded += 1
                logger.debug("Loaded env file", path=str(path), keys=len(file_values))

            set_var(MARKER_VARIABLE, self.env.code)

        logger.debug(
            "Resolved environment",
            environment=self.env.code,
            directory=str(self.base_dir),
            files_loaded=loaded,
        )

    run = resolve


def configure() -> ResolutionConfig:
    """Start a resolution using the current directory and the marker's environment."""
    return ResolutionConfig()


__all__ = [
    "DEFAULT_ENVIRONMENT",
    "MARKER_VARIABLE",
    "Environment",
    "ResolutionConfig",
    "configure",
    "read_env_file",
]
