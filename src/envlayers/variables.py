"""Read and write environment variables of the current process.

A thin facade over ``os.environ``. Nothing here keeps a private copy of the
table: every call reads or writes the live process environment.

Two lookup styles are offered so each call site picks its failure mode:

    from envlayers.variables import get_var, var

    timeout = get_var("HTTP_TIMEOUT", "30")   # None/default when absent
    database_url = var("DATABASE_URL")        # raises VariableNotFoundError

Writes are last-write-wins. The process environment is shared global state
with no isolation, so configure it during a single-threaded startup phase
or hold ``environ_lock`` around batches of writes.
"""

import os
import threading
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from envlayers.exceptions import VariableNotFoundError

# Serializes batched writes (set_vars and the loader's resolve)
environ_lock = threading.RLock()

VarPairs = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def set_var(name: str, value: str) -> None:
    """Set one environment variable, overriding any existing value."""
    os.environ[name] = value


def set_vars(pairs: VarPairs) -> None:
    """Set several environment variables in order.

    Args:
        pairs: A mapping, or an iterable of ``(name, value)`` pairs. When a
            name repeats, the last pair wins.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    with environ_lock:
        for name, value in items:
            set_var(name, value)


def get_vars() -> List[Tuple[str, str]]:
    """Snapshot every variable currently set. Order is not meaningful."""
    return list(os.environ.items())


def get_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get an environment variable, returning ``default`` when it is absent.

    Use :func:`var` for variables that must be present.
    """
    return os.environ.get(name, default)


def var(name: str) -> str:
    """Get a required environment variable.

    Raises:
        VariableNotFoundError: If ``name`` is not set.
    """
    value = os.environ.get(name)
    if value is None:
        raise VariableNotFoundError(name)
    return value


__all__ = [
    "environ_lock",
    "get_var",
    "get_vars",
    "set_var",
    "set_vars",
    "var",
]
