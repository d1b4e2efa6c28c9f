"""Namespaced loggers for regulex modules.

Every module logs under the "regulex" hierarchy so applications can turn on
tokenizer diagnostics (unexpected spans, expect() mismatches, registry
construction) with one logger name. The library only emits debug records
and never installs handlers.

Example:
    >>> import logging
    >>> logging.getLogger("regulex").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the "regulex." namespace.

    Module names inside the package are used as-is; anything else is
    prefixed, so get_logger("calc") returns the "regulex.calc" logger.
    """
    if not (name == "regulex" or name.startswith("regulex.")):
        name = f"regulex.{name}"
    return logging.getLogger(name)
