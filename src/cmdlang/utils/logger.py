"""Logger lookup for cmdlang modules.

The scanner never raises on malformed input. When it degrades (an
unterminated quote or block comment) it says so at DEBUG level on a
logger under the ``cmdlang`` namespace. No handlers are installed here;
the ``cmdlang`` command configures output from ``--verbose``.

Example:
    >>> from cmdlang.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Unterminated block comment starting at %d:%d", 3, 1)
"""

from __future__ import annotations

import logging

_NAMESPACE = "cmdlang"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the cmdlang namespace.

    Module names already inside the package are used as is, anything else
    is nested below it, so one ``logging.getLogger("cmdlang")`` setting
    controls every scanner message.

    Example:
        >>> get_logger("cmdlang.lexer.core").name
        'cmdlang.lexer.core'
        >>> get_logger("driver").name
        'cmdlang.driver'
    """
    if name == _NAMESPACE or name.startswith(_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_NAMESPACE}.{name}")
