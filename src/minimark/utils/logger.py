"""Logging for minimark.

Every logger lives under the ``minimark`` root logger. The library only
attaches a NullHandler to that root; applications decide where records go.

Example:
    >>> import logging
    >>> logging.getLogger("minimark").setLevel(logging.DEBUG)
    >>> from minimark import scan
    >>> tokens = scan("hello", name="notes.md")  # logs "notes.md: scan finished with EOF"
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "minimark"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the minimark namespace.

    Names outside the namespace are nested under it, so
    ``get_logger("mymodule")`` returns ``minimark.mymodule``.
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
