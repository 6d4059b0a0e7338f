"""State-machine types and constants shared by the scanner mixins."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

# A state does some scanning work and returns the next state, or None
# once the scan is finished.
StateFn: TypeAlias = "Callable[[], StateFn | None]"

# Returned by Scanner._next() and Scanner._peek() at end of input
EOF_CHAR = ""

# Most tokens a single state invocation may emit (trailing TEXT then EOF)
MAX_EMIT_PER_STATE = 2
