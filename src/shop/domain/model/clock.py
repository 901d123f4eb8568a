"""Time source injected into aggregates.

Aggregates never read the wall clock directly; they call the ``Clock``
they were built with. Tests pass a fixed or stepping clock instead.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    return datetime.now(timezone.utc)
