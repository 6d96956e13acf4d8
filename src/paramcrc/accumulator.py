from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class NotStarted:
    """No bytes processed yet; the next update starts from cfg.initial_value."""


@dataclass(frozen=True, slots=True)
class InProgress:
    """
    A finalized value returned by an earlier calculate/update call.

    The engine keeps no per-stream state, so this value is everything needed
    to resume.
    """
    value: int


Accumulator = NotStarted | InProgress

NOT_STARTED = NotStarted()


def resolve(prior: object) -> Optional[int]:
    """
    Normalize what callers pass as the previous value of an incremental update.

      NotStarted / None  -> None
      InProgress(v) / v  -> v
    """
    match prior:
        case None | NotStarted():
            return None
        case InProgress(value=value):
            return _check_int(value)
        case bool():
            raise TypeError("prior must be NotStarted, InProgress, int or None, got bool")
        case int():
            return prior
        case _:
            raise TypeError(
                f"prior must be NotStarted, InProgress, int or None, got {type(prior).__name__}"
            )


def _check_int(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("InProgress.value must be int")
    return value
