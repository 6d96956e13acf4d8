from __future__ import annotations

from typing import Optional

from paramcrc.config import ChecksumConfig


def calculate(message: bytes, *, cfg: ChecksumConfig) -> int:
    """
    Additive checksum of a whole message.

    Bytes are summed as signed 8-bit values (0x80..0xFF count as -128..-1)
    and the sum is masked to cfg.bits once at the end.
    """
    total = cfg.initial_value
    for b in message:
        total += _signed(b)
    return total & cfg.mask


def update(prior: Optional[int], b: int, *, cfg: ChecksumConfig) -> int:
    """
    Add one byte to a running checksum. prior=None starts a new one.

    The masked sum is its own resumable state; there is no finalize step.
    """
    total = cfg.initial_value if prior is None else prior
    total += _signed(b)
    return total & cfg.mask


def _signed(b: int) -> int:
    return b - 0x100 if b & 0x80 else b
