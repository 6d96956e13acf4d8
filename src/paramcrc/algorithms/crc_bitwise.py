from __future__ import annotations

from typing import Optional

from paramcrc.algorithms.finalize import finalize, unfinalize
from paramcrc.algorithms.reflect import REFLECTED_BYTES
from paramcrc.config import CrcConfig


def divide(register: int, *, cfg: CrcConfig) -> int:
    """
    Eight rounds of modulo-2 division of the register by cfg.polynomial,
    one bit at a time. Also used to build the lookup table.
    """
    for _ in range(8):
        if register & cfg.top_bit:
            register = ((register << 1) & cfg.mask) ^ cfg.polynomial
        else:
            register = (register << 1) & cfg.mask
    return register


def step(register: int, b: int, *, cfg: CrcConfig) -> int:
    if cfg.reflect_input_bits:
        b = REFLECTED_BYTES[b]
    register ^= b << (cfg.bits - 8)
    return divide(register, cfg=cfg)


def calculate(message: bytes, *, cfg: CrcConfig) -> int:
    """
    CRC of a whole message using bitwise division (no lookup table).
    """
    register = cfg.initial_value
    for b in message:
        register = step(register, b, cfg=cfg)
    return finalize(register, cfg=cfg)


def update(prior: Optional[int], b: int, *, cfg: CrcConfig) -> int:
    """
    Feed one byte into a CRC. prior is None to start, otherwise a finalized
    value returned by an earlier call; it is unfinalized, stepped and
    finalized again.
    """
    register = cfg.initial_value if prior is None else unfinalize(prior, cfg=cfg)
    register = step(register, b, cfg=cfg)
    return finalize(register, cfg=cfg)
