from __future__ import annotations

from typing import Optional

import numpy as np

from paramcrc.algorithms import crc_bitwise
from paramcrc.algorithms.finalize import finalize, unfinalize
from paramcrc.algorithms.reflect import REFLECTED_BYTES
from paramcrc.config import CrcConfig

TABLE_SIZE = 256


def table_dtype(bits: int) -> np.dtype:
    """
    Smallest unsigned dtype that holds a bits-wide register.
    """
    for dt in (np.uint8, np.uint16, np.uint32, np.uint64):
        if bits <= np.iinfo(dt).bits:
            return np.dtype(dt)
    raise ValueError(f"no unsigned dtype holds {bits} bits")


def build_table(*, cfg: CrcConfig) -> np.ndarray:
    """
    Partial remainder for every possible leading byte:
      table[d] = divide(d << (bits - 8))

    Input reflection is not baked in; step() reflects before indexing.
    The returned array is read-only.
    """
    shift = cfg.bits - 8
    table = np.fromiter(
        (crc_bitwise.divide(d << shift, cfg=cfg) for d in range(TABLE_SIZE)),
        dtype=table_dtype(cfg.bits),
        count=TABLE_SIZE,
    )
    table.setflags(write=False)
    return table


def step(register: int, b: int, *, cfg: CrcConfig, table: np.ndarray) -> int:
    """
    One table lookup, equivalent to crc_bitwise.step().
    """
    if cfg.reflect_input_bits:
        b = REFLECTED_BYTES[b]
    index = b ^ (register >> (cfg.bits - 8))
    return ((register << 8) & cfg.mask) ^ int(table[index])


def calculate(message: bytes, *, cfg: CrcConfig, table: np.ndarray) -> int:
    register = cfg.initial_value
    for b in message:
        register = step(register, b, cfg=cfg, table=table)
    return finalize(register, cfg=cfg)


def update(prior: Optional[int], b: int, *, cfg: CrcConfig, table: np.ndarray) -> int:
    register = cfg.initial_value if prior is None else unfinalize(prior, cfg=cfg)
    register = step(register, b, cfg=cfg, table=table)
    return finalize(register, cfg=cfg)
