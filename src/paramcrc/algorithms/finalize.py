from __future__ import annotations

from paramcrc.algorithms.reflect import reflect_bits, reflect_bytes
from paramcrc.config import CrcConfig


def finalize(register: int, *, cfg: CrcConfig) -> int:
    """
    Turn a raw division remainder into the published CRC value:
      reflect bits (refout) -> XOR final_xor_value -> reflect bytes
    """
    if cfg.reflect_output_bits:
        register = reflect_bits(register, cfg.bits)
    register ^= cfg.final_xor_value
    if cfg.reflect_output_bytes:
        register = reflect_bytes(register, cfg.nbytes)
    return register


def unfinalize(value: int, *, cfg: CrcConfig) -> int:
    """
    Exact inverse of finalize(), so an update can resume from a value that
    was already handed back to the caller.
    """
    if cfg.reflect_output_bytes:
        value = reflect_bytes(value, cfg.nbytes)
    value ^= cfg.final_xor_value
    if cfg.reflect_output_bits:
        value = reflect_bits(value, cfg.bits)
    return value
