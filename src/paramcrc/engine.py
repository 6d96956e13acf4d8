from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from paramcrc import accumulator
from paramcrc.algorithms import checksum, crc_bitwise, crc_table
from paramcrc.algorithms import finalize as crc_finalize
from paramcrc.config import ChecksumConfig, Config, CrcConfig

logger = logging.getLogger(__name__)


class UnsupportedConfigError(TypeError):
    """A config that is neither ChecksumConfig nor CrcConfig reached dispatch."""


# ----------------------------
# Stateless API (bitwise path, nothing cached)
# ----------------------------

def calculate(config: Config, message: bytes | bytearray | memoryview | str) -> int:
    """
    Checksum/CRC of a complete message. CRCs use bitwise division.
    Text is encoded as UTF-8.
    """
    data = _as_bytes(message)
    match config:
        case ChecksumConfig():
            return checksum.calculate(data, cfg=config)
        case CrcConfig():
            return crc_bitwise.calculate(data, cfg=config)
        case _:
            raise _unsupported(config)


def update(config: Config, prior: Any, next_byte: int) -> int:
    """
    Feed one more byte into an incremental computation.

    prior: NOT_STARTED / None for the first byte, otherwise the value returned
           by the previous call (plain int or InProgress).
    Returns the finalized value of everything fed so far.
    """
    b = _check_byte(next_byte)
    match config:
        case ChecksumConfig():
            return checksum.update(_resolve_prior(prior, config), b, cfg=config)
        case CrcConfig():
            return crc_bitwise.update(_resolve_prior(prior, config), b, cfg=config)
        case _:
            raise _unsupported(config)


def update_bytes(config: Config, prior: Any, data: bytes | bytearray | memoryview | str) -> int:
    """
    Feed a chunk of bytes; same result as calling update() once per byte.
    """
    value = _resolve_prior(prior, _check_config(config))
    chunk = _as_bytes(data)
    if not chunk:
        return finalize(config, config.initial_value) if value is None else value
    for b in chunk:
        value = update(config, value, b)
    return value


def finalize(config: Config, register: int) -> int:
    """
    Working register -> published value. Identity for checksums.
    """
    match config:
        case ChecksumConfig():
            return register & config.mask
        case CrcConfig():
            return crc_finalize.finalize(register, cfg=config)
        case _:
            raise _unsupported(config)


def unfinalize(config: Config, value: int) -> int:
    """
    Published value -> working register. Identity for checksums.
    """
    match config:
        case ChecksumConfig():
            return value & config.mask
        case CrcConfig():
            return crc_finalize.unfinalize(value, cfg=config)
        case _:
            raise _unsupported(config)


# ----------------------------
# Stateful API (table-driven path)
# ----------------------------

class Engine:
    """
    Checksum/CRC calculator bound to one config.

    For CRC configs the 256-entry lookup table is built here, once, and is
    read-only afterwards, so an Engine can be shared between threads.
    Checksum configs have no table.
    """

    def __init__(self, config: Config) -> None:
        self._config = _check_config(config)
        self._table: Optional[np.ndarray] = None
        if isinstance(config, CrcConfig):
            self._table = crc_table.build_table(cfg=config)
            logger.debug(
                "built %d-entry %s lookup table for %s",
                len(self._table), self._table.dtype, config.name,
            )

    def __repr__(self) -> str:
        return f"Engine({self._config.name!r})"

    @property
    def config(self) -> Config:
        return self._config

    @property
    def table(self) -> Optional[np.ndarray]:
        return self._table

    def calculate(self, message: bytes | bytearray | memoryview | str) -> int:
        data = _as_bytes(message)
        match self._config:
            case ChecksumConfig():
                return checksum.calculate(data, cfg=self._config)
            case CrcConfig():
                return crc_table.calculate(data, cfg=self._config, table=self._table)
            case _:
                raise _unsupported(self._config)

    def update(self, prior: Any, next_byte: int) -> int:
        b = _check_byte(next_byte)
        value = _resolve_prior(prior, self._config)
        match self._config:
            case ChecksumConfig():
                return checksum.update(value, b, cfg=self._config)
            case CrcConfig():
                return crc_table.update(value, b, cfg=self._config, table=self._table)
            case _:
                raise _unsupported(self._config)

    def update_bytes(self, prior: Any, data: bytes | bytearray | memoryview | str) -> int:
        value = _resolve_prior(prior, self._config)
        chunk = _as_bytes(data)
        if not chunk:
            return self.calculate(b"") if value is None else value
        for b in chunk:
            value = self.update(value, b)
        return value


# ----------------------------
# Internal
# ----------------------------

def _unsupported(config: object) -> UnsupportedConfigError:
    return UnsupportedConfigError(f"Unsupported configuration type: {type(config).__name__}")


def _check_config(config: object) -> Config:
    if not isinstance(config, (ChecksumConfig, CrcConfig)):
        raise _unsupported(config)
    return config


def _as_bytes(message: object) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise TypeError("message must be bytes-like or str")


def _check_byte(b: object) -> int:
    if not isinstance(b, int) or isinstance(b, bool):
        raise TypeError("next_byte must be int")
    if not (0 <= b <= 0xFF):
        raise ValueError("next_byte must be in [0, 255]")
    return b


def _resolve_prior(prior: object, config: Config) -> Optional[int]:
    value = accumulator.resolve(prior)
    if value is not None and not (0 <= value <= config.mask):
        raise ValueError(f"prior must be in [0, {config.mask:#x}] for {config.name}")
    return value
