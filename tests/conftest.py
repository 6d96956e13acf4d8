from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

from paramcrc import presets
from paramcrc.config import CrcConfig

CHECK_MESSAGE = b"123456789"
ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# (config, crc("123456789"), crc("A..Z"))
KNOWN_ANSWERS = [
    (presets.CHECKSUM_8, 0xDD, 0xDF),
    (presets.CHECKSUM_16, 0x01DD, 0x07DF),
    (presets.CHECKSUM_32, 0x01DD, 0x07DF),
    (presets.CRC16, 0xBB3D, 0x18E7),
    (presets.CRC16_MODBUS, 0x4B37, 0xFE85),
    (presets.CRC16_CCITT_XMODEM, 0x31C3, 0xE8AF),
    (presets.CRC16_CCITT, 0x29B1, 0xD8E1),
    (presets.CRC16_CCITT_1D0F, 0xE5CC, 0x4430),
    (presets.CRC16_CCITT_KERMIT, 0x8921, 0x5EB6),
    (presets.CRC16_DNP, 0x82EA, 0x6CE7),
    (presets.CRC32, 0xCBF43926, 0xABF77822),
]

CRC_PRESETS = [p for p in presets.PRESETS if isinstance(p, CrcConfig)]


def config_id(cfg) -> str:
    """
    pytest id for a parametrized config.
    """
    return cfg.name.replace(" ", "_")


def fold_update(update: Callable, data: Iterable[int], prior=None):
    """
    Feed data one byte at a time through update(prior, byte) -> value.
    """
    value = prior
    for b in data:
        value = update(value, b)
    return value


def random_messages(seed: int, count: int = 20, max_len: int = 64) -> list[bytes]:
    """
    Reproducible random messages covering the full byte range (incl. >= 0x80).
    """
    rng = np.random.default_rng(seed)
    lengths = rng.integers(0, max_len, size=count, endpoint=True)
    return [rng.integers(0, 256, size=int(n), dtype=np.uint8).tobytes() for n in lengths]


# Widths and reflections beyond the presets; check values ("123456789") from
# the RevEng CRC catalogue.
OTHER_WIDTHS = [
    (CrcConfig("CRC-8/SMBUS", 8, 0x07, 0x00, 0x00, False, False, False), 0xF4),
    (CrcConfig("CRC-8/MAXIM-DOW", 8, 0x31, 0x00, 0x00, True, True, False), 0xA1),
    (CrcConfig("CRC-24/OPENPGP", 24, 0x864CFB, 0xB704CE, 0x000000, False, False, False), 0x21CF02),
    (CrcConfig("CRC-32/BZIP2", 32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, False, False, False), 0xFC891918),
    (CrcConfig("CRC-32/ISCSI", 32, 0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True, True, False), 0xE3069283),
    (CrcConfig("CRC-64/ECMA-182", 64, 0x42F0E1EBA9EA3693, 0, 0, False, False, False), 0x6C40DF5F0B497347),
    (CrcConfig("CRC-64/XZ", 64, 0x42F0E1EBA9EA3693, 0xFFFFFFFFFFFFFFFF, 0xFFFFFFFFFFFFFFFF,
               True, True, False), 0x995DC9BBDF1939FA),
]
