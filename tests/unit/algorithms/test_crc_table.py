import numpy as np
import pytest

from paramcrc import presets
from paramcrc.algorithms import crc_bitwise, crc_table
from paramcrc.config import CrcConfig
from tests.conftest import CHECK_MESSAGE, CRC_PRESETS, OTHER_WIDTHS, config_id, fold_update, random_messages

ALL_CRCS = CRC_PRESETS + [cfg for cfg, _ in OTHER_WIDTHS]


@pytest.mark.parametrize(
    "bits,dtype",
    [(8, np.uint8), (16, np.uint16), (24, np.uint32), (32, np.uint32), (40, np.uint64), (64, np.uint64)],
)
def test_table_dtype_is_smallest_unsigned(bits: int, dtype):
    assert crc_table.table_dtype(bits) == np.dtype(dtype)


def test_table_dtype_rejects_too_wide():
    with pytest.raises(ValueError):
        crc_table.table_dtype(72)


@pytest.mark.parametrize("cfg", ALL_CRCS, ids=config_id)
def test_table_entries_come_from_bitwise_division(cfg: CrcConfig):
    table = crc_table.build_table(cfg=cfg)
    assert table.shape == (256,)
    assert table.dtype == crc_table.table_dtype(cfg.bits)
    assert int(table[0]) == 0
    assert int(table[1]) == cfg.polynomial
    expected = [crc_bitwise.divide(d << (cfg.bits - 8), cfg=cfg) for d in range(256)]
    assert [int(v) for v in table] == expected


def test_table_is_read_only():
    table = crc_table.build_table(cfg=presets.CRC32)
    assert not table.flags.writeable
    with pytest.raises(ValueError):
        table[0] = 1


def test_ccitt_table_matches_classic_values():
    table = crc_table.build_table(cfg=presets.CRC16_CCITT)
    assert [int(v) for v in table[:4]] == [0x0000, 0x1021, 0x2042, 0x3063]


@pytest.mark.parametrize("cfg", ALL_CRCS, ids=config_id)
def test_fast_and_slow_paths_agree(cfg: CrcConfig):
    table = crc_table.build_table(cfg=cfg)
    messages = [b"", CHECK_MESSAGE, bytes(range(256)), b"\xff" * 17] + random_messages(seed=cfg.bits)
    for msg in messages:
        assert crc_table.calculate(msg, cfg=cfg, table=table) == crc_bitwise.calculate(msg, cfg=cfg)


@pytest.mark.parametrize("cfg", CRC_PRESETS, ids=config_id)
def test_step_equals_bitwise_step_for_every_byte(cfg: CrcConfig):
    table = crc_table.build_table(cfg=cfg)
    register = cfg.initial_value
    for b in range(256):
        assert crc_table.step(register, b, cfg=cfg, table=table) == crc_bitwise.step(register, b, cfg=cfg)
        register = crc_bitwise.step(register, b, cfg=cfg)


@pytest.mark.parametrize("cfg", CRC_PRESETS, ids=config_id)
def test_table_update_fold_matches_calculate(cfg: CrcConfig):
    table = crc_table.build_table(cfg=cfg)
    msg = bytes(range(40, 140))
    folded = fold_update(lambda prior, b: crc_table.update(prior, b, cfg=cfg, table=table), msg)
    assert folded == crc_table.calculate(msg, cfg=cfg, table=table)
