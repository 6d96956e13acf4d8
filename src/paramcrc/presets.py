from __future__ import annotations

from paramcrc.config import ChecksumConfig, Config, CrcConfig

CHECKSUM_8 = ChecksumConfig("8-bit Checksum", 8)
CHECKSUM_16 = ChecksumConfig("16-bit Checksum", 16)
CHECKSUM_32 = ChecksumConfig("32-bit Checksum", 32)

CRC16 = CrcConfig("CRC-16", 16, 0x8005, 0x0000, 0x0000, True, True, False)
CRC16_MODBUS = CrcConfig("CRC-16 Modbus", 16, 0x8005, 0xFFFF, 0x0000, True, True, False)
CRC16_CCITT = CrcConfig("CRC-CCITT", 16, 0x1021, 0xFFFF, 0x0000, False, False, False)
CRC16_CCITT_XMODEM = CrcConfig("CRC-CCITT XModem", 16, 0x1021, 0x0000, 0x0000, False, False, False)
CRC16_CCITT_1D0F = CrcConfig("CRC-CCITT 0x1D0F", 16, 0x1021, 0x1D0F, 0x0000, False, False, False)
CRC16_CCITT_KERMIT = CrcConfig("CRC-CCITT Kermit", 16, 0x1021, 0x0000, 0x0000, True, True, True)
CRC16_DNP = CrcConfig("CRC-DNP", 16, 0x3D65, 0x0000, 0xFFFF, True, True, True)
CRC32 = CrcConfig("CRC-32", 32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True, False)

PRESETS: tuple[Config, ...] = (
    CHECKSUM_8,
    CHECKSUM_16,
    CHECKSUM_32,
    CRC16,
    CRC16_MODBUS,
    CRC16_CCITT,
    CRC16_CCITT_XMODEM,
    CRC16_CCITT_1D0F,
    CRC16_CCITT_KERMIT,
    CRC16_DNP,
    CRC32,
)

_BY_NAME = {p.name.upper(): p for p in PRESETS}


def available_presets() -> list[str]:
    """
    Names of the predefined configs, in declaration order.
    """
    return [p.name for p in PRESETS]


def get_preset(name: str) -> Config:
    """
    Look up a predefined config by name (case-insensitive).

    Raises ValueError for unknown names.
    """
    if not isinstance(name, str):
        raise TypeError("name must be str")
    try:
        return _BY_NAME[name.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown preset: {name!r}") from None
