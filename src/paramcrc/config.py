from __future__ import annotations

from dataclasses import dataclass, field

MAX_BITS = 64  # widest unsigned numpy dtype the lookup table can use


@dataclass(frozen=True, slots=True)
class ChecksumConfig:
    """
    Plain additive checksum, modulo 2**bits.

    name: human readable label (e.g. "8-bit Checksum")
    bits: output width, a positive multiple of 8, at most 64

    Derived: nbytes, mask, initial_value (always 0).
    """
    name: str
    bits: int
    nbytes: int = field(init=False, repr=False, compare=False)
    mask: int = field(init=False, repr=False, compare=False)
    initial_value: int = field(init=False, default=0, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_bits(self.bits)
        object.__setattr__(self, "nbytes", self.bits // 8)
        object.__setattr__(self, "mask", (1 << self.bits) - 1)
        object.__setattr__(self, "initial_value", 0)


@dataclass(frozen=True, slots=True)
class CrcConfig:
    """
    Rocksoft/Williams parameterized CRC.

    polynomial:           generator polynomial, top (x^bits) term implied
    initial_value:        register contents before the first byte
    final_xor_value:      XORed into the register when finalizing
    reflect_input_bits:   feed each message byte LSB first
    reflect_output_bits:  reverse the whole register before the final XOR
    reflect_output_bytes: reverse the byte order after the final XOR (Kermit, DNP)

    Derived: nbytes, mask, top_bit.
    """
    name: str
    bits: int
    polynomial: int
    initial_value: int
    final_xor_value: int
    reflect_input_bits: bool
    reflect_output_bits: bool
    reflect_output_bytes: bool
    nbytes: int = field(init=False, repr=False, compare=False)
    mask: int = field(init=False, repr=False, compare=False)
    top_bit: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        _check_name(self.name)
        _check_bits(self.bits)
        mask = (1 << self.bits) - 1
        for attr in ("polynomial", "initial_value", "final_xor_value"):
            _check_register_value(attr, getattr(self, attr), mask)
        for attr in ("reflect_input_bits", "reflect_output_bits", "reflect_output_bytes"):
            if not isinstance(getattr(self, attr), bool):
                raise TypeError(f"cfg.{attr} must be bool")

        object.__setattr__(self, "nbytes", self.bits // 8)
        object.__setattr__(self, "mask", mask)
        object.__setattr__(self, "top_bit", 1 << (self.bits - 1))


# Every component dispatches on this union with `match`.
Config = ChecksumConfig | CrcConfig


# ----------------------------
# Internal
# ----------------------------

def _check_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError("cfg.name must be str")
    if not name.strip():
        raise ValueError("cfg.name must be a non-empty string")


def _check_bits(bits: object) -> None:
    if not isinstance(bits, int) or isinstance(bits, bool):
        raise TypeError("cfg.bits must be int")
    if bits <= 0 or bits % 8 != 0:
        raise ValueError(f"cfg.bits must be a positive multiple of 8, got {bits}")
    if bits > MAX_BITS:
        raise ValueError(f"cfg.bits must be <= {MAX_BITS}, got {bits}")


def _check_register_value(name: str, value: object, mask: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"cfg.{name} must be int")
    if not (0 <= value <= mask):
        raise ValueError(f"cfg.{name} must be in [0, {mask:#x}]")
