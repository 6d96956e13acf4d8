from __future__ import annotations


def reflect_bits(value: int, n: int) -> int:
    """
    Reverse the order of the low n bits of value (bit i <-> bit n-1-i).
    Bits above n are dropped. Applying it twice with the same n is a no-op.
    """
    r = 0
    for _ in range(n):
        r = (r << 1) | (value & 1)
        value >>= 1
    return r


def reflect_bytes(value: int, n: int) -> int:
    """
    Reverse the order of the low n bytes of value.
    Bytes above n are dropped. Applying it twice with the same n is a no-op.
    """
    r = 0
    for _ in range(n):
        r = (r << 8) | (value & 0xFF)
        value >>= 8
    return r


# Input reflection is done once per message byte, so keep the 8-bit case cached.
REFLECTED_BYTES: tuple[int, ...] = tuple(reflect_bits(i, 8) for i in range(256))
