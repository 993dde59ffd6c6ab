"""Bit manipulation on fixed-width unsigned integers."""

from __future__ import annotations

import struct
from dataclasses import astuple, dataclass

_BYTE_BITS = 8
_WORD_BITS = 32


def _require_unsigned(number: int, width: int, name: str = "number") -> None:
    if not 0 <= number < 1 << width:
        raise ValueError(f"{name} must fit in {width} unsigned bits, got {number}")


def _require_index(index: int, width: int, name: str) -> None:
    if not 0 <= index < width:
        raise ValueError(f"{name} must be between 0 and {width - 1}, got {index}")


@dataclass(frozen=True)
class PowerGoodStatus:
    """Power-good register, one flag per bit, least significant bit first."""

    ldo2_stat: bool
    ldo1_stat: bool
    dc3_stat: bool
    dc2_stat: bool
    dc1_stat: bool
    ldo4_stat: bool
    ldo3_stat: bool
    reserved_bit: bool

    @classmethod
    def from_byte(cls, value: int) -> PowerGoodStatus:
        """Decode a register byte into its individual status flags."""
        _require_unsigned(value, _BYTE_BITS, "value")
        return cls(*(bool((value >> bit) & 1) for bit in range(_BYTE_BITS)))

    def __int__(self) -> int:
        return sum(int(flag) << bit for bit, flag in enumerate(astuple(self)))


def reverse_bits(number: int) -> int:
    """Reverse the order of the bits of a 32-bit unsigned integer."""
    _require_unsigned(number, _WORD_BITS)
    return int(format(number, f"0{_WORD_BITS}b")[::-1], 2)


def swap_nibble(number: int) -> int:
    """Swap the high and low nibbles of a byte."""
    _require_unsigned(number, _BYTE_BITS)
    return ((number & 0xF0) >> 4) | ((number & 0x0F) << 4)


def swap_nibbles_32(number: int) -> int:
    """Swap the nibbles inside each byte of a 32-bit unsigned integer."""
    _require_unsigned(number, _WORD_BITS)
    swapped = bytes(swap_nibble(byte) for byte in number.to_bytes(4, "little"))
    return int.from_bytes(swapped, "little")


def ones_complement(number: int) -> int:
    """Return the one's complement of a byte."""
    _require_unsigned(number, _BYTE_BITS)
    return ~number & 0xFF


def swap_two_bits(number: int, index1: int, index2: int) -> int:
    """Exchange the bits at two positions of a 32-bit unsigned integer."""
    _require_unsigned(number, _WORD_BITS)
    _require_index(index1, _WORD_BITS, "index1")
    _require_index(index2, _WORD_BITS, "index2")
    differ = ((number >> index1) ^ (number >> index2)) & 1
    return number ^ ((differ << index1) | (differ << index2))


def swap_odd_even_bits(number: int) -> int:
    """Swap every even-positioned bit with its odd-positioned neighbour."""
    _require_unsigned(number, _WORD_BITS)
    return ((number & 0xAAAAAAAA) >> 1) | ((number & 0x55555555) << 1)


def set_bit_group(number: int, value: int, bit_high: int, bit_low: int) -> int:
    """Replace bits bit_low..bit_high (inclusive) of number with value."""
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    if not 0 <= bit_low <= bit_high:
        raise ValueError(
            f"need 0 <= bit_low <= bit_high, got bit_low={bit_low}, bit_high={bit_high}"
        )
    width = bit_high - bit_low + 1
    _require_unsigned(value, width, "value")
    mask = ((1 << width) - 1) << bit_low
    return (number & ~mask) | (value << bit_low)


def test_bit(number: int, n: int) -> int:
    """Return bit n (0 is the least significant) of number as 0 or 1."""
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    if n < 0:
        raise ValueError(f"bit position must not be negative, got {n}")
    return (number >> n) & 1


def byte_order() -> str:
    """Return "little" or "big" by inspecting how the machine stores an int."""
    first_byte = struct.pack("=I", 1)[0]
    return "little" if first_byte else "big"