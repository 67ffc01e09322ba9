# src/crcforge/bits.py
from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np

SUPPORTED_WIDTHS = (8, 16, 32, 64)

_DTYPES = {
    8: np.uint8,
    16: np.uint16,
    32: np.uint32,
    64: np.uint64,
}


class ShiftDir(Enum):
    """
    Bit processing order of a CRC register.

    LEFT:  MSB-first, register shifts towards the high bit.
    RIGHT: LSB-first (reflected), register shifts towards bit 0.
    """
    LEFT = "left"
    RIGHT = "right"


def as_shift_dir(direction: Any) -> ShiftDir:
    if isinstance(direction, ShiftDir):
        return direction
    if not isinstance(direction, str):
        raise TypeError("direction must be ShiftDir or str")
    try:
        return ShiftDir(direction.strip().lower())
    except ValueError:
        raise ValueError(f"direction must be 'left' or 'right', got {direction!r}") from None


def check_width(width: Any) -> int:
    if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
        raise TypeError("width must be int")
    width = int(width)
    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"width must be one of {SUPPORTED_WIDTHS}, got {width}")
    return width


def register_mask(width: int) -> int:
    return (1 << width) - 1


def register_dtype(width: int) -> type:
    """numpy unsigned integer type holding a register of the given width."""
    return _DTYPES[check_width(width)]


def reverse_bits(value: int, width: int) -> int:
    """
    Mirror the bit order of a width-bit value (bit 0 <-> bit width-1).

    reverse_bits(reverse_bits(v, w), w) == v
    """
    width = check_width(width)
    if not (0 <= value <= register_mask(width)):
        raise ValueError(f"value does not fit in {width} bits")

    r = 0
    for _ in range(width):
        r = (r << 1) | (value & 1)
        value >>= 1
    return r


class Shifter:
    """
    Shift strategy for a fixed register width.
    Results are truncated to the register width.
    """
    direction: ShiftDir

    def __init__(self, width: int):
        self.width = check_width(width)
        self._mask = register_mask(self.width)

    def shift(self, value: int, bits: int) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width})"


class LeftShifter(Shifter):
    direction = ShiftDir.LEFT

    def shift(self, value: int, bits: int) -> int:
        return (value << bits) & self._mask


class RightShifter(Shifter):
    direction = ShiftDir.RIGHT

    def shift(self, value: int, bits: int) -> int:
        return value >> bits


def make_shifter(direction: Any, width: int) -> Shifter:
    if as_shift_dir(direction) is ShiftDir.LEFT:
        return LeftShifter(width)
    return RightShifter(width)
