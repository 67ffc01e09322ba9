from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from crcforge.bits import (
    ShiftDir,
    as_shift_dir,
    check_width,
    register_mask,
    reverse_bits,
)


@dataclass(frozen=True)
class Params:
    """
    CRC register configuration shared by all engines.

    width:      register width in bits (8, 16, 32 or 64)
    direction:  ShiftDir.LEFT (MSB-first) or ShiftDir.RIGHT (LSB-first);
                "left"/"right" strings are accepted
    polynomial: divisor in natural (MSB-first) notation, without the
                implicit top bit. Reflected internally for RIGHT.

    Defaults describe a 16-bit reflected register with polynomial 0x1021.
    """
    width: int = 16
    direction: ShiftDir = ShiftDir.RIGHT
    polynomial: int = 0x1021

    def __post_init__(self) -> None:
        width = check_width(self.width)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "direction", as_shift_dir(self.direction))
        object.__setattr__(self, "polynomial", check_register_value(self.polynomial, width, "polynomial"))

    @property
    def register_mask(self) -> int:
        return register_mask(self.width)

    @property
    def mask(self) -> int:
        """Bit tested before each shift: MSB for LEFT, LSB for RIGHT."""
        return 1 << (self.width - 1) if self.direction is ShiftDir.LEFT else 1

    @property
    def pack(self) -> int:
        """Shift that aligns an input byte inside the register."""
        return self.width - 8 if self.direction is ShiftDir.LEFT else 0

    @property
    def stored_polynomial(self) -> int:
        if self.direction is ShiftDir.LEFT:
            return self.polynomial
        return reverse_bits(self.polynomial, self.width)


def check_register_value(value: Any, width: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be int")
    value = int(value)
    if not (0 <= value <= register_mask(width)):
        raise ValueError(f"{name} must be in [0, 0x{register_mask(width):X}] for a {width}-bit register")
    return value
