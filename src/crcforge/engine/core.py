from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np

from crcforge.bits import ShiftDir, Shifter, make_shifter
from crcforge.engine.params import Params, check_register_value


class CrcCore:
    """
    Setup and per-byte transform shared by the CRC engines.

    Holds the fixed register configuration:
      - shifter:           left/right shift strategy for the register width
      - stored_polynomial: polynomial as used by the shift loop
                           (bit-reversed when shifting right)
      - mask:              bit tested before each shift
      - pack:              offset at which input bytes enter the register

    Nothing here changes after __init__, so one engine can serve any number
    of independent or chunked computations, including from several threads.
    """

    def __init__(self, polynomial: int, *, width: int, direction: Any):
        self._params = Params(width=width, direction=direction, polynomial=polynomial)
        self._shifter: Shifter = make_shifter(self._params.direction, self._params.width)
        self._polynomial = self._params.stored_polynomial
        self._mask = self._params.mask
        self._pack = self._params.pack

    @classmethod
    def from_params(cls, params: Params):
        return cls(params.polynomial, width=params.width, direction=params.direction)

    @property
    def params(self) -> Params:
        return self._params

    @property
    def width(self) -> int:
        return self._params.width

    @property
    def direction(self) -> ShiftDir:
        return self._params.direction

    @property
    def polynomial(self) -> int:
        """Polynomial in natural notation, as given to the constructor."""
        return self._params.polynomial

    @property
    def stored_polynomial(self) -> int:
        return self._polynomial

    @property
    def mask(self) -> int:
        return self._mask

    @property
    def pack(self) -> int:
        return self._pack

    def compute(self, data, length: Optional[int] = None, seed: int = 0) -> int:
        raise NotImplementedError

    def compute_chunks(self, chunks: Iterable, seed: int = 0) -> int:
        """
        Fold compute() over a sequence of chunks, threading the running CRC
        as the seed of the next chunk.
        """
        crc = self._get_seed(seed)
        for chunk in chunks:
            crc = self.compute(chunk, seed=crc)
        return crc

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(0x{self.polynomial:0{self.width // 4}X}, "
            f"width={self.width}, direction={self.direction.value!r})"
        )

    # ----------------------------
    # Internal
    # ----------------------------

    def _clock_byte(self, register: int) -> int:
        """
        Eight rounds of polynomial division: test the mask bit, shift by one,
        XOR in the polynomial if the tested bit was set.
        """
        shift = self._shifter.shift
        poly = self._polynomial
        mask = self._mask
        for _ in range(8):
            if register & mask:
                register = shift(register, 1) ^ poly
            else:
                register = shift(register, 1)
        return register

    def _get_seed(self, seed: Any) -> int:
        return check_register_value(seed, self.width, "seed")

    def _get_data(self, data: Any, length: Optional[int]):
        """
        Return an iterable of byte values covering data[:length].
        """
        if isinstance(data, np.ndarray):
            if data.dtype != np.uint8 or data.ndim != 1:
                raise TypeError("data array must be one-dimensional uint8")
            buf = data.tobytes()
        elif isinstance(data, (bytes, bytearray)):
            buf = data
        elif isinstance(data, memoryview):
            buf = data.tobytes()
        else:
            raise TypeError("data must be bytes-like")

        if length is None:
            return buf
        if isinstance(length, bool) or not isinstance(length, (int, np.integer)):
            raise TypeError("length must be int")
        if not (0 <= length <= len(buf)):
            raise ValueError(f"length must be in [0, {len(buf)}], got {length}")
        return memoryview(buf)[: int(length)]
