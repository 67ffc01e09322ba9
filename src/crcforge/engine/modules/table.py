from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from crcforge.bits import register_dtype
from crcforge.engine.core import CrcCore
from crcforge.engine.params import Params

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config(Params):
    """
    Table-driven CRC engine. Builds a 256-entry lookup table at construction
    and then processes one byte per lookup.
    """


class TableCrcEngine(CrcCore):
    """
    CRC computed with a precomputed per-byte lookup table.

    Entry i of the table is the register after clocking (i << pack) through
    the same eight rounds DirectCrcEngine runs per byte, so

        shift(seed, 8) ^ table[((seed >> pack) ^ b) & 0xFF]

    equals feeding byte b through the bit-by-bit algorithm.
    """

    def __init__(self, polynomial: int, *, width: int, direction: Any):
        super().__init__(polynomial, width=width, direction=direction)

        pack = self._pack
        self._table = tuple(self._clock_byte(i << pack) for i in range(256))

        view = np.array(self._table, dtype=register_dtype(self.width))
        view.flags.writeable = False
        self._table_view = view

        logger.debug(
            "built %d-bit %s lookup table for polynomial 0x%X",
            self.width, self.direction.value, self.polynomial,
        )

    def lookup_table(self) -> np.ndarray:
        """
        Read-only array of the 256 table entries (index = byte value),
        typed as the register's unsigned integer dtype.
        """
        return self._table_view

    def compute(self, data: Any, length: Optional[int] = None, seed: int = 0) -> int:
        """
        CRC of data[:length] (all of data if length is None), starting from
        seed. Same results as DirectCrcEngine.compute.
        """
        crc = self._get_seed(seed)
        shift = self._shifter.shift
        table = self._table
        pack = self._pack
        for b in self._get_data(data, length):
            crc = shift(crc, 8) ^ table[((crc >> pack) ^ b) & 0xFF]
        return crc


def create(cfg: Any) -> TableCrcEngine:
    """
    Uniform module API: create(cfg) -> engine
    """
    if not isinstance(cfg, Params):
        raise TypeError("cfg must be a Params instance")
    return TableCrcEngine.from_params(cfg)
