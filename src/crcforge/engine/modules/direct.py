from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from crcforge.engine.core import CrcCore
from crcforge.engine.params import Params


@dataclass(frozen=True)
class Config(Params):
    """
    Bit-by-bit CRC engine. No precomputation; eight shift/XOR rounds per
    input byte.
    """


class DirectCrcEngine(CrcCore):
    """
    CRC computed one bit at a time against the polynomial.

    Minimal memory, higher per-byte cost than TableCrcEngine.
    """

    def compute(self, data: Any, length: Optional[int] = None, seed: int = 0) -> int:
        """
        CRC of data[:length] (all of data if length is None), starting from
        seed. Feed the result back as seed to continue with the next chunk.
        Empty input returns the seed unchanged.
        """
        register = self._get_seed(seed)
        pack = self._pack
        for b in self._get_data(data, length):
            register = self._clock_byte(register ^ (b << pack))
        return register


def create(cfg: Any) -> DirectCrcEngine:
    """
    Uniform module API: create(cfg) -> engine
    """
    if not isinstance(cfg, Params):
        raise TypeError("cfg must be a Params instance")
    return DirectCrcEngine.from_params(cfg)
