from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional
import importlib
import logging
import pkgutil

from crcforge.engine.core import CrcCore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """
    CRC engine selection.

    module: engine module name (e.g. "direct", "table")
    module_cfg: instance of that module's Config (or None -> defaults)
    """
    module: str = "table"
    module_cfg: Any = None


def available_modules() -> list[str]:
    """
    Enumerate available engine modules under engine/modules.
    """
    pkg = importlib.import_module(f"{__package__}.modules")
    names = [m.name for m in pkgutil.iter_modules(pkg.__path__)]
    return sorted([n for n in names if not n.startswith("_")])


def _import_engine_module(name: str):
    if not isinstance(name, str) or not name:
        raise ValueError("cfg.module must be a non-empty string")
    return importlib.import_module(f"{__package__}.modules.{name}")


def _resolve_module_and_cfg(cfg: Config):
    mod = _import_engine_module(cfg.module)

    if not hasattr(mod, "Config"):
        raise AttributeError(f"engine module '{cfg.module}' missing Config")
    if not hasattr(mod, "create"):
        raise AttributeError(f"engine module '{cfg.module}' missing create")

    module_cfg = cfg.module_cfg if cfg.module_cfg is not None else mod.Config()
    return mod, module_cfg


@lru_cache(maxsize=32)
def _cached_engine(cfg: Config) -> CrcCore:
    mod, module_cfg = _resolve_module_and_cfg(cfg)
    engine = mod.create(module_cfg)
    logger.debug("created %r", engine)
    return engine


def make_engine(cfg: Config) -> CrcCore:
    """
    Engine for cfg. Engines are immutable, so one instance (and one lookup
    table) is shared between all callers using an equal Config.
    """
    if not isinstance(cfg, Config):
        raise TypeError("cfg must be an engine stage Config")
    return _cached_engine(cfg)


def compute(data, *, cfg: Config, length: Optional[int] = None, seed: int = 0) -> int:
    """
    CRC of data using the engine selected by cfg.
    """
    return make_engine(cfg).compute(data, length, seed)
