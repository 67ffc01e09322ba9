from __future__ import annotations

import random
from pathlib import Path

CHECK_INPUT = b"123456789"

# (width, direction, polynomial) covering every register width and both shift directions
REGISTER_CONFIGS = [
    (8, "left", 0x07),
    (8, "right", 0x31),
    (16, "left", 0x1021),
    (16, "right", 0x8005),
    (32, "left", 0x04C11DB7),
    (32, "right", 0x1EDC6F41),
    (64, "left", 0x42F0E1EBA9EA3693),
    (64, "right", 0x42F0E1EBA9EA3693),
]


def repo_root() -> Path:
    """
    Find the repository root by walking upward until we find pyproject.toml.
    This is robust regardless of where tests live.
    """
    start = Path(__file__).resolve()
    for p in [start] + list(start.parents):
        if (p / "pyproject.toml").exists():
            return p
    raise RuntimeError("repo_root(): could not find pyproject.toml walking upward")


def random_payloads(seed: int, count: int = 20, max_len: int = 300) -> list[bytes]:
    """
    Deterministic pseudo-random payloads, always including the empty one.
    """
    rng = random.Random(seed)
    out = [b""]
    for _ in range(count - 1):
        n = rng.randint(1, max_len)
        out.append(bytes(rng.getrandbits(8) for _ in range(n)))
    return out
