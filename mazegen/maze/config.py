from __future__ import annotations

import os
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Optional

from .errors import MazeError


class Algorithm(str, Enum):
    BACKTRACKER = "backtracker"
    PRIMS = "prims"
    KRUSKALS = "kruskals"

    @classmethod
    def parse(cls, text: str) -> "Algorithm":
        key = (text or "").strip().lower().replace("'", "").replace("-", "_")
        aliases = {
            "backtracker": cls.BACKTRACKER,
            "recursive_backtracker": cls.BACKTRACKER,
            "dfs": cls.BACKTRACKER,
            "prim": cls.PRIMS,
            "prims": cls.PRIMS,
            "kruskal": cls.KRUSKALS,
            "kruskals": cls.KRUSKALS,
        }
        if key not in aliases:
            raise ValueError(f"unknown algorithm: {text!r} (expected one of {', '.join(a.value for a in cls)})")
        return aliases[key]


@dataclass
class GenerationConfig:
    seed: Optional[int] = 12345
    width: int = 21
    height: int = 21
    algorithm: Algorithm = Algorithm.BACKTRACKER
    cell_size: float = 200.0
    wall_height: float = 300.0

    def validate(self) -> Optional[MazeError]:
        if self.width < 1 or self.height < 1:
            return MazeError.INVALID_CONFIG
        if self.cell_size <= 0 or self.wall_height <= 0:
            return MazeError.INVALID_CONFIG
        try:
            Algorithm(self.algorithm)
        except ValueError:
            return MazeError.INVALID_CONFIG
        return None

    def resolved(self) -> "GenerationConfig":
        """Copy with a concrete seed; ``None`` draws one so the layout stays reproducible."""
        if self.seed is not None:
            return self
        return replace(self, seed=random.randint(0, 2**31 - 1))

    @classmethod
    def from_env(
        cls, base: Optional["GenerationConfig"] = None, environ: Optional[Mapping[str, str]] = None
    ) -> "GenerationConfig":
        """Apply ``MAZEGEN_*`` overrides on top of ``base`` (or the defaults)."""
        env = os.environ if environ is None else environ
        cfg = replace(base) if base is not None else cls()
        int_map = {
            "MAZEGEN_SEED": "seed",
            "MAZEGEN_WIDTH": "width",
            "MAZEGEN_HEIGHT": "height",
        }
        float_map = {
            "MAZEGEN_CELL_SIZE": "cell_size",
            "MAZEGEN_WALL_HEIGHT": "wall_height",
        }
        for env_key, attr in int_map.items():
            raw = env.get(env_key, "").strip()
            if raw:
                try:
                    setattr(cfg, attr, int(raw))
                except ValueError:
                    raise ValueError(f"{env_key} must be an integer, got {raw!r}") from None
        for env_key, attr in float_map.items():
            raw = env.get(env_key, "").strip()
            if raw:
                try:
                    setattr(cfg, attr, float(raw))
                except ValueError:
                    raise ValueError(f"{env_key} must be a number, got {raw!r}") from None
        raw_algo = env.get("MAZEGEN_ALGORITHM", "").strip()
        if raw_algo:
            cfg.algorithm = Algorithm.parse(raw_algo)
        return cfg


def metrics_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    val = env.get("MAZEGEN_ENABLE_GENERATION_METRICS")
    if val is None:
        return True
    return val.strip().lower() not in {"0", "false", "no", ""}


__all__ = ["Algorithm", "GenerationConfig", "metrics_enabled"]
