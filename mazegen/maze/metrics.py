from __future__ import annotations

from typing import Dict


def init_metrics() -> Dict[str, int | float | str | dict]:
    return {
        'seed': 0,
        'algorithm': '',
        'rooms': 0,
        'carved_edges': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
