import os
import sys

import pytest

# Ensure repository root importable early (run.py lives there)
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegen import logging_utils  # noqa: E402
from mazegen.maze import Algorithm, GenerationConfig, Pathfinder, generate_maze  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_env_and_logging(monkeypatch):
    """Start every test from defaults: no MAZEGEN_* overrides, quiet plain-text logs."""
    for key in list(os.environ):
        if key.startswith("MAZEGEN_"):
            monkeypatch.delenv(key)
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["warn"])
    monkeypatch.setattr(logging_utils, "JSON_MODE", False)
    yield


@pytest.fixture
def small_maze():
    """The 5x5 seed-42 backtracker maze used by the concrete scenarios."""
    result = generate_maze(GenerationConfig(seed=42, width=5, height=5, algorithm=Algorithm.BACKTRACKER))
    assert result.ok
    return result


@pytest.fixture
def small_pathfinder(small_maze):
    pf = Pathfinder()
    cfg = small_maze.config
    assert pf.initialize(small_maze.cells, cfg.width, cfg.height, cfg.cell_size)
    return pf
