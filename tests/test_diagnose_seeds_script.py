import importlib.util
import json
from pathlib import Path

from mazegen import logging_utils

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "diagnose_seeds.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("diagnose_seeds", SCRIPT)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


def test_script_reports_clean_seeds(monkeypatch, capsys):
    mod = _load_script()
    monkeypatch.setenv("MAZEGEN_WIDTH", "11")
    monkeypatch.setenv("MAZEGEN_HEIGHT", "9")
    assert mod.main(["3", "4"]) == 0
    results = json.loads(capsys.readouterr().out)["results"]
    assert len(results) == 6
    assert all(r["ok"] and not any(r["issues"].values()) for r in results)


def test_script_flags_invalid_dimensions(monkeypatch, capsys):
    mod = _load_script()
    monkeypatch.setenv("MAZEGEN_WIDTH", "0")
    # keep the invalid_config warning off stdout so the report parses
    monkeypatch.setattr(logging_utils, "CURRENT_LEVEL", logging_utils.LEVELS["error"])
    assert mod.main(["1"]) == 1
    results = json.loads(capsys.readouterr().out)["results"]
    assert {r["error"] for r in results} == {"invalid_config"}
