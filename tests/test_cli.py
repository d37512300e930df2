from __future__ import annotations

import importlib.util
import json
from pathlib import Path

import cv2
import numpy as np

SCRIPT_PATH = Path(__file__).resolve().parents[1] / "scripts" / "tintkit_run.py"


def _load_cli():
    spec = importlib.util.spec_from_file_location("tintkit_run", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


def test_cli_prints_theme_json(tmp_path, capsys) -> None:
    pixels = np.full((40, 60, 3), (200, 40, 40), dtype=np.uint8)
    image_path = tmp_path / "solid.png"
    cv2.imwrite(str(image_path), cv2.cvtColor(pixels, cv2.COLOR_RGB2BGR))
    cli = _load_cli()

    exit_code = cli.main([str(image_path), "--grid", "4", "--bottom-height", "10"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["dominant"]["hex"] == "#c82828"
    assert payload["average"]["hex"] == "#c82828"
    assert payload["summary"]["grid"] == 4
    assert payload["bottom_is_light"] is False


def test_cli_missing_image_exits_non_zero(tmp_path) -> None:
    cli = _load_cli()

    assert cli.main([str(tmp_path / "missing.png")]) == 1


def test_cli_rejects_bad_grid(tmp_path) -> None:
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    image_path = tmp_path / "black.png"
    cv2.imwrite(str(image_path), pixels)
    cli = _load_cli()

    assert cli.main([str(image_path), "--grid", "0"]) == 2


def test_cli_rejects_negative_max_side(tmp_path) -> None:
    pixels = np.zeros((4, 4, 3), dtype=np.uint8)
    image_path = tmp_path / "black.png"
    cv2.imwrite(str(image_path), pixels)
    cli = _load_cli()

    assert cli.main([str(image_path), "--max-side", "-5"]) == 2
