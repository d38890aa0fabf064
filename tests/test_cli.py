# tests/test_cli.py
"""
Smoke tests for the teleport-path command line entry point.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from teleport_nav import config as config_module
from teleport_nav.cli import main

WORLD_YAML = """\
fills:
  - {from: [0, 63, 0], to: [4, 63, 0], id: "minecraft:stone"}
  - {from: [10, 63, 0], to: [14, 63, 0], id: "minecraft:stone"}
"""


@pytest.fixture
def world_file(tmp_path: Path) -> Path:
    path = tmp_path / "world.yaml"
    path.write_text(WORLD_YAML, encoding="utf-8")
    return path


def test_cli_finds_path(world_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(
        [
            "--world", str(world_file),
            "--start", "0", "63", "0",
            "--end", "12", "63", "0",
            "--budget-ms", "10000",
        ]
    )

    out = capsys.readouterr().out
    assert code == 0
    assert "Search Summary" in out
    assert "succeeded" in out


def test_cli_reports_failure_exit_code(
    world_file: Path,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config = tmp_path / "pf.yaml"
    config.write_text("search_radius: 3\nbudget_ms: 10000\n", encoding="utf-8")

    code = main(
        [
            "--world", str(world_file),
            "--start", "0", "63", "0",
            "--end", "12", "63", "0",
            "--config", str(config),
        ]
    )

    assert code == 1
    assert "frontier_exhausted" in capsys.readouterr().out


def test_cli_reads_default_config_file(
    world_file: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    default = tmp_path / "pathfinder.yaml"
    default.write_text("pathfinder:\n  search_radius: 3\n  budget_ms: 10000\n", encoding="utf-8")
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATH", default)

    code = main(
        [
            "--world", str(world_file),
            "--start", "0", "63", "0",
            "--end", "12", "63", "0",
        ]
    )

    assert code == 1
    assert "frontier_exhausted" in capsys.readouterr().out


def test_cli_verbose_sets_package_log_level(world_file: Path) -> None:
    main(
        [
            "--world", str(world_file),
            "--start", "0", "63", "0",
            "--end", "2", "63", "0",
            "--verbose",
        ]
    )

    assert logging.getLogger("teleport_nav").level == logging.DEBUG
