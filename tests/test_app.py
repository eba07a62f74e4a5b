import json

import pytest

from gridstar.__main__ import main
from gridstar.app import resolve_config, run_search
from gridstar.search.contracts import Cell, DiagonalCost
from gridstar.search.scenarios import DEMO_SCENARIO, Scenario


def test_run_search_on_demo() -> None:
    grid, report = run_search(DEMO_SCENARIO)

    assert grid.width == 10
    assert report.found
    assert report.path[0] == DEMO_SCENARIO.start
    assert report.path[-1] == DEMO_SCENARIO.goal


def test_run_search_reports_unreachable_goal() -> None:
    scenario = Scenario(
        width=3, height=1, start=Cell(0, 0), goal=Cell(2, 0), walls=(Cell(1, 0),)
    )

    _, report = run_search(scenario)

    assert not report.found


def test_resolve_config_prefers_arguments_over_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("GRIDSTAR_DIAGONAL", "exact")
    monkeypatch.setenv("GRIDSTAR_CORNER_CUTTING", "false")

    from_env = resolve_config()
    assert from_env.diagonal == DiagonalCost.EXACT
    assert not from_env.allow_corner_cutting

    explicit = resolve_config("integer", True)
    assert explicit.diagonal == DiagonalCost.INTEGER
    assert explicit.allow_corner_cutting


def test_resolve_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRIDSTAR_DIAGONAL", raising=False)
    monkeypatch.delenv("GRIDSTAR_CORNER_CUTTING", raising=False)

    config = resolve_config()

    assert config.diagonal == DiagonalCost.INTEGER
    assert config.allow_corner_cutting


def test_resolve_config_rejects_bad_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRIDSTAR_CORNER_CUTTING", "sometimes")

    with pytest.raises(ValueError):
        resolve_config()


def test_main_prints_map_and_path_length(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("GRIDSTAR_DIAGONAL", raising=False)
    monkeypatch.delenv("GRIDSTAR_CORNER_CUTTING", raising=False)

    main([])
    output = capsys.readouterr().out

    assert "path length:" in output
    assert "S" in output
    assert "E" in output


def test_main_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(
        [
            "--width",
            "3",
            "--height",
            "3",
            "--start",
            "0,0",
            "--goal",
            "2,2",
            "--wall",
            "1,1",
            "--diagonal",
            "exact",
            "--json",
        ]
    )
    data = json.loads(capsys.readouterr().out)

    assert data["found"] is True
    assert data["diagonal"] == "exact"
    assert data["path"][0] == [0, 0]
    assert data["path"][-1] == [2, 2]
    assert len(data["path"]) == 4


def test_main_rejects_bad_cell() -> None:
    with pytest.raises(SystemExit):
        main(["--start", "nope"])


def test_main_rejects_bad_grid_size() -> None:
    with pytest.raises(SystemExit):
        main(["--width", "0"])
