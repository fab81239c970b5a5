"""Tests for environment configuration and the command line entry point."""

import argparse

import pytest
from lifeverse.cli import main, parse_position, run
from lifeverse.config import SimulationConfig
from lifeverse.core.dense import DenseUniverse
from lifeverse.core.sparse import HashSparseUniverse


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep LIFEVERSE_* variables from the host out of these tests."""
    for name in ['LIFEVERSE_ROWS', 'LIFEVERSE_COLS', 'LIFEVERSE_KIND', 'LIFEVERSE_STEPS',
                 'LIFEVERSE_REFRESH_MS', 'LIFEVERSE_VIEW', 'LIFEVERSE_LOG_LEVEL']:
        monkeypatch.delenv(name, raising=False)


class TestSimulationConfig:
    """Test defaults, validation and environment overrides."""

    def test_defaults(self):
        config = SimulationConfig()
        assert (config.rows, config.cols) == (40, 40)
        assert config.kind == "sparse"
        assert config.view == "pan"
        assert config.refresh_period == pytest.approx(0.1)

    def test_from_env(self):
        config = SimulationConfig.from_env({
            'LIFEVERSE_ROWS': '10',
            'LIFEVERSE_KIND': 'dense',
            'LIFEVERSE_LOG_LEVEL': 'debug',
        })
        assert config.rows == 10
        assert config.cols == 40
        assert config.kind == "dense"
        assert config.log_level == "DEBUG"

    def test_from_process_environment(self, monkeypatch):
        monkeypatch.setenv('LIFEVERSE_STEPS', '7')
        assert SimulationConfig.from_env().steps == 7

    def test_invalid_integer(self):
        with pytest.raises(ValueError, match="LIFEVERSE_ROWS"):
            SimulationConfig.from_env({'LIFEVERSE_ROWS': 'many'})

    @pytest.mark.parametrize("overrides", [
        {'rows': 0}, {'steps': -1}, {'refresh_ms': -5},
        {'kind': 'toroidal'}, {'view': 'zoom'}, {'log_level': 'LOUD'},
    ])
    def test_invalid_settings(self, overrides):
        with pytest.raises(ValueError):
            SimulationConfig(**overrides)

    def test_copy_ignores_none(self):
        config = SimulationConfig(rows=12).copy(cols=9, kind=None)
        assert (config.rows, config.cols, config.kind) == (12, 9, "sparse")


class TestCommandLine:
    """Test argument parsing and the run loop."""

    def test_parse_position(self):
        assert parse_position("3,4") == (3, 4)

    @pytest.mark.parametrize("value", ["3", "a,b", "1,2,3", "-1,2"])
    def test_parse_position_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_position(value)

    def test_run_without_animation(self):
        config = SimulationConfig(rows=3, cols=3, kind="dense", steps=1)
        universe = run(config, ["blinker"], [(1, 0)], animate=False)
        assert isinstance(universe, DenseUniverse)
        assert set(universe.get_alive_cells_pos()) == {(0, 1), (1, 1), (2, 1)}

    def test_main_saves_result(self, tmp_path):
        exit_code = main(["--pattern", "blinker", "--at", "1,0", "--rows", "3", "--cols", "3",
                          "--steps", "1", "--no-animate", "--save", str(tmp_path / "out")])
        assert exit_code == 0

        saved = HashSparseUniverse.from_file(tmp_path / "out.univ")
        assert set(saved.get_alive_cells_pos()) == {(0, 1), (1, 1), (2, 1)}

    def test_main_loads_file(self, tmp_path):
        source = DenseUniverse(6, 6)
        source.seed([(2, 2), (2, 3), (3, 2), (3, 3)])
        path = source.save(tmp_path / "block")

        exit_code = main(["--load", str(path), "--kind", "ordered", "--steps", "4",
                          "--no-animate", "--save", str(tmp_path / "after")])
        assert exit_code == 0
        assert HashSparseUniverse.from_file(tmp_path / "after.univ").alive_count() == 4

    def test_main_animates(self, tmp_path, capsys):
        exit_code = main(["--pattern", "glider", "--rows", "8", "--cols", "8", "--steps", "2",
                          "--refresh-ms", "0", "--view", "full"])
        assert exit_code == 0
        assert "\x1b[" in capsys.readouterr().out

    def test_main_pattern_out_of_bounds(self):
        exit_code = main(["--pattern", "glider", "--at", "5,5", "--rows", "3", "--cols", "3",
                          "--no-animate"])
        assert exit_code == 1

    def test_main_missing_file(self, tmp_path):
        assert main(["--load", str(tmp_path / "missing.univ"), "--no-animate"]) == 1

    def test_main_invalid_environment(self, monkeypatch):
        monkeypatch.setenv('LIFEVERSE_VIEW', 'zoom')
        assert main(["--no-animate", "--steps", "0"]) == 1
