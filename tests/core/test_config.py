"""
Tests for PlotConfig and config file loading.
"""

import json
from pathlib import Path

import pytest
from densityplot.core.config import DEFAULT_TITLE, PlotConfig, load_config
from densityplot.core.errors import ConfigError


class TestPlotConfig:
    def test_defaults(self):
        cfg = PlotConfig()

        assert cfg.default_bins == 20
        assert cfg.smoothing_window == 3
        assert cfg.height == 15
        assert cfg.y_headroom == 1.05
        assert cfg.widen_factor == 4
        assert cfg.x_label_offset == 10
        assert cfg.width is None
        assert cfg.title == DEFAULT_TITLE
        assert cfg.label_precision == 1

    def test_with_overrides_skips_none(self):
        cfg = PlotConfig()

        assert cfg.with_overrides(height=None, title=None) is cfg

    def test_with_overrides_replaces(self):
        cfg = PlotConfig().with_overrides(height=8, title="Latency")

        assert cfg.height == 8
        assert cfg.title == "Latency"
        assert cfg.default_bins == 20

    def test_unknown_override_rejected(self):
        with pytest.raises(ConfigError) as exc:
            PlotConfig().with_overrides(colour="red")

        assert exc.value.code == "unknown_keys"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_bins": 0},
            {"height": -1},
            {"height": True},
            {"smoothing_window": -1},
            {"widen_factor": 1.5},
            {"x_label_offset": -2},
            {"width": 1},
            {"y_headroom": 0},
            {"title": 5},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ConfigError):
            PlotConfig(**kwargs)

    def test_to_dict_round_trips_field_names(self):
        d = PlotConfig(width=40).to_dict()

        assert d["width"] == 40
        assert PlotConfig(**d) == PlotConfig(width=40)


class TestLoadConfig:
    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "plot.yaml"
        path.write_text("height: 10\nwiden_factor: 2\ntitle: Response times\n")

        cfg = load_config(path)

        assert cfg.height == 10
        assert cfg.widen_factor == 2
        assert cfg.title == "Response times"

    def test_json(self, tmp_path: Path):
        path = tmp_path / "plot.json"
        path.write_text(json.dumps({"default_bins": 12, "width": 50}))

        cfg = load_config(str(path))

        assert cfg.default_bins == 12
        assert cfg.width == 50

    def test_plot_section(self, tmp_path: Path):
        path = tmp_path / "plot.yml"
        path.write_text("plot:\n  x_label_offset: 4\n")

        assert load_config(path).x_label_offset == 4

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "plot.yaml"
        path.write_text("")

        assert load_config(path) == PlotConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError) as exc:
            load_config(tmp_path / "nope.yaml")

        assert exc.value.code == "config_not_found"

    def test_unparseable_yaml(self, tmp_path: Path):
        path = tmp_path / "plot.yaml"
        path.write_text("height: [1, 2\n")

        with pytest.raises(ConfigError) as exc:
            load_config(path)

        assert exc.value.code == "config_parse_error"

    def test_unparseable_json(self, tmp_path: Path):
        path = tmp_path / "plot.json"
        path.write_text("{height: 3")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "plot.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError) as exc:
            load_config(path)

        assert exc.value.code == "invalid_config"

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / "plot.yaml"
        path.write_text("heigth: 3\n")

        with pytest.raises(ConfigError) as exc:
            load_config(path)

        assert "heigth" in str(exc.value)

    def test_wrong_type(self, tmp_path: Path):
        path = tmp_path / "plot.yaml"
        path.write_text("height: tall\n")

        with pytest.raises(ConfigError):
            load_config(path)
