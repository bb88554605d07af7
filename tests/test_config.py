from pathlib import Path

import pytest
import yaml

from latgroups.core.config import ConfigError, DEFAULT_CONFIG, dump_yaml, load_yaml, resolve_config


def test_defaults_resolve():
    cfg = resolve_config()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_user_file_and_overrides_deep_merge(tmp_path: Path):
    p = tmp_path / "cfg.yaml"
    p.write_text(yaml.safe_dump({"data": {"columns": {"anomaly": "dT"}}, "chart": {"dpi": 90}}), encoding="utf-8")
    cfg = resolve_config(config_path=p, overrides={"grouping": {"initial": "empty"}})
    assert cfg["data"]["columns"] == {"year": "year", "lat": "lat", "anomaly": "dT"}
    assert cfg["chart"]["dpi"] == 90
    assert cfg["chart"]["annotations"] is True
    assert cfg["grouping"]["initial"] == "empty"


@pytest.mark.parametrize(
    "overrides",
    [
        {"grouping": {"initial": "random"}},
        {"chart": {"dpi": 0}},
        {"map": {"fill_alpha": 1.5}},
        {"data": {"columns": {"lat": ""}}},
    ],
)
def test_invalid_values_raise(overrides):
    with pytest.raises(ConfigError):
        resolve_config(overrides=overrides)


def test_load_yaml_errors(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_yaml(tmp_path / "nope.yaml")
    p = tmp_path / "list.yaml"
    p.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        load_yaml(p)


def test_dump_yaml_round_trips_labels(tmp_path: Path):
    out = tmp_path / "nested" / "config_resolved.yaml"
    dump_yaml(resolve_config(), out)
    assert load_yaml(out)["chart"]["y_label"] == "Temperature Change (°C)"


@pytest.mark.parametrize("text", ["chart:\n", "map: 3\n", "data:\n  columns:\n", "grouping: []\n"])
def test_empty_or_scalar_section_raises_config_error(tmp_path: Path, text):
    p = tmp_path / "cfg.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a mapping"):
        resolve_config(config_path=p)
