from __future__ import annotations

import pytest

from ssescope.config import ENV_JSON_MODE, load_viewer_config
from ssescope.paths import find_config_file


@pytest.fixture(autouse=True)
def _no_env_mode(monkeypatch) -> None:
    monkeypatch.delenv(ENV_JSON_MODE, raising=False)


def test_defaults_when_no_file(tmp_path) -> None:
    cfg = load_viewer_config(start=tmp_path)

    assert cfg.json_mode == "auto"
    assert cfg.placeholder == "-"
    assert cfg.max_data_width == 80
    assert cfg.source_path is None


def test_loads_yaml_discovered_from_subdir(tmp_path) -> None:
    (tmp_path / "ssescope.yaml").write_text(
        "json_mode: on\nplaceholder: n/a\nmax_data_width: 40\n", encoding="utf-8"
    )
    sub = tmp_path / "a" / "b"
    sub.mkdir(parents=True)

    assert find_config_file(sub) == (tmp_path / "ssescope.yaml").resolve()

    cfg = load_viewer_config(start=sub)
    # YAML 1.1 reads a bare `on` as a boolean, which is not a valid mode.
    assert cfg.json_mode == "auto"
    assert cfg.placeholder == "n/a"
    assert cfg.max_data_width == 40


def test_invalid_values_fall_back_per_field(tmp_path) -> None:
    p = tmp_path / "ssescope.yaml"
    p.write_text('json_mode: "sometimes"\nplaceholder: 3\nmax_data_width: -1\n', encoding="utf-8")

    cfg = load_viewer_config(p)
    assert cfg.json_mode == "auto"
    assert cfg.placeholder == "-"
    assert cfg.max_data_width == 80
    assert cfg.source_path == p


def test_non_mapping_file_is_ignored(tmp_path) -> None:
    p = tmp_path / "ssescope.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")

    assert load_viewer_config(p).json_mode == "auto"


def test_explicit_missing_path_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_viewer_config(tmp_path / "missing.yaml")


def test_env_overrides_file(tmp_path, monkeypatch) -> None:
    p = tmp_path / "ssescope.yaml"
    p.write_text('json_mode: "off"\n', encoding="utf-8")

    assert load_viewer_config(p).json_mode == "off"

    monkeypatch.setenv(ENV_JSON_MODE, "ON")
    assert load_viewer_config(p).json_mode == "on"

    monkeypatch.setenv(ENV_JSON_MODE, "bogus")
    assert load_viewer_config(p).json_mode == "off"
