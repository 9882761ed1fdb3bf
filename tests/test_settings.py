import json

import pytest

from config.settings import (
    ConfigError, SchemaError, DEFAULTS, build_settings, load_settings, resolve_dir,
)


def test_defaults_are_copied():
    s = build_settings()
    s["dxf"]["layer"] = "changed"
    assert DEFAULTS["dxf"]["layer"] == "Profile"


def test_override_merges_per_section():
    s = build_settings({"dxf": {"color": 3}})
    assert s["dxf"]["color"] == 3
    assert s["dxf"]["layer"] == "Profile"


@pytest.mark.parametrize("overrides", [
    {"nope": {}},
    {"dxf": {"unknown": 1}},
    {"dxf": {"color": 0}},
    {"dxf": {"color": True}},
    {"dxf": {"ltscale": -1.0}},
    {"paths": {"data_dir": ""}},
    {"dxf": "Profile"},
])
def test_bad_overrides(overrides):
    with pytest.raises(SchemaError):
        build_settings(overrides)


def test_schema_error_context():
    with pytest.raises(SchemaError) as exc:
        build_settings({"dxf": {"color": 999}})
    assert "key='color'" in str(exc.value)


def test_load_settings_from_json(tmp_path):
    path = tmp_path / "foilcut.json"
    path.write_text(json.dumps({"dxf": {"layer": "Rib"}, "paths": {"data_dir": "d1"}}), encoding="utf-8")
    s = load_settings(str(path), overrides={"paths": {"data_dir": "d2"}})
    assert s["dxf"]["layer"] == "Rib"
    assert s["paths"]["data_dir"] == "d2"


def test_load_settings_bad_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(str(path))


def test_resolve_dir(tmp_path):
    s = build_settings({"paths": {"data_dir": "root", "output_dir": str(tmp_path)}})
    assert resolve_dir(s, "data_dir") == "root"
    assert resolve_dir(s, "profiles_dir").replace("\\", "/") == "root/airfoil"
    assert resolve_dir(s, "output_dir") == str(tmp_path)
