from __future__ import annotations

import json

import pytest

from people_app.core.config import AppConfig, load_config


def test_defaults():
    config = AppConfig()
    assert config.window.title == "Add Users"
    assert config.dialog.confirm_label == "Create"
    assert [name for name, _ in config.iter_sections()] == ["window", "dialog", "web"]


def test_update_from_mapping_ignores_unknown_keys():
    config = AppConfig()
    config.update_from_mapping(
        {"window": {"title": "Team", "bogus": 1}, "nope": {"x": 1}, "dialog": "not a dict"}
    )
    assert config.window.title == "Team"
    assert not hasattr(config.window, "bogus")
    assert config.dialog.title == "Create a Person"


def test_load_config_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"window": {"width": 800}, "web": {"server_port": 9000}}))
    config = load_config(path)
    assert config.window.width == 800
    assert config.web.server_port == 9000
    assert config.to_dict()["window"]["width"] == 800


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_without_path():
    assert load_config(None) == AppConfig()
