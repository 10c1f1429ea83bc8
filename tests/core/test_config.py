import json

import pytest
from pydantic import ValidationError

from netveil.core.config import (
    NetVeilConfig,
    ObfuscatorKind,
    ReplacementType,
    TrackerKind,
    default_config_path,
    load_config,
)
from netveil.exceptions import ConfigMissingError


def kinds(config):
    return [entry.type for entry in config.obfuscators]


def test_defaults_without_any_file():
    config = load_config()
    assert config == NetVeilConfig()
    assert kinds(config) == [ObfuscatorKind.MAC, ObfuscatorKind.IPV4, ObfuscatorKind.IPV6]
    assert all(
        entry.replacement_type is ReplacementType.CONSISTENT
        and entry.tracker is TrackerKind.SIMPLE
        for entry in config.obfuscators
    )


def test_load_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "obfuscators:\n"
        "  - type: ipv4_pattern\n"
        "    replacement_type: static\n"
        "  - type: mac\n"
        "    tracker: striped\n"
    )

    config = load_config(str(config_file))

    assert kinds(config) == [ObfuscatorKind.IPV4_PATTERN, ObfuscatorKind.MAC]
    assert config.obfuscators[0].replacement_type is ReplacementType.STATIC
    assert config.obfuscators[1].tracker is TrackerKind.STRIPED


def test_empty_yaml_gives_defaults(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert load_config(str(config_file)) == NetVeilConfig()


def test_load_json(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"obfuscators": [{"type": "ipv6"}]}))

    assert kinds(load_config(str(config_file))) == [ObfuscatorKind.IPV6]


def test_load_toml(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        '[[obfuscators]]\ntype = "ipv4"\nreplacement_type = "static"\n'
    )

    config = load_config(str(config_file))
    assert kinds(config) == [ObfuscatorKind.IPV4]
    assert config.obfuscators[0].replacement_type is ReplacementType.STATIC


def test_missing_file():
    with pytest.raises(ConfigMissingError, match="Configuration file not found"):
        load_config("non_existent_config.yaml")


def test_invalid_obfuscator_type(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("obfuscators:\n  - type: email\n")

    with pytest.raises(ValidationError):
        load_config(str(config_file))


def test_env_overrides_every_entry(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("obfuscators:\n  - type: mac\n  - type: ipv6\n")
    monkeypatch.setenv("NETVEIL_REPLACEMENT_TYPE", "static")
    monkeypatch.setenv("NETVEIL_TRACKER", "striped")

    config = load_config(str(config_file))

    for entry in config.obfuscators:
        assert entry.replacement_type is ReplacementType.STATIC
        assert entry.tracker is TrackerKind.STRIPED


def test_invalid_env_override(monkeypatch):
    monkeypatch.setenv("NETVEIL_REPLACEMENT_TYPE", "random")
    with pytest.raises(ValidationError):
        load_config()


def test_local_file_is_picked_up(tmp_path):
    # the autouse fixture runs every test from tmp_path
    (tmp_path / "netveil.yaml").write_text("obfuscators:\n  - type: mac\n")
    assert kinds(load_config()) == [ObfuscatorKind.MAC]


def test_home_config_is_picked_up():
    path = default_config_path()
    path.parent.mkdir(parents=True)
    path.write_text('[[obfuscators]]\ntype = "ipv6"\n')

    assert kinds(load_config()) == [ObfuscatorKind.IPV6]


def test_local_file_wins_over_home(tmp_path):
    path = default_config_path()
    path.parent.mkdir(parents=True)
    path.write_text('[[obfuscators]]\ntype = "ipv6"\n')
    (tmp_path / "netveil.json").write_text('{"obfuscators": [{"type": "ipv4"}]}')

    assert kinds(load_config()) == [ObfuscatorKind.IPV4]
