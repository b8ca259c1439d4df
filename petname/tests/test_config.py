"""Tests for YAML config loading and inheritance."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from petname.run import DEFAULT_CONFIG, _deep_merge, load_config, validate_options
from petname.src.errors import ConfigError

CONFIG_DIR = Path(__file__).parent.parent / "config"


class TestDeepMerge:
    """Test recursive dict merging."""

    def test_simple_override(self):
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self):
        base = {"petname": {"words": 2, "separator": "-"}, "other": 3}
        override = {"petname": {"separator": "_"}}
        result = _deep_merge(base, override)
        assert result == {"petname": {"words": 2, "separator": "_"}, "other": 3}

    def test_new_key_added(self):
        assert _deep_merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_none_replaces(self):
        assert _deep_merge({"a": {"x": 1}}, {"a": None}) == {"a": None}

    def test_original_not_mutated(self):
        base = {"a": {"x": 1}}
        _deep_merge(base, {"a": {"y": 2}})
        assert "y" not in base["a"]

    def test_empty_override(self):
        assert _deep_merge({"a": 1, "b": 2}, {}) == {"a": 1, "b": 2}


class TestLoadConfig:
    """Test YAML loading with inheritance."""

    def test_default_config_values(self):
        config = load_config(DEFAULT_CONFIG)
        options = config["petname"]
        assert options["words"] == 2
        assert options["separator"] == "-"
        assert options["complexity"] == 0
        assert options["directory"] is None
        assert options["count"] == 1
        assert options["stream"] is False
        assert options["non_repeating"] is False
        assert options["letters"] == 0
        assert options["alliterate"] is False
        assert options["alliterate_with"] is None
        assert options["seed"] is None

    def test_preset_inherits_default(self):
        config = load_config(CONFIG_DIR / "presets" / "docker.yaml")
        assert config["petname"]["separator"] == "_"
        assert config["petname"]["complexity"] == 1
        # Inherited
        assert config["petname"]["words"] == 2
        assert "inherits" not in config

    def test_hostnames_preset(self):
        config = load_config(CONFIG_DIR / "presets" / "hostnames.yaml")
        assert config["petname"]["words"] == 3
        assert config["petname"]["letters"] == 6
        assert config["petname"]["non_repeating"] is True
        assert config["petname"]["separator"] == "-"

    def test_all_presets_load(self):
        """Every preset should load and keep every default key."""
        defaults = load_config(DEFAULT_CONFIG)["petname"]
        for yaml_file in (CONFIG_DIR / "presets").glob("*.yaml"):
            config = load_config(yaml_file)
            assert set(config["petname"]) == set(defaults), yaml_file.name

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("petname: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_top_level_list_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- words\n- 3\n")
        with pytest.raises(ConfigError, match="must hold a mapping, not list"):
            load_config(path)

    def test_scalar_document_rejected(self, tmp_path):
        path = tmp_path / "scalar.yaml"
        path.write_text("just words\n")
        with pytest.raises(ConfigError, match="not str"):
            load_config(path)

    def test_inherits_must_be_a_name(self, tmp_path):
        path = tmp_path / "odd.yaml"
        path.write_text("inherits: [default]\n")
        with pytest.raises(ConfigError, match="inherits"):
            load_config(path)


class TestValidateOptions:
    """Config values get the same checks the command line flags get."""

    @pytest.fixture
    def options(self):
        return dict(load_config(DEFAULT_CONFIG)["petname"])

    def test_defaults_are_valid(self, options):
        validate_options(options)

    @pytest.mark.parametrize("key, value", [
        ("words", -1),
        ("words", "two"),
        ("words", True),
        ("count", -1),
        ("count", 1.5),
        ("letters", -2),
        ("letters", None),
        ("separator", 0),
        ("separator", None),
        ("complexity", 7),
        ("complexity", "1"),
        ("complexity", True),
        ("alliterate_with", "ab"),
        ("alliterate_with", 3),
        ("directory", 42),
        ("seed", "abc"),
        ("stream", "yes"),
        ("non_repeating", 1),
    ])
    def test_bad_value(self, options, key, value):
        options[key] = value
        with pytest.raises(ConfigError, match=key):
            validate_options(options)

    @pytest.mark.parametrize("key, value", [
        ("words", 0),
        ("count", 0),
        ("separator", ""),
        ("complexity", 2),
        ("alliterate_with", "b"),
        ("directory", "some/where"),
        ("seed", 12),
        ("stream", True),
    ])
    def test_good_value(self, options, key, value):
        options[key] = value
        validate_options(options)
