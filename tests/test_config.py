"""Tests for configuration loading."""

from pathlib import Path

import pytest

from todotxt_cli.config import ConfigModel, load_config, save_config


class TestConfigModel:
    """Test the configuration model."""

    def test_defaults(self):
        config = ConfigModel()

        assert config.todo_dir == ""
        assert config.todo_file == "todo.txt"
        assert config.plain is False
        assert config.get_todo_path() == Path(".") / "todo.txt"

    def test_todo_dir_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TODO_DIR", str(tmp_path))

        assert ConfigModel().get_todo_path() == tmp_path / "todo.txt"

    def test_todo_path_override(self, tmp_path):
        config = ConfigModel(todo_dir=str(tmp_path))

        assert config.get_todo_path("other.txt") == tmp_path / "other.txt"

    def test_yaml_round_trip(self, tmp_path):
        config = ConfigModel(todo_dir=str(tmp_path), plain=True, confirm_actions=False)

        assert ConfigModel.from_yaml(config.to_yaml()) == config

    def test_unknown_keys_are_ignored(self):
        config = ConfigModel.from_yaml("plain: true\ncolour_scheme: dark\n")

        assert config.plain is True

    def test_empty_yaml(self):
        assert ConfigModel.from_yaml("") == ConfigModel()

    def test_non_mapping_yaml(self):
        with pytest.raises(ValueError):
            ConfigModel.from_yaml("- a\n- b\n")


class TestConfigManager:
    """Test loading and saving config files."""

    def test_load_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")

        assert config == ConfigModel()
        assert not (tmp_path / "missing.yaml").exists()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "conf" / "config.yaml"
        save_config(ConfigModel(todo_file="work.txt", show_numbers=False), path)

        config = load_config(path)

        assert config.todo_file == "work.txt"
        assert config.show_numbers is False

    def test_load_reads_fresh_each_time(self, tmp_path):
        path = tmp_path / "config.yaml"
        first = load_config(path)
        save_config(ConfigModel(plain=True), path)

        assert first.plain is False
        assert load_config(path).plain is True
