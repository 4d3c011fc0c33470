"""Tests for ConfigManager and descriptor loading."""

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from s3podcast.config.manager import ConfigManager, load_descriptor
from s3podcast.config.precedence import resolve_config_value
from s3podcast.config.schema import GlobalConfig, StorageConfig
from s3podcast.utils.errors import DescriptorError, InvalidConfigError


class TestConfigManager:
    """Tests for ConfigManager class."""

    def test_init_with_custom_dir(self, tmp_path: Path) -> None:
        """Test ConfigManager initialization with custom directory."""
        manager = ConfigManager(config_dir=tmp_path)
        assert manager.config_dir == tmp_path
        assert manager.config_file == tmp_path / "config.yaml"

    def test_init_default_dir(self) -> None:
        """Test the default directory is the XDG config dir."""
        manager = ConfigManager()
        assert "s3-podcast" in str(manager.config_dir)

    def test_load_config_creates_default_if_missing(self, tmp_path: Path) -> None:
        """Test that load_config creates default config if file doesn't exist."""
        manager = ConfigManager(config_dir=tmp_path)
        config = manager.load_config()

        assert isinstance(config, GlobalConfig)
        assert manager.config_file.exists()

    def test_default_file_is_valid(self, tmp_path: Path) -> None:
        """Test the generated default file loads back."""
        manager = ConfigManager(config_dir=tmp_path)
        manager.load_config()

        config = manager.load_config()

        assert config.storage.acl == "public-read"
        assert config.storage.bucket is None

    def test_save_and_load(self, tmp_path: Path) -> None:
        """Test saving configuration and reading it back."""
        manager = ConfigManager(config_dir=tmp_path)
        manager.save_config(GlobalConfig(storage=StorageConfig(bucket="my-podcast")))

        with open(manager.config_file) as f:
            data = yaml.safe_load(f)
        assert data["storage"]["bucket"] == "my-podcast"

        assert manager.load_config().storage.bucket == "my-podcast"

    def test_invalid_config_raises(self, tmp_path: Path) -> None:
        """Test invalid config raises InvalidConfigError."""
        (tmp_path / "config.yaml").write_text("log_level: VERBOSE\n")
        manager = ConfigManager(config_dir=tmp_path)

        with pytest.raises(InvalidConfigError, match="Invalid configuration"):
            manager.load_config()


class TestLoadDescriptor:
    """Tests for load_descriptor."""

    def test_yaml(self, tmp_path: Path, descriptor_dict: dict[str, Any]) -> None:
        """Test loading a YAML descriptor."""
        path = tmp_path / "podcast.yaml"
        path.write_text(yaml.safe_dump(descriptor_dict))

        descriptor = load_descriptor(path)

        assert descriptor.title == "Test Podcast"
        assert len(descriptor.items) == 2

    def test_json(self, tmp_path: Path, descriptor_dict: dict[str, Any]) -> None:
        """Test loading a JSON descriptor."""
        path = tmp_path / "podcast.json"
        path.write_text(json.dumps(descriptor_dict))

        descriptor = load_descriptor(path)

        assert descriptor.items[0].itunes_title == "Episode One"

    def test_relative_paths_resolved(
        self, tmp_path: Path, descriptor_dict: dict[str, Any]
    ) -> None:
        """Test localPath is resolved against the descriptor's directory."""
        descriptor_dict["items"][0]["localPath"] = "audio/ep1.mp3"
        path = tmp_path / "podcast.yaml"
        path.write_text(yaml.safe_dump(descriptor_dict))

        descriptor = load_descriptor(path)

        assert descriptor.items[0].local_path == tmp_path / "audio" / "ep1.mp3"

    def test_yaml_dates(self, tmp_path: Path, descriptor_dict: dict[str, Any]) -> None:
        """Test bare YAML dates are accepted."""
        descriptor_dict["items"][0]["pubDate"] = "2024-01-08"
        path = tmp_path / "podcast.yaml"
        path.write_text(yaml.safe_dump(descriptor_dict).replace("'2024-01-08'", "2024-01-08"))

        descriptor = load_descriptor(path)

        assert descriptor.items[0].pub_date is not None
        assert descriptor.items[0].pub_date.year == 2024

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DescriptorError, match="not found"):
            load_descriptor(tmp_path / "missing.yaml")

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "podcast.toml"
        path.write_text("title = 'x'")

        with pytest.raises(DescriptorError, match="Unsupported descriptor type"):
            load_descriptor(path)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "podcast.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(DescriptorError, match="mapping"):
            load_descriptor(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "podcast.yaml"
        path.write_text("title: [unclosed\n")

        with pytest.raises(DescriptorError, match="Could not read"):
            load_descriptor(path)

    def test_invalid_data(self, tmp_path: Path, descriptor_dict: dict[str, Any]) -> None:
        """Test validation failures are DescriptorError."""
        del descriptor_dict["items"][0]["filename"]
        path = tmp_path / "podcast.json"
        path.write_text(json.dumps(descriptor_dict))

        with pytest.raises(DescriptorError, match="Invalid descriptor"):
            load_descriptor(path)


class TestResolveConfigValue:
    """Tests for resolve_config_value."""

    def test_first_set_value_wins(self) -> None:
        assert resolve_config_value(None, "env", "config", default="default") == "env"

    def test_default(self) -> None:
        assert resolve_config_value(None, None, default="default") == "default"

    def test_empty_string_counts_as_set(self) -> None:
        assert resolve_config_value("", "config", default="default") == ""
