"""Configuration manager and podcast descriptor loading."""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from s3podcast.config.defaults import DEFAULT_GLOBAL_CONFIG, get_default_config_content
from s3podcast.config.schema import GlobalConfig
from s3podcast.feeds.models import PodcastDescriptor
from s3podcast.utils.errors import DescriptorError, InvalidConfigError
from s3podcast.utils.paths import get_config_dir, get_config_file

DESCRIPTOR_SUFFIXES = {".yaml", ".yml", ".json"}


class ConfigManager:
    """Manages the s3-podcast configuration file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize the config manager.

        Args:
            config_dir: Optional custom config directory. Defaults to XDG config dir.
        """
        if config_dir is None:
            self.config_dir = get_config_dir()
            self.config_file = get_config_file()
        else:
            self.config_dir = config_dir
            self.config_file = config_dir / "config.yaml"

    def load_config(self) -> GlobalConfig:
        """Load and validate global configuration.

        Returns:
            Validated GlobalConfig instance

        Raises:
            InvalidConfigError: If config is invalid
        """
        if not self.config_file.exists():
            self._create_default_config()
            return DEFAULT_GLOBAL_CONFIG

        try:
            with open(self.config_file) as f:
                data = yaml.safe_load(f) or {}
            return GlobalConfig(**data)
        except Exception as e:
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_file}: {e}"
            ) from e

    def save_config(self, config: GlobalConfig) -> None:
        """Save global configuration.

        Args:
            config: GlobalConfig instance to save
        """
        data = config.model_dump(mode="python")

        self.config_dir.mkdir(parents=True, exist_ok=True)

        with open(self.config_file, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    def _create_default_config(self) -> None:
        """Create default config.yaml file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(get_default_config_content())


def load_descriptor(path: Path) -> PodcastDescriptor:
    """Load a podcast descriptor from a YAML or JSON file.

    Relative ``localPath`` entries are resolved against the descriptor's
    directory.

    Args:
        path: Descriptor file (.yaml, .yml or .json)

    Returns:
        Validated PodcastDescriptor

    Raises:
        DescriptorError: If the file is missing, unreadable or invalid
    """
    if not path.is_file():
        raise DescriptorError(f"Descriptor not found: {path}")
    if path.suffix.lower() not in DESCRIPTOR_SUFFIXES:
        raise DescriptorError(
            f"Unsupported descriptor type '{path.suffix}'. Use .yaml, .yml or .json"
        )

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise DescriptorError(f"Could not read descriptor {path}: {e}") from e

    if not isinstance(data, dict):
        raise DescriptorError(f"Descriptor {path} must contain a mapping")

    for item in data.get("items") or []:
        if isinstance(item, dict):
            local = item.get("localPath", item.get("local_path"))
            if isinstance(local, str) and not Path(local).is_absolute():
                key = "localPath" if "localPath" in item else "local_path"
                item[key] = str(path.parent / local)

    try:
        return PodcastDescriptor.model_validate(data)
    except ValidationError as e:
        raise DescriptorError(f"Invalid descriptor {path}: {e}") from e
