"""XDG-compliant locations for s3-podcast files."""

from pathlib import Path

import platformdirs

APP_NAME = "s3-podcast"


def get_config_dir() -> Path:
    """Return the user config directory (e.g. ~/.config/s3-podcast)."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_config_file() -> Path:
    """Return the path to config.yaml."""
    return get_config_dir() / "config.yaml"

