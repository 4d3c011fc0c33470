"""Default configuration content."""

from s3podcast.config.schema import GlobalConfig

DEFAULT_GLOBAL_CONFIG = GlobalConfig()

DEFAULT_CONFIG_CONTENT = """\
# s3-podcast configuration
version: "1"
log_level: INFO

storage:
  # bucket: my-podcast
  acl: public-read
  # region: us-east-1
  # endpoint_url: https://nyc3.digitaloceanspaces.com
  base_url: https://s3.amazonaws.com

probe:
  ffprobe_path: ffprobe
"""


def get_default_config_content() -> str:
    """Return the commented default config.yaml."""
    return DEFAULT_CONFIG_CONTENT
