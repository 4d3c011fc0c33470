"""Resolution of settings that can come from several places."""

from typing import TypeVar

T = TypeVar("T")


def resolve_config_value(*candidates: T | None, default: T) -> T:
    """Return the first candidate that is not None, else ``default``.

    Candidates are given highest precedence first, e.g.
    ``resolve_config_value(cli_option, env_var, config_value, default=...)``.
    Empty strings count as set.
    """
    for value in candidates:
        if value is not None:
            return value
    return default
