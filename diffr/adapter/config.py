import functools
import json
import pathlib
import typing

import pydantic

from diffr import data

__all__ = ("load",)

_KEYS: typing.Final[dict[str, str]] = {
    "default-match-type": "default_match_type",
    "log-level": "log_level",
    "log-rotation": "log_rotation",
    "log-retention": "log_retention",
}


@functools.lru_cache(maxsize=1)
def load(*, config_file: pathlib.Path) -> data.Config | data.ConfigError:
    """
    Loads the config file, falling back to the defaults on data.Config for
    any entry that is left out. A missing file means all defaults.
    """
    if not config_file.exists():
        return data.Config()

    try:
        with config_file.open("r") as fh:
            d = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        return data.ConfigError(f"Unable to read the config file: {e!s}", config_file=config_file)

    if not isinstance(d, dict):
        return data.ConfigError("The config file must contain a json object.", config_file=config_file)

    unrecognized_keys = sorted(set(d.keys()) - _KEYS.keys())
    if unrecognized_keys:
        return data.ConfigError(
            f"The config file contains unrecognized entries: {', '.join(unrecognized_keys)}.",
            config_file=config_file,
        )

    try:
        return data.Config(**{_KEYS[k]: v for k, v in d.items()})
    except pydantic.ValidationError as e:
        return data.ConfigError(f"The config file is invalid: {e!s}", config_file=config_file)
