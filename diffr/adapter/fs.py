import functools
import os
import pathlib
import sys

from diffr import data

__all__ = (
    "get_config_path",
    "get_log_folder",
)


@functools.lru_cache
def _root_dir() -> pathlib.Path | data.ConfigError:
    if getattr(sys, "frozen", False):
        path = pathlib.Path(os.path.dirname(sys.executable))

        if not path.exists():
            return data.ConfigError(
                "os.path.dirname(sys.executable) returned an invalid path for a frozen executable."
            )

        return path
    else:
        checkout = next(
            (p for p in pathlib.Path(__file__).parents if (p / "pyproject.toml").exists() and (p / "diffr").exists()),
            None,
        )
        if checkout is None:
            # installed into site-packages
            return pathlib.Path.cwd()

        return checkout


@functools.lru_cache
def get_config_path() -> pathlib.Path | data.ConfigError:
    root = _root_dir()
    if isinstance(root, data.ConfigError):
        return root

    return root / "assets" / "config.json"


@functools.lru_cache
def get_log_folder() -> pathlib.Path | data.ConfigError:
    try:
        root = _root_dir()
        if isinstance(root, data.ConfigError):
            return root

        folder = root / "logs"
        folder.mkdir(exist_ok=True)
        return folder
    except OSError as e:
        return data.ConfigError(f"Unable to create the log folder: {e!s}")
