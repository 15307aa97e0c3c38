from __future__ import annotations

import pathlib

__all__ = ("ConfigError", "DiffFileError", "DiffrError", "InvalidArgument")


class DiffrError(Exception):
    """Base class for errors occurring in the diffr codebase"""


class InvalidArgument(DiffrError, ValueError):
    """A caller passed an argument the change model cannot accept."""


class ConfigError(DiffrError):
    def __init__(self, message: str, /, *, config_file: pathlib.Path | None = None):
        if config_file is not None:
            message = f"{message} (config file: {config_file!s})"

        super().__init__(message)


class DiffFileError(DiffrError):
    def __init__(self, message: str, /, *, diff_file: pathlib.Path):
        super().__init__(f"{message} (diff file: {diff_file!s})")
