import json
import pathlib
import typing

from diffr import data

__all__ = ("read",)


def read(*, diff_file: pathlib.Path) -> dict[str, typing.Any] | data.DiffFileError:
    """Reads a dirty-tracking diff, {"name": [old_value, new_value]}, from a json file."""
    if not diff_file.exists():
        return data.DiffFileError("The diff file specified does not exist.", diff_file=diff_file)

    try:
        with diff_file.open("r") as fh:
            d = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        return data.DiffFileError(f"Unable to read the diff file: {e!s}", diff_file=diff_file)

    if not isinstance(d, dict):
        return data.DiffFileError(
            f"The diff file must contain a json object, but got {type(d).__name__}.",
            diff_file=diff_file,
        )

    return typing.cast(dict[str, typing.Any], d)
