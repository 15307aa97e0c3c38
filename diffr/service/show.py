import pathlib
import typing

from diffr import data
from diffr.service.load import load

__all__ = ("show",)


def show(
    *,
    diff_file: pathlib.Path,
    field: str | None,
) -> dict[str, list[typing.Any]] | list[typing.Any] | data.DiffrError:
    """
    Returns {name: [previous, current]} for the whole diff, or
    [previous, current] for a single field ([] if it did not change).
    """
    change_set = load(diff_file=diff_file)
    if isinstance(change_set, data.DiffrError):
        return change_set

    if field is None:
        return change_set.to_dict()

    return change_set.to_list(field)
