import pathlib
import typing

from loguru import logger

from diffr import data
from diffr.service.load import load

__all__ = ("check",)


def check(
    *,
    diff_file: pathlib.Path,
    fields: typing.Iterable[str],
    match_type: data.MatchType,
) -> bool | data.DiffrError:
    change_set = load(diff_file=diff_file)
    if isinstance(change_set, data.DiffrError):
        return change_set

    fields = tuple(fields)
    result = change_set.changed(fields, match_type)

    logger.debug(f"changed({fields!r}, {match_type!s}) = {result} for {diff_file!s}.")

    return result
