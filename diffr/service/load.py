import pathlib

from loguru import logger

from diffr import adapter, data

__all__ = ("load",)


def load(*, diff_file: pathlib.Path) -> data.ChangeSet | data.DiffrError:
    diff = adapter.diff_file.read(diff_file=diff_file)
    if isinstance(diff, data.DiffrError):
        return diff

    try:
        change_set = data.ChangeSet.from_dirty(diff)
    except data.InvalidArgument as e:
        return data.DiffFileError(str(e), diff_file=diff_file)

    logger.debug(f"Loaded {change_set!r} from {diff_file!s}.")

    return change_set
