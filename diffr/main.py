import argparse
import json
import pathlib
import sys
import typing

import pydantic
from loguru import logger

from diffr import adapter, data, service

__all__ = ("main", "run")

EXIT_CHANGED: typing.Final[int] = 0
EXIT_UNCHANGED: typing.Final[int] = 1
EXIT_ERROR: typing.Final[int] = 2


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class CheckArgs:
    diff_file: pathlib.Path
    fields: tuple[str, ...]
    match_type: data.MatchType


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class ShowArgs:
    diff_file: pathlib.Path
    field: str | None


def parse_args(args: argparse.Namespace, /, *, config: data.Config) -> CheckArgs | ShowArgs | data.DiffrError:
    match args.command:
        case "check":
            if not args.fields:
                return data.InvalidArgument("--fields requires at least one field name.")

            if any(not f for f in args.fields):
                return data.InvalidArgument(f"--fields cannot contain an empty name, but got {args.fields!r}.")

            try:
                match_type = data.MatchType.parse(args.match or config.default_match_type)
            except data.InvalidArgument as e:
                return e

            return CheckArgs(
                diff_file=pathlib.Path(args.diff_file),
                fields=tuple(args.fields),
                match_type=match_type,
            )
        case "show":
            if args.field == "":
                return data.InvalidArgument("--field cannot be empty.")

            return ShowArgs(diff_file=pathlib.Path(args.diff_file), field=args.field)
        case cmd:
            return data.InvalidArgument(f"Unrecognized command, {cmd!r}.")


def run(argv: typing.Sequence[str], /, *, config: data.Config) -> int:
    parsed_args = parse_args(_create_parser().parse_args(argv), config=config)

    match parsed_args:
        case CheckArgs(diff_file=diff_file, fields=fields, match_type=match_type):
            check_result = service.check(diff_file=diff_file, fields=fields, match_type=match_type)
            if isinstance(check_result, data.DiffrError):
                logger.error(f"An error occurred while checking {diff_file!s}: {check_result!s}")
                return EXIT_ERROR

            print(json.dumps(check_result))

            return EXIT_CHANGED if check_result else EXIT_UNCHANGED
        case ShowArgs(diff_file=diff_file, field=field):
            show_result = service.show(diff_file=diff_file, field=field)
            if isinstance(show_result, data.DiffrError):
                logger.error(f"An error occurred while reading {diff_file!s}: {show_result!s}")
                return EXIT_ERROR

            print(json.dumps(show_result, default=str))

            return EXIT_CHANGED
        case data.DiffrError() as e:
            logger.error(str(e))
            return EXIT_ERROR


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="diffr")
    subparser = parser.add_subparsers(dest="command", required=True)

    check_parser = subparser.add_parser("check")
    show_parser = subparser.add_parser("show")

    check_parser.add_argument("--diff-file", type=str, required=True)
    check_parser.add_argument("--fields", nargs="+", type=str, required=True)
    check_parser.add_argument("--match", type=str, choices=[m.value for m in data.MatchType])

    show_parser.add_argument("--diff-file", type=str, required=True)
    show_parser.add_argument("--field", type=str)

    return parser


def main() -> None:
    try:
        config_file_path = adapter.fs.get_config_path()
        if isinstance(config_file_path, data.DiffrError):
            logger.error(f"An error occurred while looking up config_file_path: {config_file_path!s}")
            sys.exit(EXIT_ERROR)

        cfg = adapter.config.load(config_file=config_file_path)
        if isinstance(cfg, data.DiffrError):
            logger.error(f"An error occurred while loading config file: {cfg!s}")
            sys.exit(EXIT_ERROR)

        logger.remove()
        logger.add(sys.stderr, level=cfg.log_level)

        log_folder = adapter.fs.get_log_folder()
        if isinstance(log_folder, data.DiffrError):
            logger.error(f"An error occurred while looking up log folder: {log_folder!s}")
            sys.exit(EXIT_ERROR)

        logger.add(
            log_folder / "error.log",
            rotation=cfg.log_rotation,
            retention=cfg.log_retention,
            level="ERROR",
        )

        sys.exit(run(sys.argv[1:], config=cfg))
    except Exception as e:
        logger.exception(e)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
