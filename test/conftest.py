import json
import pathlib
import typing

import pytest

from diffr import adapter, data


@pytest.fixture(scope="function")
def change_set_fixture() -> data.ChangeSet:
    change_set = data.ChangeSet()
    change_set.add_change("name", "foo")
    change_set.add_change("age", 12)
    change_set.add_change("email", "bar@biz.com")
    return change_set


@pytest.fixture(scope="function")
def write_json_fixture(tmp_path: pathlib.Path) -> typing.Callable[[str, typing.Any], pathlib.Path]:
    def _write(file_name: str, contents: typing.Any) -> pathlib.Path:
        path = tmp_path / file_name
        with path.open("w") as fh:
            json.dump(contents, fh)
        return path

    return _write


@pytest.fixture(scope="function")
def diff_file_fixture(write_json_fixture: typing.Callable[[str, typing.Any], pathlib.Path]) -> pathlib.Path:
    return write_json_fixture(
        "diff.json",
        {
            "first_name": ["James", "Jim"],
            "age": [39, 40],
            "email": [None, "jim@example.com"],
        },
    )


@pytest.fixture(autouse=True)
def _clear_config_cache() -> typing.Generator[None, None, None]:
    yield
    adapter.config.load.cache_clear()
