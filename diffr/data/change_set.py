from __future__ import annotations

import collections.abc
import typing

from loguru import logger

from diffr.data.change import Change
from diffr.data.error import InvalidArgument
from diffr.data.match_type import MatchType

__all__ = ("ChangeSet",)

_MISSING: typing.Final = object()


class ChangeSet:
    """
    The set of Changes for one record, keyed by field name.

    A ChangeSet can be seeded with either bare current values or
    [current, previous] pairs:

        change_set = ChangeSet({"name": ["Bob", "Tom"], "age": 33})
        change_set.changed("name")  # True
        change_set.get_change("age").previous  # None

    Diffs in the old-value-first dirty-tracking format are ingested with
    parse_changes() or the from_dirty() constructor:

        change_set = ChangeSet.from_dirty({"age": [32, 33]})
        change_set.get_change("age").current  # 33
    """

    def __init__(self, seed: typing.Mapping[str, typing.Any] | None = None, /):
        self._changes: dict[str, Change] = _parse_seed(seed or {})

    @staticmethod
    def from_dirty(diff: typing.Mapping[str, typing.Sequence[typing.Any]], /) -> ChangeSet:
        change_set = ChangeSet()
        change_set.parse_changes(diff)
        return change_set

    def add_change(
        self,
        name: str,
        current_value: typing.Any = _MISSING,
        previous_value: typing.Any = None,
    ) -> Change:
        """
        Creates or replaces the Change for name and returns it.

        current_value must be passed explicitly, though None is an acceptable
        value. Both values of an existing Change are overwritten.
        """
        if current_value is _MISSING:
            raise InvalidArgument(f"add_change requires a current_value for {name!r}.")

        change = Change(name, current_value, previous_value)
        self._changes[change.name] = change
        return change

    def remove_change(self, name: str) -> Change | None:
        """Removes the Change for name, returning it, or None if there was no such Change."""
        return self._changes.pop(name, None)

    def changed(
        self,
        keys: str | typing.Iterable[str],
        match_type: MatchType | str = MatchType.ANY,
    ) -> bool:
        """
        Are any (MatchType.ANY) or all (MatchType.ALL) of the keys in the set?

            change_set.changed(["foo", "age"])  # True if either changed
            change_set.changed(["foo", "age"], MatchType.ALL)  # True if both changed
        """
        match_type = MatchType.parse(match_type)
        if isinstance(keys, str):
            keys = {keys}
        else:
            keys = set(keys)

        found = keys & self._changes.keys()

        match match_type:
            case MatchType.ALL:
                return len(found) == len(keys)
            case _:
                return len(found) > 0

    def get_change(self, name: str) -> Change:
        """Returns the Change for name, or an empty Change if the field has not changed."""
        change = self._changes.get(name)
        if change is None:
            return Change(name)

        return change

    @typing.overload
    def to_list(self, name: None = None) -> list[tuple[str, list[typing.Any]]]:
        ...

    @typing.overload
    def to_list(self, name: str) -> list[typing.Any]:
        ...

    def to_list(self, name: str | None = None) -> list[typing.Any]:
        """
        Without a name, returns (name, [previous, current]) for every Change.

        With a name, returns [previous, current] for that field, or an empty
        list if it has not changed.
        """
        if name:
            change = self._changes.get(name)
            if change is None:
                return []

            return change.to_pair()

        return [(k, v.to_pair()) for k, v in self._changes.items()]

    def to_dict(self) -> dict[str, list[typing.Any]]:
        return {k: v.to_pair() for k, v in self._changes.items()}

    def parse_changes(self, diff: typing.Mapping[str, typing.Sequence[typing.Any]], /) -> None:
        """
        Adds every entry of a dirty-tracking diff, {name: [old_value, new_value]}.

        Note that the pair order is the reverse of the seed accepted by
        ChangeSet(), which is {name: [current, previous]}. The set is left
        untouched if any entry is malformed.
        """
        staged: dict[str, Change] = {}
        for name, pair in diff.items():
            if (
                isinstance(pair, (str, bytes))
                or not isinstance(pair, collections.abc.Sequence)
                or len(pair) != 2
            ):
                raise InvalidArgument(
                    f"Expected an [old_value, new_value] pair for {name!r}, but got {pair!r}."
                )

            old_value, new_value = pair
            staged[name] = Change(name, new_value, old_value)

        self._changes.update(staged)

        logger.debug(f"Parsed {len(diff)} changes.")

    def __contains__(self, name: object) -> bool:
        return name in self._changes

    def __iter__(self) -> typing.Iterator[Change]:
        return iter(self._changes.values())

    def __len__(self) -> int:
        return len(self._changes)

    def __repr__(self) -> str:
        return f"ChangeSet(fields={list(self._changes)!r})"


def _parse_seed(seed: typing.Mapping[str, typing.Any], /) -> dict[str, Change]:
    changes: dict[str, Change] = {}
    for name, value in seed.items():
        current, previous = _to_pair(value)
        changes[name] = Change(name, current, previous)

    if changes:
        logger.debug(f"Seeded ChangeSet with {len(changes)} changes.")

    return changes


def _to_pair(value: typing.Any, /) -> tuple[typing.Any, typing.Any]:
    if isinstance(value, (list, tuple)):
        current = value[0] if len(value) > 0 else None
        previous = value[1] if len(value) > 1 else None
        return current, previous

    return value, None
