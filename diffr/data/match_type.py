from __future__ import annotations

import enum

from diffr.data.error import InvalidArgument

__all__ = ("MatchType",)


class MatchType(enum.Enum):
    ANY = "any"
    ALL = "all"

    @staticmethod
    def parse(value: MatchType | str, /) -> MatchType:
        if isinstance(value, MatchType):
            return value

        try:
            return MatchType(value)
        except ValueError:
            raise InvalidArgument(
                f"The match type specified, {value!r}, was not recognized. Expected 'any' or 'all'."
            ) from None

    def __repr__(self) -> str:
        return f"MatchType.{self.name}"

    def __str__(self) -> str:
        return self.value
