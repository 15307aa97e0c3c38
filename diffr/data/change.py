import dataclasses
import typing

from diffr.data.error import InvalidArgument

__all__ = ("Change",)


@dataclasses.dataclass
class Change:
    """
    The current and previous state of a single named field.

    The values are opaque; a Change whose current value equals its previous
    value is still a Change.

        Change("first_name", "Jim", "James").to_pair()  # ["James", "Jim"]
    """

    name: str
    current: typing.Any = None
    previous: typing.Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgument(f"A Change requires a non-empty str name, but got {self.name!r}.")

    def to_pair(self) -> list[typing.Any]:
        """Returns [previous, current], the old-value-first order of dirty-tracking diffs."""
        return [self.previous, self.current]
