import pydantic

from diffr.data.match_type import MatchType

__all__ = ("Config",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(extra="forbid"))
class Config:
    default_match_type: MatchType = MatchType.ANY
    log_level: str = "INFO"
    log_rotation: str = "5 MB"
    log_retention: str = "7 days"

    def __repr__(self) -> str:
        return (
            f"Config(default_match_type={self.default_match_type!r}, log_level={self.log_level!r}, "
            f"log_rotation={self.log_rotation!r}, log_retention={self.log_retention!r})"
        )
