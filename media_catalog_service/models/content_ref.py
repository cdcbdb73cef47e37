"""Typed references to catalog content.

Movie and TV show ids come from separate tables and may collide, so any
code that needs to refer to "a movie or a show" carries the kind along
with the id.
"""
from dataclasses import dataclass
from enum import Enum


class ContentKind(str, Enum):
    """Discriminator between movie and TV show content."""

    MOVIE = "movie"
    TV = "tv"

    @classmethod
    def parse(cls, value: "str | ContentKind") -> "ContentKind":
        """
        Parse a kind from its wire value.

        Raises:
            ValueError: If the value is not a known kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown content kind: {value!r}") from None


# Accepted values for catalog type filters
CONTENT_TYPE_ALL = "all"


def kinds_for_type(content_type: str | None) -> list[ContentKind]:
    """
    Resolve a catalog type filter to the kinds it covers.

    Movies always come before shows.

    Args:
        content_type: 'movie', 'tv' or 'all' (None means 'all')

    Returns:
        Ordered list of content kinds
    """
    if content_type is None or content_type == CONTENT_TYPE_ALL:
        return [ContentKind.MOVIE, ContentKind.TV]
    return [ContentKind.parse(content_type)]


@dataclass(frozen=True)
class ContentRef:
    """Reference to a single movie or TV show."""

    kind: ContentKind
    id: int

    @classmethod
    def movie(cls, content_id: int) -> "ContentRef":
        return cls(ContentKind.MOVIE, int(content_id))

    @classmethod
    def show(cls, content_id: int) -> "ContentRef":
        return cls(ContentKind.TV, int(content_id))

    @classmethod
    def parse(cls, kind: "str | ContentKind", content_id: "str | int") -> "ContentRef":
        """
        Build a reference from untyped route values.

        Raises:
            ValueError: If the kind is unknown or the id is not an integer
        """
        try:
            parsed_id = int(content_id)
        except (TypeError, ValueError):
            raise ValueError(f"content_id must be an integer, got {content_id!r}") from None
        return cls(ContentKind.parse(kind), parsed_id)

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.id}"
