"""Artwork records and one fetched page of them."""
from dataclasses import asdict, dataclass, field
from typing import Any, List, Optional, Union

ArtworkId = Union[int, str]


@dataclass(frozen=True)
class Artwork:
    """One catalog row as returned by the remote artworks endpoint."""
    id: ArtworkId
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    @property
    def key(self) -> str:
        """Selection key; JSON object keys are strings, so 12 and "12" are the same row."""
        return str(self.id)


@dataclass
class ArtworkPage:
    """Result of one page fetch."""
    page: int
    records: List[Artwork] = field(default_factory=list)
    total: int = 0


def artwork_from_dict(item: dict) -> Artwork:
    """Build an Artwork from an API row or a persisted row. Raises KeyError without an id."""
    return Artwork(
        id=item["id"],
        title=item.get("title"),
        place_of_origin=item.get("place_of_origin"),
        artist_display=item.get("artist_display"),
        inscriptions=item.get("inscriptions"),
        date_start=item.get("date_start"),
        date_end=item.get("date_end"),
    )


def artwork_to_dict(artwork: Artwork) -> dict[str, Any]:
    return asdict(artwork)
