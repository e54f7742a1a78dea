"""Data models for catalog rows and pages."""
from artpager.models.artwork import Artwork, ArtworkPage

__all__ = [
    "Artwork",
    "ArtworkPage",
]
