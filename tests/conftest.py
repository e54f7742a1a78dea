"""Test bootstrap.

Ensures the project root is importable and provides fake catalog pages.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from artpager.core.artworks_client import CatalogFetchError  # noqa: E402
from artpager.core.local_store import LocalStore, SelectionStore  # noqa: E402
from artpager.core.selection_controller import SelectionController  # noqa: E402
from artpager.models.artwork import Artwork, ArtworkPage  # noqa: E402

PAGE_SIZE = 12


def make_artwork(i: int) -> Artwork:
    return Artwork(
        id=i,
        title=f"Artwork {i}",
        place_of_origin="Chicago",
        artist_display=f"Artist {i}",
        inscriptions=None,
        date_start=1900 + i,
        date_end=1901 + i,
    )


class FakeCatalogClient:
    """In-memory paginated catalog with ids 1..total; records every request."""

    def __init__(self, total: int = 40) -> None:
        self.total = total
        self.calls: list[tuple[int, int]] = []
        self.fail_pages: set[int] = set()
        self.closed = False

    def fetch_page(self, page: int, limit: int) -> ArtworkPage:
        self.calls.append((page, limit))
        if page in self.fail_pages:
            raise CatalogFetchError(page, "503 Server Error")
        start = (page - 1) * limit + 1
        stop = min(start + limit, self.total + 1)
        return ArtworkPage(page=page, records=[make_artwork(i) for i in range(start, stop)], total=self.total)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "local_storage.json"


@pytest.fixture
def selection_store(store_path):
    return SelectionStore(LocalStore(store_path))


@pytest.fixture
def catalog():
    return FakeCatalogClient()


@pytest.fixture
def controller(catalog, selection_store):
    ctrl = SelectionController(catalog, selection_store, page_size=PAGE_SIZE)
    ctrl.load()
    return ctrl
