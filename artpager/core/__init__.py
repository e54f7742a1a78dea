"""Core services: remote catalog client, local storage, selection controller."""
from artpager.core.artworks_client import ArtworksClient, CatalogFetchError
from artpager.core.local_store import LocalStore, SelectionStore
from artpager.core.selection_controller import SelectionController

__all__ = [
    "ArtworksClient",
    "CatalogFetchError",
    "LocalStore",
    "SelectionStore",
    "SelectionController",
]
