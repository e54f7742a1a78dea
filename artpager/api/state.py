"""Shared application state (injected into routes)."""
from artpager.config import LOCAL_STORE_PATH, PAGE_SIZE
from artpager.core.artworks_client import ArtworksClient
from artpager.core.local_store import LocalStore, SelectionStore
from artpager.core.selection_controller import SelectionController


class AppState:
    def __init__(self) -> None:
        self.client = ArtworksClient()
        self.store = SelectionStore(LocalStore(LOCAL_STORE_PATH))
        self.controller = SelectionController(self.client, self.store, page_size=PAGE_SIZE)

    def close(self) -> None:
        self.client.close()


_state = AppState()


def get_state() -> AppState:
    return _state
