import json

from artpager.core.local_store import CURRENT_PAGE_KEY, SELECTED_ROWS_KEY, LocalStore, SelectionStore
from conftest import make_artwork


def test_local_store_reads_missing_file_as_empty(store_path):
    store = LocalStore(store_path)
    assert store.get_item("anything") is None
    assert not store_path.exists()


def test_local_store_set_and_get(store_path):
    store = LocalStore(store_path)
    store.set_item("a", "1")
    store.set_item("b", "two")

    assert LocalStore(store_path).get_item("a") == "1"
    assert json.loads(store_path.read_text()) == {"a": "1", "b": "two"}

    store.set_item("a", "3")
    assert store.get_item("a") == "3"
    assert store.get_item("b") == "two"


def test_local_store_tolerates_corrupt_file(store_path):
    store_path.write_text("{not json")
    store = LocalStore(store_path)

    assert store.get_item(CURRENT_PAGE_KEY) is None
    store.set_item(CURRENT_PAGE_KEY, "2")
    assert store.get_item(CURRENT_PAGE_KEY) == "2"


def test_selection_is_stored_under_selected_rows_key(store_path, selection_store):
    selection_store.save_selection({"5": make_artwork(5)})

    raw = LocalStore(store_path).get_item(SELECTED_ROWS_KEY)
    data = json.loads(raw)
    assert list(data) == ["5"]
    assert data["5"]["title"] == "Artwork 5"
    assert data["5"]["id"] == 5


def test_selection_round_trip(selection_store):
    selection = {str(i): make_artwork(i) for i in (3, 1, 8)}
    selection_store.save_selection(selection)
    assert selection_store.load_selection() == selection


def test_selection_load_skips_rows_without_id(store_path):
    LocalStore(store_path).set_item(
        SELECTED_ROWS_KEY, json.dumps({"1": {"id": 1, "title": "ok"}, "2": {"title": "no id"}, "3": "junk"})
    )
    loaded = SelectionStore(LocalStore(store_path)).load_selection()
    assert list(loaded) == ["1"]
    assert loaded["1"].title == "ok"
    assert loaded["1"].artist_display is None


def test_selection_load_invalid_json_is_empty(store_path):
    LocalStore(store_path).set_item(SELECTED_ROWS_KEY, "[broken")
    assert SelectionStore(LocalStore(store_path)).load_selection() == {}


def test_current_page_stored_as_decimal_string(store_path, selection_store):
    assert selection_store.load_current_page() == 1
    selection_store.save_current_page(7)
    assert LocalStore(store_path).get_item(CURRENT_PAGE_KEY) == "7"
    assert selection_store.load_current_page() == 7


def test_current_page_falls_back_to_first_page(store_path, selection_store):
    storage = LocalStore(store_path)
    storage.set_item(CURRENT_PAGE_KEY, "abc")
    assert selection_store.load_current_page() == 1
    storage.set_item(CURRENT_PAGE_KEY, "-3")
    assert selection_store.load_current_page() == 1
