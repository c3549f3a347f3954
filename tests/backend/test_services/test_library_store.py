# tests/backend/test_services/test_library_store.py
import threading

from backend.api.schemas.authors_schema import AuthorCreate
from backend.api.schemas.books_schema import BookCreate
from backend.api.utils.library_store import LibraryStore, SEED_AUTHORS, SEED_BOOKS, get_store


def test_seed_dataset(store):
    assert [a.id for a in store.authors] == [1, 2, 3]
    assert [a.name for a in store.authors] == SEED_AUTHORS
    assert [(b.name, b.author_id) for b in store.books] == SEED_BOOKS
    assert [b.id for b in store.books] == list(range(1, 9))


def test_empty_store(empty_store):
    assert empty_store.authors == []
    assert empty_store.books == []
    assert empty_store.append_author(AuthorCreate(name="First")).id == 1


def test_find_author_and_book(store):
    assert store.find_author(3).name == "Brent Weeks"
    assert store.find_author(0) is None
    assert store.find_author(None) is None
    assert store.find_book(8).name == "Beyond the Shadows"
    assert store.find_book(9) is None


def test_books_by_author_preserves_order(store):
    store.append_book(BookCreate(name="Shadow's Edge", author_id=3))

    assert [b.id for b in store.books_by_author(3)] == [7, 8, 9]
    assert store.books_by_author(42) == []


def test_snapshot_does_not_expose_internal_list(store):
    snapshot = store.books
    snapshot.clear()

    assert len(store.books) == 8


def test_rename_author_in_place(store):
    author = store.find_author(2)

    renamed = store.rename_author(2, "Tolkien")

    assert renamed is author
    assert store.find_author(2).name == "Tolkien"
    assert store.rename_author(999, "X") is None


def test_ids_unique_under_concurrent_appends(empty_store):
    def worker():
        for i in range(50):
            empty_store.append_author(AuthorCreate(name=f"Author {i}"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [a.id for a in empty_store.authors]
    assert len(ids) == 400
    assert len(set(ids)) == 400


def test_get_store_is_process_wide():
    assert get_store() is get_store()
    assert isinstance(get_store(), LibraryStore)
