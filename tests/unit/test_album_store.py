"""
Unit tests for the in-memory album store
"""
import threading

import pytest

from recordshop.core.exceptions import AlbumNotFoundError, StoreError
from recordshop.store import SEED_ALBUMS, Album, AlbumStore


@pytest.mark.unit
class TestAlbumStore:
    """Test album store ordering, lookup and isolation"""

    def test_seeded_store_holds_seed_albums_in_order(self, album_store):
        albums = album_store.list_albums()

        assert [album.id for album in albums] == ["1", "2", "3"]
        assert albums[0] == Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99)
        assert albums[2].title == "Sarah Vaughan and Clifford Brown"
        assert len(album_store) == 3

    def test_empty_store(self):
        store = AlbumStore()

        assert store.list_albums() == []
        assert len(store) == 0

    def test_add_album_appends_to_end(self, album_store, sample_album):
        created = album_store.add_album(sample_album)

        assert created == sample_album
        assert album_store.list_albums()[-1] == sample_album
        assert len(album_store) == 4

    def test_duplicate_ids_are_kept(self, album_store):
        album_store.add_album(Album(id="1", title="Another Blue Train"))

        ids = [album.id for album in album_store.list_albums()]
        assert ids.count("1") == 2

    def test_get_album_returns_first_match(self, album_store):
        album_store.add_album(Album(id="2", title="Later Jeru"))

        assert album_store.get_album("2").title == "Jeru"

    def test_get_unknown_album_raises(self, album_store):
        with pytest.raises(AlbumNotFoundError) as excinfo:
            album_store.get_album("999")

        assert excinfo.value.album_id == "999"
        assert isinstance(excinfo.value, StoreError)

    def test_snapshot_is_detached_from_store(self, album_store):
        snapshot = album_store.list_albums()
        snapshot.append(Album(id="x"))
        snapshot[0].title = "Changed"

        assert len(album_store) == 3
        assert album_store.list_albums()[0].title == "Blue Train"

    def test_stored_album_is_detached_from_caller(self, album_store, sample_album):
        album_store.add_album(sample_album)
        sample_album.title = "Changed"

        assert album_store.list_albums()[-1].title == "Kind of Blue"

    def test_seed_data_is_not_shared_between_stores(self):
        first = AlbumStore.seeded()
        first.add_album(Album(id="4"))
        first.list_albums()[0].price = 0.0

        second = AlbumStore.seeded()

        assert len(second) == 3
        assert second.list_albums()[0].price == 56.99
        assert SEED_ALBUMS[0].price == 56.99

    def test_concurrent_appends_all_land(self):
        store = AlbumStore()
        workers = 8
        per_worker = 250

        def append_many(worker: int) -> None:
            for n in range(per_worker):
                store.add_album(Album(id=f"{worker}-{n}"))

        threads = [threading.Thread(target=append_many, args=(w,)) for w in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        albums = store.list_albums()
        assert len(albums) == workers * per_worker
        assert len({album.id for album in albums}) == workers * per_worker

        # each worker's albums keep their relative order
        for worker in range(workers):
            own = [a.id for a in albums if a.id.startswith(f"{worker}-")]
            assert own == [f"{worker}-{n}" for n in range(per_worker)]
