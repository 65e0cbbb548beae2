"""Tests for the in-memory video store."""

import threading

import pytest

from videohub.errors import NotFoundError, VideoNotFoundError
from videohub.store.memory import VideoStore


def make_video(store, title="Title", author="Author", resolutions=None):
    return store.create(title=title, author=author, available_resolutions=resolutions or ["P144"])


class TestCreate:
    """Test VideoStore.create."""

    def test_sets_defaults(self, store):
        """New videos are not downloadable and have no age restriction."""
        video = make_video(store)
        assert video.can_be_downloaded is False
        assert video.min_age_restriction is None

    def test_stamps_timestamps_from_clock(self, store):
        """createdAt is now and publicationDate is one day later."""
        video = make_video(store)
        assert video.created_at == "2024-03-01T09:30:15.123Z"
        assert video.publication_date == "2024-03-02T09:30:15.123Z"
        assert video.publication_date > video.created_at

    def test_explicit_publication_date_kept(self, store):
        """A supplied publicationDate overrides the default."""
        video = store.create("T", "A", [], publication_date="2030-01-01T00:00:00.000Z")
        assert video.publication_date == "2030-01-01T00:00:00.000Z"

    def test_ids_are_unique(self, store):
        """Back-to-back creates get distinct ids."""
        ids = {make_video(store).id for _ in range(50)}
        assert len(ids) == 50

    def test_ids_increase(self, store):
        """Later videos get larger ids."""
        first = make_video(store)
        second = make_video(store)
        assert second.id > first.id

    def test_copies_resolutions(self, store):
        """Mutating the caller's list does not change the stored video."""
        resolutions = ["P144"]
        video = make_video(store, resolutions=resolutions)
        resolutions.append("P240")
        assert video.available_resolutions == ["P144"]

    def test_empty_publication_date_kept(self, store):
        """An empty string is a supplied value, not a missing one."""
        video = store.create("T", "A", [], publication_date="")
        assert video.publication_date == ""

    def test_stores_exact_title(self, store):
        """Title is stored as sent, not trimmed."""
        video = make_video(store, title="  padded  ")
        assert video.title == "  padded  "


class TestRead:
    """Test VideoStore.list and get_by_id."""

    def test_empty_store_lists_nothing(self, store):
        """New store is empty."""
        assert store.list() == []
        assert len(store) == 0

    def test_list_keeps_insertion_order(self, store):
        """Videos are listed in creation order."""
        titles = ["one", "two", "three"]
        for title in titles:
            make_video(store, title=title)
        assert [v.title for v in store.list()] == titles

    def test_get_by_id_returns_video(self, store):
        """Lookup finds a created video."""
        video = make_video(store)
        assert store.get_by_id(video.id) == video

    def test_get_by_id_missing_raises(self, store):
        """Unknown id raises VideoNotFoundError."""
        with pytest.raises(VideoNotFoundError):
            store.get_by_id(12345)

    def test_not_found_is_a_not_found_error(self):
        """VideoNotFoundError is caught by NotFoundError handlers."""
        assert issubclass(VideoNotFoundError, NotFoundError)


class TestReturnedCopies:
    """Test that callers never hold live stored records."""

    def test_changing_get_result_leaves_store_alone(self, store):
        """Mutating a fetched video does not touch the stored one."""
        video = make_video(store, title="T")
        fetched = store.get_by_id(video.id)
        fetched.title = ""
        fetched.min_age_restriction = 99
        fetched.available_resolutions.append("P4000")

        stored = store.list()[0]
        assert stored.title == "T"
        assert stored.min_age_restriction is None
        assert stored.available_resolutions == ["P144"]

    def test_changing_list_result_leaves_store_alone(self, store):
        """Mutating a listed video does not touch the stored one."""
        make_video(store, title="T")
        store.list()[0].title = "changed"
        assert store.list()[0].title == "T"

    def test_changing_create_and_update_results_leaves_store_alone(self, store):
        """Results of create and update are copies too."""
        video = make_video(store, title="T")
        video.title = "from create"
        updated = store.update(video.id, {"author": "New"})
        updated.author = "from update"

        stored = store.get_by_id(video.id)
        assert stored.title == "T"
        assert stored.author == "New"

    def test_update_copies_list_values(self, store):
        """The caller's resolutions list is not shared with the store."""
        video = make_video(store)
        resolutions = ["P720"]
        store.update(video.id, {"available_resolutions": resolutions})
        resolutions.append("P4000")
        assert store.get_by_id(video.id).available_resolutions == ["P720"]


class TestUpdate:
    """Test VideoStore.update."""

    def test_overwrites_fields(self, store):
        """Supplied fields are overwritten in place."""
        video = make_video(store)
        updated = store.update(
            video.id,
            {"title": "New", "can_be_downloaded": True, "min_age_restriction": 7},
        )
        assert updated.title == "New"
        assert updated.can_be_downloaded is True
        assert updated.min_age_restriction == 7
        assert store.get_by_id(video.id).title == "New"

    def test_leaves_other_fields_alone(self, store):
        """Unsupplied fields and createdAt are unchanged."""
        video = make_video(store, author="Keep")
        created_at = video.created_at
        store.update(video.id, {"title": "New"})
        stored = store.get_by_id(video.id)
        assert stored.author == "Keep"
        assert stored.created_at == created_at

    def test_missing_raises(self, store):
        """Updating an unknown id raises VideoNotFoundError."""
        with pytest.raises(VideoNotFoundError):
            store.update(999, {"title": "New"})

    @pytest.mark.parametrize("name", ["id", "created_at", "bogus"])
    def test_immutable_fields_rejected(self, store, name):
        """id, created_at and unknown fields cannot be updated."""
        video = make_video(store)
        with pytest.raises(ValueError):
            store.update(video.id, {name: 1})
        assert store.get_by_id(video.id).id == video.id


class TestDelete:
    """Test VideoStore.delete."""

    def test_removes_and_returns_video(self, store):
        """Delete returns the removed video."""
        video = make_video(store)
        removed = store.delete(video.id)
        assert removed.id == video.id
        assert store.list() == []

    def test_only_matching_video_removed(self, store):
        """Other videos stay in order."""
        first = make_video(store, title="first")
        second = make_video(store, title="second")
        third = make_video(store, title="third")
        store.delete(second.id)
        assert [v.id for v in store.list()] == [first.id, third.id]

    def test_missing_raises(self, store):
        """Deleting an unknown id raises VideoNotFoundError."""
        with pytest.raises(VideoNotFoundError):
            store.delete(1)

    def test_second_delete_raises(self, store):
        """A video can only be deleted once."""
        video = make_video(store)
        store.delete(video.id)
        with pytest.raises(VideoNotFoundError):
            store.delete(video.id)


class TestClear:
    """Test VideoStore.clear."""

    def test_returns_removed_count(self, store):
        """clear() reports how many videos it removed."""
        make_video(store)
        make_video(store)
        assert store.clear() == 2
        assert len(store) == 0

    def test_empty_store_returns_zero(self, store):
        """Clearing an empty store signals nothing was deleted."""
        assert store.clear() == 0


class TestSeedSample:
    """Test VideoStore.seed_sample."""

    def test_inserts_sample_video(self, store):
        """Sample video has id 1 and a P144 resolution."""
        video = store.seed_sample()
        assert video.id == 1
        assert video.can_be_downloaded is True
        assert video.available_resolutions == ["P144"]
        assert store.get_by_id(1) == video

    def test_is_idempotent(self, store):
        """Seeding twice leaves one sample video."""
        store.seed_sample()
        store.seed_sample()
        assert len(store) == 1

    def test_created_ids_do_not_collide_with_sample(self, store):
        """New videos never reuse id 1."""
        store.seed_sample()
        assert make_video(store).id != 1


class TestConcurrency:
    """Test store under concurrent access."""

    def test_parallel_creates_get_unique_ids(self):
        """Threads creating at once still get distinct ids."""
        store = VideoStore()
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            for _ in range(25):
                store.create("T", "A", [])

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [v.id for v in store.list()]
        assert len(ids) == 200
        assert len(set(ids)) == 200

    def test_readers_never_see_half_applied_updates(self):
        """Concurrent updates and reads only ever observe whole records."""
        store = VideoStore()
        video = store.create("a", "a", [])
        states = [
            {"title": "a", "author": "a", "available_resolutions": []},
            {"title": "b", "author": "b", "available_resolutions": ["P144"]},
        ]
        mismatches = []
        stop = threading.Event()

        def writer():
            for i in range(500):
                store.update(video.id, states[i % 2])
            stop.set()

        def reader():
            while not stop.is_set():
                seen = store.get_by_id(video.id)
                expected = states[0] if seen.title == "a" else states[1]
                if (seen.author, seen.available_resolutions) != (
                    expected["author"],
                    expected["available_resolutions"],
                ):
                    mismatches.append(seen)

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert mismatches == []
