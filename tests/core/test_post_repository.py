"""Post store: CRUD outcomes, id assignment and locking."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.apps.posts.repositories.post_repository import PostRepository
from src.core.exceptions import StoreLockError
from src.core.response.schemas import PostDbStatus


def test_new_store_is_empty(store):
    assert store.get_posts() == []


def test_create_assigns_sequential_ids(store):
    first = store.create_post("post content")
    second = store.create_post("different post content")

    assert first.status == PostDbStatus.OK
    assert first.value == 1
    assert second.value == 2
    assert len(store.get_posts()) == 2


def test_get_post_returns_created_content(store):
    post_id = store.create_post("post content").value

    response = store.get_post(post_id)

    assert response.status == PostDbStatus.OK
    assert response.value.post_id == post_id
    assert response.value.content == "post content"


def test_get_missing_post_is_err_with_none(store):
    response = store.get_post(42)
    assert response.status == PostDbStatus.ERR
    assert response.value is None


def test_update_preserves_id(store):
    store.create_post("first")
    store.create_post("old text")

    response = store.update_post(2, "new text")

    assert response.status == PostDbStatus.OK
    assert response.value == 2
    assert store.get_post(2).value.content == "new text"


def test_update_missing_post_leaves_store_unchanged(store):
    store.create_post("only post")

    response = store.update_post(7, "ignored")

    assert response.status == PostDbStatus.ERR
    assert response.value is None
    assert [p.content for p in store.get_posts()] == ["only post"]


def test_delete_then_get_is_err(store):
    post_id = store.create_post("short lived").value

    deleted = store.delete_post(post_id)

    assert deleted.status == PostDbStatus.OK
    assert deleted.value == post_id
    assert store.get_post(post_id).status == PostDbStatus.ERR


def test_delete_missing_post_is_err(store):
    response = store.delete_post(1)
    assert response.status == PostDbStatus.ERR
    assert response.value is None


def test_delete_keeps_insertion_order(store):
    for content in ("a", "b", "c"):
        store.create_post(content)

    store.delete_post(2)

    assert [(p.post_id, p.content) for p in store.get_posts()] == [(1, "a"), (3, "c")]


def test_id_after_deleting_lowest_post_skips_to_next_free_candidate(store):
    assert store.create_post("one").value == 1
    assert store.create_post("two").value == 2
    store.delete_post(1)

    # candidate is count + 1 = 2, which is taken, so the walk lands on 3
    assert store.create_post("three").value == 3


def test_id_reused_when_candidate_is_free(store):
    for content in ("a", "b", "c"):
        store.create_post(content)
    store.delete_post(3)

    assert store.create_post("d").value == 3


def test_count_invariant_and_uniqueness():
    store = PostRepository()
    created = [store.create_post(f"post {i}").value for i in range(10)]
    for post_id in created[::3]:
        assert store.delete_post(post_id).status == PostDbStatus.OK
    for i in range(5):
        store.create_post(f"extra {i}")

    ids = [p.post_id for p in store.get_posts()]
    assert len(ids) == 10 - len(created[::3]) + 5
    assert len(ids) == len(set(ids))


def test_get_posts_returns_copies(store):
    store.create_post("original")

    snapshot = store.get_posts()
    snapshot[0].content = "changed outside"

    assert store.get_post(1).value.content == "original"


def test_concurrent_creates_yield_distinct_ids():
    store = PostRepository()

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda i: store.create_post(f"post {i}").value, range(200)))

    assert sorted(ids) == list(range(1, 201))
    assert store.count() == 200


def test_session_times_out_while_lock_is_held_elsewhere(store):
    holding = threading.Event()
    release = threading.Event()

    def hold_lock():
        with store.session():
            holding.set()
            release.wait(timeout=5)

    holder = threading.Thread(target=hold_lock)
    holder.start()
    try:
        assert holding.wait(timeout=5)
        with pytest.raises(StoreLockError) as exc_info:
            with store.session(timeout=0.01):
                pass
        assert exc_info.value.timeout == 0.01
    finally:
        release.set()
        holder.join()

    with store.session() as db:
        assert db is store
