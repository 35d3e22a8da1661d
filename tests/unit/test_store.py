import threading

import pytest

from apps.users_api.store import UserNotFound, UserStore
from lib.contracts.user import User


def _user(uid, name="n"):
    return User(id=uid, name=name, email=f"{name}@x.com")


def _dump(store):
    return [u.model_dump() for u in store.list_users()]


def test_default_seed():
    store = UserStore()
    assert [u.id for u in store.list_users()] == ["1", "2"]
    assert store.get("1").name == "John Doe"


def test_list_returns_copy():
    store = UserStore()
    users = store.list_users()
    users.clear()
    assert len(store) == 2


def test_get_missing_raises():
    with pytest.raises(UserNotFound) as info:
        UserStore().get("nope")
    assert info.value.user_id == "nope"


def test_first_match_wins_for_every_lookup():
    store = UserStore(seed=[_user("a", "first"), _user("b"), _user("a", "second")])
    assert store.get("a").name == "first"

    store.update("a", _user("a", "replaced"))
    assert [u.name for u in store.list_users()] == ["replaced", "n", "second"]

    removed = store.delete("a")
    assert removed.name == "replaced"
    assert store.get("a").name == "second"


def test_delete_preserves_order():
    store = UserStore(seed=[_user(str(i)) for i in range(5)])
    store.delete("2")
    assert [u.id for u in store.list_users()] == ["0", "1", "3", "4"]


def test_update_and_delete_missing_leave_store_untouched():
    store = UserStore()
    before = _dump(store)
    with pytest.raises(UserNotFound):
        store.update("x", _user("x"))
    with pytest.raises(UserNotFound):
        store.delete("x")
    assert _dump(store) == before


def test_reset_restores_seed():
    store = UserStore()
    store.create(_user("3"))
    store.delete("1")
    store.reset()
    assert [u.id for u in store.list_users()] == ["1", "2"]

    store.reset(seed=[{"id": "z", "name": "Z", "email": "z@x.com"}])
    assert _dump(store) == [{"id": "z", "name": "Z", "email": "z@x.com"}]


def test_concurrent_creates_are_all_kept():
    store = UserStore(seed=[])

    def worker(n):
        for i in range(100):
            store.create(_user(f"{n}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 800
