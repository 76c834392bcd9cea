import json

import pytest

from services.models import Database, User
from services.store import InMemoryStore, JsonFileStore
from utils.exceptions import StorageError


def _user(**overrides):
    fields = dict(
        user_id="U123456",
        username="alice",
        password="aB3dE9",
        age=30,
        hobbies=["chess"],
        city="Paris",
        level=1,
        coins=0,
    )
    fields.update(overrides)
    return User(**fields)


def test_load_empty_database(store):
    db = store.load()
    assert db.users == []


def test_save_then_load(store, db_path):
    store.save(Database(users=[_user()]))

    assert store.load().users == [_user()]
    data = json.loads(db_path.read_text(encoding="utf-8"))
    assert list(data) == ["users"]
    assert list(data["users"][0]) == [
        "userId", "username", "password", "age", "hobbies", "city", "level", "coins",
    ]


def test_save_is_indented(store, db_path):
    store.save(Database(users=[_user()]))
    assert db_path.read_text(encoding="utf-8").startswith('{\n  "users": [\n')


def test_save_of_load_is_a_noop(store, db_path):
    store.save(Database(users=[_user(), _user(username="bob", city="Zürich")]))
    before = db_path.read_bytes()

    store.save(store.load())

    assert db_path.read_bytes() == before


def test_load_missing_file(tmp_path):
    store = JsonFileStore(str(tmp_path / "nope.json"))
    with pytest.raises(StorageError) as err:
        store.load()
    assert err.value.path == store.path
    assert isinstance(err.value.__cause__, FileNotFoundError)


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"people": []}',
        '{"users": {}}',
        '{"users": [{"username": "x"}]}',
        '{"users": ["x"]}',
    ],
)
def test_load_malformed(db_path, store, content):
    db_path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        store.load()


def test_save_to_missing_folder(tmp_path):
    store = JsonFileStore(str(tmp_path / "missing" / "database.json"))
    with pytest.raises(StorageError):
        store.save(Database())


def test_init_db_creates_file(tmp_path):
    store = JsonFileStore(str(tmp_path / "nested" / "database.json"))
    assert not store.exists()

    store.init_db()

    assert store.exists()
    assert store.load().users == []


def test_init_db_keeps_existing_data(store):
    store.save(Database(users=[_user()]))
    store.init_db()
    assert len(store.load().users) == 1


def test_in_memory_store_returns_copies():
    store = InMemoryStore(Database(users=[_user()]))

    db = store.load()
    db.users[0].hobbies.append("golf")
    db.users.append(_user(username="bob"))

    fresh = store.load()
    assert [u.username for u in fresh.users] == ["alice"]
    assert fresh.users[0].hobbies == ["chess"]

    store.save(db)
    assert len(store.load().users) == 2


def test_save_of_load_keeps_unknown_keys(store, db_path):
    document = {
        "users": [dict(_user().to_dict(), email="a@b", tags=["x"])],
        "meta": {"created": "2024-01-01"},
    }
    db_path.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    before = db_path.read_bytes()

    db = store.load()
    assert db.users[0].extra == {"email": "a@b", "tags": ["x"]}
    assert db.extra == {"meta": {"created": "2024-01-01"}}

    store.save(db)

    assert db_path.read_bytes() == before
