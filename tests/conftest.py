import json
import random

import pytest

from services.account_service import AccountService
from services.store import JsonFileStore


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "database.json"
    path.write_text(json.dumps({"users": []}, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def store(db_path):
    return JsonFileStore(str(db_path))


@pytest.fixture
def service(store):
    return AccountService(store, rng=random.Random(1234))
