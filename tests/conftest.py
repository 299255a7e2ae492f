import json

import pytest


@pytest.fixture
def emails():
    return ["one@example.com", "two@example.com", "three@example.com"]


@pytest.fixture
def raw_items():
    return [
        {"name": "coffee", "amount": 2, "price": 25},
        {"name": "bread", "amount": 2, "price": 25},
    ]


@pytest.fixture
def mixed_raw_items():
    return [
        {"name": "dummy", "amount": 1, "price": 120},
        {"name": "dummy", "amount": 1},
    ]


@pytest.fixture
def purchase_file(tmp_path, raw_items, emails):
    path = tmp_path / "purchase.json"
    path.write_text(
        json.dumps({"items": raw_items, "recipients": emails + [emails[0]]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    # Keep a developer's .env files and SPLIT_IT_* variables out of the tests.
    monkeypatch.chdir(tmp_path)
    for key in ("SPLIT_IT_MINOR_UNIT_SCALE", "SPLIT_IT_LOG_LEVEL", "SPLIT_IT_SHOW_BANNER", "SPLIT_IT_CONFIG_DIR"):
        monkeypatch.delenv(key, raising=False)
