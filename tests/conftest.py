import json
import logging
from pathlib import Path

import pytest

SCHEMA_DIR = Path(__file__).parent / "schemas"

ADDRESS_ID = "https://example.com/address.schema.json"
USER_ID = "https://example.com/user-profile.schema.json"


def load_json(name: str):
    with open(SCHEMA_DIR / name, encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def address():
    return load_json("address.schema.json")


@pytest.fixture
def user_profile():
    return load_json("user-profile.schema.json")


@pytest.fixture
def profile_set(address, user_profile):
    """Address first, user profile second; the profile $refs the address."""
    return [address, user_profile]


@pytest.fixture
def valid_user():
    return {
        "username": "jdoe",
        "email": "jdoe@example.com",
        "address": {"locality": "Nagoya", "region": "Aichi", "countryName": "Japan"},
    }


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
