"""Shared fixtures for the job board tests."""

import json
import os

# Keep tests off the on-disk database and away from any real Gemini key
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("GEMINI_API_KEY", "")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest

from jobboard.core.storage import MemoryStorage
from jobboard.models.account import UserRole
from jobboard.services.store import DomainStore

ADMIN_EMAIL = "root@jobboard.test"
ADMIN_PASSWORD = "Sup3r!"


def seed_accounts(storage, *accounts, prefix="jb_"):
    """Write stored accounts straight into storage, as a previous session would"""
    storage.set_item(f"{prefix}all_users", json.dumps(list(accounts)))


def make_store(storage, **kwargs):
    kwargs.setdefault("admin_email", ADMIN_EMAIL)
    kwargs.setdefault("admin_password", ADMIN_PASSWORD)
    kwargs.setdefault("admin_name", "ROOT ADMIN")
    kwargs.setdefault("key_prefix", "jb_")
    kwargs.setdefault("seed_demo_jobs", True)
    return DomainStore(storage, **kwargs)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return make_store(storage)


@pytest.fixture
def seeded_storage(storage):
    """Storage that already knows the demo employers e1/e2"""
    seed_accounts(
        storage,
        {"id": "e1", "email": "hr@techcorp.test", "role": "EMPLOYER",
         "name": "TechCorp HR", "companyName": "TechCorp", "password": "pw1"},
        {"id": "e2", "email": "hr@finstream.test", "role": "EMPLOYER",
         "name": "FinStream HR", "companyName": "FinStream", "password": "pw2"},
    )
    return storage


@pytest.fixture
def seeded_store(seeded_storage):
    return make_store(seeded_storage)


@pytest.fixture
def asha(seeded_store):
    """Seeded store with candidate Asha registered and logged in"""
    result = seeded_store.register("Asha", "Asha@Example.com", "secret", UserRole.CANDIDATE)
    assert result
    return result.entity
