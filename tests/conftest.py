from __future__ import annotations

import importlib

import pytest

from src.looply.looply.container import build_container
from src.looply.looply.main import create_app
from src.looply.looply.storage.memory_store import InMemoryKeyValueStore



@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def container(store):
    return build_container(store=store)


@pytest.fixture
def app():
    settings = importlib.import_module("config.testing")
    return create_app(settings)


@pytest.fixture
def client(app):
    return app.test_client()
