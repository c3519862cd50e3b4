import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def upload_dir(tmp_path_factory):
    """Uploaded images go to a throwaway directory for the whole session."""
    path = tmp_path_factory.mktemp("uploads")
    os.environ["UPLOAD_DIR"] = str(path)
    os.environ["PUBLIC_DIR"] = str(tmp_path_factory.mktemp("public"))

    from store.config import get_settings

    get_settings.cache_clear()
    return path


@pytest.fixture(scope="session")
def _store_domain(request, upload_dir):
    """Initialize the store domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from store.domain import store

    store.init()
    return store


@pytest.fixture(scope="session", autouse=True)
def setup_db(_store_domain):
    from store.utils.db import drop_db, setup_db

    setup_db(_store_domain)

    yield

    drop_db(_store_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_store_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _store_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def create_user():
    """Register a user through the command pipeline and return its id."""
    from protean import current_domain

    from store.user.registration import RegisterUser

    def _create(username="jane", email=None, password="s3cret-pass", is_admin=False):
        return current_domain.process(
            RegisterUser(
                username=username,
                email=email or f"{username}@example.com",
                password=password,
                is_admin=is_admin,
            ),
            asynchronous=False,
        )

    return _create


@pytest.fixture()
def create_product():
    """Add a catalogue product through the command pipeline and return its id."""
    import json

    from protean import current_domain

    from store.product.creation import CreateProduct

    def _create(name="Classic Tee", price=19.99, stock_quantity=100, category="unisex", **overrides):
        fields = {
            "name": name,
            "description": f"{name} in soft cotton",
            "price": price,
            "category": category,
            "sizes": json.dumps(["S", "M", "L"]),
            "colors": json.dumps(["Black"]),
            "stock_quantity": stock_quantity,
        }
        fields.update(overrides)
        return current_domain.process(CreateProduct(**fields), asynchronous=False)

    return _create
