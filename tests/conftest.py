"""
Pytest configuration shared by unit and integration tests.

Provides fixtures for building small document trees and keeps the
AppConfig singleton from leaking between tests.
"""

import pytest


@pytest.fixture(autouse=True, scope="function")
def reset_config_singleton(monkeypatch):
    """
    Clear the cached AppConfig around every test.

    Also removes XML_NODE_SEARCH_* variables from the environment so a
    developer's shell settings cannot change test outcomes.
    """
    import os
    from xml_node_search.config import reset_app_config

    for key in list(os.environ):
        if key.upper().startswith('XML_NODE_SEARCH_'):
            monkeypatch.delenv(key, raising=False)

    reset_app_config()
    yield
    reset_app_config()


@pytest.fixture
def make_document(tmp_path):
    """Factory writing a UTF-8 document below tmp_path/docs."""
    docs = tmp_path / "docs"
    docs.mkdir()

    def _make(relative_path: str, content: str):
        path = docs / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path

    _make.root = docs
    return _make
