"""Shared fixtures for text_lines tests."""

import pytest

from text_lines.api import create_app


@pytest.fixture
def app():
    """Flask app in testing mode."""
    application = create_app()
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()
