"""Tests for the application factory, config and utility endpoints."""

import pytest

from bookshelf import create_app
from config.config import config, DevelopmentConfig, ProductionConfig, TestingConfig


def test_config_map():
    assert config["default"] is DevelopmentConfig
    assert config["production"] is ProductionConfig
    assert config["testing"] is TestingConfig


def test_error_details_only_exposed_in_development():
    assert DevelopmentConfig.EXPOSE_ERROR_DETAILS is True
    assert ProductionConfig.EXPOSE_ERROR_DETAILS is False
    assert TestingConfig.EXPOSE_ERROR_DETAILS is False


def test_testing_config(app):
    assert app.testing
    assert app.config["WTF_CSRF_ENABLED"] is False
    assert app.config["SQLALCHEMY_DATABASE_URI"] == "sqlite://"


def test_unknown_config_name():
    with pytest.raises(KeyError):
        create_app("staging")


def test_default_store_is_sqlalchemy(app):
    from bookshelf.services.collection_store import SQLAlchemyCollectionStore

    assert isinstance(app.extensions["collection_store"], SQLAlchemyCollectionStore)


def test_health(client):
    resp = client.get("/api/health")

    assert resp.status_code == 200
    assert resp.get_json()["status"] == "healthy"


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Not found"


def test_unsupported_method_is_json_405(auth_client):
    resp = auth_client.put("/api/collection")

    assert resp.status_code == 405
    assert resp.get_json() == {"error": "Method not allowed"}


def test_api_blueprint_defers_errors_to_app_handlers(app, client):
    resp = client.get("/api/health/nope")

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Not found"}
    assert not any(app.error_handler_spec.get("api", {}).values())
