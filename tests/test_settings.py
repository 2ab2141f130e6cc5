"""Tests for the production settings module."""

import importlib
import sys

import pytest

from config.settings import base

PRODUCTION = 'config.settings.production'


@pytest.fixture
def load_production(monkeypatch):
    """production은 base의 MIDDLEWARE 리스트를 수정하므로 복사본 위에서 로드"""
    monkeypatch.setattr(base, 'MIDDLEWARE', list(base.MIDDLEWARE))
    monkeypatch.delitem(sys.modules, PRODUCTION, raising=False)

    def load():
        module = importlib.import_module(PRODUCTION)
        sys.modules.pop(PRODUCTION, None)
        return module

    return load


def test_no_cache_or_session_backend_override(load_production, monkeypatch):
    monkeypatch.delenv('DATABASE_URL', raising=False)

    production = load_production()

    assert not hasattr(production, 'CACHES')
    assert not hasattr(production, 'SESSION_ENGINE')
    assert production.DATABASES == base.DATABASES


def test_whitenoise_follows_security_middleware(load_production):
    production = load_production()

    assert production.MIDDLEWARE[1] == 'whitenoise.middleware.WhiteNoiseMiddleware'
    assert production.STORAGES['staticfiles']['BACKEND'] == (
        'whitenoise.storage.CompressedManifestStaticFilesStorage'
    )


def test_database_url_gets_connection_reuse(load_production, monkeypatch):
    monkeypatch.setenv('DATABASE_URL', 'postgres://books:secret@db:5432/books')
    monkeypatch.setenv('DB_CONN_MAX_AGE', '120')

    production = load_production()

    database = production.DATABASES['default']
    assert database['NAME'] == 'books'
    assert database['HOST'] == 'db'
    assert database['CONN_MAX_AGE'] == 120
    assert database['CONN_HEALTH_CHECKS'] is True


def test_book_logs_reach_console(load_production, monkeypatch):
    monkeypatch.setenv('APP_LOG_LEVEL', 'DEBUG')

    production = load_production()

    assert production.LOGGING['loggers']['apps']['level'] == 'DEBUG'
    assert production.LOGGING['loggers']['apps']['handlers'] == ['console']
