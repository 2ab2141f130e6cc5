"""Shared fixtures for the book API tests."""

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.books.models import Book


@pytest.fixture
def api_client():
    """Anonymous API client (read-only access)."""
    return APIClient()


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username='reader', password='pass-1234-word')


@pytest.fixture
def auth_client(user):
    """API client logged in as a regular user (write access)."""
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def book_factory(db):
    """Create books with sensible defaults; override any field by keyword."""
    counter = {'n': 0}

    def _create(**kwargs):
        counter['n'] += 1
        defaults = {
            'title': f'Book {counter["n"]}',
            'author': 'Author',
            'published_year': 2020,
            'is_available': True,
        }
        defaults.update(kwargs)
        return Book.objects.create(**defaults)

    return _create


@pytest.fixture
def book(book_factory):
    return book_factory(title='Django for APIs', author='William S. Vincent', published_year=2022)
