"""CRUD behaviour shared by every view style.

The same requests are sent to the APIView, GenericAPIView + mixin,
concrete generic view and ModelViewSet endpoints; all of them must agree.
"""

import logging

import pytest

from apps.books.models import Book

pytestmark = pytest.mark.django_db

STYLE_PREFIXES = [
    '/api/apiview/books/',
    '/api/generic/books/',
    '/api/concrete/books/',
    '/api/books/',
]

NEW_BOOK = {
    'title': 'Two Scoops of Django',
    'author': 'Daniel Roy Greenfeld',
    'published_year': 2020,
}


@pytest.fixture(params=STYLE_PREFIXES, ids=['apiview', 'generic', 'concrete', 'viewset'])
def prefix(request):
    return request.param


class TestList:
    def test_paginated_envelope(self, api_client, prefix, book_factory):
        book_factory()
        book_factory()

        response = api_client.get(prefix)

        assert response.status_code == 200
        assert response.data['count'] == 2
        assert response.data['next'] is None
        assert len(response.data['results']) == 2

    def test_page_size_from_settings(self, api_client, prefix, book_factory):
        for _ in range(25):
            book_factory()

        first = api_client.get(prefix)
        second = api_client.get(prefix, {'page': 2})

        assert len(first.data['results']) == 20
        assert first.data['next'] is not None
        assert len(second.data['results']) == 5

    def test_newest_first(self, api_client, prefix, book_factory):
        older = book_factory(title='Older')
        newer = book_factory(title='Newer')

        response = api_client.get(prefix)

        assert [item['id'] for item in response.data['results']] == [newer.pk, older.pk]

    def test_search_by_title_or_author(self, api_client, prefix, book_factory):
        book_factory(title='Fluent Python', author='Luciano Ramalho')
        book_factory(title='Clean Code', author='Robert C. Martin')

        by_title = api_client.get(prefix, {'search': 'fluent'})
        by_author = api_client.get(prefix, {'search': 'martin'})

        assert [item['title'] for item in by_title.data['results']] == ['Fluent Python']
        assert [item['title'] for item in by_author.data['results']] == ['Clean Code']

    @pytest.mark.parametrize('raw, expected', [('true', True), ('false', False), ('1', True), ('0', False)])
    def test_filter_by_availability(self, api_client, prefix, book_factory, raw, expected):
        book_factory(is_available=True)
        book_factory(is_available=False)

        response = api_client.get(prefix, {'is_available': raw})

        assert response.data['count'] == 1
        assert response.data['results'][0]['is_available'] is expected

    def test_invalid_availability_filter(self, api_client, prefix):
        response = api_client.get(prefix, {'is_available': 'sometimes'})

        assert response.status_code == 400
        assert 'is_available' in response.data


class TestCreate:
    def test_create(self, auth_client, prefix):
        response = auth_client.post(prefix, NEW_BOOK)

        assert response.status_code == 201
        assert response.data['title'] == NEW_BOOK['title']
        assert response.data['is_available'] is True
        assert Book.objects.filter(title=NEW_BOOK['title']).exists()

    def test_anonymous_cannot_create(self, api_client, prefix):
        response = api_client.post(prefix, NEW_BOOK)

        assert response.status_code == 403
        assert not Book.objects.exists()

    def test_invalid_payload(self, auth_client, prefix):
        response = auth_client.post(prefix, {'title': '', 'published_year': 'abc'})

        assert response.status_code == 400
        assert {'title', 'author', 'published_year'} <= set(response.data)
        assert not Book.objects.exists()

    def test_duplicate(self, auth_client, prefix, book):
        response = auth_client.post(prefix, {
            'title': book.title, 'author': book.author, 'published_year': book.published_year,
        })

        assert response.status_code == 400
        assert 'non_field_errors' in response.data
        assert Book.objects.count() == 1

    def test_create_is_logged(self, auth_client, prefix, caplog):
        with caplog.at_level(logging.INFO, logger='apps.books'):
            response = auth_client.post(prefix, NEW_BOOK)

        assert f"pk={response.data['id']}" in caplog.text


class TestDetail:
    def test_retrieve(self, api_client, prefix, book):
        response = api_client.get(f'{prefix}{book.pk}/')

        assert response.status_code == 200
        assert response.data['id'] == book.pk
        assert response.data['author'] == book.author
        assert 'created_at' in response.data

    def test_missing_is_404(self, api_client, prefix):
        response = api_client.get(f'{prefix}999/')

        assert response.status_code == 404
        assert response.data['status_code'] == 404

    def test_put_replaces_fields(self, auth_client, prefix, book):
        payload = {
            'title': 'Django for APIs 5th',
            'author': book.author,
            'published_year': 2024,
            'is_available': False,
        }

        response = auth_client.put(f'{prefix}{book.pk}/', payload)

        assert response.status_code == 200
        book.refresh_from_db()
        assert book.title == 'Django for APIs 5th'
        assert book.published_year == 2024
        assert book.is_available is False

    def test_put_requires_all_fields(self, auth_client, prefix, book):
        response = auth_client.put(f'{prefix}{book.pk}/', {'title': 'Only title'})

        assert response.status_code == 400
        book.refresh_from_db()
        assert book.title == 'Django for APIs'

    def test_patch_updates_single_field(self, auth_client, prefix, book):
        response = auth_client.patch(f'{prefix}{book.pk}/', {'is_available': False})

        assert response.status_code == 200
        assert response.data['is_available'] is False
        book.refresh_from_db()
        assert book.title == 'Django for APIs'
        assert book.is_available is False

    def test_delete(self, auth_client, prefix, book):
        response = auth_client.delete(f'{prefix}{book.pk}/')

        assert response.status_code == 204
        assert not Book.objects.filter(pk=book.pk).exists()

    def test_anonymous_cannot_delete(self, api_client, prefix, book):
        response = api_client.delete(f'{prefix}{book.pk}/')

        assert response.status_code == 403
        assert Book.objects.filter(pk=book.pk).exists()
