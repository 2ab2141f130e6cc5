"""Tests for the project-wide API exception handler."""

from rest_framework import exceptions, status

from config.exceptions import api_exception_handler


def test_dict_body_gets_status_code():
    response = api_exception_handler(exceptions.NotFound(), {})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.data['status_code'] == 404
    assert 'detail' in response.data


def test_field_errors_keep_their_keys():
    exc = exceptions.ValidationError({'title': ['required']})

    response = api_exception_handler(exc, {})

    assert response.data['title'] == ['required']
    assert response.data['status_code'] == 400


def test_list_body_is_wrapped():
    exc = exceptions.ValidationError(['first', 'second'])

    response = api_exception_handler(exc, {})

    assert response.data == {'detail': ['first', 'second'], 'status_code': 400}


def test_unhandled_exception_is_left_to_django():
    assert api_exception_handler(ValueError('boom'), {}) is None
