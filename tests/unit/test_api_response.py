"""Tests for GraphResponse decoding and error classification."""
import json

import pytest

from fbgraph.core.api.response import GraphResponse
from fbgraph.core.api.errors import (
    ResponseError,
    AuthenticationError,
    AuthorizationError,
    ClientError,
    ServerError,
    ThrottleError,
    OtherError,
    ResumableUploadError,
)
from fbgraph.core.nodes import GraphNode, GraphUser

from fakes import error_body


def response_for(body, request=None, status=200, headers=None):
    raw = body if isinstance(body, str) else json.dumps(body)
    return GraphResponse(request, raw, status, headers)


class TestDecodeBody:
    """Test suite for body decoding."""

    def test_json_object(self):
        assert response_for({'id': '123'}).get_decoded_body() == {'id': '123'}

    def test_json_list(self):
        assert response_for([1, 2]).get_decoded_body() == [1, 2]

    @pytest.mark.parametrize("raw,expected", [('true', True), ('false', False)])
    def test_boolean(self, raw, expected):
        assert response_for(raw).get_decoded_body() == {'success': expected}

    def test_number_is_id(self):
        assert response_for('1337').get_decoded_body() == {'id': 1337}

    def test_digit_string_is_id(self):
        assert response_for('"1337"').get_decoded_body() == {'id': '1337'}

    def test_url_encoded_fallback(self):
        body = response_for('access_token=foo_token&expires=5183999').get_decoded_body()

        assert body == {'access_token': 'foo_token', 'expires': '5183999'}

    def test_empty_body(self):
        response = response_for('')

        assert response.get_body() is None
        assert response.get_decoded_body() == {}
        assert response.is_error() is False

    def test_other_json_scalars(self):
        assert response_for('"foo"').get_decoded_body() == {}


class TestResponseAccessors:
    """Test suite for response accessors."""

    def test_headers(self, request_factory):
        response = response_for({'id': '1'}, request_factory(), 200,
                                {'etag': '"abc"', 'facebook-api-version': 'v2.10'})

        assert response.get_etag() == '"abc"'
        assert response.get_graph_version() == 'v2.10'
        assert response.get_header('ETAG') == '"abc"'
        assert response.get_header('missing') is None

    def test_request_passthrough(self, app, request_factory):
        request = request_factory()
        response = response_for({'id': '1'}, request)

        assert response.get_request() is request
        assert response.get_app() is app
        assert response.get_access_token() == 'foo_token'
        assert response.get_app_secret_proof() == request.get_app_secret_proof()

    def test_node_accessors(self, request_factory):
        response = response_for({'id': '1', 'name': 'Foo'}, request_factory())

        assert type(response.get_graph_node()) is GraphNode
        assert isinstance(response.get_graph_user(), GraphUser)

    def test_edge_accessor(self, request_factory):
        response = response_for({'data': [{'id': '1'}]}, request_factory())

        edge = response.get_graph_edge()

        assert edge.request is response.get_request()
        assert edge[0].get_field('id') == '1'


class TestErrorClassification:
    """Test suite for ResponseError.create."""

    @pytest.mark.parametrize("code,subcode,expected", [
        (100, None, AuthenticationError),
        (102, None, AuthenticationError),
        (190, None, AuthenticationError),
        (190, 463, AuthenticationError),
        (999, 458, AuthenticationError),
        (6000, 1363030, ResumableUploadError),
        (6000, 1363019, ResumableUploadError),
        (6000, 1363033, ResumableUploadError),
        (6000, 1363021, ResumableUploadError),
        (6000, 1363041, ResumableUploadError),
        (1, None, ServerError),
        (2, None, ServerError),
        (4, None, ThrottleError),
        (17, None, ThrottleError),
        (32, None, ThrottleError),
        (341, None, ThrottleError),
        (613, None, ThrottleError),
        (506, None, ClientError),
        (10, None, AuthorizationError),
        (200, None, AuthorizationError),
        (299, None, AuthorizationError),
    ])
    def test_classification(self, code, subcode, expected):
        response = response_for(error_body(code, subcode, error_type='GraphMethodException'), status=400)

        assert response.is_error() is True
        assert type(response.thrown_exception) is expected

    def test_oauth_exception_type_is_authorization(self):
        response = response_for(error_body(12345, error_type='OAuthException'), status=400)

        assert type(response.thrown_exception) is AuthorizationError

    def test_unknown_is_other(self):
        response = response_for(error_body(12345, error_type='GraphMethodException'), status=400)

        assert type(response.thrown_exception) is OtherError

    def test_resumable_error_with_range(self):
        """Test the corrected range is read from error_data."""
        body = error_body(6001, 1363037, error_data={'start_offset': 40, 'end_offset': 50})

        error = response_for(body, status=400).thrown_exception

        assert isinstance(error, ResumableUploadError)
        assert error.has_range() is True
        assert (error.start_offset, error.end_offset) == (40, 50)

    def test_resumable_error_without_range(self):
        error = response_for(error_body(6000, 1363019), status=400).thrown_exception

        assert error.has_range() is False
        assert error.start_offset is None

    def test_error_attributes(self):
        body = error_body(190, 463, message='Error validating access token', error_type='OAuthException')
        response = response_for(body, status=401)

        error = response.thrown_exception

        assert isinstance(error, ResponseError)
        assert str(error) == 'Error validating access token'
        assert error.code == 190
        assert error.subcode == 463
        assert error.error_type == 'OAuthException'
        assert error.http_status_code == 401
        assert error.response is response
        assert error.raw_response == response.get_body()
        assert error.response_data == body

    def test_throw_exception(self):
        response = response_for(error_body(1), status=500)

        with pytest.raises(ServerError):
            response.throw_exception()

    def test_non_object_error(self):
        response = response_for({'error': 'nope'}, status=400)

        assert type(response.thrown_exception) is OtherError
        assert response.thrown_exception.code == -1

    def test_no_exception_on_success(self):
        response = response_for({'id': '1'})

        assert response.thrown_exception is None
        response.throw_exception()
