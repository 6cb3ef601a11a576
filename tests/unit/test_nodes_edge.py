"""Tests for GraphEdge pagination."""
import json

import pytest

from fbgraph.core.exceptions import DecodingError
from fbgraph.core.nodes import GraphEdge, GraphNode

NEXT_URL = 'https://graph.facebook.com/v2.10/998899/photos?pretty=0&limit=25&after=foo_after_cursor'
PREVIOUS_URL = 'https://graph.facebook.com/v2.10/998899/photos?pretty=0&limit=25&before=foo_before_cursor'

PAGING = {
    'cursors': {'after': 'foo_after_cursor', 'before': 'foo_before_cursor'},
    'next': NEXT_URL,
    'previous': PREVIOUS_URL,
}


@pytest.fixture
def get_request(request_factory):
    return request_factory('GET', '/123/photos', {'fields': 'id'})


class TestCursors:
    """Test suite for cursor accessors."""

    def test_cursors(self, get_request):
        edge = GraphEdge(get_request, [], {'paging': PAGING})

        assert edge.get_next_cursor() == 'foo_after_cursor'
        assert edge.get_previous_cursor() == 'foo_before_cursor'

    def test_no_paging(self, get_request):
        edge = GraphEdge(get_request, [])

        assert edge.get_next_cursor() is None
        assert edge.get_previous_cursor() is None
        assert edge.get_total_count() is None


class TestPaginationUrl:
    """Test suite for pagination URL resolution."""

    def test_paging_urls_are_made_relative(self, get_request):
        edge = GraphEdge(get_request, [], {'paging': PAGING})

        assert edge.get_pagination_url('next') == '/998899/photos?pretty=0&limit=25&after=foo_after_cursor'
        assert edge.get_pagination_url('previous') == '/998899/photos?pretty=0&limit=25&before=foo_before_cursor'

    def test_parent_endpoint_fallback(self, get_request):
        """Test nested edges page from their parent endpoint and cursor."""
        paging = {'cursors': {'after': 'abc', 'before': 'xyz'}}
        edge = GraphEdge(get_request, [], {'paging': paging}, '/1234567890/likes')

        assert edge.get_pagination_url('next') == '/1234567890/likes?after=abc'
        assert edge.get_pagination_url('previous') == '/1234567890/likes?before=xyz'

    def test_no_url_without_cursor_or_parent(self, get_request):
        edge = GraphEdge(get_request, [], {'paging': {'cursors': {'after': 'abc'}}})

        assert edge.get_pagination_url('next') is None
        assert edge.get_next_page_request() is None

    def test_non_get_request_cannot_paginate(self, request_factory):
        edge = GraphEdge(request_factory('POST', '/123/photos'), [], {'paging': PAGING})

        with pytest.raises(DecodingError) as exc_info:
            edge.get_next_page_request()

        assert exc_info.value.code == 720


class TestPaginationRequest:
    """Test suite for next/previous page requests."""

    def test_next_page_request(self, get_request):
        edge = GraphEdge(get_request, [], {'paging': PAGING})

        next_request = edge.get_next_page_request()

        assert next_request is not get_request
        assert next_request.method == 'GET'
        assert next_request.endpoint == '/998899/photos?pretty=0&limit=25&after=foo_after_cursor'
        assert next_request.access_token == get_request.access_token
        assert get_request.endpoint == '/123/photos'

    def test_page_request_does_not_share_params(self, get_request):
        edge = GraphEdge(get_request, [], {'paging': PAGING})

        previous_request = edge.get_previous_page_request()
        previous_request.set_params({'limit': 10})

        assert 'limit' not in get_request.params

    def test_token_in_paging_url_is_stripped(self, get_request):
        paging = {'next': NEXT_URL + '&access_token=foo_token'}
        edge = GraphEdge(get_request, [], {'paging': paging})

        next_request = edge.get_next_page_request()

        assert 'access_token' not in next_request.endpoint
        assert next_request.access_token == 'foo_token'


class TestEdgeCollection:
    """Test suite for edge list behaviour."""

    def test_map_keeps_metadata(self, get_request):
        edge = GraphEdge(get_request, [GraphNode({'id': '1'}), GraphNode({'id': '2'})],
                         {'summary': {'total_count': 2}}, '/1/photos')

        mapped = edge.map(lambda node, index: node.get_field('id') + str(index))

        assert isinstance(mapped, GraphEdge)
        assert mapped.as_list() == ['10', '21']
        assert mapped.get_total_count() == 2
        assert mapped.get_parent_graph_edge() == '/1/photos'

    def test_as_list_and_json(self, get_request):
        edge = GraphEdge(get_request, [GraphNode({'id': '1', 'created_time': 1405547020})])

        assert edge.as_list() == [{'id': '1', 'created_time': edge[0].get_field('created_time')}]
        assert json.loads(edge.as_json()) == [{'id': '1', 'created_time': '2014-07-16T21:43:40+00:00'}]

    def test_default_variant(self, get_request):
        assert GraphEdge(get_request).variant is GraphNode
