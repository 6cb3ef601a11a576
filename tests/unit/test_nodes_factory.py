"""Tests for NodeFactory casting."""
import json
from datetime import datetime, timezone

import pytest

from fbgraph.core.exceptions import DecodingError
from fbgraph.core.api.response import GraphResponse
from fbgraph.core.nodes import (
    NodeFactory,
    GraphNode,
    GraphEdge,
    GraphUser,
    GraphPage,
    GraphLocation,
    GraphPicture,
    GraphAlbum,
    GraphEvent,
    GraphGroup,
    GraphCoverPhoto,
    GraphAchievement,
    GraphApplication,
    GraphSessionInfo,
    Birthday,
)
from fbgraph.core.nodes.registry import registry, VariantRegistry


class GraphWidget(GraphNode):
    graph_object_map = {'owner': 'GraphUser'}


@pytest.fixture
def factory_for(request_factory):
    def make(body, method='GET'):
        response = GraphResponse(request_factory(method), json.dumps(body), 200)
        return NodeFactory(response)
    return make


class TestIsCastableAsEdge:
    """Test suite for the edge shape check."""

    def test_empty_list(self):
        assert NodeFactory.is_castable_as_edge([]) is True

    def test_list_of_values(self):
        assert NodeFactory.is_castable_as_edge(['a', 'b']) is True

    def test_mapping_with_names(self):
        assert NodeFactory.is_castable_as_edge({'k': 'v'}) is False

    def test_empty_mapping(self):
        assert NodeFactory.is_castable_as_edge({}) is True

    def test_mapping_with_sequential_keys(self):
        assert NodeFactory.is_castable_as_edge({0: 'a', 1: 'b'}) is True
        assert NodeFactory.is_castable_as_edge({'0': 'a', '1': 'b'}) is True

    def test_mapping_with_gaps(self):
        assert NodeFactory.is_castable_as_edge({0: 'a', 2: 'b'}) is False

    @pytest.mark.parametrize("value", ['foo', 1, None])
    def test_scalars(self, value):
        assert NodeFactory.is_castable_as_edge(value) is False


class TestMakeGraphNode:
    """Test suite for node casting."""

    def test_simple_node(self, factory_for):
        node = factory_for({'id': '123', 'name': 'Foo McBar'}).make_graph_node()

        assert type(node) is GraphNode
        assert node.get_field('id') == '123'
        assert node.get_field('name') == 'Foo McBar'
        assert node.get_field('missing', 'default') == 'default'

    def test_data_object_is_merged_into_node(self, factory_for):
        """Test a node nested under data is flattened with its siblings."""
        node = factory_for({'id': '123', 'foo': 'bar', 'data': {'name': 'X'}}).make_graph_node()

        assert node.as_dict() == {'id': '123', 'foo': 'bar', 'name': 'X'}

    def test_inner_data_fields_win(self, factory_for):
        node = factory_for({'id': '1', 'data': {'id': '2'}}).make_graph_node()

        assert node.get_field('id') == '2'

    def test_list_response_is_rejected(self, factory_for):
        with pytest.raises(DecodingError):
            factory_for([{'id': '1'}]).make_graph_node()

    def test_edge_shaped_response_is_rejected(self, factory_for):
        with pytest.raises(DecodingError) as exc_info:
            factory_for({'data': [{'id': '1'}]}).make_graph_node()

        assert exc_info.value.code == 620

    def test_nested_unmapped_objects_become_nodes(self, factory_for):
        node = factory_for({'id': '1', 'meta': {'a': 1}}).make_graph_node()

        assert isinstance(node.get_field('meta'), GraphNode)
        assert node.get_field('meta').get_field('a') == 1

    def test_nested_list_becomes_edge_with_parent(self, factory_for):
        """Test nested edges remember their parent endpoint."""
        body = {
            'id': '123',
            'photos': {
                'data': [{'id': '1'}, {'id': '2'}],
                'paging': {'cursors': {'after': 'abc', 'before': 'xyz'}},
            },
        }

        node = factory_for(body).make_graph_node()
        photos = node.get_field('photos')

        assert isinstance(photos, GraphEdge)
        assert len(photos) == 2
        assert photos.get_parent_graph_edge() == '/123/photos'
        assert photos.get_next_cursor() == 'abc'
        assert photos.get_previous_cursor() == 'xyz'

    def test_scalar_lists_are_kept(self, factory_for):
        node = factory_for({'id': '1', 'tags': ['a', 'b']}).make_graph_node()

        assert node.get_field('tags').as_list() == ['a', 'b']

    def test_date_fields_are_cast(self, factory_for):
        node = factory_for({'id': '1', 'created_time': 1405547020, 'birthday': '1984'}).make_graph_node()

        assert node.get_field('created_time') == datetime(2014, 7, 16, 21, 43, 40, tzinfo=timezone.utc)
        birthday = node.get_field('birthday')
        assert isinstance(birthday, Birthday)
        assert birthday.has_year() is True
        assert birthday.has_date() is False

    def test_variant_by_class(self, factory_for):
        node = factory_for({'id': '1', 'name': 'Foo'}).make_graph_node(GraphUser)

        assert isinstance(node, GraphUser)
        assert node.name == 'Foo'

    def test_variant_by_registered_name(self, factory_for):
        node = factory_for({'id': '1'}).make_graph_node('GraphPage')

        assert isinstance(node, GraphPage)

    def test_variant_by_import_path(self, factory_for):
        node = factory_for({'id': '1'}).make_graph_node('fbgraph.core.nodes.GraphAlbum')

        assert isinstance(node, GraphAlbum)

    def test_custom_variant_is_registered(self, factory_for):
        """Test subclasses defined by users resolve by name and cast their fields."""
        node = factory_for({'id': '1', 'owner': {'id': '2', 'name': 'Foo'}}).make_graph_node('GraphWidget')

        assert isinstance(node, GraphWidget)
        assert isinstance(node.get_field('owner'), GraphUser)

    @pytest.mark.parametrize("variant", ['GraphNothing', 'no.such.module.Node', dict, 42])
    def test_invalid_variant(self, factory_for, variant):
        with pytest.raises(DecodingError):
            factory_for({'id': '1'}).make_graph_node(variant)

    def test_decode_as_node_alias(self, factory_for):
        assert factory_for({'id': '1'}).decode_as_node().get_field('id') == '1'

    def test_unparseable_date_raises_decoding_error(self, factory_for):
        with pytest.raises(DecodingError):
            factory_for({'data': [{'id': '1', 'updated_time': '2014-02-30'}]}).make_graph_edge()


class TestVariantRegistry:
    """Test suite for variant name resolution."""

    def test_same_name_does_not_replace_catalog_variant(self, factory_for):
        """Test a user class named like a catalog variant leaves field maps alone."""
        class GraphPage(GraphNode):
            pass

        assert GraphUser.get_object_map()['hometown'] is not GraphPage
        assert GraphUser.get_object_map()['hometown'].__module__ == 'fbgraph.core.nodes.catalog'
        assert not isinstance(factory_for({'id': '1'}).make_graph_node('GraphPage'), GraphPage)

    def test_classes_are_kept_under_full_path(self):
        class GraphGadget(GraphNode):
            pass

        assert registry.get(VariantRegistry.full_name(GraphGadget)) is GraphGadget
        assert registry.get('GraphGadget') is GraphGadget

    def test_first_short_name_wins(self):
        local = VariantRegistry()
        first = type('GraphThing', (object,), {})
        second = type('GraphThing', (object,), {'__module__': 'elsewhere'})

        local.register(first)
        local.register(second)

        assert local.resolve('GraphThing') is first
        assert local.resolve('elsewhere.GraphThing') is second


class TestMakeGraphEdge:
    """Test suite for edge casting."""

    def test_data_list_with_paging(self, factory_for):
        """Test a paged data list becomes an edge of nodes."""
        body = {
            'data': [{'id': '123'}, {'id': '1337'}],
            'paging': {'next': 'N', 'previous': 'P'},
        }

        edge = factory_for(body).make_graph_edge()

        assert isinstance(edge, GraphEdge)
        assert len(edge) == 2
        assert all(isinstance(item, GraphNode) for item in edge)
        assert [item.get_field('id') for item in edge] == ['123', '1337']
        assert edge.get_meta_data()['paging'] == {'next': 'N', 'previous': 'P'}

    def test_plain_list_response(self, factory_for):
        edge = factory_for([{'id': '1'}, {'id': '2'}]).make_graph_edge()

        assert [item.get_field('id') for item in edge] == ['1', '2']
        assert edge.get_meta_data() == {}

    def test_items_cast_to_variant(self, factory_for):
        edge = factory_for({'data': [{'id': '1', 'name': 'Foo'}]}).make_graph_edge('GraphUser')

        assert isinstance(edge[0], GraphUser)
        assert edge.variant is GraphUser

    def test_non_prefixed_variant_must_be_import_path(self, factory_for):
        factory = factory_for({'data': [{'id': '1'}]})

        with pytest.raises(DecodingError):
            factory.make_graph_edge('GraphUser', auto_prefix=False)

        edge = factory.make_graph_edge('fbgraph.core.nodes.GraphUser', auto_prefix=False)
        assert isinstance(edge[0], GraphUser)

    def test_summary_total_count(self, factory_for):
        edge = factory_for({'data': [], 'summary': {'total_count': 42}}).make_graph_edge()

        assert len(edge) == 0
        assert edge.get_total_count() == 42

    def test_node_response_is_rejected(self, factory_for):
        with pytest.raises(DecodingError):
            factory_for({'id': '1'}).make_graph_edge()

    def test_data_object_is_rejected(self, factory_for):
        with pytest.raises(DecodingError):
            factory_for({'data': {'name': 'X'}}).make_graph_edge()

    def test_scalar_and_nested_list_items(self, factory_for):
        edge = factory_for({'data': ['a', ['b', 'c']]}).make_graph_edge()

        assert edge[0] == 'a'
        assert isinstance(edge[1], GraphEdge)
        assert edge[1].as_list() == ['b', 'c']

    def test_non_array_response(self, request_factory):
        response = GraphResponse(request_factory(), 'true', 200)
        response.decoded_body = 'oops'

        with pytest.raises(DecodingError):
            NodeFactory(response).make_graph_edge()


class TestTypedVariants:
    """Test suite for the node catalog field maps."""

    def test_user(self, factory_for):
        body = {
            'id': '123',
            'name': 'Foo McBar',
            'hometown': {'id': '1', 'name': 'Springfield'},
            'location': {'id': '2', 'name': 'Shelbyville'},
            'significant_other': {'id': '3', 'name': 'Bar'},
            'picture': {'data': {'url': 'http://pic', 'is_silhouette': False}},
            'birthday': '03/29/1984',
        }

        user = factory_for(body).make_graph_user()

        assert isinstance(user, GraphUser)
        assert isinstance(user.hometown, GraphPage)
        assert isinstance(user.location, GraphPage)
        assert isinstance(user.significant_other, GraphUser)
        assert isinstance(user.picture, GraphPicture)
        assert user.picture.url == 'http://pic'
        assert user.picture.is_silhouette is False
        assert user.birthday.has_date() and user.birthday.has_year()

    def test_page(self, factory_for):
        body = {
            'id': '1',
            'best_page': {'id': '2'},
            'global_brand_parent_page': {'id': '3'},
            'location': {'city': 'Menlo Park', 'latitude': 37.4},
            'cover': {'id': '4', 'source': 'http://cover'},
            'picture': {'data': {'url': 'http://pic'}},
        }

        page = factory_for(body).make_graph_page()

        assert isinstance(page.best_page, GraphPage)
        assert isinstance(page.global_brand_parent_page, GraphPage)
        assert isinstance(page.location, GraphLocation)
        assert page.location.city == 'Menlo Park'
        assert isinstance(page.cover, GraphCoverPhoto)
        assert isinstance(page.picture, GraphPicture)

    def test_album(self, factory_for):
        album = factory_for({'id': '1', 'from': {'id': '2'}, 'place': {'id': '3'}}).make_graph_album()

        assert isinstance(album.from_, GraphUser)
        assert isinstance(album.place, GraphPage)

    def test_achievement(self, factory_for):
        body = {'id': '1', 'from': {'id': '2'}, 'application': {'id': '3'}, 'publish_time': 1405547020}

        achievement = factory_for(body).make_graph_achievement()

        assert isinstance(achievement, GraphAchievement)
        assert achievement.type == 'game.achievement'
        assert isinstance(achievement.from_, GraphUser)
        assert isinstance(achievement.application, GraphApplication)
        assert isinstance(achievement.publish_time, datetime)

    def test_event(self, factory_for):
        body = {
            'id': '1',
            'cover': {'id': '2'},
            'place': {'id': '3'},
            'picture': {'data': {'url': 'u'}},
            'parent_group': {'id': '4'},
            'start_time': '2014-07-15T03:44:53+0000',
        }

        event = factory_for(body).make_graph_event()

        assert isinstance(event.cover, GraphCoverPhoto)
        assert isinstance(event.place, GraphPage)
        assert isinstance(event.picture, GraphPicture)
        assert isinstance(event.parent_group, GraphGroup)
        assert event.start_time == datetime(2014, 7, 15, 3, 44, 53, tzinfo=timezone.utc)

    def test_group(self, factory_for):
        group = factory_for({'id': '1', 'cover': {'id': '2'}, 'venue': {'city': 'X'}}).make_graph_group()

        assert isinstance(group.cover, GraphCoverPhoto)
        assert isinstance(group.venue, GraphLocation)

    def test_session_info(self, factory_for):
        body = {'app_id': '123', 'is_valid': True, 'expires_at': 1405547020, 'scopes': ['email']}

        info = factory_for(body).make_graph_session_info()

        assert isinstance(info, GraphSessionInfo)
        assert info.is_valid is True
        assert info.scopes.as_list() == ['email']
        assert info.expires_at.year == 2014
