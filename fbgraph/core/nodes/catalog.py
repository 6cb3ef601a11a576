"""
Typed node variants.

Each variant declares the fields the factory should cast to other
variants. Variants are referenced by name so the order of definition
does not matter.
"""
from .node import GraphNode
from .registry import node_field


class GraphUser(GraphNode):
    graph_object_map = {
        'hometown': 'GraphPage',
        'location': 'GraphPage',
        'significant_other': 'GraphUser',
        'picture': 'GraphPicture',
    }

    id = node_field()
    name = node_field()
    first_name = node_field()
    middle_name = node_field()
    last_name = node_field()
    email = node_field()
    gender = node_field()
    link = node_field()
    birthday = node_field()
    location = node_field()
    hometown = node_field()
    significant_other = node_field()
    picture = node_field()


class GraphPage(GraphNode):
    graph_object_map = {
        'best_page': 'GraphPage',
        'global_brand_parent_page': 'GraphPage',
        'location': 'GraphLocation',
        'cover': 'GraphCoverPhoto',
        'picture': 'GraphPicture',
    }

    id = node_field()
    category = node_field()
    name = node_field()
    best_page = node_field()
    global_brand_parent_page = node_field()
    location = node_field()
    cover = node_field()
    picture = node_field()
    access_token = node_field()
    perms = node_field()
    fan_count = node_field()


class GraphAlbum(GraphNode):
    graph_object_map = {
        'from': 'GraphUser',
        'place': 'GraphPage',
    }

    id = node_field()
    can_upload = node_field()
    count = node_field()
    cover_photo = node_field()
    created_time = node_field()
    updated_time = node_field()
    description = node_field()
    from_ = node_field('from')
    place = node_field()
    link = node_field()
    location = node_field()
    name = node_field()
    privacy = node_field()
    type = node_field()


class GraphAchievement(GraphNode):
    graph_object_map = {
        'from': 'GraphUser',
        'application': 'GraphApplication',
    }

    id = node_field()
    from_ = node_field('from')
    publish_time = node_field()
    application = node_field()
    data = node_field()
    no_feed_story = node_field()

    @property
    def type(self) -> str:
        """Achievements are always ``game.achievement``."""
        return 'game.achievement'


class GraphApplication(GraphNode):
    id = node_field()


class GraphLocation(GraphNode):
    street = node_field()
    city = node_field()
    state = node_field()
    country = node_field()
    zip = node_field()
    latitude = node_field()
    longitude = node_field()


class GraphPicture(GraphNode):
    is_silhouette = node_field()
    url = node_field()
    width = node_field()
    height = node_field()


class GraphCoverPhoto(GraphNode):
    id = node_field()
    source = node_field()
    offset_x = node_field()
    offset_y = node_field()


class GraphEvent(GraphNode):
    graph_object_map = {
        'cover': 'GraphCoverPhoto',
        'place': 'GraphPage',
        'picture': 'GraphPicture',
        'parent_group': 'GraphGroup',
    }

    id = node_field()
    cover = node_field()
    description = node_field()
    end_time = node_field()
    is_date_only = node_field()
    name = node_field()
    owner = node_field()
    parent_group = node_field()
    place = node_field()
    privacy = node_field()
    start_time = node_field()
    ticket_uri = node_field()
    timezone = node_field()
    updated_time = node_field()
    picture = node_field()
    attending_count = node_field()
    declined_count = node_field()
    maybe_count = node_field()
    noreply_count = node_field()
    invited_count = node_field()


class GraphGroup(GraphNode):
    graph_object_map = {
        'cover': 'GraphCoverPhoto',
        'venue': 'GraphLocation',
    }

    id = node_field()
    cover = node_field()
    description = node_field()
    email = node_field()
    icon = node_field()
    link = node_field()
    name = node_field()
    member_request_count = node_field()
    owner = node_field()
    parent = node_field()
    privacy = node_field()
    updated_time = node_field()
    venue = node_field()


class GraphSessionInfo(GraphNode):
    app_id = node_field()
    application = node_field()
    expires_at = node_field()
    is_valid = node_field()
    issued_at = node_field()
    metadata = node_field()
    profile_id = node_field()
    scopes = node_field()
    user_id = node_field()
