"""Pytest fixtures for fbgraph unit tests."""
from typing import Callable

import pytest

from fbgraph.core.app import GraphApp
from fbgraph.core.api.client import GraphClient
from fbgraph.core.api.request import GraphRequest

from fakes import FakeHttpClient


@pytest.fixture
def app():
    return GraphApp('123', 'foo_secret')


@pytest.fixture
def http_client():
    return FakeHttpClient()


@pytest.fixture
def graph_client(http_client):
    return GraphClient(http_client)


@pytest.fixture
def request_factory(app) -> Callable[..., GraphRequest]:
    def make(method='GET', endpoint='/me', params=None, access_token='foo_token', **kwargs):
        return GraphRequest(app, access_token, method, endpoint, params, **kwargs)
    return make


@pytest.fixture
def video_file(tmp_path):
    """A 50-byte video file."""
    path = tmp_path / 'clip.mp4'
    path.write_bytes(bytes(range(50)))
    return path


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / 'notes.txt'
    path.write_bytes(b'This is a text file used for testing.')
    return path
