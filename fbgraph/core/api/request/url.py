"""URL helpers for Graph endpoints."""
import json
import re
from typing import Dict, Any, Iterable, Optional
from urllib.parse import urlencode, urlsplit, parse_qsl

_VERSION_PREFIX_RE = re.compile(r'^/v\d+\.\d+(?=/|$)')


def to_query_value(value: Any) -> str:
    """Converts a parameter value to its form/query string representation."""
    if isinstance(value, bool):
        return '1' if value else '0'
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(',', ':'))
    return str(value)


def build_query(params: Dict[str, Any]) -> str:
    """Builds an urlencoded query string, skipping None values."""
    return urlencode([(k, to_query_value(v)) for k, v in params.items() if v is not None])


def get_params_as_dict(url: str) -> Dict[str, str]:
    """Returns the query parameters of a URL (or bare endpoint) as a dict."""
    query = urlsplit(url).query
    if not query:
        return {}
    return dict(parse_qsl(query, keep_blank_values=True))


def remove_params_from_url(url: str, params_to_filter: Iterable[str]) -> str:
    """Removes the given query parameters, keeping the rest in order."""
    if '?' not in url:
        return url
    path, query = url.split('?', 1)
    filtered = [(k, v) for k, v in parse_qsl(query, keep_blank_values=True) if k not in set(params_to_filter)]
    if not filtered:
        return path
    return f"{path}?{urlencode(filtered)}"


def append_params_to_url(url: str, new_params: Optional[Dict[str, Any]] = None) -> str:
    """
    Appends params to a URL.

    Params already present in the URL win over new ones and the merged
    query is sorted by key for a predictable order.
    """
    if not new_params:
        return url
    if '?' not in url:
        return f"{url}?{build_query(new_params)}"

    path, query = url.split('?', 1)
    merged = dict(new_params)
    merged.update(dict(parse_qsl(query, keep_blank_values=True)))
    merged = dict(sorted(merged.items()))
    return f"{path}?{build_query(merged)}"


def force_slash_prefix(value: Optional[str]) -> Optional[str]:
    if not value:
        return value
    return value if value.startswith('/') else f"/{value}"


def base_graph_url_endpoint(url: str) -> str:
    """
    Trims the scheme, host and graph version from a full Graph URL.

    ``https://graph.facebook.com/v2.10/123/photos?after=x`` becomes
    ``/123/photos?after=x``.
    """
    parts = urlsplit(url)
    path = parts.path or '/'
    path = _VERSION_PREFIX_RE.sub('', path) or '/'
    return f"{path}?{parts.query}" if parts.query else path
