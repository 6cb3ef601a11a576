"""Graph nodes."""
import json
from datetime import datetime
from typing import Any, Dict, Optional

from ..exceptions import DecodingError
from .birthday import Birthday
from .collection import Collection
from .dates import should_cast_as_datetime, is_timestamp, is_iso8601_date_string, cast_to_datetime, format_datetime
from .registry import registry, DECODING_ERROR_CODE


class GraphNode(Collection):
    """
    A single Graph object.

    Subclasses declare ``graph_object_map`` (field name => variant class or
    registered variant name) so the factory casts those fields to typed
    nodes. Date fields become aware datetimes and ``birthday`` a Birthday.
    """

    graph_object_map: Dict[str, Any] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        registry.register(cls)

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        super().__init__(self.cast_items(data or {}))

    @staticmethod
    def cast_items(data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Cast date fields and birthdays.

        Raises:
            DecodingError: If a date or birthday value cannot be parsed
        """
        items = {}
        for key, value in data.items():
            try:
                if should_cast_as_datetime(key) and (is_timestamp(value) or is_iso8601_date_string(value)):
                    items[key] = cast_to_datetime(value)
                elif key == 'birthday' and isinstance(value, str):
                    items[key] = Birthday(value)
                else:
                    items[key] = value
            except (ValueError, OverflowError, OSError) as e:
                raise DecodingError(f'Unable to cast field "{key}" from {value!r}: {e}', DECODING_ERROR_CODE) from e
        return items

    @classmethod
    def get_object_map(cls) -> Dict[str, type]:
        """The field map with every entry resolved to a class."""
        return {field: registry.resolve(variant) for field, variant in cls.graph_object_map.items()}

    def as_dict(self) -> Dict[str, Any]:
        """Fields as a dict, keeping datetimes and birthdays typed."""
        return self.as_native()

    def uncast_items(self) -> Dict[str, Any]:
        """Fields as JSON-ready values."""
        return uncast_value(self.as_native())

    def as_json(self, **kwargs) -> str:
        kwargs.setdefault('separators', (',', ':'))
        return json.dumps(self.uncast_items(), **kwargs)

    def __str__(self) -> str:
        return self.as_json()


registry.register(GraphNode)


def uncast_value(value: Any) -> Any:
    if isinstance(value, Collection):
        value = value.as_native()
    if isinstance(value, Birthday):
        return value.to_graph_string()
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, dict):
        return {k: uncast_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [uncast_value(v) for v in value]
    return value
