"""Base container for decoded Graph data."""
from typing import Any, Callable, Iterator, List, Union


class Collection:
    """
    A wrapper around decoded Graph data.

    Nodes wrap a dict of fields, edges wrap a list of items. Nested
    collections are unwrapped by ``as_native()``.
    """

    def __init__(self, items: Union[dict, list, None] = None):
        self.items = items if items is not None else {}

    def get_field(self, name: Any, default: Any = None) -> Any:
        """Returns a field value, or default if absent."""
        if isinstance(self.items, dict):
            return self.items.get(name, default)
        try:
            return self.items[name]
        except (IndexError, TypeError):
            return default

    def get_field_names(self) -> List[Any]:
        if isinstance(self.items, dict):
            return list(self.items.keys())
        return list(range(len(self.items)))

    def all(self) -> Union[dict, list]:
        return self.items

    def map(self, callback: Callable[[Any, Any], Any]) -> 'Collection':
        """Apply callback(value, key) to every item."""
        if isinstance(self.items, dict):
            return Collection({k: callback(v, k) for k, v in self.items.items()})
        return Collection([callback(v, i) for i, v in enumerate(self.items)])

    def as_native(self) -> Union[dict, list]:
        """Plain dict/list with nested collections unwrapped; typed values kept."""
        if isinstance(self.items, dict):
            return {k: _unwrap(v) for k, v in self.items.items()}
        return [_unwrap(v) for v in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)

    def __getitem__(self, key):
        return self.items[key]

    def __setitem__(self, key, value) -> None:
        self.items[key] = value

    def __delitem__(self, key) -> None:
        del self.items[key]

    def __contains__(self, key) -> bool:
        if isinstance(self.items, dict):
            return key in self.items
        return isinstance(key, int) and -len(self.items) <= key < len(self.items)

    def __eq__(self, other) -> bool:
        if isinstance(other, Collection):
            return type(self) is type(other) and self.items == other.items
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.items!r})"


def _unwrap(value: Any) -> Any:
    return value.as_native() if isinstance(value, Collection) else value
