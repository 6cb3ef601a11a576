"""Registry of typed node variants."""
import importlib
from typing import Any, Dict, Optional, Type

from ..exceptions import DecodingError

# Code Graph SDKs use for casting failures
DECODING_ERROR_CODE = 620


class VariantRegistry:
    """
    Maps variant names to node classes.

    Node classes register themselves when they are created, so field maps
    may name variants that are defined later in the module. Every class is
    kept under its full ``module.qualname`` path; a short name stays bound
    to the first class registered under it, so a later class with the same
    name never replaces a catalog variant.
    """

    def __init__(self):
        self._variants: Dict[str, type] = {}
        self._short_names: Dict[str, type] = {}

    @staticmethod
    def full_name(variant: type) -> str:
        return f"{variant.__module__}.{variant.__qualname__}"

    def register(self, variant: type) -> None:
        self._variants[self.full_name(variant)] = variant
        self._short_names.setdefault(variant.__name__, variant)

    def get(self, name: str) -> Optional[type]:
        """Look a variant up by full path, then by short name."""
        return self._variants.get(name) or self._short_names.get(name)

    def resolve(self, reference: Any) -> type:
        """
        Resolve a field map entry (a class or a registered name) to a class.

        Raises:
            DecodingError: If a name is not registered
        """
        if isinstance(reference, type):
            return reference
        variant = self.get(reference)
        if variant is None:
            raise DecodingError(f'Unknown node variant "{reference}".', DECODING_ERROR_CODE)
        return variant

    @staticmethod
    def import_variant(path: str) -> type:
        """
        Import a variant from a dotted path such as ``myapp.nodes.MyNode``.

        Raises:
            DecodingError: If the path cannot be imported
        """
        module_name, _, attr = path.rpartition('.')
        if not module_name:
            raise DecodingError(f'The given subclass "{path}" is not valid. Expected a dotted import path.',
                                DECODING_ERROR_CODE)
        try:
            module = importlib.import_module(module_name)
            return getattr(module, attr)
        except (ImportError, AttributeError) as e:
            raise DecodingError(f'The given subclass "{path}" could not be imported.', DECODING_ERROR_CODE) from e


registry = VariantRegistry()


class node_field:
    """
    Read-only accessor for a node field.

    Example:
        >>> class GraphThing(GraphNode):
        ...     name = node_field()
        ...     from_ = node_field('from')
    """

    def __init__(self, name: Optional[str] = None, default: Any = None):
        self.name = name
        self.default = default

    def __set_name__(self, owner: Type, attr: str) -> None:
        if self.name is None:
            self.name = attr

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return instance.get_field(self.name, self.default)
