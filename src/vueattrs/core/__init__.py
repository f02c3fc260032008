"""
Composition core: name grammar, link strategies, traversal and details provider.
"""
from vueattrs.core.details import ComponentDetailsProvider
from vueattrs.core.grammar import (
    DEFAULT_GRAMMAR,
    GrammarConfig,
    allows_no_value,
    build_name_filter,
    parse_bound_name,
    to_camel,
    to_kebab,
)
from vueattrs.core.links import DEFAULT_LINKS
from vueattrs.core.model import (
    AttributeDescriptor,
    ComponentDefinition,
    ComponentReference,
    CompositionEdge,
    LinkKind,
    VisitResult,
)
from vueattrs.core.traversal import traverse

__all__ = [
    "AttributeDescriptor",
    "ComponentDefinition",
    "ComponentDetailsProvider",
    "ComponentReference",
    "CompositionEdge",
    "DEFAULT_GRAMMAR",
    "DEFAULT_LINKS",
    "GrammarConfig",
    "LinkKind",
    "VisitResult",
    "allows_no_value",
    "build_name_filter",
    "parse_bound_name",
    "to_camel",
    "to_kebab",
    "traverse",
]
