"""
Collaborator protocols consumed by the composition core.

Implementations are expected to be synchronous, idempotent queries.
See vueattrs.catalog.providers for the YAML-backed implementations.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Tuple

from vueattrs.core.model import (
    AttributeDescriptor,
    ComponentDefinition,
    ComponentReference,
)

NameFilter = Callable[[str], bool]
LocalComponentFilter = Callable[[str, Optional[ComponentDefinition]], bool]


def _accept_all(name: str) -> bool:
    return True


EMPTY_FILTER: NameFilter = _accept_all


class ComponentIndex(Protocol):
    """Project-wide index of composition relations."""

    def local_mixins(self, definition: ComponentDefinition) -> List[ComponentReference]:
        """References from the component's own mixins list, in declaration order."""
        ...

    def global_mixins(self) -> List[ComponentReference]:
        """References to mixins registered for every component."""
        ...

    def extends(self, definition: ComponentDefinition) -> List[ComponentReference]:
        """Reference to the component's extends target (zero or one)."""
        ...

    def find_definition(self, reference: ComponentReference) -> Optional[ComponentDefinition]:
        """Dereference a token, None if it no longer resolves."""
        ...


class OwnDetailsProvider(Protocol):
    """Attributes and local components declared directly on one definition."""

    def get_details(
        self,
        definition: ComponentDefinition,
        name_filter: NameFilter,
        only_public: bool,
        only_first: bool,
    ) -> List[AttributeDescriptor]:
        ...

    def get_local_components(
        self,
        definition: ComponentDefinition,
        name_filter: LocalComponentFilter,
        only_first: bool,
    ) -> List[Tuple[str, Optional[ComponentDefinition]]]:
        ...


class DirectivesProvider(Protocol):
    """Attributes contributed by custom directives."""

    def get_attributes(self, definition: ComponentDefinition) -> List[AttributeDescriptor]:
        ...

    def resolve_attribute(
        self, definition: Optional[ComponentDefinition], attr_name: str
    ) -> Optional[AttributeDescriptor]:
        ...
