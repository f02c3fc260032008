"""
Component Link Strategies
=========================
Each strategy enumerates the definitions related to a component through one
composition relation.

Architecture:
- ComponentLink: ABC with related_references() and resolve()
- LocalMixinLink: component's own `mixins` list
- GlobalMixinLink: mixins registered for all components
- ExtendsLink: component's `extends` target
- DEFAULT_LINKS: the fixed evaluation order used by traversal
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from vueattrs.core.model import ComponentDefinition, ComponentReference, LinkKind
from vueattrs.core.providers import ComponentIndex


class ComponentLink(ABC):
    """Base class for composition link strategies."""

    @property
    @abstractmethod
    def kind(self) -> LinkKind:
        """Return the composition relation this strategy follows."""
        pass

    @abstractmethod
    def related_references(
        self, definition: Optional[ComponentDefinition], index: ComponentIndex
    ) -> List[ComponentReference]:
        """References reachable from definition, in index order."""
        pass

    def resolve(
        self, reference: ComponentReference, index: ComponentIndex
    ) -> Optional[ComponentDefinition]:
        """Dereference a token; None means the edge is stale."""
        return index.find_definition(reference)


class LocalMixinLink(ComponentLink):
    """mixins: [...] declared on the component itself."""

    @property
    def kind(self) -> LinkKind:
        return LinkKind.LOCAL_MIXIN

    def related_references(self, definition, index):
        if definition is None:
            return []
        return list(index.local_mixins(definition) or [])


class GlobalMixinLink(ComponentLink):
    """
    Vue.mixin(...) registrations.

    Applies to every component, including an absent root.
    """

    @property
    def kind(self) -> LinkKind:
        return LinkKind.GLOBAL_MIXIN

    def related_references(self, definition, index):
        return list(index.global_mixins() or [])


class ExtendsLink(ComponentLink):
    """extends: Base declared on the component itself."""

    @property
    def kind(self) -> LinkKind:
        return LinkKind.EXTENDS

    def related_references(self, definition, index):
        if definition is None:
            return []
        return list(index.extends(definition) or [])


DEFAULT_LINKS: Tuple[ComponentLink, ...] = (
    LocalMixinLink(),
    GlobalMixinLink(),
    ExtendsLink(),
)
