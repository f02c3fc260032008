"""
Component Details Provider
==========================
Answers attribute questions about a component, including everything it
inherits through local mixins, global mixins and extends.

Resolution order for a single name:
1. Attributes declared on the component itself
2. Attributes of definitions reachable through composition (first match stops the walk)
3. Custom directive attributes

Usage:
    details = ComponentDetailsProvider(index, own_details, directives)
    details.get_attributes(definition, only_public=True, xml_context=True)
    details.resolve_attribute(definition, ":my-prop", only_public=True)
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from vueattrs.core.grammar import (
    DEFAULT_GRAMMAR,
    GrammarConfig,
    build_name_filter,
    to_camel,
    to_kebab,
)
from vueattrs.core.links import DEFAULT_LINKS, ComponentLink
from vueattrs.core.model import AttributeDescriptor, ComponentDefinition, VisitResult
from vueattrs.core.providers import (
    EMPTY_FILTER,
    ComponentIndex,
    DirectivesProvider,
    LocalComponentFilter,
    NameFilter,
    OwnDetailsProvider,
)
from vueattrs.core.traversal import traverse

logger = logging.getLogger(__name__)

LocalComponentProcessor = Callable[[str, Optional[ComponentDefinition]], VisitResult]


class ComponentDetailsProvider:
    """Aggregates and resolves attributes across the composition graph."""

    def __init__(
        self,
        index: ComponentIndex,
        own_details: OwnDetailsProvider,
        directives: Optional[DirectivesProvider] = None,
        links: Sequence[ComponentLink] = DEFAULT_LINKS,
        grammar: GrammarConfig = DEFAULT_GRAMMAR,
    ):
        self.index = index
        self.own_details = own_details
        self.directives = directives
        self.links = tuple(links)
        self.grammar = grammar

    def get_attributes(
        self,
        definition: Optional[ComponentDefinition],
        only_public: bool = False,
        xml_context: bool = False,
    ) -> List[AttributeDescriptor]:
        """
        All attributes of definition and of everything it is composed from.

        Args:
            definition: Component to inspect (None yields global contributions only)
            only_public: Restrict to props
            xml_context: Emit template spellings (kebab, ":" and "v-bind:")
                instead of script spellings

        Returns:
            Descriptors in discovery order, one per display variant
        """
        result: List[AttributeDescriptor] = []
        if definition is not None:
            result.extend(self._own_details(definition, EMPTY_FILTER, only_public, False))
            result.extend(self._directive_attributes(definition))

        def collect(mixed_in: ComponentDefinition) -> VisitResult:
            result.extend(self._own_details(mixed_in, EMPTY_FILTER, only_public, False))
            return VisitResult.CONTINUE

        traverse(definition, collect, self.index, self.links)

        variants: List[AttributeDescriptor] = []
        for descriptor in result:
            variants.extend(self._display_variants(descriptor, xml_context))
        return variants

    def resolve_attribute(
        self,
        definition: Optional[ComponentDefinition],
        attr_name: str,
        only_public: bool = False,
    ) -> Optional[AttributeDescriptor]:
        """Find the attribute attr_name denotes, nearest declaration first."""
        name_filter = build_name_filter(attr_name, self.grammar)

        if definition is not None:
            direct = self._own_details(definition, name_filter, only_public, True)
            if direct:
                return direct[0]

        found: List[AttributeDescriptor] = []

        def match(mixed_in: ComponentDefinition) -> VisitResult:
            details = self._own_details(mixed_in, name_filter, only_public, True)
            if details:
                found.append(details[0])
                return VisitResult.STOP
            return VisitResult.CONTINUE

        traverse(definition, match, self.index, self.links)
        if found:
            owner = found[0].owner
            logger.debug("Resolved %r through %s", attr_name, owner.name if owner else "<global>")
            return found[0]

        if self.directives is None:
            return None
        logger.debug("Falling back to directives for %r", attr_name)
        return self.directives.resolve_attribute(definition, attr_name)

    def process_local_components(
        self,
        definition: Optional[ComponentDefinition],
        processor: LocalComponentProcessor,
    ) -> VisitResult:
        """
        Offer local sub-components to processor, nearest declaration first.

        If the component's own local components make processor stop, mixed-in
        declarations are never consulted.
        """
        def stops(name: str, target: Optional[ComponentDefinition]) -> bool:
            return processor(name, target) is VisitResult.STOP

        if definition is not None and self._local_components(definition, stops):
            return VisitResult.STOP

        def visit(mixed_in: ComponentDefinition) -> VisitResult:
            if self._local_components(mixed_in, stops):
                return VisitResult.STOP
            return VisitResult.CONTINUE

        return traverse(definition, visit, self.index, self.links)

    def _own_details(
        self,
        definition: ComponentDefinition,
        name_filter: NameFilter,
        only_public: bool,
        only_first: bool,
    ) -> List[AttributeDescriptor]:
        return self.own_details.get_details(definition, name_filter, only_public, only_first) or []

    def _local_components(
        self, definition: ComponentDefinition, name_filter: LocalComponentFilter
    ) -> List[Tuple[str, Optional[ComponentDefinition]]]:
        return self.own_details.get_local_components(definition, name_filter, True) or []

    def _directive_attributes(self, definition: ComponentDefinition) -> List[AttributeDescriptor]:
        if self.directives is None:
            return []
        return self.directives.get_attributes(definition) or []

    @staticmethod
    def _display_variants(
        descriptor: AttributeDescriptor, xml_context: bool
    ) -> List[AttributeDescriptor]:
        if xml_context:
            kebab = to_kebab(descriptor.name)
            return [
                descriptor.create_name_variant(kebab),
                descriptor.create_name_variant(f":{kebab}"),
                descriptor.create_name_variant(f"v-bind:{kebab}"),
            ]
        if "-" in descriptor.name:
            return [descriptor.create_name_variant(to_camel(descriptor.name))]
        return [descriptor]
