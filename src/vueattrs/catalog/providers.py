"""
Catalog-backed collaborators for the composition core.

- CatalogIndex: mixins / global mixins / extends as reference tokens
- CatalogDetailsProvider: props, data, computed, methods and local components
- CatalogDirectivesProvider: custom directives as "v-*" attributes
"""
from __future__ import annotations

import re
from typing import List, Optional, Tuple

from vueattrs.catalog.loader import ComponentCatalog
from vueattrs.core.details import ComponentDetailsProvider
from vueattrs.core.grammar import name_variants, to_kebab
from vueattrs.core.model import (
    AttributeDescriptor,
    ComponentDefinition,
    ComponentReference,
    LinkKind,
)
from vueattrs.core.providers import LocalComponentFilter, NameFilter

DIRECTIVE_PREFIX = "v-"

# v-name, v-name:arg, v-name.modifier
_DIRECTIVE_NAME_RE = re.compile(r"^v-([^:.]+)")


class CatalogIndex:
    """Composition relations as declared in the catalog."""

    def __init__(self, catalog: ComponentCatalog):
        self.catalog = catalog

    def local_mixins(self, definition: ComponentDefinition) -> List[ComponentReference]:
        entry = self.catalog.entry(definition)
        if entry is None:
            return []
        return [ComponentReference(name, LinkKind.LOCAL_MIXIN, definition) for name in entry.mixins]

    def global_mixins(self) -> List[ComponentReference]:
        return [ComponentReference(name, LinkKind.GLOBAL_MIXIN) for name in self.catalog.global_mixins]

    def extends(self, definition: ComponentDefinition) -> List[ComponentReference]:
        entry = self.catalog.entry(definition)
        if entry is None or not entry.extends:
            return []
        return [ComponentReference(entry.extends, LinkKind.EXTENDS, definition)]

    def find_definition(self, reference: ComponentReference) -> Optional[ComponentDefinition]:
        return self.catalog.get(reference.name)


class CatalogDetailsProvider:
    """
    Own attributes of a catalog component.

    Props are public; data, computed and methods are internal and only
    reported when only_public is False.
    """

    def __init__(self, catalog: ComponentCatalog):
        self.catalog = catalog

    def get_details(
        self,
        definition: ComponentDefinition,
        name_filter: NameFilter,
        only_public: bool,
        only_first: bool,
    ) -> List[AttributeDescriptor]:
        entry = self.catalog.entry(definition)
        if entry is None:
            return []

        candidates = [
            AttributeDescriptor(name=p.name, owner=definition, kind="prop", required=p.required)
            for p in entry.props
        ]
        if not only_public:
            for kind, names in (("data", entry.data), ("computed", entry.computed), ("method", entry.methods)):
                candidates.extend(
                    AttributeDescriptor(name=n, owner=definition, is_public=False, kind=kind)
                    for n in names
                )

        result = []
        for descriptor in candidates:
            if not name_filter(descriptor.name):
                continue
            result.append(descriptor)
            if only_first:
                break
        return result

    def get_local_components(
        self,
        definition: ComponentDefinition,
        name_filter: LocalComponentFilter,
        only_first: bool,
    ) -> List[Tuple[str, Optional[ComponentDefinition]]]:
        entry = self.catalog.entry(definition)
        if entry is None:
            return []

        result = []
        for local_name, target_name in entry.components:
            target = self.catalog.get(target_name)
            if not name_filter(local_name, target):
                continue
            result.append((local_name, target))
            if only_first:
                break
        return result


class CatalogDirectivesProvider:
    """Custom directives registered locally on a component or globally."""

    def __init__(self, catalog: ComponentCatalog):
        self.catalog = catalog

    def get_attributes(self, definition: ComponentDefinition) -> List[AttributeDescriptor]:
        return [
            self._descriptor(name, owner)
            for name, owner in self._directives(definition)
        ]

    def resolve_attribute(
        self, definition: Optional[ComponentDefinition], attr_name: str
    ) -> Optional[AttributeDescriptor]:
        match = _DIRECTIVE_NAME_RE.match(attr_name)
        if not match:
            return None

        variants = name_variants(match.group(1))
        for name, owner in self._directives(definition):
            if name in variants or to_kebab(name) in variants:
                return self._descriptor(name, owner)
        return None

    def _directives(
        self, definition: Optional[ComponentDefinition]
    ) -> List[Tuple[str, Optional[ComponentDefinition]]]:
        """Local directives first, then global ones."""
        entry = self.catalog.entry(definition)
        local = [(name, definition) for name in entry.directives] if entry else []
        return local + [(name, None) for name in self.catalog.global_directives]

    @staticmethod
    def _descriptor(name: str, owner: Optional[ComponentDefinition]) -> AttributeDescriptor:
        return AttributeDescriptor(
            name=DIRECTIVE_PREFIX + to_kebab(name),
            owner=owner,
            kind="directive",
            declared_name=name,
        )


def build_details_provider(catalog: ComponentCatalog) -> ComponentDetailsProvider:
    """Wire the catalog collaborators into a ComponentDetailsProvider."""
    return ComponentDetailsProvider(
        index=CatalogIndex(catalog),
        own_details=CatalogDetailsProvider(catalog),
        directives=CatalogDirectivesProvider(catalog),
    )
