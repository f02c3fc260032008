"""
Component Attribute CLI Command
===============================
Provides CLI interface for attribute lookup against a component catalog.

Commands:
- attrs: List every attribute a component accepts
- resolve: Resolve one attribute name to its declaration
- locals: List local sub-components visible from a component
- graph: Export the composition graph (JSON/DOT)
- parse: Show how an attribute name is parsed

Usage:
    vueattrs attrs base-input
    vueattrs attrs base-input --public --script
    vueattrs resolve base-input ":model-value"
    vueattrs locals base-input
    vueattrs graph base-input --format dot
    vueattrs parse "@click.stop"
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from vueattrs.catalog import CatalogError, ComponentCatalog, build_details_provider
from vueattrs.core.details import ComponentDetailsProvider
from vueattrs.core.grammar import allows_no_value, parse_bound_name, tokenize
from vueattrs.core.graph import build_composition_graph
from vueattrs.core.model import ComponentDefinition, VisitResult
from vueattrs.utils.config import get_catalog_config, get_output_config
from vueattrs.utils.repo import find_repo_root


class AttrsCommand:
    """
    CLI command handler for attribute operations.

    The catalog is loaded lazily so that `parse` works without one.
    """

    def __init__(
        self,
        repo_root: Optional[Path] = None,
        catalog_path: Optional[Path] = None,
        output_format: Optional[str] = None,
    ):
        self.repo_root = repo_root or find_repo_root()
        self.catalog_config = get_catalog_config(self.repo_root)
        self.catalog_path = Path(catalog_path) if catalog_path else self.catalog_config["path"]
        self.output_format = output_format or get_output_config(self.repo_root)["format"]
        self._catalog: Optional[ComponentCatalog] = None
        self._details: Optional[ComponentDetailsProvider] = None

    def _load(self) -> Tuple[ComponentCatalog, ComponentDetailsProvider]:
        if self._catalog is None:
            self._catalog = ComponentCatalog.from_yaml(self.catalog_path)
            self._details = build_details_provider(self._catalog)
        return self._catalog, self._details

    def _emit(self, data: Any) -> None:
        if self.output_format == "yaml":
            print(yaml.dump(data, default_flow_style=False, sort_keys=False), end="")
        else:
            print(json.dumps(data, indent=2))

    def attrs(
        self,
        component: str,
        only_public: Optional[bool] = None,
        xml_context: Optional[bool] = None,
    ) -> int:
        """
        List every attribute a component accepts, inherited ones included.

        Args:
            component: Catalog name of the component
            only_public: Restrict to props (default from config)
            xml_context: Template spellings instead of script spellings (default from config)

        Returns:
            Exit code (0 for success)
        """
        if only_public is None:
            only_public = self.catalog_config["only_public"]
        if xml_context is None:
            xml_context = self.catalog_config["xml_context"]

        try:
            catalog, details = self._load()
            definition = catalog.require(component)
        except CatalogError as e:
            print(f"Error listing attributes: {e}", file=sys.stderr)
            return 1

        descriptors = details.get_attributes(definition, only_public, xml_context)
        self._emit({
            "component": component,
            "attributes": [d.to_dict() for d in descriptors],
        })
        return 0

    def resolve(self, component: str, attr_name: str, only_public: Optional[bool] = None) -> int:
        """
        Resolve a single attribute name on a component.

        Returns:
            Exit code (0 if resolved, 1 if not)
        """
        if only_public is None:
            only_public = self.catalog_config["only_public"]

        try:
            catalog, details = self._load()
            definition = catalog.require(component)
        except CatalogError as e:
            print(f"Error resolving attribute: {e}", file=sys.stderr)
            return 1

        descriptor = details.resolve_attribute(definition, attr_name, only_public)
        self._emit({
            "component": component,
            "attribute": attr_name,
            "resolved": descriptor is not None,
            "descriptor": descriptor.to_dict() if descriptor else None,
        })
        return 0 if descriptor else 1

    def local_components(self, component: str) -> int:
        """
        List local sub-components visible from a component, nearest first.

        Returns:
            Exit code (0 for success)
        """
        try:
            catalog, details = self._load()
            definition = catalog.require(component)
        except CatalogError as e:
            print(f"Error listing local components: {e}", file=sys.stderr)
            return 1

        found: List[dict] = []

        def collect(name: str, target: Optional[ComponentDefinition]) -> VisitResult:
            found.append({"name": name, "component": target.name if target else None})
            return VisitResult.CONTINUE

        details.process_local_components(definition, collect)
        self._emit({"component": component, "local_components": found})
        return 0

    def graph(self, component: Optional[str] = None, format: str = "json") -> int:
        """
        Export the composition graph reachable from a component.

        Args:
            component: Root component (None shows global mixins only)
            format: "json" or "dot"

        Returns:
            Exit code (0 for success)
        """
        try:
            catalog, details = self._load()
            root = catalog.require(component) if component else None
        except CatalogError as e:
            print(f"Error generating graph: {e}", file=sys.stderr)
            return 1

        graph = build_composition_graph(root, details.index, details.links)
        if format == "dot":
            print(graph.to_dot())
        else:
            self._emit(graph.to_dict())
        return 0

    def parse(self, attr_name: str) -> int:
        """
        Show how an attribute name is parsed.

        Returns:
            Exit code (always 0)
        """
        token = tokenize(attr_name)
        self._emit({
            "attribute": attr_name,
            **token.to_dict(),
            "bound_name": parse_bound_name(attr_name),
            "allows_no_value": allows_no_value(attr_name),
        })
        return 0
