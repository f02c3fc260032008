"""
YAML component catalog and the collaborators backed by it.
"""
from vueattrs.catalog.loader import CatalogError, ComponentCatalog
from vueattrs.catalog.providers import (
    CatalogDetailsProvider,
    CatalogDirectivesProvider,
    CatalogIndex,
    build_details_provider,
)

__all__ = [
    "CatalogDetailsProvider",
    "CatalogDirectivesProvider",
    "CatalogError",
    "CatalogIndex",
    "ComponentCatalog",
    "build_details_provider",
]
