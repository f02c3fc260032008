"""
Shared fixtures for vue-attrs validators.

Two kinds of collaborators are provided:
- FakeIndex: a bare name -> names graph for traversal tests
- SAMPLE_CATALOG: a small component library exercising every link kind
"""
from typing import Dict, List, Optional

import pytest
import yaml

from vueattrs.catalog import ComponentCatalog, build_details_provider
from vueattrs.core.model import ComponentDefinition, ComponentReference, LinkKind


SAMPLE_CATALOG = {
    "global_mixins": ["i18n"],
    "global_directives": ["focusTrap"],
    "components": {
        "i18n": {
            "props": ["locale"],
            "methods": ["translate"],
        },
        "clearable": {
            "props": ["clearable"],
            "methods": ["clear"],
        },
        "validatable": {
            "props": {"rules": {}, "error-message": {}},
            "data": ["errors"],
            "components": {"ErrorTip": "error-tip"},
        },
        "base-field": {
            "props": {"label": {}, "value": {"required": True}},
            "computed": ["hasValue"],
            "mixins": ["validatable"],
            "components": {"FieldLabel": "field-label"},
        },
        "base-input": {
            "file": "src/components/BaseInput.vue",
            "props": ["placeholder", "value"],
            "data": ["internalValue"],
            "mixins": ["clearable", "missing-mixin"],
            "extends": "base-field",
            "components": {"InputIcon": "input-icon"},
            "directives": ["autoSize"],
        },
        "error-tip": {"props": ["text"]},
        "field-label": {"props": ["for-id"]},
        "input-icon": {"props": ["iconName"]},
        "cycle-a": {"props": ["alpha"], "mixins": ["cycle-b"]},
        "cycle-b": {"props": ["beta"], "extends": "cycle-a"},
        "cycle-c": {"props": ["gamma"], "extends": "cycle-a"},
    },
}


class FakeIndex:
    """
    In-memory ComponentIndex over plain names.

    Records every query in `calls` so tests can assert what traversal
    asked for and in which order.
    """

    def __init__(
        self,
        mixins: Optional[Dict[str, List[str]]] = None,
        global_mixins: Optional[List[str]] = None,
        extends: Optional[Dict[str, str]] = None,
        names: Optional[List[str]] = None,
    ):
        self.mixins = mixins or {}
        self.global_names = global_mixins or []
        self.extends_map = extends or {}
        all_names = set(names or [])
        all_names.update(self.mixins)
        all_names.update(self.extends_map)
        for targets in self.mixins.values():
            all_names.update(targets)
        all_names.update(self.extends_map.values())
        all_names.update(self.global_names)
        self.definitions = {n: ComponentDefinition(name=n) for n in sorted(all_names)}
        self.missing = set()
        self.calls = []

    def __getitem__(self, name: str) -> ComponentDefinition:
        return self.definitions[name]

    def local_mixins(self, definition):
        self.calls.append(("local_mixins", definition.name))
        return [
            ComponentReference(n, LinkKind.LOCAL_MIXIN, definition)
            for n in self.mixins.get(definition.name, [])
        ]

    def global_mixins(self):
        self.calls.append(("global_mixins", None))
        return [ComponentReference(n, LinkKind.GLOBAL_MIXIN) for n in self.global_names]

    def extends(self, definition):
        self.calls.append(("extends", definition.name))
        target = self.extends_map.get(definition.name)
        return [ComponentReference(target, LinkKind.EXTENDS, definition)] if target else []

    def find_definition(self, reference):
        if reference.name in self.missing:
            return None
        return self.definitions.get(reference.name)


@pytest.fixture
def sample_catalog() -> ComponentCatalog:
    """Catalog built from SAMPLE_CATALOG."""
    return ComponentCatalog.from_dict(SAMPLE_CATALOG)


@pytest.fixture
def details(sample_catalog):
    """ComponentDetailsProvider wired to the sample catalog."""
    return build_details_provider(sample_catalog)


@pytest.fixture
def catalog_file(tmp_path):
    """SAMPLE_CATALOG written to components.yaml in a temporary project root."""
    (tmp_path / ".vueattrs").mkdir()
    path = tmp_path / "components.yaml"
    path.write_text(yaml.safe_dump(SAMPLE_CATALOG, sort_keys=False), encoding="utf-8")
    return path
