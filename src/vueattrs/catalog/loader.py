"""
Component catalog loader.

Reads a YAML description of a project's components and interns one
ComponentDefinition per component name.

Example catalog:
    global_mixins: [loggable]
    global_directives: [focus]
    components:
      base-input:
        file: src/components/BaseInput.vue
        props:
          value: {required: true}
          placeholder: {}
        data: [internalValue]
        mixins: [validatable]
        extends: base-field
        components: {InputIcon: input-icon}
        directives: [autoSize]
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from vueattrs.core.model import ComponentDefinition

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a component catalog cannot be loaded or queried."""


@dataclass
class PropSpec:
    """A prop declared on a component."""

    name: str
    required: bool = False


@dataclass
class ComponentEntry:
    """Everything a catalog declares about one component."""

    definition: ComponentDefinition
    props: List[PropSpec] = field(default_factory=list)
    data: List[str] = field(default_factory=list)
    computed: List[str] = field(default_factory=list)
    methods: List[str] = field(default_factory=list)
    mixins: List[str] = field(default_factory=list)
    extends: Optional[str] = None
    components: List[Tuple[str, str]] = field(default_factory=list)
    directives: List[str] = field(default_factory=list)


class ComponentCatalog:
    """Interned component definitions and their declarations."""

    def __init__(
        self,
        entries: Dict[str, ComponentEntry],
        global_mixins: Optional[List[str]] = None,
        global_directives: Optional[List[str]] = None,
        source_path: Optional[Path] = None,
    ):
        self._entries = entries
        self._by_definition = {e.definition: e for e in entries.values()}
        self.global_mixins = list(global_mixins or [])
        self.global_directives = list(global_directives or [])
        self.source_path = source_path

        for owner, name in self.dangling_references():
            logger.warning("Component %r refers to unknown component %r", owner, name)

    @classmethod
    def from_yaml(cls, path: Path) -> "ComponentCatalog":
        """Load a catalog from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise CatalogError(
                f"Catalog not found: {path}\n"
                "Pass --catalog or set catalog.path in .vueattrs/config.yaml"
            )
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogError(f"Invalid YAML in {path}: {e}") from e
        except UnicodeDecodeError as e:
            raise CatalogError(f"Catalog is not valid UTF-8: {path}") from e
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e.strerror or e}") from e

        catalog = cls.from_dict(data or {}, source_path=path)
        logger.info("Loaded %d components from %s", len(catalog), path)
        return catalog

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_path: Optional[Path] = None) -> "ComponentCatalog":
        """Build a catalog from an already parsed document."""
        if not isinstance(data, dict):
            raise CatalogError("Catalog root must be a mapping")

        components = data.get("components") or {}
        if not isinstance(components, dict):
            raise CatalogError("'components' must be a mapping of name -> declaration")

        entries: Dict[str, ComponentEntry] = {}
        for name, spec in components.items():
            entries[str(name)] = _parse_entry(str(name), spec or {}, source_path)

        return cls(
            entries,
            global_mixins=_name_list(data.get("global_mixins"), "global_mixins", "<catalog>"),
            global_directives=_name_list(data.get("global_directives"), "global_directives", "<catalog>"),
            source_path=source_path,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    @property
    def names(self) -> List[str]:
        """Return component names in declaration order."""
        return list(self._entries.keys())

    def get(self, name: str) -> Optional[ComponentDefinition]:
        """Definition registered under name, None if unknown."""
        entry = self._entries.get(name)
        return entry.definition if entry else None

    def require(self, name: str) -> ComponentDefinition:
        """Definition registered under name; raises CatalogError if unknown."""
        definition = self.get(name)
        if definition is None:
            raise CatalogError(f"Unknown component: {name}")
        return definition

    def entry(self, definition: Optional[ComponentDefinition]) -> Optional[ComponentEntry]:
        """Declarations of definition, None for definitions from elsewhere."""
        if definition is None:
            return None
        return self._by_definition.get(definition)

    def dangling_references(self) -> List[Tuple[str, str]]:
        """(owner, name) pairs naming components the catalog does not declare."""
        dangling = []
        for name, entry in self._entries.items():
            targets = list(entry.mixins)
            if entry.extends:
                targets.append(entry.extends)
            targets.extend(target for _, target in entry.components)
            dangling.extend((name, t) for t in targets if t not in self._entries)
        dangling.extend(("<global>", m) for m in self.global_mixins if m not in self._entries)
        return dangling


def _parse_entry(name: str, spec: Any, source_path: Optional[Path]) -> ComponentEntry:
    if not isinstance(spec, dict):
        raise CatalogError(f"Component {name!r} must be a mapping")

    file_value = spec.get("file")
    definition = ComponentDefinition(
        name=name,
        source_path=Path(file_value) if file_value else source_path,
        line_number=spec.get("line"),
    )

    extends = spec.get("extends")
    if extends is not None and not isinstance(extends, str):
        raise CatalogError(f"Component {name!r}: 'extends' must be a component name")

    return ComponentEntry(
        definition=definition,
        props=_parse_props(name, spec.get("props")),
        data=_name_list(spec.get("data"), "data", name),
        computed=_name_list(spec.get("computed"), "computed", name),
        methods=_name_list(spec.get("methods"), "methods", name),
        mixins=_name_list(spec.get("mixins"), "mixins", name),
        extends=extends,
        components=_parse_local_components(name, spec.get("components")),
        directives=_name_list(spec.get("directives"), "directives", name),
    )


def _name_list(value: Any, key: str, owner: str) -> List[str]:
    """Accept a single name, a list of names, or nothing."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    raise CatalogError(f"Component {owner!r}: '{key}' must be a list of names")


def _parse_props(owner: str, value: Any) -> List[PropSpec]:
    """Props as a list of names or a mapping of name -> options."""
    if isinstance(value, dict):
        props = []
        for prop_name, options in value.items():
            options = options or {}
            if not isinstance(options, dict):
                raise CatalogError(f"Component {owner!r}: options of prop {prop_name!r} must be a mapping")
            props.append(PropSpec(name=str(prop_name), required=bool(options.get("required", False))))
        return props
    return [PropSpec(name=n) for n in _name_list(value, "props", owner)]


def _parse_local_components(owner: str, value: Any) -> List[Tuple[str, str]]:
    """Local components as a mapping of local name -> component, or a list of names."""
    if isinstance(value, dict):
        return [(str(local), str(target)) for local, target in value.items()]
    return [(n, n) for n in _name_list(value, "components", owner)]
