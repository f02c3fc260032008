"""
Component Composition Model
===========================
Value types shared by the grammar, link strategies, traversal and details provider.

- ComponentDefinition: identity-compared node of the composition graph
- ComponentReference: opaque token pointing at a related definition
- CompositionEdge: one resolved (source -> target) step of a traversal
- AttributeDescriptor: one attribute accepted by a component
- LinkKind / VisitResult: closed enumerations
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Dict, Optional


class LinkKind(Enum):
    """Composition relations between component definitions."""

    LOCAL_MIXIN = "local_mixin"  # Component's own mixins list
    GLOBAL_MIXIN = "global_mixin"  # Mixins registered for every component
    EXTENDS = "extends"  # Single-parent extension


class VisitResult(Enum):
    """Outcome returned by a traversal visitor."""

    CONTINUE = "continue"
    STOP = "stop"


@dataclass(eq=False)
class ComponentDefinition:
    """
    Declaration site of one component.

    Compared by identity: two definitions are the same node only when they
    are the same object. Catalogs intern one instance per declaration.

    Attributes:
        name: Registered component name
        source_path: File declaring the component (if known)
        line_number: Line of the declaration (if known)
        metadata: Collaborator-specific payload (never read by the core)
    """

    name: str
    source_path: Optional[Path] = None
    line_number: Optional[int] = None
    metadata: Dict = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"ComponentDefinition({self.name!r})"

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "source_path": str(self.source_path) if self.source_path else None,
            "line_number": self.line_number,
        }


@dataclass(frozen=True)
class ComponentReference:
    """Unresolved pointer from one definition to a related one."""

    name: str
    kind: LinkKind
    source: Optional[ComponentDefinition] = None


@dataclass(frozen=True)
class CompositionEdge:
    """A resolved composition step found during traversal."""

    source: Optional[ComponentDefinition]
    target: ComponentDefinition
    kind: LinkKind

    @property
    def id(self) -> str:
        """Return unique edge ID."""
        source = self.source.name if self.source else "<root>"
        return f"{source}--{self.kind.value}-->{self.target.name}"

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "source": self.source.name if self.source else None,
            "target": self.target.name,
            "type": self.kind.value,
        }


@dataclass(frozen=True)
class AttributeDescriptor:
    """
    One attribute a component accepts.

    Attributes:
        name: Display name (may be a spelling variant of declared_name)
        owner: Definition declaring the attribute (None for global contributions)
        is_public: True for props, False for internal state
        kind: prop, data, computed, method or directive
        required: True if the prop is declared as required
        declared_name: Spelling used at the declaration site
    """

    name: str
    owner: Optional[ComponentDefinition] = None
    is_public: bool = True
    kind: str = "prop"
    required: bool = False
    declared_name: Optional[str] = None

    def __post_init__(self):
        if self.declared_name is None:
            object.__setattr__(self, "declared_name", self.name)

    def create_name_variant(self, name: str) -> "AttributeDescriptor":
        """Same attribute under another display name."""
        return replace(self, name=name)

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "declared_name": self.declared_name,
            "owner": self.owner.name if self.owner else None,
            "kind": self.kind,
            "public": self.is_public,
            "required": self.required,
        }
