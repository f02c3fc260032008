"""
Attribute Name Grammar
======================
Parses and classifies attribute names as written in Vue templates.

Grammar:
    [prefix] base [modifier...]

    prefix    ":" | "v-bind:"  -> modifiers .prop .camel .sync
              "@" | "v-on:"    -> any single modifier segment
    modifier  "." segment

Spelling variants:
    kebab-case  "my-prop"   (template / XML spelling)
    camelCase   "myProp"    (script spelling, "asset" form)

Usage:
    parse_bound_name(":value.sync")     -> "value"
    parse_bound_name("plain-attr")      -> None
    allows_no_value("@click.stop")      -> True
    build_name_filter(":my-prop")("myProp") -> True
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Tuple

WILDCARD = "*"

BIND_MODIFIERS = (".prop", ".camel", ".sync")
ON_MODIFIERS = (WILDCARD,)
EVENT_MODIFIERS = (".stop", ".prevent", ".capture", ".self", ".once")

_CAMEL_RE = re.compile(r"-([a-z])")
_KEBAB_RE = re.compile(r"(?<=[A-Za-z0-9])([A-Z])")


@dataclass(frozen=True)
class GrammarConfig:
    """
    Prefix and modifier tables driving every grammar function.

    Attributes:
        prefix_variants: (prefix, modifiers) pairs in lookup order
        no_value_variants: (prefix, modifiers) pairs whose modifiers make a value optional
    """

    prefix_variants: Tuple[Tuple[str, Tuple[str, ...]], ...]
    no_value_variants: Tuple[Tuple[str, Tuple[str, ...]], ...]

    @property
    def prefixes(self) -> Tuple[str, ...]:
        return tuple(prefix for prefix, _ in self.prefix_variants)

    def find_prefix(self, attr_name: str) -> Optional[str]:
        """Return the first known prefix attr_name starts with."""
        for prefix in self.prefixes:
            if attr_name.startswith(prefix):
                return prefix
        return None


DEFAULT_GRAMMAR = GrammarConfig(
    prefix_variants=(
        (":", BIND_MODIFIERS),
        ("v-bind:", BIND_MODIFIERS),
        ("@", ON_MODIFIERS),
        ("v-on:", ON_MODIFIERS),
    ),
    no_value_variants=(
        ("@", EVENT_MODIFIERS),
        ("v-on:", EVENT_MODIFIERS),
    ),
)


@dataclass(frozen=True)
class NameToken:
    """Parsed attribute name: prefix, base name and trailing modifier text."""

    prefix: Optional[str]
    base: str
    modifier: Optional[str] = None

    @property
    def is_bound(self) -> bool:
        return self.prefix is not None

    def to_dict(self) -> dict:
        return {"prefix": self.prefix, "base": self.base, "modifier": self.modifier}


def to_camel(name: str) -> str:
    """
    Convert kebab-case to camelCase ("my-prop" -> "myProp").

    Only a hyphen followed by a lowercase letter is folded; "item-2" stays
    as is so that to_kebab(to_camel(name)) == name for every kebab name.
    """
    return _CAMEL_RE.sub(lambda m: m.group(1).upper(), name)


def to_kebab(name: str) -> str:
    """Convert camelCase to kebab-case ("myProp" -> "my-prop")."""
    return _KEBAB_RE.sub(r"-\1", name).lower()


def name_variants(name: str) -> FrozenSet[str]:
    """All spellings under which name may be declared or written."""
    return frozenset((name, to_camel(name), to_kebab(name)))


def parse_bound_name(
    attr_name: str, grammar: GrammarConfig = DEFAULT_GRAMMAR
) -> Optional[str]:
    """
    Strip the binding prefix and at most one modifier from attr_name.

    Returns None if attr_name carries no known prefix.
    """
    for prefix, modifiers in grammar.prefix_variants:
        if not attr_name.startswith(prefix):
            continue
        after = attr_name[len(prefix):]
        if not after:
            continue

        if WILDCARD in modifiers:
            return after.split(".", 1)[0]

        # Only the first modifier found in table order is stripped
        for modifier in modifiers:
            index = after.find(modifier)
            if index > 0:
                return after[:index]
        return after

    return None


def allows_no_value(attr_name: str, grammar: GrammarConfig = DEFAULT_GRAMMAR) -> bool:
    """True if attr_name may appear in markup without a value (e.g. "@submit.prevent")."""
    for prefix, modifiers in grammar.no_value_variants:
        if not attr_name.startswith(prefix):
            continue
        after = attr_name[len(prefix):]
        if after and any(after.endswith(modifier) for modifier in modifiers):
            return True
    return False


def build_name_filter(
    attr_name: str, grammar: GrammarConfig = DEFAULT_GRAMMAR
) -> Callable[[str], bool]:
    """Predicate matching every declared name equivalent to attr_name."""
    prefix = grammar.find_prefix(attr_name)
    normalized = attr_name[len(prefix):] if prefix else attr_name
    variants = name_variants(normalized)
    return lambda name: name in variants


def tokenize(attr_name: str, grammar: GrammarConfig = DEFAULT_GRAMMAR) -> NameToken:
    """Split attr_name into prefix, base and modifier text."""
    prefix = grammar.find_prefix(attr_name)
    remainder = attr_name[len(prefix):] if prefix else attr_name
    if prefix is None:
        return NameToken(prefix=None, base=remainder)

    base = parse_bound_name(attr_name, grammar)
    if base is None:
        return NameToken(prefix=prefix, base=remainder)

    modifier = remainder[len(base):] or None
    return NameToken(prefix=prefix, base=base, modifier=modifier)
