"""
Component Details Validators
============================
Validates attribute aggregation, single-name resolution and local
component lookup across mixins, global mixins and extends.

Sample library (see shared_fixtures.SAMPLE_CATALOG):
    base-input  --mixins-->  clearable, missing-mixin (stale)
                --extends--> base-field --mixins--> validatable
    i18n is registered as a global mixin
"""
import pytest

from vueattrs.catalog import CatalogDetailsProvider, CatalogIndex, ComponentCatalog
from vueattrs.core.details import ComponentDetailsProvider
from vueattrs.core.model import VisitResult


def _names(descriptors):
    return [d.name for d in descriptors]


@pytest.mark.details
def test_script_attributes_include_inherited(details, sample_catalog):
    """
    Given: base-input with own, mixed-in, global and extended declarations
    When: Listing attributes in script context
    Then: Own attributes and directives come first, then every reachable
          definition in traversal order; hyphenated names are camelized
    """
    base_input = sample_catalog.get("base-input")

    attributes = details.get_attributes(base_input, only_public=False, xml_context=False)

    assert _names(attributes) == [
        "placeholder", "value", "internalValue",
        "vAutoSize", "vFocusTrap",
        "clearable", "clear",
        "locale", "translate",
        "label", "value", "hasValue",
        "rules", "errorMessage", "errors",
    ]


@pytest.mark.details
def test_public_attributes_exclude_internal_state(details, sample_catalog):
    attributes = details.get_attributes(sample_catalog.get("base-input"), only_public=True)

    assert all(d.is_public for d in attributes)
    assert "internalValue" not in _names(attributes)
    assert "hasValue" not in _names(attributes)
    assert "rules" in _names(attributes)


@pytest.mark.details
def test_xml_context_variants():
    """
    Given: A component declaring a prop named fooBar
    When: Listing attributes in template (XML) context
    Then: Exactly foo-bar, :foo-bar and v-bind:foo-bar are produced
    """
    catalog = ComponentCatalog.from_dict({"components": {"widget": {"props": ["fooBar"]}}})
    details = ComponentDetailsProvider(CatalogIndex(catalog), CatalogDetailsProvider(catalog))

    attributes = details.get_attributes(catalog.get("widget"), xml_context=True)

    assert _names(attributes) == ["foo-bar", ":foo-bar", "v-bind:foo-bar"]
    assert {d.declared_name for d in attributes} == {"fooBar"}
    assert all(d.owner is catalog.get("widget") for d in attributes)


@pytest.mark.details
def test_script_context_keeps_unhyphenated_descriptor(details, sample_catalog):
    attributes = details.get_attributes(sample_catalog.get("error-tip"), only_public=True)

    text = next(d for d in attributes if d.declared_name == "text")
    assert text.name == "text"


@pytest.mark.details
def test_absent_root_without_edges_is_empty():
    catalog = ComponentCatalog.from_dict({"components": {"widget": {"props": ["a"]}}})
    details = ComponentDetailsProvider(CatalogIndex(catalog), CatalogDetailsProvider(catalog))

    assert details.get_attributes(None) == []
    assert details.resolve_attribute(None, "a") is None

    offered = []
    details.process_local_components(None, lambda name, target: offered.append(name) or VisitResult.CONTINUE)
    assert offered == []


@pytest.mark.details
def test_absent_root_yields_global_mixins(details):
    assert _names(details.get_attributes(None)) == ["locale", "translate"]


@pytest.mark.details
def test_own_attribute_shadows_inherited(details, sample_catalog):
    """
    Given: base-input and its base-field parent both declare "value"
    When: Resolving ":value"
    Then: base-input's own declaration wins
    """
    base_input = sample_catalog.get("base-input")

    descriptor = details.resolve_attribute(base_input, ":value")

    assert descriptor.owner is base_input
    assert descriptor.required is False


@pytest.mark.details
@pytest.mark.parametrize("attr_name,owner", [
    ("error-message", "validatable"),
    (":errorMessage", "validatable"),
    ("v-bind:label", "base-field"),
    ("clearable", "clearable"),
    ("@locale", "i18n"),
    ("hasValue", "base-field"),
])
def test_resolve_through_composition(details, sample_catalog, attr_name, owner):
    descriptor = details.resolve_attribute(sample_catalog.get("base-input"), attr_name)

    assert descriptor is not None
    assert descriptor.owner is sample_catalog.get(owner)


@pytest.mark.details
def test_resolve_respects_only_public(details, sample_catalog):
    base_input = sample_catalog.get("base-input")

    assert details.resolve_attribute(base_input, "hasValue", only_public=True) is None
    assert details.resolve_attribute(base_input, "label", only_public=True).kind == "prop"


@pytest.mark.details
def test_resolve_stops_at_first_match(sample_catalog):
    """
    Given: "label" is declared on base-field, reached before validatable
    When: Resolving "label"
    Then: validatable is never asked for its details
    """
    asked = []

    class RecordingDetails(CatalogDetailsProvider):
        def get_details(self, definition, name_filter, only_public, only_first):
            asked.append(definition.name)
            return super().get_details(definition, name_filter, only_public, only_first)

    details = ComponentDetailsProvider(CatalogIndex(sample_catalog), RecordingDetails(sample_catalog))

    details.resolve_attribute(sample_catalog.get("base-input"), "label")

    assert asked == ["base-input", "clearable", "i18n", "base-field"]


@pytest.mark.details
@pytest.mark.parametrize("attr_name,declared,local", [
    ("v-auto-size", "autoSize", True),
    ("v-autoSize.lazy", "autoSize", True),
    ("v-focus-trap:active", "focusTrap", False),
])
def test_resolve_falls_back_to_directives(details, sample_catalog, attr_name, declared, local):
    base_input = sample_catalog.get("base-input")

    descriptor = details.resolve_attribute(base_input, attr_name)

    assert descriptor.kind == "directive"
    assert descriptor.declared_name == declared
    assert (descriptor.owner is base_input) is local


@pytest.mark.details
def test_unknown_attribute_is_absent(details, sample_catalog):
    assert details.resolve_attribute(sample_catalog.get("base-input"), ":nope") is None
    assert details.resolve_attribute(sample_catalog.get("base-input"), "v-nope") is None


@pytest.mark.details
def test_missing_collaborator_results_contribute_nothing(sample_catalog):
    """
    Given: An own-details provider returning None and no directives provider
    When: Aggregating and resolving
    Then: Empty results are returned instead of errors
    """
    class SilentDetails:
        def get_details(self, definition, name_filter, only_public, only_first):
            return None

        def get_local_components(self, definition, name_filter, only_first):
            return None

    details = ComponentDetailsProvider(CatalogIndex(sample_catalog), SilentDetails())
    base_input = sample_catalog.get("base-input")

    assert details.get_attributes(base_input) == []
    assert details.resolve_attribute(base_input, "v-auto-size") is None
    assert details.process_local_components(base_input, lambda n, t: VisitResult.STOP) is VisitResult.CONTINUE


@pytest.mark.details
def test_local_components_nearest_first(details, sample_catalog):
    """
    Given: base-input, base-field and validatable each declare a local component
    When: Processing local components with a processor that never stops
    Then: All are offered, own declarations first
    """
    offered = []

    def collect(name, target):
        offered.append((name, target.name if target else None))
        return VisitResult.CONTINUE

    result = details.process_local_components(sample_catalog.get("base-input"), collect)

    assert result is VisitResult.CONTINUE
    assert offered == [
        ("InputIcon", "input-icon"),
        ("FieldLabel", "field-label"),
        ("ErrorTip", "error-tip"),
    ]


@pytest.mark.details
def test_local_components_shadow_mixed_in(details, sample_catalog):
    """
    Given: base-input declares InputIcon locally
    When: The processor stops on InputIcon
    Then: Mixed-in and extended components are never offered
    """
    offered = []

    def find_icon(name, target):
        offered.append(name)
        return VisitResult.STOP if name == "InputIcon" else VisitResult.CONTINUE

    result = details.process_local_components(sample_catalog.get("base-input"), find_icon)

    assert result is VisitResult.STOP
    assert offered == ["InputIcon"]


@pytest.mark.details
def test_local_components_stop_in_traversal(details, sample_catalog):
    offered = []

    def find_label(name, target):
        offered.append(name)
        return VisitResult.STOP if name == "FieldLabel" else VisitResult.CONTINUE

    result = details.process_local_components(sample_catalog.get("base-input"), find_label)

    assert result is VisitResult.STOP
    assert offered == ["InputIcon", "FieldLabel"]


@pytest.mark.details
def test_cyclic_catalog_attributes(details, sample_catalog):
    """
    Given: cycle-a mixes in cycle-b, cycle-b extends cycle-a, cycle-c extends cycle-a
    When: Listing attributes of cycle-c
    Then: Each definition contributes once
    """
    attributes = details.get_attributes(sample_catalog.get("cycle-c"), only_public=True)

    assert _names(attributes) == ["gamma", "vFocusTrap", "locale", "alpha", "beta"]
