"""
Conditional attributes tag helper tests.

Covers the merge rule, mode precedence, if-not semantics and many-mode grouping.
"""

from __future__ import annotations

import pytest

from src.components.conditional_attributes import (
    ApplyConditionalAttributesInput,
    AttributeMarker,
    ConditionalAttribute,
    ConditionalAttributesTagHelper,
    EitherAttribute,
    group_values,
    run,
)
from src.core.taghelper import TagHelperContext, TagHelperOutput


def apply(attributes: dict, tag_name: str = "div") -> dict:
    return run(ApplyConditionalAttributesInput(tag_name=tag_name, attributes=attributes)).attributes


class TestMergeRule:
    """Merging with an attribute already declared on the element."""

    def test_blank_existing_and_blank_new_emits_nothing(self) -> None:
        result = apply({"xpc-attr-if": (True, "data-x", "  ")})

        assert "data-x" not in result

    def test_blank_existing_takes_new_value(self) -> None:
        result = apply({"data-x": "", "xpc-attr-if": (True, "data-x", "A")})

        assert result["data-x"] == "A"

    def test_blank_new_leaves_existing_unchanged(self) -> None:
        result = apply({"data-x": "keep", "xpc-attr-if": (True, "data-x", "")})

        assert result["data-x"] == "keep"

    def test_both_present_are_space_joined(self) -> None:
        result = apply({"data-x": "E", "xpc-attr-if": (True, "data-x", "V")})

        assert result["data-x"] == "E V"

    def test_existing_lookup_is_case_insensitive(self) -> None:
        result = apply({"ARIA-Label": "Open", "xpc-attr-if": (True, "aria-label", "menu")})

        assert result == {"aria-label": "Open menu"}

    def test_non_string_existing_value_is_coerced(self) -> None:
        result = apply({"tabindex": 0, "xpc-attr-if": (True, "tabindex", "1")})

        assert result["tabindex"] == "0 1"


class TestSingleModes:
    """if, if-not and if-else."""

    def test_if_applies_when_condition_true(self) -> None:
        assert apply({"xpc-attr-if": (True, "role", "button")}) == {"role": "button"}

    def test_if_skipped_when_condition_false(self) -> None:
        assert apply({"xpc-attr-if": (False, "role", "button")}) == {}

    def test_if_not_applies_when_condition_false(self) -> None:
        assert apply({"xpc-attr-if-not": (False, "role", "button")}) == {"role": "button"}

    def test_if_not_skipped_when_condition_true(self) -> None:
        assert apply({"xpc-attr-if-not": (True, "role", "button")}) == {}

    def test_if_else_chooses_true_branch(self) -> None:
        result = apply({"xpc-attr-if-else": (True, "aria-expanded", "true", "false")})

        assert result == {"aria-expanded": "true"}

    def test_if_else_chooses_false_branch(self) -> None:
        result = apply({"xpc-attr-if-else": (False, "aria-expanded", "true", "false")})

        assert result == {"aria-expanded": "false"}

    def test_if_else_with_one_blank_branch_does_not_fire(self) -> None:
        result = apply({"xpc-attr-if-else": (True, "data-x", "A", "")})

        assert result == {}

    def test_list_payload_is_accepted(self) -> None:
        assert apply({"xpc-attr-if": [True, "data-x", "A"]}) == {"data-x": "A"}

    def test_malformed_payload_is_ignored(self) -> None:
        assert apply({"xpc-attr-if": (True, "data-x")}) == {}

    def test_string_conditions_are_parsed(self) -> None:
        assert apply({"xpc-attr-if": ["false", "role", "button"]}) == {}
        assert apply({"xpc-attr-if": ["true", "role", "button"]}) == {"role": "button"}
        assert apply({"xpc-attr-if-else": ["false", "data-x", "A", "B"]}) == {"data-x": "B"}

    def test_unknown_input_type_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run({"tag_name": "div", "attributes": {}})  # type: ignore[arg-type]


class TestPrecedence:
    """First matching mode wins."""

    def test_if_beats_if_not(self) -> None:
        output = run(
            ApplyConditionalAttributesInput(
                tag_name="div",
                attributes={
                    "xpc-attr-if": (True, "data-x", "A"),
                    "xpc-attr-if-not": (True, "data-x", "B"),
                },
            )
        )

        assert output.attributes == {"data-x": "A"}
        assert output.mode is AttributeMarker.IF

    def test_false_if_falls_through_to_if_not(self) -> None:
        result = apply(
            {
                "xpc-attr-if": (False, "data-x", "A"),
                "xpc-attr-if-not": (False, "data-x", "B"),
            }
        )

        assert result == {"data-x": "B"}

    def test_if_else_beats_if(self) -> None:
        result = apply(
            {
                "xpc-attr-if": (True, "data-x", "A"),
                "xpc-attr-if-else": (False, "data-x", "T", "F"),
            }
        )

        assert result == {"data-x": "F"}

    def test_incomplete_if_else_falls_through_to_if(self) -> None:
        result = apply(
            {
                "xpc-attr-if": (True, "data-x", "A"),
                "xpc-attr-if-else": (True, "data-x", "T", ""),
            }
        )

        assert result == {"data-x": "A"}

    def test_if_else_many_beats_if_many(self) -> None:
        output = run(
            ApplyConditionalAttributesInput(
                tag_name="div",
                attributes={
                    "xpc-attr-if-many": [(True, "data-a", "1")],
                    "xpc-attr-if-else-many": [(False, "data-b", "yes", "no")],
                },
            )
        )

        assert output.attributes == {"data-b": "no"}
        assert output.mode is AttributeMarker.IF_ELSE_MANY

    def test_if_many_beats_single_modes_even_when_nothing_selected(self) -> None:
        result = apply(
            {
                "xpc-attr-if-many": [(False, "data-a", "1")],
                "xpc-attr-if": (True, "data-x", "A"),
            }
        )

        assert result == {}


class TestManyModes:
    """Grouping by attribute name."""

    def test_if_many_groups_true_entries(self) -> None:
        result = apply(
            {
                "xpc-attr-if-many": [
                    (True, "data-a", "1"),
                    (True, "data-a", "2"),
                    (False, "data-a", "3"),
                ]
            }
        )

        assert result == {"data-a": "1 2"}

    def test_if_else_many_uses_every_entry(self) -> None:
        result = apply(
            {
                "xpc-attr-if-else-many": [
                    (True, "data-a", "on", "off"),
                    (False, "data-a", "on", "off"),
                    (False, "data-b", "x", "y"),
                ]
            }
        )

        assert result == {"data-a": "on off", "data-b": "y"}

    def test_many_merges_with_declared_values(self) -> None:
        result = apply(
            {
                "data-a": "0",
                "xpc-attr-if-many": [(True, "data-a", "1"), (True, "data-b", "2")],
            }
        )

        assert result == {"data-a": "0 1", "data-b": "2"}

    def test_group_values_keeps_first_seen_order(self) -> None:
        grouped = group_values([("b", "1"), ("a", "2"), ("b", "3")])

        assert list(grouped.items()) == [("b", "1 3"), ("a", "2")]


class TestMarkers:
    """Marker attributes never reach the output."""

    def test_markers_are_removed_when_a_mode_fires(self) -> None:
        result = apply({"id": "x", "xpc-attr-if": (True, "role", "button")})

        assert result == {"id": "x", "role": "button"}

    def test_markers_are_removed_when_nothing_fires(self) -> None:
        result = apply({"id": "x", "xpc-attr-if": (False, "role", "button")})

        assert result == {"id": "x"}

    def test_running_again_on_stripped_element_is_a_no_op(self) -> None:
        first = apply({"class": "c", "xpc-attr-if": (True, "data-x", "A")})
        second = apply(first)

        assert second == first

    @pytest.mark.parametrize("marker", [m.value for m in AttributeMarker])
    def test_helper_applies_to_every_marker(self, marker: str) -> None:
        context = TagHelperContext("span", {marker: None})

        assert ConditionalAttributesTagHelper.applies_to(context)


class TestHelperDirectly:
    """Constructing the helper without attribute binding."""

    def test_helper_with_entry_objects(self) -> None:
        context = TagHelperContext("a", {"href": "/x"})
        output = TagHelperOutput.for_context(context)
        helper = ConditionalAttributesTagHelper(
            if_else=EitherAttribute(True, "target", "_blank", "_self"),
            if_=ConditionalAttribute(True, "rel", "noopener"),
        )

        helper.process(context, output)

        assert output.attributes.to_dict() == {"href": "/x", "target": "_blank"}
        assert helper.applied_mode is AttributeMarker.IF_ELSE
