"""
ConditionalAttributesTagHelper - set or append attribute values on conditions.

Five mutually exclusive modes, first match wins:

1. if-else-many: every entry contributes its true or false value
2. if-many: only entries whose condition holds contribute
3. if-else: single either value, only when both branches are non-blank
4. if: single value when the condition holds
5. if-not: single value when the condition does not hold

"Many" modes group values by attribute name in first-seen order, joining
same-name values with a space. Every resulting value is merged with the
attribute already declared on the element.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from src.core.taghelper import TagHelper, TagHelperContext, TagHelperOutput
from src.domain.attributes import declared_value, set_merged_attribute
from src.domain.values import entries_from_value, is_blank

from .models import AttributeMarker, ConditionalAttribute, EitherAttribute

logger = logging.getLogger(__name__)


def group_values(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Group (name, value) pairs by name, space-joining repeats in input order."""
    lookup: dict[str, str] = {}
    for name, value in pairs:
        if name in lookup:
            lookup[name] += f" {value}"
        else:
            lookup[name] = value
    return lookup


class ConditionalAttributesTagHelper(TagHelper):
    markers = tuple(m.value for m in AttributeMarker)

    def __init__(
        self,
        *,
        if_: ConditionalAttribute | None = None,
        if_not: ConditionalAttribute | None = None,
        if_else: EitherAttribute | None = None,
        if_many: Iterable[ConditionalAttribute] = (),
        if_else_many: Iterable[EitherAttribute] = (),
    ) -> None:
        self.if_ = if_
        self.if_not = if_not
        self.if_else = if_else
        self.if_many = tuple(if_many)
        self.if_else_many = tuple(if_else_many)
        self.applied_mode: AttributeMarker | None = None

    @classmethod
    def bind(cls, context: TagHelperContext, **services: Any) -> ConditionalAttributesTagHelper:
        value = context.get_attribute_value
        return cls(
            if_=ConditionalAttribute.from_value(value(AttributeMarker.IF.value)),
            if_not=ConditionalAttribute.from_value(value(AttributeMarker.IF_NOT.value)),
            if_else=EitherAttribute.from_value(value(AttributeMarker.IF_ELSE.value)),
            if_many=entries_from_value(
                value(AttributeMarker.IF_MANY.value), ConditionalAttribute
            ),
            if_else_many=entries_from_value(
                value(AttributeMarker.IF_ELSE_MANY.value), EitherAttribute
            ),
        )

    def process(self, context: TagHelperContext, output: TagHelperOutput) -> None:
        self.applied_mode = self._apply(context, output)
        logger.debug("Conditional attributes on <%s>: mode=%s", context.tag_name, self.applied_mode)
        self.remove_markers(output)

    def _apply(self, context: TagHelperContext, output: TagHelperOutput) -> AttributeMarker | None:
        if self.if_else_many:
            lookup = group_values((e.attribute_name, e.selected) for e in self.if_else_many)
            self._merge_all(context, output, lookup)
            return AttributeMarker.IF_ELSE_MANY

        if self.if_many:
            lookup = group_values(
                (e.attribute_name, e.value) for e in self.if_many if e.condition
            )
            self._merge_all(context, output, lookup)
            return AttributeMarker.IF_MANY

        either = self.if_else
        if (
            either is not None
            and not is_blank(either.value_if)
            and not is_blank(either.value_if_not)
        ):
            self._merge(context, output, either.attribute_name, either.selected)
            return AttributeMarker.IF_ELSE

        if self.if_ is not None and self.if_.condition:
            self._merge(context, output, self.if_.attribute_name, self.if_.value)
            return AttributeMarker.IF

        if self.if_not is not None and not self.if_not.condition:
            self._merge(context, output, self.if_not.attribute_name, self.if_not.value)
            return AttributeMarker.IF_NOT

        return None

    def _merge_all(
        self, context: TagHelperContext, output: TagHelperOutput, lookup: dict[str, str]
    ) -> None:
        for name, value in lookup.items():
            self._merge(context, output, name, value)

    @staticmethod
    def _merge(context: TagHelperContext, output: TagHelperOutput, name: str, value: str) -> None:
        if is_blank(name):
            logger.debug("Skipping conditional value %r with no attribute name", value)
            return
        set_merged_attribute(output, name, declared_value(context, name), value)
