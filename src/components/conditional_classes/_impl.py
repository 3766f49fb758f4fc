"""
ConditionalClassesTagHelper - set or append the class attribute on conditions.

Evaluation order:

1. if-many: classes of entries whose condition holds
2. if-else-many: the true or false classes of every entry
3. only when if-else-many is absent, the first of:
   if-else (both branches non-blank), if (condition holds), if-not (condition fails)

Unlike the attribute helper, if-many does not exclude the modes after it.
Each mode merges against the class value left by the previous one.
"Many" modes append every selected fragment followed by a space, blank
fragments included.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from src.core.taghelper import TagHelper, TagHelperContext, TagHelperOutput
from src.domain.attributes import declared_value, set_merged_attribute
from src.domain.values import entries_from_value, get_string, is_blank

from .models import ClassMarker, ConditionalClasses, EitherClasses

logger = logging.getLogger(__name__)

CLASS_ATTRIBUTE = "class"


def join_fragments(fragments: Iterable[str]) -> str:
    """Concatenate class fragments, each followed by a single space."""
    return "".join(f"{fragment} " for fragment in fragments)


class ConditionalClassesTagHelper(TagHelper):
    markers = tuple(m.value for m in ClassMarker)

    def __init__(
        self,
        *,
        if_: ConditionalClasses | None = None,
        if_not: ConditionalClasses | None = None,
        if_else: EitherClasses | None = None,
        if_many: Iterable[ConditionalClasses] = (),
        if_else_many: Iterable[EitherClasses] = (),
    ) -> None:
        self.if_ = if_
        self.if_not = if_not
        self.if_else = if_else
        self.if_many = tuple(if_many)
        self.if_else_many = tuple(if_else_many)
        self.applied_modes: list[ClassMarker] = []

    @classmethod
    def bind(cls, context: TagHelperContext, **services: Any) -> ConditionalClassesTagHelper:
        value = context.get_attribute_value
        return cls(
            if_=ConditionalClasses.from_value(value(ClassMarker.IF.value)),
            if_not=ConditionalClasses.from_value(value(ClassMarker.IF_NOT.value)),
            if_else=EitherClasses.from_value(value(ClassMarker.IF_ELSE.value)),
            if_many=entries_from_value(value(ClassMarker.IF_MANY.value), ConditionalClasses),
            if_else_many=entries_from_value(value(ClassMarker.IF_ELSE_MANY.value), EitherClasses),
        )

    def process(self, context: TagHelperContext, output: TagHelperOutput) -> None:
        self.applied_modes = []
        existing = declared_value(context, CLASS_ATTRIBUTE)

        if self.if_many:
            classes = join_fragments(e.classes for e in self.if_many if e.condition)
            existing = self._apply(output, existing, classes, ClassMarker.IF_MANY)

        if self.if_else_many:
            classes = join_fragments(e.selected for e in self.if_else_many)
            existing = self._apply(output, existing, classes, ClassMarker.IF_ELSE_MANY)
        elif (
            self.if_else is not None
            and not is_blank(self.if_else.classes_if)
            and not is_blank(self.if_else.classes_if_not)
        ):
            existing = self._apply(output, existing, self.if_else.selected, ClassMarker.IF_ELSE)
        elif self.if_ is not None and self.if_.condition:
            existing = self._apply(output, existing, self.if_.classes, ClassMarker.IF)
        elif self.if_not is not None and not self.if_not.condition:
            existing = self._apply(output, existing, self.if_not.classes, ClassMarker.IF_NOT)

        logger.debug(
            "Conditional classes on <%s>: modes=%s", context.tag_name, self.applied_modes
        )
        self.remove_markers(output)

    def _apply(
        self, output: TagHelperOutput, existing: str, classes: str, mode: ClassMarker
    ) -> str:
        self.applied_modes.append(mode)
        if set_merged_attribute(output, CLASS_ATTRIBUTE, existing, classes):
            attr = output.attributes.get(CLASS_ATTRIBUTE)
            return get_string(attr.value if attr else None)
        return existing
