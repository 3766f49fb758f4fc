"""
Conditional attributes component models.

Marker payloads arrive as tuples (or lists, from JSON) and are normalised
into the entry types below before any merging happens.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.values import to_condition


class AttributeMarker(str, Enum):
    """Marker attributes recognised by the conditional attributes helper."""

    IF = "xpc-attr-if"
    IF_NOT = "xpc-attr-if-not"
    IF_ELSE = "xpc-attr-if-else"
    IF_MANY = "xpc-attr-if-many"
    IF_ELSE_MANY = "xpc-attr-if-else-many"


@dataclass(frozen=True)
class ConditionalAttribute:
    """(condition, name, value): one proposed attribute value."""

    condition: bool
    attribute_name: str
    value: str

    @classmethod
    def from_value(cls, value: Any) -> ConditionalAttribute | None:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 3:
            condition, name, text = value
            return cls(to_condition(condition), str(name), "" if text is None else str(text))
        return None


@dataclass(frozen=True)
class EitherAttribute:
    """(condition, name, value_if, value_if_not): exactly one value per evaluation."""

    condition: bool
    attribute_name: str
    value_if: str
    value_if_not: str

    @property
    def selected(self) -> str:
        return self.value_if if self.condition else self.value_if_not

    @classmethod
    def from_value(cls, value: Any) -> EitherAttribute | None:
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 4:
            condition, name, if_true, if_false = value
            return cls(
                to_condition(condition),
                str(name),
                "" if if_true is None else str(if_true),
                "" if if_false is None else str(if_false),
            )
        return None


# --- Input/Output Models ---


@dataclass(frozen=True)
class ApplyConditionalAttributesInput:
    """An element as declared in the template, markers included."""

    tag_name: str
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConditionalAttributesOutput:
    """Final element attributes and the mode that fired, if any."""

    attributes: dict[str, Any]
    mode: AttributeMarker | None = None
