"""
Conditional classes component models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.domain.values import to_condition


class ClassMarker(str, Enum):
    """Marker attributes recognised by the conditional classes helper."""

    IF = "xpc-class-if"
    IF_NOT = "xpc-class-if-not"
    IF_ELSE = "xpc-class-if-else"
    IF_MANY = "xpc-class-if-many"
    IF_ELSE_MANY = "xpc-class-if-else-many"


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _is_pair(value: Any, size: int) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str) and len(value) == size


@dataclass(frozen=True)
class ConditionalClasses:
    """(condition, classes)."""

    condition: bool
    classes: str

    @classmethod
    def from_value(cls, value: Any) -> ConditionalClasses | None:
        if value is None or isinstance(value, cls):
            return value
        if _is_pair(value, 2):
            return cls(to_condition(value[0]), _text(value[1]))
        return None


@dataclass(frozen=True)
class EitherClasses:
    """(condition, classes_if, classes_if_not)."""

    condition: bool
    classes_if: str
    classes_if_not: str

    @property
    def selected(self) -> str:
        return self.classes_if if self.condition else self.classes_if_not

    @classmethod
    def from_value(cls, value: Any) -> EitherClasses | None:
        if value is None or isinstance(value, cls):
            return value
        if _is_pair(value, 3):
            return cls(to_condition(value[0]), _text(value[1]), _text(value[2]))
        return None


# --- Input/Output Models ---


@dataclass(frozen=True)
class ApplyConditionalClassesInput:
    """An element as declared in the template, markers included."""

    tag_name: str
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ConditionalClassesOutput:
    """Final element attributes and every mode that fired, in firing order."""

    attributes: dict[str, Any]
    modes: tuple[ClassMarker, ...] = ()

    @property
    def classes(self) -> str | None:
        for name, value in self.attributes.items():
            if name.lower() == "class":
                return value
        return None
