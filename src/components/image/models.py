"""
Image component models.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ImageMarker(str, Enum):
    """Marker attributes recognised by the image helper."""

    IMAGE = "xpc-image"
    SIZE_CONSTRAINT = "xpc-image-size-constraint"
    SRCSET = "xpc-image-srcset"
    SIZES = "xpc-image-sizes"


def _is_tuple_like(value: Any, size: int) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str) and len(value) == size


def has_unconstrained_format(relative_path: str, formats: Iterable[str]) -> bool:
    """True when any format marker occurs in the path, ignoring case."""
    path = relative_path.lower()
    return any(fmt.lower() in path for fmt in formats)


# --- Size Constraint ---


@dataclass(frozen=True)
class SizeConstraint:
    """
    Resize instruction forwarded to the image URL service.

    Only positive dimensions count; an all-empty constraint means
    "serve the original".
    """

    width: int | None = None
    height: int | None = None
    max_width_or_height: int | None = None

    @property
    def is_empty(self) -> bool:
        return not any(v and v > 0 for v in (self.width, self.height, self.max_width_or_height))

    @classmethod
    def empty(cls) -> SizeConstraint:
        return cls()

    @classmethod
    def max_side(cls, size: int) -> SizeConstraint:
        _require_positive("max_width_or_height", size)
        return cls(max_width_or_height=size)

    @classmethod
    def width_only(cls, width: int) -> SizeConstraint:
        _require_positive("width", width)
        return cls(width=width)

    @classmethod
    def height_only(cls, height: int) -> SizeConstraint:
        _require_positive("height", height)
        return cls(height=height)

    @classmethod
    def size(cls, width: int, height: int) -> SizeConstraint:
        _require_positive("width", width)
        _require_positive("height", height)
        return cls(width=width, height=height)

    @classmethod
    def from_value(cls, value: Any) -> SizeConstraint:
        """Coerce a bound attribute value. Unknown shapes mean no constraint."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.empty()
        if isinstance(value, int) and value > 0:
            return cls.max_side(value)
        if isinstance(value, Mapping):
            return cls(
                width=_to_int(value.get("width")) or None,
                height=_to_int(value.get("height")) or None,
                max_width_or_height=_to_int(value.get("max_width_or_height")) or None,
            )
        return cls.empty()


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def _to_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


# --- Image Descriptor ---


@dataclass(frozen=True)
class ImageDescriptor:
    """Concrete image view model; any object with the same attributes also works."""

    relative_path: str
    alt_text: str | None = None
    title: str | None = None
    width: int = 0
    height: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ImageDescriptor:
        return cls(
            relative_path=str(data.get("relative_path") or ""),
            alt_text=data.get("alt_text"),
            title=data.get("title"),
            width=_to_int(data.get("width")),
            height=_to_int(data.get("height")),
        )


# --- Responsive Entries ---


@dataclass(frozen=True)
class SrcSetEntry:
    """Density descriptor: serve ``max_width_or_height`` for ``factor``x screens."""

    factor: float
    max_width_or_height: int

    @property
    def descriptor(self) -> str:
        factor = format(self.factor, "f").rstrip("0").rstrip(".")
        return f"{factor}x"

    @classmethod
    def from_value(cls, value: Any) -> SrcSetEntry | None:
        if isinstance(value, cls):
            return value
        if not _is_tuple_like(value, 2):
            return None
        try:
            entry = cls(float(value[0]), int(value[1]))
        except (TypeError, ValueError):
            return None
        return entry if entry.factor > 0 and entry.max_width_or_height > 0 else None


@dataclass(frozen=True)
class SizesEntry:
    """Width descriptor paired with the viewport breakpoint it applies below."""

    max_width_or_height: int
    breakpoint: str

    @property
    def descriptor(self) -> str:
        return f"{self.max_width_or_height}w"

    @property
    def media_condition(self) -> str:
        return f"(max-width: {self.breakpoint}) {self.max_width_or_height}px"

    @classmethod
    def from_value(cls, value: Any) -> SizesEntry | None:
        if isinstance(value, cls):
            return value
        if not _is_tuple_like(value, 2):
            return None
        try:
            entry = cls(int(value[0]), str(value[1]))
        except (TypeError, ValueError):
            return None
        return entry if entry.max_width_or_height > 0 else None


# --- Input/Output Models ---


@dataclass(frozen=True)
class RenderImageInput:
    """An <img> element as declared in the template, markers included."""

    attributes: dict[str, Any] = field(default_factory=dict)
    tag_name: str = "img"


@dataclass(frozen=True)
class RenderImageOutput:
    """Final image attributes, or a suppressed element."""

    attributes: dict[str, Any]
    suppressed: bool = False
    error: str | None = None
