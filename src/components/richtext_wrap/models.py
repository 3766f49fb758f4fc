"""
Richtext wrap component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class WrapRichTextInput:
    """A wrapper element and the rich text rendered inside it."""

    tag_name: str
    content: str
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class WrapRichTextOutput:
    """Rendered markup and whether the wrapper was elided."""

    html: str
    unwrapped: bool = False
