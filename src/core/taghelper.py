"""
Tag helper element model.

The host rendering pipeline hands every helper two objects: a read-only
context describing what the template declared on the element, and a mutable
output the helper edits. Helpers never build markup themselves; they set and
remove attributes, rename or elide the tag, or suppress the element.

Invariants:
- Attribute names compare case-insensitively, original casing is kept for output
- set_attribute replaces in place, so declared attribute order survives edits
- Child content is produced at most once per output
"""

from __future__ import annotations

import html
from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar

from src.domain.values import get_string

# Elements rendered without a closing tag.
VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    ]
)

ChildContentFactory = Callable[[], Awaitable[str]]


@dataclass
class TagHelperAttribute:
    """A single element attribute."""

    name: str
    value: Any = None

    def matches(self, name: str) -> bool:
        return self.name.lower() == name.lower()


class TagHelperAttributeList:
    """Ordered attribute list with case-insensitive lookup."""

    def __init__(self, attributes: Iterable[TagHelperAttribute] | None = None) -> None:
        self._items: list[TagHelperAttribute] = list(attributes or [])

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> TagHelperAttributeList:
        return cls(TagHelperAttribute(name, value) for name, value in mapping.items())

    def __iter__(self) -> Iterator[TagHelperAttribute]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def contains(self, name: str) -> bool:
        return any(a.matches(name) for a in self._items)

    def get(self, name: str) -> TagHelperAttribute | None:
        """Return the first attribute named ``name``, if any."""
        for attr in self._items:
            if attr.matches(name):
                return attr
        return None

    def set_attribute(self, name: str, value: Any = None) -> None:
        """
        Set an attribute value.

        Replaces the first same-named attribute (dropping any duplicates)
        or appends a new one.
        """
        replaced = False
        kept: list[TagHelperAttribute] = []
        for attr in self._items:
            if attr.matches(name):
                if replaced:
                    continue
                kept.append(TagHelperAttribute(name, value))
                replaced = True
            else:
                kept.append(attr)
        if not replaced:
            kept.append(TagHelperAttribute(name, value))
        self._items = kept

    def remove_all(self, name: str) -> bool:
        """Remove every attribute named ``name``. Returns True if any was removed."""
        before = len(self._items)
        self._items = [a for a in self._items if not a.matches(name)]
        return len(self._items) != before

    def to_dict(self) -> dict[str, Any]:
        return {a.name: a.value for a in self._items}


class TagHelperContext:
    """What the template declared on an element, before any helper ran."""

    def __init__(
        self,
        tag_name: str,
        all_attributes: TagHelperAttributeList | dict[str, Any] | None = None,
    ) -> None:
        self.tag_name = tag_name
        if isinstance(all_attributes, TagHelperAttributeList):
            self.all_attributes = all_attributes
        else:
            self.all_attributes = TagHelperAttributeList.from_mapping(all_attributes or {})

    def get_attribute_value(self, name: str) -> Any:
        attr = self.all_attributes.get(name)
        return attr.value if attr is not None else None


async def _no_content() -> str:
    return ""


class TagHelperOutput:
    """
    Mutable element output.

    ``tag_name`` set to None elides the element itself while its children
    still render. ``suppress_output`` drops the element and its children.
    """

    def __init__(
        self,
        tag_name: str | None,
        attributes: TagHelperAttributeList | dict[str, Any] | None = None,
        child_content: ChildContentFactory | str | None = None,
    ) -> None:
        self.tag_name = tag_name
        if isinstance(attributes, TagHelperAttributeList):
            self.attributes = attributes
        else:
            self.attributes = TagHelperAttributeList.from_mapping(attributes or {})

        if isinstance(child_content, str):
            text = child_content

            async def _static() -> str:
                return text

            self._child_factory: ChildContentFactory = _static
        else:
            self._child_factory = child_content or _no_content

        self._child_content: str | None = None
        self.is_suppressed = False

    @classmethod
    def for_context(
        cls,
        context: TagHelperContext,
        child_content: ChildContentFactory | str | None = None,
    ) -> TagHelperOutput:
        """Create an output that starts as a copy of the declared element."""
        attributes = TagHelperAttributeList(
            TagHelperAttribute(a.name, a.value) for a in context.all_attributes
        )
        return cls(context.tag_name, attributes, child_content)

    async def get_child_content(self) -> str:
        if self._child_content is None:
            self._child_content = await self._child_factory()
        return self._child_content

    def suppress_output(self) -> None:
        self.tag_name = None
        self.is_suppressed = True
        self._child_content = ""

    async def render(self) -> str:
        """Serialise the output to HTML."""
        if self.is_suppressed:
            return ""

        content = await self.get_child_content()
        if self.tag_name is None:
            return content

        parts = [self.tag_name]
        for attr in self.attributes:
            if attr.value is None:
                parts.append(attr.name)
            else:
                parts.append(f'{attr.name}="{html.escape(get_string(attr.value))}"')
        start = f"<{' '.join(parts)}>"

        if self.tag_name.lower() in VOID_ELEMENTS:
            return start
        return f"{start}{content}</{self.tag_name}>"


class TagHelper:
    """
    Base class for element helpers.

    Subclasses list the marker attributes that trigger them and implement
    either ``process`` or ``process_async``.
    """

    markers: ClassVar[tuple[str, ...]] = ()
    target_tag: ClassVar[str] = "*"
    order: ClassVar[int] = 0

    @classmethod
    def applies_to(cls, context: TagHelperContext) -> bool:
        if cls.target_tag != "*" and cls.target_tag.lower() != context.tag_name.lower():
            return False
        return any(context.all_attributes.contains(m) for m in cls.markers)

    @classmethod
    def bind(cls, context: TagHelperContext, **services: Any) -> TagHelper:
        """Build the helper from the marker values declared on the element."""
        return cls(**services)

    def process(self, context: TagHelperContext, output: TagHelperOutput) -> None:
        return None

    async def process_async(self, context: TagHelperContext, output: TagHelperOutput) -> None:
        self.process(context, output)

    def remove_markers(self, output: TagHelperOutput) -> None:
        for marker in self.markers:
            output.attributes.remove_all(marker)
