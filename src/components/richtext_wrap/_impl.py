"""
RichTextWrapTagHelper - wrap rich text only when it is not already wrapped.

Placed on an element (typically <p> or <div>) around rendered rich text.
When the rich text already starts with the same element, the wrapper is
elided so the output is not doubly nested; otherwise the wrapper renders.

Only the start of the rendered children is inspected, no descent.
"""

from __future__ import annotations

import logging
from typing import Any

from src.core.taghelper import TagHelper, TagHelperContext, TagHelperOutput

logger = logging.getLogger(__name__)

WRAP_MARKER = "xpc-rich-text-wrap"


def starts_with_tag(content: str, tag_name: str) -> bool:
    """
    True if ``content`` opens with ``<tag_name `` (case-insensitive).

    The trailing space is required, so "<div" does not match "<divider>".
    """
    text = content.lstrip()
    if not text.startswith("<"):
        return False
    return text.lower().startswith(f"<{tag_name.lower()} ")


class RichTextWrapTagHelper(TagHelper):
    markers = (WRAP_MARKER,)

    def __init__(self, **services: Any) -> None:
        self.unwrapped = False

    async def process_async(self, context: TagHelperContext, output: TagHelperOutput) -> None:
        content = await output.get_child_content()

        self.remove_markers(output)

        if starts_with_tag(content, context.tag_name):
            logger.debug("Rich text already wrapped in <%s>, eliding wrapper", context.tag_name)
            output.tag_name = None
            self.unwrapped = True
