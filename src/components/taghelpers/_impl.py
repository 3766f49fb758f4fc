"""
TagHelperRunner - dispatch helpers to an element by marker attribute.

This is the minimal host the HTTP preview and the tests drive the helpers
through; it is not a template engine.

Key behaviors:
- A helper runs when its target tag matches and any of its markers is declared
- Helpers run in ascending ``order``, registration order breaking ties
- Once a helper suppresses the output, later helpers are skipped
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from src.core.taghelper import (
    ChildContentFactory,
    TagHelper,
    TagHelperContext,
    TagHelperOutput,
)

logger = logging.getLogger(__name__)


class TagHelperRunner:
    def __init__(
        self,
        helpers: Iterable[type[TagHelper]] = (),
        services: dict[type[TagHelper], dict[str, Any]] | None = None,
    ) -> None:
        self.helpers: list[type[TagHelper]] = list(helpers)
        self.services = services or {}

    def register(self, helper: type[TagHelper], **services: Any) -> None:
        self.helpers.append(helper)
        if services:
            self.services[helper] = services

    def select(self, context: TagHelperContext) -> list[type[TagHelper]]:
        """Helpers applicable to the element, in execution order."""
        matching = [h for h in self.helpers if h.applies_to(context)]
        return sorted(matching, key=lambda h: h.order)

    async def run(self, context: TagHelperContext, output: TagHelperOutput) -> TagHelperOutput:
        for helper_cls in self.select(context):
            if output.is_suppressed:
                logger.debug(
                    "Output of <%s> suppressed, skipping %s",
                    context.tag_name,
                    helper_cls.__name__,
                )
                continue

            helper = helper_cls.bind(context, **self.services.get(helper_cls, {}))
            await helper.process_async(context, output)

        return output

    async def render_element(
        self,
        tag_name: str,
        attributes: dict[str, Any] | None = None,
        content: ChildContentFactory | str | None = None,
    ) -> str:
        """Run every applicable helper on one element and serialise the result."""
        context = TagHelperContext(tag_name, attributes or {})
        output = TagHelperOutput.for_context(context, content)
        await self.run(context, output)
        return await output.render()
