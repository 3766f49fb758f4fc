"""
Tag helpers component - wires the element helpers into one runner.
"""

from __future__ import annotations

from src.adapters.rules import ImageRulesAdapter, create_image_url_adapter
from src.components.conditional_attributes import ConditionalAttributesTagHelper
from src.components.conditional_classes import ConditionalClassesTagHelper
from src.components.image import ImageTagHelper, ImageUrlPort, build_config
from src.components.richtext_wrap import RichTextWrapTagHelper
from src.rules.models import Rules

from ._impl import TagHelperRunner


def create_default_runner(
    rules: Rules | None = None,
    image_urls: ImageUrlPort | None = None,
) -> TagHelperRunner:
    """
    Create a runner with every element helper registered.

    Args:
        rules: Validated rules; defaults apply when omitted.
        image_urls: Image URL service; the query string adapter when omitted.

    Returns:
        TagHelperRunner ready to render elements.
    """
    rules = rules or Rules()

    runner = TagHelperRunner()
    runner.register(ConditionalAttributesTagHelper)
    runner.register(ConditionalClassesTagHelper)
    runner.register(RichTextWrapTagHelper)
    runner.register(
        ImageTagHelper,
        image_urls=image_urls or create_image_url_adapter(rules),
        config=build_config(ImageRulesAdapter(rules)),
    )
    return runner
