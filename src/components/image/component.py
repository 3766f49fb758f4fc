"""
Image component - responsive <img> rendering.

Invariants:
- A missing image renders nothing; a blank path renders a visible error attribute
- srcset density mode and sizes width mode never both apply
- Marker attributes never reach the output
"""

from __future__ import annotations

from src.core.taghelper import TagHelperContext, TagHelperOutput

from ._impl import DEFAULT_CONFIG, ImageConfig, ImageTagHelper
from .models import RenderImageInput, RenderImageOutput
from .ports import ImageUrlPort, RulesPort


def build_config(rules: RulesPort | None) -> ImageConfig:
    """Build image config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return ImageConfig(
        default_loading=rules.get_default_loading(),
        error_attribute=rules.get_error_attribute(),
        error_message=rules.get_error_message(),
        unconstrained_formats=rules.get_unconstrained_formats(),
    )


def run(
    inp: RenderImageInput,
    *,
    image_urls: ImageUrlPort,
    rules: RulesPort | None = None,
) -> RenderImageOutput:
    """
    Render the image markers declared on an <img> element.

    Args:
        inp: The element as declared, marker attributes included.
        image_urls: Service producing resized asset paths.
        rules: Optional rules port for configuration.

    Returns:
        RenderImageOutput with the final attributes.
    """
    if not isinstance(inp, RenderImageInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    context = TagHelperContext(inp.tag_name, inp.attributes)
    output = TagHelperOutput.for_context(context)

    helper = ImageTagHelper.bind(context, image_urls=image_urls, config=build_config(rules))
    helper.process(context, output)

    return RenderImageOutput(
        attributes=output.attributes.to_dict(),
        suppressed=output.is_suppressed,
        error=helper.error,
    )
