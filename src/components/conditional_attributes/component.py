"""
Conditional attributes component - attribute injection driven by conditions.

Invariants:
- At most one mode fires per element
- Existing declared values are kept and appended to, never replaced
- Marker attributes never reach the output
"""

from __future__ import annotations

from src.core.taghelper import TagHelperContext, TagHelperOutput

from ._impl import ConditionalAttributesTagHelper
from .models import ApplyConditionalAttributesInput, ConditionalAttributesOutput


def run(inp: ApplyConditionalAttributesInput) -> ConditionalAttributesOutput:
    """
    Apply the conditional attribute markers declared on an element.

    Args:
        inp: The element as declared, marker attributes included.

    Returns:
        ConditionalAttributesOutput with the final attributes.
    """
    if not isinstance(inp, ApplyConditionalAttributesInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    context = TagHelperContext(inp.tag_name, inp.attributes)
    output = TagHelperOutput.for_context(context)

    helper = ConditionalAttributesTagHelper.bind(context)
    helper.process(context, output)

    return ConditionalAttributesOutput(
        attributes=output.attributes.to_dict(),
        mode=helper.applied_mode,
    )
