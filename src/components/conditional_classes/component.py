"""
Conditional classes component - class injection driven by conditions.

Invariants:
- Declared classes are kept and appended to, never replaced
- Marker attributes never reach the output
"""

from __future__ import annotations

from src.core.taghelper import TagHelperContext, TagHelperOutput

from ._impl import ConditionalClassesTagHelper
from .models import ApplyConditionalClassesInput, ConditionalClassesOutput


def run(inp: ApplyConditionalClassesInput) -> ConditionalClassesOutput:
    """
    Apply the conditional class markers declared on an element.

    Args:
        inp: The element as declared, marker attributes included.

    Returns:
        ConditionalClassesOutput with the final attributes.
    """
    if not isinstance(inp, ApplyConditionalClassesInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    context = TagHelperContext(inp.tag_name, inp.attributes)
    output = TagHelperOutput.for_context(context)

    helper = ConditionalClassesTagHelper.bind(context)
    helper.process(context, output)

    return ConditionalClassesOutput(
        attributes=output.attributes.to_dict(),
        modes=tuple(helper.applied_modes),
    )
