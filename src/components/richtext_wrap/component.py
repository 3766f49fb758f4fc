"""
Richtext wrap component - conditional wrapper around rendered rich text.

Invariants:
- The wrapper is elided only when the content opens with the same tag
- Content is never altered
- The marker attribute never reaches the output
"""

from __future__ import annotations

from src.core.taghelper import TagHelperContext, TagHelperOutput

from ._impl import WRAP_MARKER, RichTextWrapTagHelper
from .models import WrapRichTextInput, WrapRichTextOutput


async def run(inp: WrapRichTextInput) -> WrapRichTextOutput:
    """
    Render rich text inside its wrapper, eliding a redundant wrapper.

    Args:
        inp: Wrapper tag, its declared attributes and the rendered rich text.

    Returns:
        WrapRichTextOutput with the final markup.
    """
    if not isinstance(inp, WrapRichTextInput):
        raise ValueError(f"Unknown input type: {type(inp)}")

    attributes = {WRAP_MARKER: None, **inp.attributes}
    context = TagHelperContext(inp.tag_name, attributes)
    output = TagHelperOutput.for_context(context, inp.content)

    helper = RichTextWrapTagHelper.bind(context)
    await helper.process_async(context, output)

    return WrapRichTextOutput(
        html=await output.render(),
        unwrapped=helper.unwrapped,
    )
