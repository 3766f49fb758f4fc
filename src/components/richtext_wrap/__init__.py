"""
Richtext wrap component - avoid doubly nested rich text wrappers.
"""

from ._impl import WRAP_MARKER, RichTextWrapTagHelper, starts_with_tag
from .component import run
from .models import WrapRichTextInput, WrapRichTextOutput

__all__ = [
    "run",
    "WRAP_MARKER",
    "RichTextWrapTagHelper",
    "starts_with_tag",
    "WrapRichTextInput",
    "WrapRichTextOutput",
]
