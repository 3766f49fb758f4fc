"""
Attribute value merging shared by the conditional helpers.

Merge rule for an existing value E and a new value V:
- both blank: nothing is emitted
- E blank: the attribute becomes V
- V blank: E is left untouched
- otherwise: the attribute becomes "E V"
"""

from src.core.taghelper import TagHelperContext, TagHelperOutput
from src.domain.values import get_string, is_blank


def merge_values(existing: str, new: str) -> str | None:
    """Return the merged value, or None when the attribute should not change."""
    if is_blank(existing) and is_blank(new):
        return None
    if is_blank(existing):
        return new
    if is_blank(new):
        return None
    return f"{existing} {new}"


def declared_value(context: TagHelperContext, name: str) -> str:
    """Declared value of ``name`` on the element, coerced to a string."""
    return get_string(context.get_attribute_value(name), "")


def set_merged_attribute(output: TagHelperOutput, name: str, existing: str, new: str) -> bool:
    """Apply the merge rule to ``output``. Returns True if the attribute was set."""
    merged = merge_values(existing, new)
    if merged is None:
        return False
    output.attributes.set_attribute(name, merged)
    return True
