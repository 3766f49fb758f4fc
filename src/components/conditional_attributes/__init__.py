"""
Conditional attributes component - set or append attributes on conditions.
"""

from ._impl import ConditionalAttributesTagHelper, group_values
from .component import run
from .models import (
    ApplyConditionalAttributesInput,
    AttributeMarker,
    ConditionalAttribute,
    ConditionalAttributesOutput,
    EitherAttribute,
)

__all__ = [
    # Entry point
    "run",
    # Helper
    "ConditionalAttributesTagHelper",
    "group_values",
    # Models
    "ApplyConditionalAttributesInput",
    "AttributeMarker",
    "ConditionalAttribute",
    "ConditionalAttributesOutput",
    "EitherAttribute",
]
