"""
Conditional classes component - set or append CSS classes on conditions.
"""

from ._impl import CLASS_ATTRIBUTE, ConditionalClassesTagHelper, join_fragments
from .component import run
from .models import (
    ApplyConditionalClassesInput,
    ClassMarker,
    ConditionalClasses,
    ConditionalClassesOutput,
    EitherClasses,
)

__all__ = [
    "run",
    "CLASS_ATTRIBUTE",
    "ConditionalClassesTagHelper",
    "join_fragments",
    "ApplyConditionalClassesInput",
    "ClassMarker",
    "ConditionalClasses",
    "ConditionalClassesOutput",
    "EitherClasses",
]
