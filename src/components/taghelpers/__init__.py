"""
Tag helpers component - dispatch of element helpers by marker attribute.
"""

from ._impl import TagHelperRunner
from .component import create_default_runner

__all__ = [
    "TagHelperRunner",
    "create_default_runner",
]
