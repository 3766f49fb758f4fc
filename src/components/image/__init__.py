"""
Image component - responsive <img> attributes from an image view model.
"""

from ._impl import (
    DEFAULT_CONFIG,
    ImageConfig,
    ImageTagHelper,
    build_sizes,
    build_srcset,
    coerce_image,
    is_unconstrained,
)
from .component import build_config, run
from .models import (
    ImageDescriptor,
    ImageMarker,
    RenderImageInput,
    RenderImageOutput,
    SizeConstraint,
    SizesEntry,
    SrcSetEntry,
)
from .ports import ImageUrlPort, ImageViewModel, RulesPort

__all__ = [
    # Entry points
    "run",
    "build_config",
    # Helper
    "ImageTagHelper",
    "ImageConfig",
    "DEFAULT_CONFIG",
    "build_sizes",
    "build_srcset",
    "coerce_image",
    "is_unconstrained",
    # Models
    "ImageDescriptor",
    "ImageMarker",
    "RenderImageInput",
    "RenderImageOutput",
    "SizeConstraint",
    "SizesEntry",
    "SrcSetEntry",
    # Ports
    "ImageUrlPort",
    "ImageViewModel",
    "RulesPort",
]
