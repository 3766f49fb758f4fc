"""
ImageTagHelper - responsive <img> attributes from an image view model.

Key behaviors:
- No bound image: the element is suppressed
- Blank image path: a diagnostic data attribute instead of a broken src
- SVG and WEBP paths are used as-is, without srcset or sizes
- Other formats go through the image URL service for src, srcset and sizes
- Explicit alt/title/loading on the element win over the view model
- Helper markers never reach the output
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.core.taghelper import TagHelper, TagHelperContext, TagHelperOutput
from src.domain.values import entries_from_value, get_string, is_blank

from .models import (
    ImageDescriptor,
    ImageMarker,
    SizeConstraint,
    SizesEntry,
    SrcSetEntry,
    has_unconstrained_format,
)
from .ports import ImageUrlPort, ImageViewModel

logger = logging.getLogger(__name__)

OVERRIDE_ATTRIBUTES = ("alt", "title", "loading")


@dataclass(frozen=True)
class ImageConfig:
    """Image rendering configuration from rules."""

    default_loading: str = "lazy"
    error_attribute: str = f"data-{ImageMarker.IMAGE.value}-error"
    error_message: str = "Image path is missing"

    # Matched case-insensitively anywhere in the path
    unconstrained_formats: frozenset[str] = field(
        default_factory=lambda: frozenset([".svg", ".webp"])
    )


DEFAULT_CONFIG = ImageConfig()


def coerce_image(value: Any) -> ImageViewModel | None:
    """Accept any image view model, or a mapping with the same keys."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return ImageDescriptor.from_mapping(value)
    if isinstance(value, ImageViewModel):
        return value
    return None


def is_unconstrained(relative_path: str, config: ImageConfig = DEFAULT_CONFIG) -> bool:
    """True when the URL service cannot resize this path."""
    return has_unconstrained_format(relative_path, config.unconstrained_formats)


def build_srcset(
    relative_path: str, entries: Iterable[SrcSetEntry], image_urls: ImageUrlPort
) -> str:
    """Density srcset: "<url> 1x,<url> 2x"."""
    parts = []
    for e in entries:
        constraint = SizeConstraint.max_side(e.max_width_or_height)
        parts.append(f"{image_urls.with_size_constraint(relative_path, constraint)} {e.descriptor}")
    return ",".join(parts)


def build_sizes(
    relative_path: str, entries: Iterable[SizesEntry], image_urls: ImageUrlPort
) -> tuple[str, str]:
    """Width srcset and the matching sizes attribute."""
    srcset: list[str] = []
    sizes: list[str] = []
    for e in entries:
        url = image_urls.with_size_constraint(
            relative_path, SizeConstraint.max_side(e.max_width_or_height)
        )
        srcset.append(f"{url} {e.descriptor}")
        sizes.append(e.media_condition)
    return ",".join(srcset), ",".join(sizes)


class ImageTagHelper(TagHelper):
    markers = tuple(m.value for m in ImageMarker)
    target_tag = "img"
    order = 10

    @classmethod
    def applies_to(cls, context: TagHelperContext) -> bool:
        # The other markers only configure an element that binds an image
        if not context.all_attributes.contains(ImageMarker.IMAGE.value):
            return False
        return super().applies_to(context)

    def __init__(
        self,
        *,
        image_urls: ImageUrlPort,
        image: ImageViewModel | None = None,
        constraint: SizeConstraint | None = None,
        srcset: Iterable[SrcSetEntry] = (),
        sizes: Iterable[SizesEntry] = (),
        alt: str = "",
        title: str = "",
        loading: str = "",
        config: ImageConfig = DEFAULT_CONFIG,
    ) -> None:
        self.image_urls = image_urls
        self.image = image
        self.constraint = constraint or SizeConstraint.empty()
        self.srcset = tuple(srcset)
        self.sizes = tuple(sizes)
        self.alt = alt
        self.title = title
        self.loading = loading
        self.config = config
        self.error: str | None = None

    @classmethod
    def bind(cls, context: TagHelperContext, **services: Any) -> ImageTagHelper:
        value = context.get_attribute_value
        return cls(
            image=coerce_image(value(ImageMarker.IMAGE.value)),
            constraint=SizeConstraint.from_value(value(ImageMarker.SIZE_CONSTRAINT.value)),
            srcset=entries_from_value(value(ImageMarker.SRCSET.value), SrcSetEntry),
            sizes=entries_from_value(value(ImageMarker.SIZES.value), SizesEntry),
            alt=get_string(value("alt")),
            title=get_string(value("title")),
            loading=get_string(value("loading")),
            **services,
        )

    def process(self, context: TagHelperContext, output: TagHelperOutput) -> None:
        overrides = {"alt": self.alt, "title": self.title, "loading": self.loading}
        for name in OVERRIDE_ATTRIBUTES:
            if not is_blank(overrides[name]):
                output.attributes.set_attribute(name, overrides[name])

        if self.image is None:
            logger.debug("No image bound to <%s>, suppressing output", context.tag_name)
            self.remove_markers(output)
            output.suppress_output()
            return

        self.render_image(self.image, output)

    def render_image(self, image: ImageViewModel, output: TagHelperOutput) -> None:
        if is_blank(image.relative_path):
            logger.warning("Image bound without a path")
            self.error = self.config.error_message
            output.attributes.set_attribute(self.config.error_attribute, self.error)
            self.remove_markers(output)
            return

        if is_unconstrained(image.relative_path, self.config):
            output.attributes.set_attribute("src", image.relative_path)
        else:
            src = self.image_urls.with_size_constraint(image.relative_path, self.constraint)
            output.attributes.set_attribute("src", src)
            self._set_srcset(image, output)

        if image.width > 0:
            output.attributes.set_attribute("width", image.width)

        if image.height > 0:
            output.attributes.set_attribute("height", image.height)

        if is_blank(self.alt):
            output.attributes.set_attribute("alt", get_string(image.alt_text))

        if is_blank(self.title):
            output.attributes.set_attribute("title", get_string(image.title))

        if is_blank(self.loading):
            output.attributes.set_attribute("loading", self.config.default_loading)

        self.remove_markers(output)

    def _set_srcset(self, image: ImageViewModel, output: TagHelperOutput) -> None:
        # Density descriptors win when both lists are bound
        if self.srcset:
            srcset = build_srcset(image.relative_path, self.srcset, self.image_urls)
            sizes = ""
        elif self.sizes:
            srcset, sizes = build_sizes(image.relative_path, self.sizes, self.image_urls)
        else:
            return

        if srcset:
            output.attributes.set_attribute("srcset", srcset)
        if sizes:
            output.attributes.set_attribute("sizes", sizes)
