"""
Rules adapters for the tag helper components.

Expose the validated rules file through the component ports.
"""

from __future__ import annotations

from src.adapters.image_url import QueryStringImageUrlAdapter, UrlConfig
from src.rules.models import Rules


class ImageRulesAdapter:
    """Implements the image component RulesPort on top of the rules file."""

    def __init__(self, rules: Rules) -> None:
        self._image = rules.taghelpers.image

    def get_default_loading(self) -> str:
        return self._image.default_loading

    def get_error_attribute(self) -> str:
        return self._image.error_attribute

    def get_error_message(self) -> str:
        return self._image.error_message

    def get_unconstrained_formats(self) -> frozenset[str]:
        return frozenset(self._image.unconstrained_formats)


def create_image_url_adapter(rules: Rules) -> QueryStringImageUrlAdapter:
    """Build the media URL adapter from the rules file."""
    url = rules.taghelpers.url
    return QueryStringImageUrlAdapter(
        UrlConfig(
            width_param=url.width_param,
            height_param=url.height_param,
            max_side_param=url.max_side_param,
            unconstrained_formats=frozenset(rules.taghelpers.image.unconstrained_formats),
        )
    )
