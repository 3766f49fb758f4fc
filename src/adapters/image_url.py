"""
Query String Image URL Adapter.

Implements the ImageUrlPort by appending resize parameters to the asset
path, the way the CMS media handler expects them:

    /media/foo.jpg + max side 400 -> /media/foo.jpg?maxsidesize=400

Formats the media handler cannot resize are returned unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from src.components.image.models import SizeConstraint, has_unconstrained_format


@dataclass(frozen=True)
class UrlConfig:
    """Query parameter names understood by the media handler."""

    width_param: str = "width"
    height_param: str = "height"
    max_side_param: str = "maxsidesize"
    unconstrained_formats: frozenset[str] = field(
        default_factory=lambda: frozenset([".svg", ".webp"])
    )


class QueryStringImageUrlAdapter:
    """ImageUrlPort implementation producing resize query strings."""

    def __init__(self, config: UrlConfig | None = None) -> None:
        self.config = config or UrlConfig()

    def with_size_constraint(self, relative_path: str, constraint: SizeConstraint) -> str:
        if constraint.is_empty or has_unconstrained_format(
            relative_path, self.config.unconstrained_formats
        ):
            return relative_path

        params = [
            (self.config.width_param, constraint.width),
            (self.config.height_param, constraint.height),
            (self.config.max_side_param, constraint.max_width_or_height),
        ]
        resize = [(name, str(value)) for name, value in params if value and value > 0]
        resize_names = {name for name, _ in resize}

        parts = urlsplit(relative_path)
        # Existing resize parameters are replaced, anything else is kept as given
        query = [
            (k, v)
            for k, v in parse_qsl(parts.query, keep_blank_values=True)
            if k not in resize_names
        ]
        query.extend(resize)

        return urlunsplit(parts._replace(query=urlencode(query, quote_via=quote)))
