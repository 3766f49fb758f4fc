"""
Image component port definitions.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import SizeConstraint


@runtime_checkable
class ImageViewModel(Protocol):
    """Anything that can describe an image to render."""

    relative_path: str
    alt_text: str | None
    title: str | None
    width: int
    height: int


class ImageUrlPort(Protocol):
    """Port for the CMS service that serves resized image assets."""

    def with_size_constraint(self, relative_path: str, constraint: SizeConstraint) -> str:
        """Return the relative path of ``relative_path`` resized to ``constraint``."""
        ...


class RulesPort(Protocol):
    """Port for accessing image rendering configuration."""

    def get_default_loading(self) -> str:
        """Get the loading attribute used when none is declared."""
        ...

    def get_error_attribute(self) -> str:
        """Get the attribute that reports a missing image path."""
        ...

    def get_error_message(self) -> str:
        """Get the message written to the error attribute."""
        ...

    def get_unconstrained_formats(self) -> frozenset[str]:
        """Get path fragments of formats the URL service cannot resize."""
        ...
