from pathlib import Path

import pytest

from src.components.image import ImageDescriptor, SizeConstraint
from src.rules.loader import load_rules
from src.rules.models import Rules


class FakeImageUrls:
    """ImageUrlPort double: "<path>?max=<n>" and a record of every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, SizeConstraint]] = []

    def with_size_constraint(self, relative_path: str, constraint: SizeConstraint) -> str:
        self.calls.append((relative_path, constraint))
        if constraint.is_empty:
            return relative_path
        if constraint.max_width_or_height:
            return f"{relative_path}?max={constraint.max_width_or_height}"
        return f"{relative_path}?w={constraint.width or 0}&h={constraint.height or 0}"


@pytest.fixture
def image_urls() -> FakeImageUrls:
    return FakeImageUrls()


@pytest.fixture
def jpg_image() -> ImageDescriptor:
    return ImageDescriptor(
        relative_path="/media/foo.jpg",
        alt_text="A foo",
        title="Foo",
        width=1200,
        height=800,
    )


@pytest.fixture
def rules() -> Rules:
    """Load the REAL rules file from the project root."""
    rules_path = Path(__file__).parent.parent / "rules.yaml"
    return load_rules(rules_path)
