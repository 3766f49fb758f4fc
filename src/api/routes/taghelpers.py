"""
Tag Helper Preview API Routes.

Renders a single element through the tag helpers, so editors can preview
what a template produces for given marker values.

Marker payloads are JSON arrays standing in for tuples, e.g.
``"xpc-attr-if": [true, "data-x", "A"]``.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from src.api.deps import get_runner
from src.components.image import ImageMarker
from src.components.taghelpers import TagHelperRunner

router = APIRouter()


# --- Request/Response Models ---


class ImagePayload(BaseModel):
    """Image view model bound to the xpc-image marker."""

    relative_path: str = ""
    alt_text: str | None = None
    title: str | None = None
    width: int = 0
    height: int = 0


class RenderElementRequest(BaseModel):
    """Request to render one element through the tag helpers."""

    tag_name: str = Field(..., min_length=1, description="Element tag name")
    attributes: dict[str, Any] = Field(default_factory=dict, description="Declared attributes")
    content: str = Field(default="", description="Rendered child content")
    image: ImagePayload | None = Field(default=None, description="Bound to xpc-image")


class RenderElementResponse(BaseModel):
    """Rendered element markup."""

    html: str


# --- Routes ---


@router.post("/render", response_model=RenderElementResponse)
async def render_element(
    request: RenderElementRequest,
    runner: TagHelperRunner = Depends(get_runner),
) -> RenderElementResponse:
    """Render an element with every applicable tag helper applied."""
    attributes = dict(request.attributes)
    if request.image is not None:
        attributes[ImageMarker.IMAGE.value] = request.image.model_dump()

    html = await runner.render_element(request.tag_name, attributes, request.content)
    return RenderElementResponse(html=html)
