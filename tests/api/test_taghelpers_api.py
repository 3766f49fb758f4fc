"""
Tests for the tag helper preview API.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.deps import get_rules
from src.api.routes.taghelpers import router
from src.rules.models import Rules


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.include_router(router, prefix="/api/taghelpers")
    app.dependency_overrides[get_rules] = lambda: Rules()

    return TestClient(app)


class TestRenderEndpoint:
    """POST /api/taghelpers/render"""

    def test_conditional_attribute(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={
                "tag_name": "button",
                "attributes": {"xpc-attr-if-not": [False, "role", "button"]},
                "content": "Go",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"html": '<button role="button">Go</button>'}

    def test_class_many(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={
                "tag_name": "div",
                "attributes": {"class": "card", "xpc-class-if-many": [[True, "a"], [False, "b"]]},
            },
        )

        assert response.json()["html"] == '<div class="card a "></div>'

    def test_image(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={
                "tag_name": "img",
                "attributes": {"xpc-image-srcset": [[1, 400], [2, 800]]},
                "image": {"relative_path": "/media/foo.jpg", "alt_text": "Foo"},
            },
        )

        html = response.json()["html"]
        assert 'src="/media/foo.jpg"' in html
        assert (
            'srcset="/media/foo.jpg?maxsidesize=400 1x,/media/foo.jpg?maxsidesize=800 2x"'
            in html
        )
        assert 'alt="Foo"' in html
        assert "xpc-" not in html

    def test_image_missing_path(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={"tag_name": "img", "image": {"relative_path": ""}},
        )

        assert response.json()["html"] == '<img data-xpc-image-error="Image path is missing">'

    def test_string_false_condition_adds_nothing(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={
                "tag_name": "button",
                "attributes": {"xpc-attr-if": ["false", "role", "button"]},
                "content": "Go",
            },
        )

        assert response.json() == {"html": "<button>Go</button>"}

    def test_srcset_marker_without_image_marker_keeps_element(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={
                "tag_name": "img",
                "attributes": {"src": "/static.jpg", "xpc-image-srcset": [[1, 400]]},
            },
        )

        assert response.json()["html"].startswith('<img src="/static.jpg"')

    def test_image_marker_without_image_is_suppressed(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={"tag_name": "img", "attributes": {"xpc-image": None}},
        )

        assert response.json()["html"] == ""

    def test_rich_text_wrap(self, client: TestClient) -> None:
        response = client.post(
            "/api/taghelpers/render",
            json={
                "tag_name": "p",
                "attributes": {"xpc-rich-text-wrap": None},
                "content": "<p class=\"x\">hi</p>",
            },
        )

        assert response.json()["html"] == '<p class="x">hi</p>'

    def test_missing_tag_name_is_rejected(self, client: TestClient) -> None:
        response = client.post("/api/taghelpers/render", json={"attributes": {}})

        assert response.status_code == 422
