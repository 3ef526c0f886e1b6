"""Tests for focusflow/ai/image_generator.py

Tests:
- Parameter validation and clamping
- HTTP generation via httpx.MockTransport
- Placeholder SVG and the fallback wrapper
"""

import base64
import json

import httpx
import pytest

from focusflow.ai.image_generator import (
    POWERED_BY_PLACEHOLDER,
    SVG_MIME_TYPE,
    HttpImageGenerator,
    ImageRequest,
    build_image_request,
    generate_with_fallback,
    render_placeholder_svg,
)
from focusflow.errors import UpstreamUnavailable, ValidationError
from tests.conftest import FakeImageGenerator


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def image_config():
    return {
        "endpoint": "https://images.example.com/generate",
        "timeout_seconds": 5,
        "max_prompt_chars": 700,
        "default_size": 1024,
        "min_size": 64,
        "max_size": 2048,
    }


def _generator(image_config, handler):
    return HttpImageGenerator(config=image_config, transport=httpx.MockTransport(handler))


# ─────────────────────────────────────────────────────────────────────────────
# build_image_request() Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestBuildImageRequest:
    def test_defaults(self, image_config):
        request = build_image_request("a calm desk", config=image_config)

        assert request.width == 1024
        assert request.height == 1024
        assert 0 <= request.seed < 2**31
        assert request.negative_prompt is None

    def test_clamps_size(self, image_config):
        request = build_image_request("desk", width=10, height=9999, seed=7, config=image_config)

        assert (request.width, request.height) == (64, 2048)
        assert request.seed == 7

    @pytest.mark.parametrize("prompt", [None, "", "   ", 12])
    def test_prompt_required(self, image_config, prompt):
        with pytest.raises(ValidationError, match="Prompt required"):
            build_image_request(prompt, config=image_config)

    def test_prompt_length_limit(self, image_config):
        build_image_request("x" * 700, config=image_config)

        with pytest.raises(ValidationError, match="700"):
            build_image_request("x" * 701, config=image_config)


# ─────────────────────────────────────────────────────────────────────────────
# HttpImageGenerator Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestHttpImageGenerator:
    @pytest.mark.asyncio
    async def test_successful_generation(self, image_config):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["payload"] = json.loads(request.content)
            return httpx.Response(200, content=b"PNGDATA", headers={"content-type": "image/png"})

        gen = _generator(image_config, handler)
        image = await gen.generate(ImageRequest(prompt="desk", width=512, height=512, seed=3, negative_prompt="blur"))

        assert image.data == b"PNGDATA"
        assert image.mime_type == "image/png"
        assert image.data_url == "data:image/png;base64," + base64.b64encode(b"PNGDATA").decode()
        assert seen["payload"] == {"prompt": "desk", "width": 512, "height": 512, "seed": 3, "negative_prompt": "blur"}

    @pytest.mark.asyncio
    async def test_no_endpoint(self, image_config):
        gen = HttpImageGenerator(config={**image_config, "endpoint": None})

        with pytest.raises(UpstreamUnavailable, match="No image endpoint"):
            await gen.generate(ImageRequest(prompt="desk"))

    @pytest.mark.asyncio
    async def test_http_error_status(self, image_config):
        gen = _generator(image_config, lambda request: httpx.Response(503))

        with pytest.raises(UpstreamUnavailable):
            await gen.generate(ImageRequest(prompt="desk"))

    @pytest.mark.asyncio
    async def test_non_image_response(self, image_config):
        gen = _generator(image_config, lambda request: httpx.Response(200, json={"error": "nope"}))

        with pytest.raises(UpstreamUnavailable, match="application/json"):
            await gen.generate(ImageRequest(prompt="desk"))

    @pytest.mark.asyncio
    async def test_transport_error(self, image_config):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnavailable):
            await _generator(image_config, handler).generate(ImageRequest(prompt="desk"))


# ─────────────────────────────────────────────────────────────────────────────
# Placeholder and Fallback Tests
# ─────────────────────────────────────────────────────────────────────────────


class TestPlaceholder:
    def test_deterministic(self):
        request = ImageRequest(prompt="a calm desk", width=320, height=200, seed=42)

        assert render_placeholder_svg(request) == render_placeholder_svg(request)

    def test_seed_changes_colours(self):
        a = render_placeholder_svg(ImageRequest(prompt="desk", seed=1))
        b = render_placeholder_svg(ImageRequest(prompt="desk", seed=2))
        assert a.data != b.data

    def test_svg_content(self):
        image = render_placeholder_svg(ImageRequest(prompt="<cats & dogs>", width=320, height=200))
        svg = image.data.decode("utf-8")

        assert image.mime_type == SVG_MIME_TYPE
        assert svg.startswith("<svg")
        assert 'width="320"' in svg
        assert "&lt;cats &amp; dogs&gt;" in svg


class TestGenerateWithFallback:
    @pytest.mark.asyncio
    async def test_uses_generator(self):
        image, powered_by = await generate_with_fallback(ImageRequest(prompt="desk"), FakeImageGenerator())

        assert image.mime_type == "image/png"
        assert powered_by == "fake-image"

    @pytest.mark.asyncio
    async def test_failure_falls_back_to_svg(self):
        image, powered_by = await generate_with_fallback(
            ImageRequest(prompt="desk"), FakeImageGenerator(fail=True)
        )

        assert image.mime_type == SVG_MIME_TYPE
        assert powered_by == POWERED_BY_PLACEHOLDER
