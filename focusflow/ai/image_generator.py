"""
Image Generator with a local SVG fallback

Sends the prompt to a configured image service over HTTP and expects raw
image bytes back. When no service is configured, or the call fails, the
route renders a placeholder SVG instead so the client always gets a
picture.

Usage:
    from focusflow.ai.image_generator import HttpImageGenerator, ImageRequest

    generator = HttpImageGenerator()
    image = await generator.generate(ImageRequest(prompt="a calm desk at sunrise"))
    print(image.data_url[:40])
"""

from __future__ import annotations

import base64
import hashlib
import html
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import httpx

from focusflow.config import load_config
from focusflow.errors import UpstreamUnavailable, ValidationError

logger = logging.getLogger(__name__)

SVG_MIME_TYPE = "image/svg+xml"
POWERED_BY_PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class ImageRequest:
    prompt: str
    width: int = 1024
    height: int = 1024
    seed: int = 0
    negative_prompt: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "prompt": self.prompt,
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
        }
        if self.negative_prompt:
            payload["negative_prompt"] = self.negative_prompt
        return payload


@dataclass(frozen=True)
class GeneratedImage:
    data: bytes
    mime_type: str

    @property
    def encoded(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.encoded}"


class ImageGenerator(ABC):
    """Anything that turns an ImageRequest into image bytes."""

    name = "image"

    @abstractmethod
    async def generate(self, request: ImageRequest) -> GeneratedImage:
        """
        Generate an image.

        Raises:
            UpstreamUnavailable: On any failure, timeout or non-image response
        """


class HttpImageGenerator(ImageGenerator):
    """ImageGenerator that POSTs JSON to an HTTP endpoint and reads bytes back."""

    name = "image-api"

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            config: The ai.image config section (defaults to args/focusflow.yaml)
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.config = config or load_config()["ai"]["image"]
        self.endpoint = self.config.get("endpoint")
        self.timeout = float(self.config.get("timeout_seconds", 30.0))
        self.transport = transport

    async def generate(self, request: ImageRequest) -> GeneratedImage:
        if not self.endpoint:
            raise UpstreamUnavailable("No image endpoint configured")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.endpoint, json=request.to_payload())
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(f"Image generation failed: {e}") from e

        mime_type = response.headers.get("content-type", "").split(";")[0].strip()
        if not mime_type.startswith("image/"):
            raise UpstreamUnavailable(f"Image service returned {mime_type or 'no content type'}")
        if not response.content:
            raise UpstreamUnavailable("Image service returned an empty body")

        logger.info(f"Generated image: {request.prompt[:50]}... ({len(response.content)} bytes)")
        return GeneratedImage(data=response.content, mime_type=mime_type)


def _palette(prompt: str, seed: int) -> tuple[str, str]:
    digest = hashlib.sha256(f"{prompt}|{seed}".encode("utf-8")).hexdigest()
    return f"#{digest[:6]}", f"#{digest[6:12]}"


def render_placeholder_svg(request: ImageRequest) -> GeneratedImage:
    """
    Deterministic placeholder image for a request.

    Colours come from a hash of prompt and seed, so the same request always
    yields the same SVG.
    """
    start, end = _palette(request.prompt, request.seed)
    caption = request.prompt if len(request.prompt) <= 60 else request.prompt[:57] + "..."
    font_size = max(12, min(request.width, request.height) // 24)

    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{request.width}" height="{request.height}" '
        f'viewBox="0 0 {request.width} {request.height}">'
        f'<defs><linearGradient id="bg" x1="0" y1="0" x2="1" y2="1">'
        f'<stop offset="0%" stop-color="{start}"/><stop offset="100%" stop-color="{end}"/>'
        f"</linearGradient></defs>"
        f'<rect width="100%" height="100%" fill="url(#bg)"/>'
        f'<text x="50%" y="50%" text-anchor="middle" dominant-baseline="middle" '
        f'font-family="sans-serif" font-size="{font_size}" fill="#ffffff">'
        f"{html.escape(caption)}</text>"
        f"</svg>"
    )
    return GeneratedImage(data=svg.encode("utf-8"), mime_type=SVG_MIME_TYPE)


def build_image_request(
    prompt: Any,
    width: int | None = None,
    height: int | None = None,
    seed: int | None = None,
    negative_prompt: str | None = None,
    config: dict[str, Any] | None = None,
) -> ImageRequest:
    """
    Validate and normalize image parameters.

    Width and height are clamped into the configured range; a missing seed
    is drawn at random.

    Raises:
        ValidationError: If the prompt is missing or too long
    """
    config = config or load_config()["ai"]["image"]
    max_chars = int(config.get("max_prompt_chars", 700))

    if not isinstance(prompt, str) or not prompt.strip():
        raise ValidationError("Prompt required")
    if len(prompt) > max_chars:
        raise ValidationError(f"Prompt must be at most {max_chars} characters")

    default_size = int(config.get("default_size", 1024))
    min_size = int(config.get("min_size", 64))
    max_size = int(config.get("max_size", 2048))

    def clamp(value: int | None) -> int:
        if value is None:
            return default_size
        return max(min_size, min(max_size, int(value)))

    if seed is None:
        seed = random.randint(0, 2**31 - 1)

    return ImageRequest(
        prompt=prompt.strip(),
        width=clamp(width),
        height=clamp(height),
        seed=int(seed),
        negative_prompt=negative_prompt or None,
    )


async def generate_with_fallback(
    request: ImageRequest, generator: ImageGenerator | None
) -> tuple[GeneratedImage, str]:
    """
    Generate an image, substituting the placeholder SVG on any upstream failure.

    Returns:
        Tuple of (image, powered_by)
    """
    if generator is None:
        return render_placeholder_svg(request), POWERED_BY_PLACEHOLDER

    try:
        return await generator.generate(request), generator.name
    except UpstreamUnavailable as e:
        logger.warning(f"Image generation unavailable, using placeholder: {e}")
        return render_placeholder_svg(request), POWERED_BY_PLACEHOLDER
    except Exception as e:
        logger.warning(f"Image generation failed, using placeholder: {e}")
        return render_placeholder_svg(request), POWERED_BY_PLACEHOLDER


__all__ = [
    "ImageRequest",
    "GeneratedImage",
    "ImageGenerator",
    "HttpImageGenerator",
    "render_placeholder_svg",
    "build_image_request",
    "generate_with_fallback",
    "POWERED_BY_PLACEHOLDER",
    "SVG_MIME_TYPE",
]
