from __future__ import annotations

import io
import secrets

from PIL import Image, ImageDraw, ImageFont

from vcode.domain.entities import ImageCode, RequestContext
from vcode.domain.ports.code_generator import CodeGeneratorPort

# No 0/O, 1/I/L: too easy to confuse once rendered.
ALPHABET = "23456789ABCDEFGHJKMNPQRSTUVWXYZ"


def random_text(length: int, alphabet: str = ALPHABET) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _random_color(lo: int, hi: int) -> tuple[int, int, int]:
    return tuple(lo + secrets.randbelow(hi - lo) for _ in range(3))


def render_png(text: str, width: int, height: int, *, noise_lines: int = 20) -> bytes:
    img = Image.new("RGB", (width, height), color=_random_color(200, 250))
    draw = ImageDraw.Draw(img)

    for _ in range(noise_lines):
        x = secrets.randbelow(width)
        y = secrets.randbelow(height)
        dx = secrets.randbelow(12)
        dy = secrets.randbelow(12)
        draw.line((x, y, x + dx, y + dy), fill=_random_color(160, 200))

    font = ImageFont.load_default()
    step = max(width // (len(text) + 1), 1)
    for i, ch in enumerate(text):
        jitter = secrets.randbelow(max(height // 4, 1))
        draw.text(
            (step * i + step // 2, height // 4 + jitter - height // 8),
            ch,
            font=font,
            fill=_random_color(20, 130),
        )

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


class ImageCodeGenerator(CodeGeneratorPort):
    """
    Random captcha rendered to PNG.
    `width` / `height` request parameters override the configured size,
    clamped to the configured maxima.
    """

    def __init__(
        self,
        *,
        length: int = 4,
        ttl_seconds: int = 60,
        width: int = 67,
        height: int = 23,
        max_width: int = 400,
        max_height: int = 200,
    ) -> None:
        self._length = length
        self._ttl = ttl_seconds
        self._width = width
        self._height = height
        self._max_width = max_width
        self._max_height = max_height

    def generate(self, context: RequestContext) -> ImageCode:
        width = min(max(context.get_int_param("width", self._width), 1), self._max_width)
        height = min(
            max(context.get_int_param("height", self._height), 1), self._max_height
        )
        text = random_text(self._length)
        return ImageCode.expiring_in(
            text, self._ttl, image=render_png(text, width, height)
        )
