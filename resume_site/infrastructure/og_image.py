"""OG Image Renderer — draws the 1200x630 social preview card with Pillow.

Invariants:
    - Output is always a 1200x630 PNG
    - Title override replaces the resume title; description is drawn only when given
    - Rendering errors surface as OgImageError; content errors are not caught here
"""

import io
import textwrap

from PIL import Image, ImageDraw, ImageFont

from resume_site.core.page_metadata import OG_IMAGE_HEIGHT, OG_IMAGE_WIDTH

BACKGROUND = (250, 250, 250)
DOT = (229, 229, 229)
CARD = (255, 255, 255)
CARD_BORDER = (224, 224, 224)
TITLE_COLOR = (64, 64, 64)
MUTED = (115, 115, 115)
GRADIENT = ((59, 130, 246), (139, 92, 246), (236, 72, 153))

BRANDING = "Resume Portfolio"


class OgImageError(Exception):
    """Pillow failed to render the preview card."""


def _gradient_color(t: float) -> tuple[int, int, int]:
    """Color at position t (0..1) along the blue → violet → pink accent."""
    if t <= 0.5:
        a, b, local = GRADIENT[0], GRADIENT[1], t * 2
    else:
        a, b, local = GRADIENT[1], GRADIENT[2], (t - 0.5) * 2
    return tuple(int(a[i] + (b[i] - a[i]) * local) for i in range(3))  # type: ignore[return-value]


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def _centered_text(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill) -> int:
    """Draw text centered horizontally at y; return the y below it."""
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    draw.text(((OG_IMAGE_WIDTH - (right - left)) // 2, y), text, font=font, fill=fill)
    return y + (bottom - top)


def _draw_background(draw: ImageDraw.ImageDraw) -> None:
    for x in range(25, OG_IMAGE_WIDTH, 50):
        for y in range(25, OG_IMAGE_HEIGHT, 50):
            draw.ellipse((x - 2, y - 2, x + 2, y + 2), fill=DOT)


def _draw_accent_line(draw: ImageDraw.ImageDraw, y: int, width: int = 120) -> None:
    x0 = (OG_IMAGE_WIDTH - width) // 2
    for i in range(width):
        draw.line((x0 + i, y, x0 + i, y + 4), fill=_gradient_color(i / (width - 1)))


def render_og_image(name: str, title: str, description: str | None = None) -> bytes:
    try:
        image = Image.new("RGB", (OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT), BACKGROUND)
        draw = ImageDraw.Draw(image)
        _draw_background(draw)

        draw.rounded_rectangle(
            (60, 60, OG_IMAGE_WIDTH - 60, OG_IMAGE_HEIGHT - 110),
            radius=24, fill=CARD, outline=CARD_BORDER, width=1,
        )

        y = 140 if description else 190
        y = _centered_text(draw, y, name, _font(72), GRADIENT[0]) + 30
        y = _centered_text(draw, y, title, _font(36), TITLE_COLOR) + 30
        if description:
            for line in textwrap.wrap(description, width=60)[:3]:
                y = _centered_text(draw, y, line, _font(24), MUTED) + 8
        _draw_accent_line(draw, y + 30)

        brand_font = _font(18)
        left, top, right, bottom = draw.textbbox((0, 0), BRANDING, font=brand_font)
        brand_x = (OG_IMAGE_WIDTH - (right - left) - 20) // 2
        brand_y = OG_IMAGE_HEIGHT - 60
        draw.ellipse((brand_x, brand_y + 6, brand_x + 8, brand_y + 14), fill=GRADIENT[0])
        draw.text((brand_x + 20, brand_y), BRANDING, font=brand_font, fill=MUTED)

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()
    except (OSError, ValueError) as e:
        raise OgImageError(str(e)) from e
