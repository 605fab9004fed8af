"""
Battery Icon Generator
Renders a battery percentage as a 44x44 RGBA PNG for the tray

Above 50% the icon is a template icon: the numeral is cut out of a solid
fill so the host can tint it. At 50% and below it is a colored alert icon
with a white numeral on red (20% and below) or amber.
"""

import io

from PIL import Image, ImageDraw

from icon_config import (
    ICON_SIZE, FONT_SIZE, FONT_SIZE_100, TOP_OFFSET, TOP_OFFSET_100,
    TEMPLATE_THRESHOLD, CRITICAL_THRESHOLD,
    COLOR_CRITICAL, COLOR_LOW, TEXT_COLOR, TRANSPARENT,
    default_template_fill,
)
from icon_errors import RenderError, FontUnavailableError, EncodeError, InvalidPercentageError
from font_sources import BundledFontSource
from logging_config import get_logger

logger = get_logger(__name__)

__all__ = [
    "RenderError", "FontUnavailableError", "EncodeError", "InvalidPercentageError",
    "generate_battery_icon", "render_icon_image", "encode_png", "validate_percentage",
    "is_template_mode", "background_color", "icon_text",
    "font_size_for", "top_offset_for", "load_icon_font", "text_width", "text_origin", "draw_glyph_layer",
]


def validate_percentage(percentage):
    """Reject anything that is not an int in [0, 100]"""
    if isinstance(percentage, bool) or not isinstance(percentage, int):
        raise InvalidPercentageError(f"Percentage must be an integer, got {percentage!r}")
    if not 0 <= percentage <= 100:
        raise InvalidPercentageError(f"Percentage must be between 0 and 100, got {percentage}")
    return percentage


def is_template_mode(percentage: int) -> bool:
    """True when the icon should be a template (cutout) icon"""
    return percentage > TEMPLATE_THRESHOLD


def background_color(percentage: int):
    """Alert color for the colored icon: red when critical, amber otherwise"""
    if percentage <= CRITICAL_THRESHOLD:
        return COLOR_CRITICAL
    return COLOR_LOW


def icon_text(percentage: int) -> str:
    return str(percentage)


def font_size_for(percentage: int) -> float:
    # Three digits only fit at the smaller size
    return FONT_SIZE_100 if percentage == 100 else FONT_SIZE


def top_offset_for(percentage: int) -> int:
    return TOP_OFFSET_100 if percentage == 100 else TOP_OFFSET


def load_icon_font(font_source, percentage: int):
    """Load the font at the line height used for this percentage"""
    return font_source.load_for_line_height(font_size_for(percentage))


def text_width(font, text: str) -> float:
    """Sum of the horizontal advances of each character"""
    return sum(font.getlength(ch) for ch in text)


def text_origin(percentage: int, width: float):
    """Top-left draw position for text of the given width, centered horizontally"""
    x = int(max(0.0, (ICON_SIZE - width) / 2.0))
    return x, top_offset_for(percentage)


def draw_glyph_layer(text: str, font, origin, size=ICON_SIZE) -> Image.Image:
    """Draw the white numeral on a fully transparent canvas.

    Its alpha channel is used as the stencil for template icons.
    """
    layer = Image.new("RGBA", (size, size), TRANSPARENT)
    ImageDraw.Draw(layer).text(origin, text, font=font, fill=TEXT_COLOR)
    return layer


def render_icon_image(percentage: int, font_source=None, template_fill=None) -> Image.Image:
    """
    Build the icon canvas for a percentage

    Args:
        percentage: Battery level, integer in [0, 100]
        font_source: FontSource to draw with (default: BundledFontSource)
        template_fill: RGBA background for template icons (default: platform dependent)

    Returns:
        44x44 RGBA PIL image
    """
    validate_percentage(percentage)
    if font_source is None:
        font_source = BundledFontSource()

    font = load_icon_font(font_source, percentage)
    text = icon_text(percentage)
    origin = text_origin(percentage, text_width(font, text))

    if is_template_mode(percentage):
        fill = template_fill if template_fill is not None else default_template_fill()
        canvas = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), fill)

        # Wherever the glyph left any ink, punch a transparent hole
        glyph = draw_glyph_layer(text, font, origin)
        stencil = glyph.getchannel("A").point(lambda a: 255 if a > 0 else 0)
        hole = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), TRANSPARENT)
        canvas = Image.composite(hole, canvas, stencil)
    else:
        canvas = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), background_color(percentage))
        ImageDraw.Draw(canvas).text(origin, text, font=font, fill=TEXT_COLOR)

    return canvas


def encode_png(image: Image.Image) -> bytes:
    """Serialize an image to PNG bytes"""
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        logger.error(f"Failed to encode {image.size[0]}x{image.size[1]} {image.mode} icon as PNG: {e}", exc_info=True)
        raise EncodeError(f"Failed to encode icon as PNG: {e}") from e
    return buffer.getvalue()


def generate_battery_icon(percentage: int, font_source=None, template_fill=None) -> bytes:
    """
    Render the tray icon for a battery percentage

    Args:
        percentage: Battery level, integer in [0, 100]
        font_source: FontSource to draw with (default: BundledFontSource)
        template_fill: RGBA background for template icons (default: platform dependent)

    Returns:
        PNG encoded 44x44 RGBA image

    Raises:
        InvalidPercentageError: percentage outside [0, 100] or not an int
        FontUnavailableError: no font could be read or parsed
        EncodeError: PNG serialization failed
    """
    image = render_icon_image(percentage, font_source=font_source, template_fill=template_fill)
    png_bytes = encode_png(image)
    logger.debug(
        f"Rendered {percentage}% icon ({'template' if is_template_mode(percentage) else 'color'} mode, "
        f"{len(png_bytes)} bytes)"
    )
    return png_bytes
