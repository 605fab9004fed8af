"""
Font Sources
Strategies for obtaining the scalable font used to draw the percentage numeral
"""

import io
from pathlib import Path

from PIL import ImageFont

from icon_config import REFERENCE_EM_SIZE, system_font_candidates
from icon_errors import FontUnavailableError
from logging_config import get_logger

logger = get_logger(__name__)


class FontSource:
    """Base class for font-sourcing strategies.

    A source hands out a fresh font object for every call to load(); nothing
    is cached, so one source can be shared by concurrent render calls.
    """

    name = "font"

    def load(self, size: float) -> ImageFont.FreeTypeFont:
        raise NotImplementedError

    def load_for_line_height(self, height: float) -> ImageFont.FreeTypeFont:
        """Load the font scaled so that ascent + descent spans height pixels"""
        reference = self.load(REFERENCE_EM_SIZE)
        ascent, descent = reference.getmetrics()
        if ascent + descent <= 0:
            raise FontUnavailableError(f"Font from {self!r} reports no line height")
        return self.load(height * REFERENCE_EM_SIZE / (ascent + descent))

    def __repr__(self):
        return f"{type(self).__name__}()"


class EmbeddedFontSource(FontSource):
    """Font parsed from raw TrueType/OpenType bytes held in memory"""

    name = "embedded"

    def __init__(self, data: bytes, label: str = "<embedded>"):
        self.data = data
        self.label = label

    def load(self, size: float) -> ImageFont.FreeTypeFont:
        if not self.data:
            raise FontUnavailableError(f"Font data from {self.label} is empty")
        try:
            return ImageFont.truetype(io.BytesIO(self.data), size)
        except (OSError, ValueError) as e:
            raise FontUnavailableError(f"Could not parse font data from {self.label}: {e}") from e

    def __repr__(self):
        return f"EmbeddedFontSource(label={self.label!r}, {len(self.data)} bytes)"


class BundledFontSource(FontSource):
    """The scalable font that ships inside Pillow itself.

    Always present with the Pillow dependency, which makes it the
    deterministic default.
    """

    name = "bundled"

    def load(self, size: float) -> ImageFont.FreeTypeFont:
        try:
            font = ImageFont.load_default(size=size)
        except (OSError, ImportError) as e:
            raise FontUnavailableError(f"Pillow's bundled font could not be loaded: {e}") from e

        # Without FreeType Pillow falls back to a fixed-size bitmap font
        if not isinstance(font, ImageFont.FreeTypeFont):
            raise FontUnavailableError("Pillow was built without FreeType, bundled font is not scalable")
        return font


class SystemFontSource(FontSource):
    """Probe an ordered list of font files and use the first readable one"""

    name = "system"

    def __init__(self, candidates=None):
        if candidates is None:
            candidates = system_font_candidates()
        self.candidates = [Path(c) for c in candidates]

    def read_first_available(self):
        """Return (path, bytes) of the first candidate that can be read"""
        for path in self.candidates:
            try:
                data = path.read_bytes()
            except OSError as e:
                logger.debug(f"Font candidate not usable: {path} ({e})")
                continue
            if data:
                logger.debug(f"Using system font: {path}")
                return path, data

        tried = ", ".join(str(p) for p in self.candidates) or "none"
        raise FontUnavailableError(f"No usable system font found (tried: {tried})")

    def load(self, size: float) -> ImageFont.FreeTypeFont:
        path, data = self.read_first_available()
        return EmbeddedFontSource(data, label=str(path)).load(size)

    def __repr__(self):
        return f"SystemFontSource({len(self.candidates)} candidates)"


def font_source_from_name(value):
    """Build a font source from a CLI value: "bundled", "system" or a font file path"""
    if value is None or value == BundledFontSource.name:
        return BundledFontSource()
    if value == SystemFontSource.name:
        return SystemFontSource()
    return SystemFontSource([value])
