"""
Icon Configuration
Layout constants, colors and font locations for the battery tray icon
"""

import sys

# Canvas is a fixed square; tray hosts scale it down themselves
ICON_SIZE = 44

# Two-tier glyph size: "100" needs a smaller size to fit the 44px width.
# Sizes are line heights (ascent + descent) in pixels, not em sizes.
FONT_SIZE = 36.0
FONT_SIZE_100 = 30.0

# Em size a font is measured at to turn a line height into an em size
REFERENCE_EM_SIZE = 100

# Vertical draw origin, tuned by eye for each digit count.
# The smaller "100" glyphs sit lower to stay visually centered.
TOP_OFFSET = 3
TOP_OFFSET_100 = 6

# Above this the icon is a template (cutout) icon, at or below it is colored
TEMPLATE_THRESHOLD = 50
# At or below this the colored icon turns red instead of amber
CRITICAL_THRESHOLD = 20

# RGBA colors
COLOR_CRITICAL = (255, 0, 0, 255)  # Bright red
COLOR_LOW = (255, 120, 0, 255)  # Darker orange
TEXT_COLOR = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)

TEMPLATE_FILL_BLACK = (0, 0, 0, 255)
TEMPLATE_FILL_WHITE = (255, 255, 255, 255)

TEMPLATE_FILLS = {
    "black": TEMPLATE_FILL_BLACK,
    "white": TEMPLATE_FILL_WHITE,
}

# Probed in order, first readable file wins
SYSTEM_FONT_CANDIDATES = {
    "darwin": [
        "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
        "/Library/Fonts/Arial Bold.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
        "/System/Library/Fonts/SFNS.ttf",
    ],
    "win32": [
        "C:\\Windows\\Fonts\\arialbd.ttf",
        "C:\\Windows\\Fonts\\segoeuib.ttf",
        "C:\\Windows\\Fonts\\arial.ttf",
    ],
    "linux": [
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
        "/usr/share/fonts/liberation-sans/LiberationSans-Bold.ttf",
    ],
}


def default_template_fill(platform=None):
    """Return the template-mode background for a platform.

    macOS tints template images from their alpha channel, so black is used
    there. Other hosts show the icon as-is, where white reads better on dark
    taskbars.
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return TEMPLATE_FILL_BLACK
    return TEMPLATE_FILL_WHITE


def system_font_candidates(platform=None):
    """Return the ordered font paths to probe on a platform"""
    platform = platform or sys.platform
    if platform.startswith("linux") or platform.startswith("freebsd"):
        platform = "linux"
    return list(SYSTEM_FONT_CANDIDATES.get(platform, []))
