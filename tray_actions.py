"""
Tray Icon Actions Module
Business logic for updating the battery tray icon (no Qt/GUI code)
"""

from icon_generator import generate_battery_icon, is_template_mode, validate_percentage, RenderError
from logging_config import get_logger

logger = get_logger(__name__)


def parse_battery_level(line):
    """Parse one line of battery level input, None if it is not a percentage in [0, 100]"""
    line = line.strip()
    if not line:
        return None
    try:
        percentage = int(line)
    except ValueError:
        logger.warning(f"Ignoring invalid battery level: {line!r}")
        return None
    if not 0 <= percentage <= 100:
        logger.warning(f"Ignoring out of range battery level: {percentage}")
        return None
    return percentage


class TrayIconUpdater:
    """Renders battery icons and hands them to a tray target.

    The target needs a single method, show_icon(png_bytes, template), where
    template says whether the host should treat the image as a tintable
    template icon. It always matches the mode the icon was rendered in.
    show_icon returns True once the icon is on the tray.
    """

    def __init__(self, target, font_source=None, template_fill=None):
        """
        Initialize the updater

        Args:
            target: Object with show_icon(png_bytes, template) -> bool
            font_source: FontSource passed to the renderer (default: bundled font)
            template_fill: RGBA background for template icons (default: platform dependent)
        """
        self.target = target
        self.font_source = font_source
        self.template_fill = template_fill
        self._percentage = None

    @property
    def current_percentage(self):
        """Percentage of the icon currently shown, None before the first update"""
        return self._percentage

    def update(self, percentage, force=False):
        """
        Show the icon for a percentage

        Returns:
            True if the tray shows the icon for this percentage afterwards,
            False if rendering or displaying failed and the previous icon was kept
        """
        try:
            validate_percentage(percentage)
        except RenderError as e:
            logger.error(f"Rejected battery level, keeping previous icon: {e}")
            return False

        if not force and percentage == self._percentage:
            logger.debug(f"Battery still at {percentage}%, keeping current icon")
            return True

        logger.info(f"Updating tray icon with battery percentage: {percentage}%")

        try:
            png_bytes = generate_battery_icon(
                percentage,
                font_source=self.font_source,
                template_fill=self.template_fill,
            )
        except RenderError as e:
            logger.error(f"Failed to generate icon for {percentage}%, keeping previous icon: {e}", exc_info=True)
            return False

        if not self.target.show_icon(png_bytes, is_template_mode(percentage)):
            logger.error(f"Tray did not accept the icon for {percentage}%, keeping previous icon")
            return False

        self._percentage = percentage
        return True

    def refresh(self):
        """Re-render the current icon, e.g. after the font or fill changed"""
        if self._percentage is None:
            return False
        return self.update(self._percentage, force=True)
