"""
Icon rendering errors
"""


class RenderError(Exception):
    """Base class for all battery icon rendering failures"""


class FontUnavailableError(RenderError):
    """No usable font: nothing readable on the candidate paths, or the font data failed to parse"""


class EncodeError(RenderError):
    """The finished canvas could not be serialized to PNG"""


class InvalidPercentageError(RenderError, ValueError):
    """Percentage is not an integer in [0, 100]"""
