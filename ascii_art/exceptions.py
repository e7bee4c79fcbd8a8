"""
Error Types

Every error raised by the package derives from AsciiArtError and carries the
message the shell prints to the user.
"""

from typing import Optional


class AsciiArtError(Exception):
    """Base class for all ASCII art errors."""

    default_message = "Did not execute."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class EmptyPaletteError(AsciiArtError):
    """Matching or rendering was attempted with an empty character set."""

    default_message = "Did not execute. Charset is empty."


class DegenerateImageError(AsciiArtError, ValueError):
    """The image has zero width or height."""

    default_message = "Did not execute. Image has no pixels."


class InvalidResolutionError(AsciiArtError, ValueError):
    """The resolution cannot tile the padded image."""

    default_message = "Did not execute. Resolution does not fit the image."


class ImageLoadError(AsciiArtError, OSError):
    default_message = "Did not execute due to problem with image file."


class ExceedingValueError(AsciiArtError):
    default_message = "Did not change resolution due to exceeding boundaries."


class InvalidCommandError(AsciiArtError):
    default_message = "Did not execute due to incorrect command."


class IncorrectFormatError(AsciiArtError):
    """
    A known command was given a malformed argument.

    The message names the action that was skipped, e.g.
    ``IncorrectFormatError.for_command("add")`` ->
    "Did not add due to incorrect format."
    """

    MESSAGES = {
        "add": "Did not add due to incorrect format.",
        "remove": "Did not remove due to incorrect format.",
        "res": "Did not change resolution due to incorrect format.",
        "output": "Did not change output method due to incorrect format.",
    }

    @classmethod
    def for_command(cls, command: str) -> "IncorrectFormatError":
        return cls(cls.MESSAGES.get(command, InvalidCommandError.default_message))
