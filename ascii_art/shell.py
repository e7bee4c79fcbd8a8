#!/usr/bin/env python3
"""
Interactive ASCII Art Shell

A command-line interface for converting an image to brightness-matched
ASCII art while editing the character set and resolution between runs.

Usage:
    ascii-art --image cat.jpeg             # Interactive mode
    ascii-art --image cat.jpeg --run       # Render once and exit
    ascii-art --help                       # Help

Commands (interactive mode):
    chars                       Show the current character set
    add <c|all|space|c1-c2>     Add characters
    remove <c|all|space|c1-c2>  Remove characters
    res up | res down           Double / halve the resolution
    image <path>                Switch to another image
    output console | html       Choose where asciiart output goes
    asciiart                    Render the current image
    exit                        Quit
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from .algorithm import AsciiArtAlgorithm
from .cache import BrightnessCache
from .charsets import DEFAULT_CHARSET, get_charset, list_charsets, parse_range
from .exceptions import (
    AsciiArtError,
    EmptyPaletteError,
    ExceedingValueError,
    ImageLoadError,
    IncorrectFormatError,
    InvalidCommandError,
)
from .image import RasterImage
from .palette import CharacterPalette, GlyphRenderer
from .result import AsciiArtResult, DEFAULT_FONT


OUTPUT_MODES = ("console", "html")


@dataclass
class ShellConfig:
    """Startup settings for the shell."""
    image_path: Optional[str] = None      # Image loaded at startup
    resolution: int = 128                 # Characters per side
    charset: str = DEFAULT_CHARSET        # Initial character set
    output: str = "console"               # "console" or "html"
    html_path: str = "out.html"           # Target of html output
    font_family: str = DEFAULT_FONT       # Font named in the html page
    verbose: bool = False                 # Print algorithm progress


class Shell:
    """
    Command interpreter around one palette, one image and one cache.

    The cache lives as long as the shell, so rendering the same image again
    or re-adding a character never recomputes brightness.
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        cache: Optional[BrightnessCache] = None,
        render_glyph: Optional[GlyphRenderer] = None,
        image_loader: Callable[[str], RasterImage] = RasterImage.open,
    ):
        self.config = config or ShellConfig()
        self.cache = cache if cache is not None else BrightnessCache()
        self.palette = CharacterPalette(
            self.config.charset, cache=self.cache, render_glyph=render_glyph
        )
        self.algorithm = AsciiArtAlgorithm(cache=self.cache, verbose=self.config.verbose)
        self.resolution = self.config.resolution
        self.output = self.config.output
        self.image: Optional[RasterImage] = None
        self.image_path: Optional[str] = None
        self.last_result: Optional[AsciiArtResult] = None
        self._image_loader = image_loader

        self._commands = {
            "chars": self._handle_chars,
            "add": self._handle_add,
            "remove": self._handle_remove,
            "res": self._handle_resolution,
            "image": self._handle_image,
            "output": self._handle_output,
            "asciiart": self._handle_asciiart,
        }

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def load_image(self, path: str):
        """Load and select an image (ImageLoadError on failure)."""
        self.image = self._image_loader(path)
        self.image_path = path

    def execute(self, line: str) -> bool:
        """
        Run one command line.

        Errors are printed and the shell state is left as it was.

        Returns:
            False when the shell should exit
        """
        line = line.strip()
        if not line:
            return True

        command, _, arg = line.partition(" ")
        command = command.lower()

        if command == "exit":
            return False

        try:
            handler = self._commands.get(command)
            if handler is None:
                raise InvalidCommandError()
            handler(arg)
        except AsciiArtError as e:
            print(f"❌ {e.message}")
        return True

    def run(self):
        """Interactive REPL loop."""
        print("\n" + "=" * 60)
        print("   ASCII ART SHELL")
        print("=" * 60)
        print("Commands: chars, add, remove, res, image, output, asciiart, exit")

        if self.config.image_path:
            try:
                self.load_image(self.config.image_path)
                print(f"✅ Loaded {self.image_path} ({self.image.width}x{self.image.height})")
            except ImageLoadError as e:
                print(f"❌ {e.message}")
        else:
            print("Load an image with: image <path>")

        while True:
            try:
                line = input(">>> ")
            except (KeyboardInterrupt, EOFError):
                print("\n👋 Goodbye!")
                break

            if not self.execute(line):
                print("👋 Goodbye!")
                break

    # ------------------------------------------------------------------
    # Command handlers
    # ------------------------------------------------------------------

    def _handle_chars(self, arg: str):
        if arg:
            raise InvalidCommandError()
        print(" ".join(self.palette.characters()))

    def _apply_char_command(self, command: str, arg: str, single, everything, span):
        if len(arg) == 1:
            single(arg)
        elif arg.lower() == "all":
            everything()
        elif arg.lower() == "space":
            single(" ")
        else:
            bounds = parse_range(arg)
            if bounds is None:
                raise IncorrectFormatError.for_command(command)
            span(*bounds)

    def _handle_add(self, arg: str):
        self._apply_char_command(
            "add", arg,
            self.palette.add, self.palette.add_all, self.palette.add_range,
        )

    def _handle_remove(self, arg: str):
        self._apply_char_command(
            "remove", arg,
            self.palette.remove, self.palette.remove_all, self.palette.remove_range,
        )

    def _handle_resolution(self, arg: str):
        direction = arg.lower()
        if direction not in ("up", "down"):
            raise IncorrectFormatError.for_command("res")
        if self.image is None:
            raise ImageLoadError()

        if direction == "up":
            if self.resolution * 2 > self.image.width:
                raise ExceedingValueError()
            self.resolution *= 2
        else:
            min_resolution = max(1, self.image.width // max(1, self.image.height))
            if self.resolution // 2 < min_resolution:
                raise ExceedingValueError()
            self.resolution //= 2

        print(f"Resolution set to {self.resolution}.")

    def _handle_image(self, arg: str):
        if not arg:
            raise ImageLoadError()
        self.load_image(arg)

    def _handle_output(self, arg: str):
        mode = arg.lower()
        if mode not in OUTPUT_MODES:
            raise IncorrectFormatError.for_command("output")
        self.output = mode

    def _handle_asciiart(self, arg: str):
        if arg:
            raise InvalidCommandError()
        if len(self.palette) == 0:
            raise EmptyPaletteError()
        if self.image is None:
            raise ImageLoadError()

        result = self.algorithm.convert(self.image, self.resolution, self.palette)
        self.last_result = result

        if self.output == "html":
            result.save(self.config.html_path, format="html", font_family=self.config.font_family)
            print(f"✅ Saved to {self.config.html_path}")
        else:
            result.display()


def resolve_charset(value: Optional[str]) -> str:
    """Named charset if ``value`` is one, else the literal characters."""
    if value is None:
        return DEFAULT_CHARSET
    if value in list_charsets():
        return get_charset(value)
    return value


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert images to brightness-matched ASCII art",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ascii-art --image cat.jpeg
    Start interactive mode with cat.jpeg loaded

  ascii-art --image cat.jpeg --resolution 64 --charset ascii_dense --run
    Render once with a named character set and exit
""",
    )

    parser.add_argument("--image", "-i", default=None, help="Image file to load at startup")
    parser.add_argument(
        "--resolution", "-r",
        type=int,
        default=128,
        help="Characters per side (default: 128)",
    )
    parser.add_argument(
        "--charset", "-c",
        default=None,
        help="Initial characters, or a named set (digits, ascii_standard, ascii_dense, ...)",
    )
    parser.add_argument(
        "--output", "-o",
        choices=OUTPUT_MODES,
        default="console",
        help="Where rendered art goes (default: console)",
    )
    parser.add_argument("--html-path", default="out.html", help="HTML output file (default: out.html)")
    parser.add_argument("--run", action="store_true", help="Render once and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print progress")

    args = parser.parse_args(argv)

    config = ShellConfig(
        image_path=args.image,
        resolution=args.resolution,
        charset=resolve_charset(args.charset),
        output=args.output,
        html_path=args.html_path,
        verbose=args.verbose,
    )
    shell = Shell(config)

    if args.run:
        if not args.image:
            parser.error("--run requires --image")
        try:
            shell.load_image(args.image)
        except ImageLoadError as e:
            print(f"❌ {e.message}")
            return 1
        shell.execute("asciiart")
        return 0 if shell.last_result is not None else 1

    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
