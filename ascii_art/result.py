"""
ASCII Art Result Container

Provides the AsciiArtResult dataclass for storing and displaying a
converted character grid, with support for console display, HTML export,
and file saving.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from datetime import datetime
import html

from .image import RasterImage


DEFAULT_FONT = "Courier New"


@dataclass
class AsciiArtResult:
    """
    Container for ASCII art conversion results.

    Attributes:
        grid: Rows of single characters
        source_image: The image the grid was computed from
        metadata: Conversion parameters (resolution, charset, cache status)
    """
    grid: List[List[str]]
    source_image: Optional[RasterImage] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        """Grid rows joined with newlines."""
        return "\n".join("".join(row) for row in self.grid)

    @property
    def width(self) -> int:
        """Width in characters."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        """Height in lines."""
        return len(self.grid)

    def display(self, max_width: Optional[int] = None):
        """
        Print the ASCII art to the terminal.

        Args:
            max_width: Maximum width to display (truncates if needed)
        """
        for row in self.grid:
            line = "".join(row)
            print(line[:max_width] if max_width else line)

    def save(self, path: str, format: str = "auto", font_family: str = DEFAULT_FONT):
        """
        Save ASCII art to a file.

        Args:
            path: Output file path
            format: "txt", "html", or "auto" (detect from extension)
            font_family: Font used by the HTML page
        """
        if format == "auto":
            format = "html" if path.endswith(('.html', '.htm')) else "txt"

        if format == "html":
            content = self.to_html(font_family=font_family)
        else:
            content = self.text

        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

    def to_html(
        self,
        font_family: str = DEFAULT_FONT,
        font_size: str = "8px",
        bg_color: str = "#ffffff",
        fg_color: str = "#000000",
        title: str = "ASCII Art",
    ) -> str:
        """
        Convert ASCII art to a styled HTML page.

        The grid is drawn dark-on-light: brighter palette characters are the
        ones with less ink, so a light background keeps bright tiles bright.

        Returns:
            Complete HTML document string
        """
        escaped_text = html.escape(self.text)
        family = f"'{font_family}', monospace"

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{
            background-color: {bg_color};
            color: {fg_color};
            margin: 0;
            padding: 20px;
        }}
        pre {{
            font-family: {family};
            font-size: {font_size};
            line-height: 1.0;
            letter-spacing: 0.2em;
            white-space: pre;
            margin: 0;
        }}
    </style>
</head>
<body>
<pre>{escaped_text}</pre>
</body>
</html>"""

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the ASCII art."""
        counts: Dict[str, int] = {}
        for row in self.grid:
            for char in row:
                counts[char] = counts.get(char, 0) + 1

        return {
            'width': self.width,
            'height': self.height,
            'total_characters': sum(counts.values()),
            'unique_characters': len(counts),
            'character_counts': counts,
        }

    def __repr__(self) -> str:
        return f"AsciiArtResult(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return self.text


def create_result(
    grid: List[List[str]],
    source_image: Optional[RasterImage] = None,
    resolution: Optional[int] = None,
    charset: Optional[str] = None,
    **extra_metadata
) -> AsciiArtResult:
    """
    Factory function to create an AsciiArtResult with standard metadata.

    Args:
        grid: Character rows
        source_image: Source image
        resolution: Characters per side
        charset: Palette characters used
        **extra_metadata: Additional metadata

    Returns:
        Configured AsciiArtResult
    """
    metadata = {
        'generated_at': datetime.now().isoformat(),
    }

    if resolution is not None:
        metadata['resolution'] = resolution
    if charset is not None:
        metadata['charset'] = charset

    metadata.update(extra_metadata)

    return AsciiArtResult(
        grid=grid,
        source_image=source_image,
        metadata=metadata,
    )
