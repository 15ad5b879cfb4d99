import html
import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

from asciishade.config import HTML_FONT, HTML_OUTPUT_PATH
from asciishade.pipeline import CharGrid

logger = logging.getLogger(__name__)

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>ASCII Art</title>
</head>
<body style="margin: 0; background: #fff;">
<pre style="font-family: '{font}', monospace; font-size: {font_size}px; line-height: 1em; letter-spacing: 0.4em;">
{body}
</pre>
</body>
</html>
"""


class AsciiOutput(Protocol):
    def out(self, grid: CharGrid) -> None: ...


class ConsoleOutput:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def out(self, grid: CharGrid) -> None:
        print(str(grid), file=self.stream or sys.stdout)


class HtmlOutput:
    """Writes the grid to an HTML page as a monospace ``<pre>`` block."""

    def __init__(self, path: str | Path = HTML_OUTPUT_PATH, font: str = HTML_FONT, font_size: int = 8):
        self.path = Path(path)
        self.font = font
        self.font_size = font_size

    def render(self, grid: CharGrid) -> str:
        body = "\n".join(html.escape(row) for row in grid.rows)
        return _HTML_TEMPLATE.format(font=html.escape(self.font), font_size=self.font_size, body=body)

    def out(self, grid: CharGrid) -> None:
        self.path.write_text(self.render(grid), encoding="utf-8")
        logger.info("Wrote %dx%d grid to %s", grid.width, grid.height, self.path)
